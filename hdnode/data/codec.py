"""
Methods for encoding and decoding base58 and base58check
"""
from hdnode.core import XKEYS, ChecksumMismatchError, DataEncodingError
from hdnode.cryptography import hash256

__all__ = ["BASE58_ALPHABET", "encode_base58", "decode_base58", "encode_base58check", "decode_base58check"]

# --- BASE58 ENCODING --- #
BASE58_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
_BASE58_INDEX = {char: i for i, char in enumerate(BASE58_ALPHABET)}


def encode_base58(data: bytes) -> str:
    """
    Given bytes we return the base58 encoded string. Each leading zero byte is written as a leading '1'.
    """
    n = int.from_bytes(data, "big")
    encoded = []
    while n > 0:
        n, remainder = divmod(n, 58)
        encoded.append(BASE58_ALPHABET[remainder])

    leading_zeros = len(data) - len(data.lstrip(b'\x00'))
    return "1" * leading_zeros + "".join(reversed(encoded))


def decode_base58(text: str) -> bytes:
    """
    Given a base58 encoded string, return the underlying bytes. Each leading '1' becomes a leading zero byte.
    """
    if not isinstance(text, str):
        raise DataEncodingError(f"Base58 data must be a str, received {type(text).__name__}")
    total = 0
    for char in text:
        try:
            total = total * 58 + _BASE58_INDEX[char]
        except KeyError:
            raise DataEncodingError(f"Invalid base58 character: {char!r}") from None

    leading_zeros = len(text) - len(text.lstrip("1"))
    body = total.to_bytes((total.bit_length() + 7) // 8, "big")
    return b'\x00' * leading_zeros + body


def encode_base58check(data: bytes) -> str:
    """
    Base58 over data || first 4 bytes of HASH256(data)
    """
    return encode_base58(data + hash256(data)[:XKEYS.CHECKSUM_BYTES])


def decode_base58check(text: str) -> bytes:
    """
    Given a base58check string, we verify and strip the checksum and return the payload
    """
    decoded = decode_base58(text)
    if len(decoded) < XKEYS.CHECKSUM_BYTES:
        raise DataEncodingError("Base58check data shorter than its checksum")

    payload, checksum = decoded[:-XKEYS.CHECKSUM_BYTES], decoded[-XKEYS.CHECKSUM_BYTES:]
    if hash256(payload)[:XKEYS.CHECKSUM_BYTES] != checksum:
        raise ChecksumMismatchError("Decoded checksum does not equal given checksum")
    return payload
