"""
Extended key serialization (xprv/xpub)

    version (4) || depth (1) || parent fingerprint (4) || index (4) || chain code (32) || key data (33)

All integers are big-endian. Private key data is 0x00 || k, public key data is the compressed point. The text form is
base58check over the 78-byte payload.
"""
from hdnode.core import (XKEYS, NetworkParams, SERIALIZED, ValidationError, IsNeuteredError, InvalidLengthError,
                         InvalidNetworkError, InvalidPrivateKeyPaddingError, get_stream, read_stream, read_big_int)
from hdnode.data import encode_base58check, decode_base58check

__all__ = ["serialize_extended_key", "encode_extended_key", "parse_extended_key", "decode_extended_key"]


def serialize_extended_key(node, private: bool) -> bytes:
    """
    Returns the 78-byte payload of node. Private export from a neutered node raises IsNeuteredError.
    """
    network = node.network
    if private:
        if node.is_neutered:
            raise IsNeuteredError("Cannot export private key data from a neutered node")
        version = network.private_version_bytes
        key_data = XKEYS.PRIVATE_PADDING + node.private_key
    else:
        version = network.public_version_bytes
        key_data = node.public_key

    parts = [
        version,
        node.depth.to_bytes(XKEYS.DEPTH_BYTES, "big"),
        node.parent_fingerprint,
        node.index.to_bytes(XKEYS.INDEX_BYTES, "big"),
        node.chain_code,
        key_data
    ]
    return b''.join(parts)


def encode_extended_key(node, private: bool) -> str:
    return encode_base58check(serialize_extended_key(node, private))


def parse_extended_key(byte_stream: SERIALIZED, network: NetworkParams) -> dict:
    """
    Reads a 78-byte payload and returns the node fields as constructor keyword arguments. Nothing is derived here:
    the fields are taken verbatim from the payload.
    """
    if not isinstance(network, NetworkParams):
        raise ValidationError(f"Expected NetworkParams but received: {type(network).__name__}")
    try:
        stream = get_stream(byte_stream)
    except TypeError as e:
        raise ValidationError(str(e)) from e
    payload_length = stream.getbuffer().nbytes - stream.tell()
    if payload_length != XKEYS.SERIAL_BYTES:
        raise InvalidLengthError(f"Extended key payload must be {XKEYS.SERIAL_BYTES} bytes, received {payload_length}")

    version = read_big_int(stream, XKEYS.VERSION_BYTES, "version")
    depth = read_big_int(stream, XKEYS.DEPTH_BYTES, "depth")
    parent_fingerprint = read_stream(stream, XKEYS.FINGERPRINT_BYTES, "parent_fingerprint")
    index = read_big_int(stream, XKEYS.INDEX_BYTES, "index")
    chain_code = read_stream(stream, XKEYS.CHAIN_LENGTH, "chain_code")
    key_data = read_stream(stream, XKEYS.KEY_DATA_BYTES, "key_data")

    fields = {
        "chain_code": chain_code,
        "network": network,
        "depth": depth,
        "parent_fingerprint": parent_fingerprint,
        "index": index,
    }
    if network.is_private_version(version):
        if key_data[:1] != XKEYS.PRIVATE_PADDING:
            raise InvalidPrivateKeyPaddingError(f"Private key data must begin with 0x00, found {key_data[:1].hex()}")
        fields["private_key"] = key_data[1:]
    elif network.is_public_version(version):
        fields["public_key"] = key_data
    else:
        raise InvalidNetworkError(f"Version {version:08x} is not known to network {network.name}")

    return fields


def decode_extended_key(text: str, network: NetworkParams) -> dict:
    if not isinstance(text, str):
        raise ValidationError(f"Extended key text must be a str, received {type(text).__name__}")
    return parse_extended_key(decode_base58check(text), network)
