"""
Key identifiers. The 4-byte fingerprint links a serialized child to its parent; with only 32 bits it can collide,
so it is a cross-check and never a unique key.
"""
from hdnode.core import XKEYS
from hdnode.cryptography import hash160

__all__ = ["identifier", "fingerprint"]


def identifier(public_key: bytes) -> bytes:
    """HASH160 of the compressed public key"""
    return hash160(public_key)


def fingerprint(node) -> bytes:
    """First 4 bytes of the node's identifier"""
    return identifier(node.public_key)[:XKEYS.FINGERPRINT_BYTES]
