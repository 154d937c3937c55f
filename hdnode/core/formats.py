"""
The BIP32 formats and constants
"""
from typing import Final

__all__ = ["ECC", "XKEYS"]


class ECC:
    COORD_BYTES: Final[int] = 32
    PRIVKEY_BYTES: Final[int] = 32
    COMPRESSED_BYTES: Final[int] = 33
    EVEN_PREFIX: Final[bytes] = b'\x02'
    ODD_PREFIX: Final[bytes] = b'\x03'


class XKEYS:
    """
    Constants related to the extended public and private keys
    """
    SEED_KEY: Final[bytes] = b'Bitcoin seed'
    MIN_SEED_BYTES: Final[int] = 16
    MAX_SEED_BYTES: Final[int] = 64
    RANDOM_SEED_BYTES: Final[int] = 64

    CHAIN_LENGTH: Final[int] = 32
    MAX_DEPTH: Final[int] = 255
    FINGERPRINT_BYTES: Final[int] = 4
    ZERO_FINGERPRINT: Final[bytes] = b'\x00' * 4

    # Serialized field sizes
    VERSION_BYTES: Final[int] = 4
    DEPTH_BYTES: Final[int] = 1
    INDEX_BYTES: Final[int] = 4
    KEY_DATA_BYTES: Final[int] = 33
    SERIAL_BYTES: Final[int] = 78
    CHECKSUM_BYTES: Final[int] = 4
    PRIVATE_PADDING: Final[bytes] = b'\x00'

    # Version bytes for different key types
    TESTNET_PRIVATE: Final[bytes] = bytes.fromhex("04358394")
    TESTNET_PUBLIC: Final[bytes] = bytes.fromhex("043587cf")
    BIP44_XPRV: Final[bytes] = bytes.fromhex("0488ade4")
    BIP44_XPUB: Final[bytes] = bytes.fromhex("0488b21e")
    BIP49_XPRV: Final[bytes] = bytes.fromhex("049d7878")
    BIP49_XPUB: Final[bytes] = bytes.fromhex("049d7cb2")
    BIP84_XPRV: Final[bytes] = bytes.fromhex("04b2430c")
    BIP84_XPUB: Final[bytes] = bytes.fromhex("04b24746")

    # Hardened derivation threshold
    HARDENED_OFFSET: Final[int] = 0x80000000
    MAX_INDEX: Final[int] = 0xffffffff

    # Caps on the retry loops. Both loops are expected to finish on the first pass.
    MAX_DERIVATION_ATTEMPTS: Final[int] = 8
    MAX_RESEED_ATTEMPTS: Final[int] = 8
