"""
Network parameters for extended keys. Each NetworkParams is an immutable value handed to the node factories and
inherited by every derived child, so several networks can be used side by side in one process.
"""
from dataclasses import dataclass

from .exceptions import ValidationError
from .formats import XKEYS

__all__ = ["NetworkParams", "BITCOIN", "BITCOIN_BIP49", "BITCOIN_BIP84", "TESTNET", "NETWORKS", "get_network"]


@dataclass(frozen=True, slots=True)
class NetworkParams:
    """Immutable network parameters."""
    name: str
    master_secret: bytes
    private_version: int
    public_version: int
    hardened_bit: int = XKEYS.HARDENED_OFFSET

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name:
            raise ValidationError(f"Network name must be a non-empty string: {self.name!r}")
        if not isinstance(self.master_secret, bytes) or not self.master_secret:
            raise ValidationError(f"Master secret must be non-empty bytes: {self.master_secret!r}")
        for version in (self.private_version, self.public_version):
            if isinstance(version, bool) or not isinstance(version, int) or not 0 <= version <= XKEYS.MAX_INDEX:
                raise ValidationError(f"Version {version} is not a 32-bit value")
        if self.private_version == self.public_version:
            raise ValidationError("Private and public versions must differ")
        if not isinstance(self.hardened_bit, int) or not 0 < self.hardened_bit <= XKEYS.MAX_INDEX:
            raise ValidationError(f"Hardened bit {self.hardened_bit} is not a 32-bit value")

    @property
    def private_version_bytes(self) -> bytes:
        return self.private_version.to_bytes(XKEYS.VERSION_BYTES, "big")

    @property
    def public_version_bytes(self) -> bytes:
        return self.public_version.to_bytes(XKEYS.VERSION_BYTES, "big")

    def is_private_version(self, version: int) -> bool:
        return version == self.private_version

    def is_public_version(self, version: int) -> bool:
        return version == self.public_version


def _params(name: str, private_version: bytes, public_version: bytes) -> NetworkParams:
    return NetworkParams(
        name=name,
        master_secret=XKEYS.SEED_KEY,
        private_version=int.from_bytes(private_version, "big"),
        public_version=int.from_bytes(public_version, "big"),
    )


BITCOIN = _params("bitcoin", XKEYS.BIP44_XPRV, XKEYS.BIP44_XPUB)
BITCOIN_BIP49 = _params("bitcoin_bip49", XKEYS.BIP49_XPRV, XKEYS.BIP49_XPUB)
BITCOIN_BIP84 = _params("bitcoin_bip84", XKEYS.BIP84_XPRV, XKEYS.BIP84_XPUB)
TESTNET = _params("testnet", XKEYS.TESTNET_PRIVATE, XKEYS.TESTNET_PUBLIC)

NETWORKS = {params.name: params for params in (BITCOIN, BITCOIN_BIP49, BITCOIN_BIP84, TESTNET)}


def get_network(name: str) -> NetworkParams:
    """Look up one of the known networks by name"""
    try:
        return NETWORKS[name.lower()]
    except KeyError:
        raise ValidationError(f"Unknown network: {name}. Must be one of {list(NETWORKS)}") from None
