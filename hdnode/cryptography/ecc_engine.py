"""
The EC engine used by key derivation. ECCEngine fixes the five operations BIP32 needs; Secp256k1Engine implements
them on the pure-python curve. Failing operations raise ECCError.
"""
from abc import ABC, abstractmethod

from hdnode.core import ECC, ECCError
from .ecc import EllipticCurve, SECP256K1

__all__ = ["ECCEngine", "Secp256k1Engine", "SECP256K1_ENGINE"]


class ECCEngine(ABC):
    """
    Scalar and point operations on 32-byte private keys and 33-byte compressed public keys
    """

    @abstractmethod
    def validate_private_key(self, private_key: bytes) -> bool:
        raise NotImplementedError(f"{self.__class__.__name__} must implement validate_private_key()")

    @abstractmethod
    def validate_public_key(self, public_key: bytes) -> bool:
        raise NotImplementedError(f"{self.__class__.__name__} must implement validate_public_key()")

    @abstractmethod
    def derive_public_key(self, private_key: bytes) -> bytes:
        raise NotImplementedError(f"{self.__class__.__name__} must implement derive_public_key()")

    @abstractmethod
    def tweak_add_private(self, private_key: bytes, tweak: bytes) -> bytes:
        """(private_key + tweak) mod n. Fails if tweak >= n or the sum is 0"""
        raise NotImplementedError(f"{self.__class__.__name__} must implement tweak_add_private()")

    @abstractmethod
    def tweak_add_public(self, public_key: bytes, tweak: bytes) -> bytes:
        """public_key + tweak*G. Fails if tweak >= n or the sum is the point at infinity"""
        raise NotImplementedError(f"{self.__class__.__name__} must implement tweak_add_public()")


class Secp256k1Engine(ECCEngine):

    def __init__(self, curve: EllipticCurve = SECP256K1):
        self.curve = curve

    def _scalar(self, data: bytes, label: str) -> int:
        if len(data) != ECC.PRIVKEY_BYTES:
            raise ECCError(f"{label} must be {ECC.PRIVKEY_BYTES} bytes")
        return int.from_bytes(data, "big")

    def validate_private_key(self, private_key: bytes) -> bool:
        if not isinstance(private_key, (bytes, bytearray)) or len(private_key) != ECC.PRIVKEY_BYTES:
            return False
        return 0 < int.from_bytes(private_key, "big") < self.curve.order

    def validate_public_key(self, public_key: bytes) -> bool:
        if not isinstance(public_key, (bytes, bytearray)):
            return False
        try:
            self.curve.decompress(bytes(public_key))
        except ECCError:
            return False
        return True

    def derive_public_key(self, private_key: bytes) -> bytes:
        if not self.validate_private_key(private_key):
            raise ECCError("Private key out of range")
        point = self.curve.multiply_generator(int.from_bytes(private_key, "big"))
        return self.curve.compress(point)

    def tweak_add_private(self, private_key: bytes, tweak: bytes) -> bytes:
        tweak_int = self._scalar(tweak, "Tweak")
        if tweak_int >= self.curve.order:
            raise ECCError("Tweak is not below the curve order")

        child_int = (self._scalar(private_key, "Private key") + tweak_int) % self.curve.order
        if child_int == 0:
            raise ECCError("Tweaked private key is zero")
        return child_int.to_bytes(ECC.PRIVKEY_BYTES, "big")

    def tweak_add_public(self, public_key: bytes, tweak: bytes) -> bytes:
        tweak_int = self._scalar(tweak, "Tweak")
        if tweak_int >= self.curve.order:
            raise ECCError("Tweak is not below the curve order")

        point = self.curve.decompress(bytes(public_key))
        child_point = self.curve.add_points(point, self.curve.multiply_generator(tweak_int))
        if not child_point:
            raise ECCError("Tweaked public key is the point at infinity")
        return self.curve.compress(child_point)


SECP256K1_ENGINE = Secp256k1Engine()
