"""
Test utilities: deterministic engines and random sources
"""
from hdnode.core import ECCError
from hdnode.cryptography import Secp256k1Engine

__all__ = ["VECTOR1_SEED", "FailingEngine", "FlakyEngine", "RejectingEngine", "CountingEngine", "counting_source"]

VECTOR1_SEED = bytes.fromhex("000102030405060708090a0b0c0d0e0f")


# --- Test Engines --- #

class FailingEngine(Secp256k1Engine):
    """Every tweak fails, so every derivation exhausts its attempts"""

    def tweak_add_private(self, private_key: bytes, tweak: bytes) -> bytes:
        raise ECCError("forced private tweak failure")

    def tweak_add_public(self, public_key: bytes, tweak: bytes) -> bytes:
        raise ECCError("forced public tweak failure")


class FlakyEngine(Secp256k1Engine):
    """The first `failures` tweaks fail, later tweaks behave normally"""

    def __init__(self, failures: int = 1):
        super().__init__()
        self.failures = failures
        self.calls = 0

    def _maybe_fail(self):
        self.calls += 1
        if self.calls <= self.failures:
            raise ECCError("forced tweak failure")

    def tweak_add_private(self, private_key: bytes, tweak: bytes) -> bytes:
        self._maybe_fail()
        return super().tweak_add_private(private_key, tweak)

    def tweak_add_public(self, public_key: bytes, tweak: bytes) -> bytes:
        self._maybe_fail()
        return super().tweak_add_public(public_key, tweak)


class RejectingEngine(Secp256k1Engine):
    """Rejects the first `rejections` private keys it is asked to validate"""

    def __init__(self, rejections: int):
        super().__init__()
        self.rejections = rejections
        self.calls = 0

    def validate_private_key(self, private_key: bytes) -> bool:
        self.calls += 1
        if self.calls <= self.rejections:
            return False
        return super().validate_private_key(private_key)


def counting_source():
    """
    Deterministic random source. Returns the source and the list of seeds it handed out.
    """
    handed_out = []

    def source(n: int) -> bytes:
        seed = bytes((len(handed_out) + i) % 256 for i in range(n))
        handed_out.append(seed)
        return seed

    return source, handed_out



class CountingEngine(Secp256k1Engine):
    """Counts public key computations, otherwise the plain secp256k1 engine"""

    def __init__(self):
        super().__init__()
        self.public_keys = 0

    def derive_public_key(self, private_key: bytes) -> bytes:
        self.public_keys += 1
        return super().derive_public_key(private_key)
