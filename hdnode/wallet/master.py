"""
Master key generation: seed -> (private key, chain code) via HMAC-SHA512 keyed with the network's master secret
"""
from secrets import token_bytes
from typing import Callable

from hdnode.core import (XKEYS, NetworkParams, ValidationError, InvalidSeedLengthError, InvalidKeyError,
                         DerivationExhaustedError, get_logger)
from hdnode.cryptography import ECCEngine, SECP256K1_ENGINE, hmac_sha512

__all__ = ["master_key_material", "random_master_key_material"]

logger = get_logger(__name__)

RandomSource = Callable[[int], bytes]


def master_key_material(seed: bytes, network: NetworkParams,
                        engine: ECCEngine = SECP256K1_ENGINE) -> tuple[bytes, bytes]:
    """
    Returns (IL, IR) = HMAC-SHA512(master_secret, seed) split in half. IL is the master private key and IR the
    master chain code. Raises InvalidKeyError if IL is 0 or not below the curve order.
    """
    if not isinstance(network, NetworkParams):
        raise ValidationError(f"Expected NetworkParams but received: {type(network).__name__}")
    if not isinstance(seed, (bytes, bytearray)):
        raise InvalidSeedLengthError(f"Seed must be bytes, received {type(seed).__name__}")
    if not XKEYS.MIN_SEED_BYTES <= len(seed) <= XKEYS.MAX_SEED_BYTES:
        raise InvalidSeedLengthError(
            f"Seed length {len(seed)} outside [{XKEYS.MIN_SEED_BYTES}, {XKEYS.MAX_SEED_BYTES}] bytes")

    seed_hash = hmac_sha512(key=network.master_secret, message=bytes(seed))
    private_key, chain_code = seed_hash[:32], seed_hash[32:]

    if not engine.validate_private_key(private_key):
        raise InvalidKeyError("Seed produced an invalid master private key")
    return private_key, chain_code


def random_master_key_material(network: NetworkParams, random_source: RandomSource = token_bytes,
                               engine: ECCEngine = SECP256K1_ENGINE) -> tuple[bytes, bytes]:
    """
    Draws fresh 64-byte seeds until one yields a valid master key, up to XKEYS.MAX_RESEED_ATTEMPTS draws
    """
    for attempt in range(1, XKEYS.MAX_RESEED_ATTEMPTS + 1):
        seed = random_source(XKEYS.RANDOM_SEED_BYTES)
        try:
            return master_key_material(seed, network, engine)
        except InvalidKeyError:
            logger.warning(f"Random seed produced an invalid master key; reseeding (attempt {attempt})")

    logger.error(f"No valid master key after {XKEYS.MAX_RESEED_ATTEMPTS} random seeds")
    raise DerivationExhaustedError(f"No valid master key after {XKEYS.MAX_RESEED_ATTEMPTS} random seeds")
