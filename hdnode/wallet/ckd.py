"""
Child key derivation (CKD)

For a parent with chain code c and index i:

    hardened:   I = HMAC-SHA512(c, 0x00 || k_par || ser32(i + hardened_bit))
    normal:     I = HMAC-SHA512(c, K_par || ser32(i))

IL = I[:32] is the tweak and IR = I[32:] the child chain code. A private parent yields k_child = k_par + IL (mod n);
a neutered parent yields K_child = K_par + IL*G. If the tweak is invalid (IL >= n, a zero key or the point at
infinity) the derivation moves on to i + 1 with the same hardened flag.
"""
from typing import Iterable, Union

from hdnode.core import (XKEYS, ECCError, ValidationError, HardenedFromNeuteredError, NotMasterNodeError,
                         DerivationExhaustedError, get_logger)
from hdnode.cryptography import ECCEngine, SECP256K1_ENGINE, hmac_sha512
from .derivation import DerivationStep, ParsedPath, parse_path
from .fingerprint import fingerprint

__all__ = ["derive_child", "derive_steps", "derive_path"]

logger = get_logger(__name__)

PATH = Union[str, ParsedPath, Iterable[DerivationStep]]


def _validate_index(index: int, hardened_bit: int):
    if isinstance(index, bool) or not isinstance(index, int):
        raise ValidationError(f"Child index must be an integer: {index!r}")
    if not 0 <= index < hardened_bit:
        raise ValidationError(f"Child index {index} outside [0, {hardened_bit})")


def _derive_once(parent, index: int, hardened: bool, engine: ECCEngine):
    """
    A single CKD attempt. Raises ECCError if the tweak is unusable.
    """
    hardened_bit = parent.network.hardened_bit
    child_number = index + hardened_bit if hardened else index
    index_bytes = child_number.to_bytes(XKEYS.INDEX_BYTES, "big")

    if hardened:
        data = XKEYS.PRIVATE_PADDING + parent.private_key + index_bytes
    else:
        data = parent.public_key + index_bytes

    key_hash = hmac_sha512(key=parent.chain_code, message=data)
    tweak, child_chain_code = key_hash[:32], key_hash[32:]

    if parent.is_neutered:
        child_keys = {"public_key": engine.tweak_add_public(parent.public_key, tweak)}
    else:
        child_keys = {"private_key": engine.tweak_add_private(parent.private_key, tweak)}

    return type(parent)(
        chain_code=child_chain_code,
        network=parent.network,
        depth=parent.depth + 1,
        parent_fingerprint=fingerprint(parent),
        index=child_number,
        engine=engine,
        **child_keys,
    )


def derive_child(parent, index: int, hardened: bool = False, engine: ECCEngine = SECP256K1_ENGINE):
    """
    Derive the child of parent at the base index. The stored index of the child is index + hardened_bit for
    hardened children. Retries with the next index on an invalid tweak, at most XKEYS.MAX_DERIVATION_ATTEMPTS times.
    """
    hardened_bit = parent.network.hardened_bit
    _validate_index(index, hardened_bit)

    if hardened and parent.is_neutered:
        raise HardenedFromNeuteredError("Cannot derive a hardened child from a neutered node")
    if parent.depth >= XKEYS.MAX_DEPTH:
        raise ValidationError(f"Cannot derive below the maximum depth {XKEYS.MAX_DEPTH}")

    for candidate in range(index, min(index + XKEYS.MAX_DERIVATION_ATTEMPTS, hardened_bit)):
        try:
            return _derive_once(parent, candidate, hardened, engine)
        except ECCError as e:
            logger.warning(f"Invalid tweak at index {candidate} (hardened={hardened}): {e}. Trying {candidate + 1}")

    logger.error(f"Child derivation exhausted starting from index {index} (hardened={hardened})")
    raise DerivationExhaustedError(f"No valid child from index {index} after {XKEYS.MAX_DERIVATION_ATTEMPTS} attempts")


def _as_steps(steps) -> tuple:
    try:
        steps = tuple(steps)
    except TypeError:
        raise ValidationError(f"Expected a sequence of DerivationStep, received {type(steps).__name__}") from None
    for step in steps:
        if not isinstance(step, DerivationStep):
            raise ValidationError(f"Expected DerivationStep but received: {step!r}")
    return steps


def derive_steps(node, steps: Iterable[DerivationStep], engine: ECCEngine = SECP256K1_ENGINE):
    """Fold derive_child over the steps, left to right. Every step is type-checked before the first derivation"""
    for step in _as_steps(steps):
        node = derive_child(node, step.index, step.hardened, engine)
    return node


def derive_path(node, path: PATH, engine: ECCEngine = SECP256K1_ENGINE):
    """
    Derive along a path: text such as "m/0'/1" or "0'/1", a ParsedPath, or a sequence of DerivationStep.
    Absolute paths are only allowed from a root node (zero parent fingerprint).
    """
    if isinstance(path, str):
        path = parse_path(path, node.network.hardened_bit)
    elif not isinstance(path, ParsedPath):
        path = ParsedPath(absolute=False, steps=_as_steps(path))

    if path.absolute and node.parent_fingerprint != XKEYS.ZERO_FINGERPRINT:
        raise NotMasterNodeError("Absolute path given for a node which is not a master node")

    return derive_steps(node, path.steps, engine)
