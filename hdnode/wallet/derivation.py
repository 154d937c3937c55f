"""
Derivation paths. Text paths like m/44'/0'/0'/0/5 are parsed into DerivationStep sequences here, before any key
material is touched. Applying the steps to a node lives in the ckd module.
"""
import re
from dataclasses import dataclass
from enum import Enum

from hdnode.core import XKEYS, InvalidPathSyntaxError, ValidationError

__all__ = ["DerivationStep", "ParsedPath", "parse_path", "PurposePath"]

MASTER_PREFIX = "m"
HARDENED_MARKER = "'"
_PATH_PATTERN = re.compile(r"(m/)?([0-9]+'?/)*[0-9]+'?")


@dataclass(frozen=True)
class DerivationStep:
    """
    One edge of the tree: a base index below the hardened bit, and whether the child is hardened
    """
    index: int
    hardened: bool = False

    def __post_init__(self):
        if isinstance(self.index, bool) or not isinstance(self.index, int) or self.index < 0:
            raise ValidationError(f"Derivation index must be a non-negative integer: {self.index!r}")

    def __str__(self):
        return f"{self.index}{HARDENED_MARKER if self.hardened else ''}"

    def child_number(self, hardened_bit: int = XKEYS.HARDENED_OFFSET) -> int:
        """The index as stored in a derived node"""
        return self.index + hardened_bit if self.hardened else self.index

    @classmethod
    def from_child_number(cls, child_number: int, hardened_bit: int = XKEYS.HARDENED_OFFSET) -> "DerivationStep":
        """Inverse of child_number: splits a stored 32-bit index back into base index and flag"""
        if not 0 <= child_number <= XKEYS.MAX_INDEX:
            raise ValidationError(f"Child number {child_number} is not a 32-bit value")
        if child_number >= hardened_bit:
            return cls(child_number - hardened_bit, hardened=True)
        return cls(child_number)


@dataclass(frozen=True)
class ParsedPath:
    """
    A parsed path. absolute is True when the text began with m/ and may only be applied to a root node.
    """
    absolute: bool
    steps: tuple[DerivationStep, ...]

    def __str__(self):
        segments = [str(step) for step in self.steps]
        if self.absolute:
            segments.insert(0, MASTER_PREFIX)
        return "/".join(segments)

    def __len__(self):
        return len(self.steps)

    def __iter__(self):
        return iter(self.steps)


def parse_path(path: str, hardened_bit: int = XKEYS.HARDENED_OFFSET) -> ParsedPath:
    """
    Parses an optional m/ prefix followed by /-separated segments, each digits with an optional trailing
    apostrophe. Every base index must be below the hardened bit.
    """
    if not isinstance(path, str) or not _PATH_PATTERN.fullmatch(path):
        raise InvalidPathSyntaxError(f"Malformed derivation path: {path!r}")

    segments = path.split("/")
    absolute = segments[0] == MASTER_PREFIX
    if absolute:
        segments = segments[1:]

    steps = []
    for segment in segments:
        hardened = segment.endswith(HARDENED_MARKER)
        index = int(segment.rstrip(HARDENED_MARKER))
        if index >= hardened_bit:
            raise InvalidPathSyntaxError(f"Path segment {segment!r} is not below the hardened bit {hardened_bit}")
        steps.append(DerivationStep(index, hardened))

    return ParsedPath(absolute, tuple(steps))


class PurposePath(Enum):
    """
    Purpose templates for the common account structures. Purpose, coin type and account are hardened; change and
    address index are not.
    """
    BIP44 = 44
    BIP49 = 49
    BIP84 = 84
    BIP86 = 86

    @property
    def purpose(self) -> int:
        return self.value

    def path(self, account: int = 0, change: int = 0, index: int = 0, coin_type: int = 0) -> str:
        return f"m/{self.purpose}'/{coin_type}'/{account}'/{change}/{index}"

    def account_path(self, account: int = 0, coin_type: int = 0) -> str:
        return f"m/{self.purpose}'/{coin_type}'/{account}'"

    def steps(self, account: int = 0, change: int = 0, index: int = 0, coin_type: int = 0) -> ParsedPath:
        return parse_path(self.path(account, change, index, coin_type))
