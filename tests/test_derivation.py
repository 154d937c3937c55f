"""
Tests for derivation path parsing and path-based derivation
"""
import pytest

from hdnode.core import XKEYS, InvalidPathSyntaxError, NotMasterNodeError, ValidationError
from hdnode.wallet import DerivationStep, ParsedPath, PurposePath, parse_path, derive_path
from tests.utility import FailingEngine


def test_parse_absolute():
    parsed = parse_path("m/0'/1/2'")
    assert parsed.absolute
    assert parsed.steps == (DerivationStep(0, True), DerivationStep(1), DerivationStep(2, True))


def test_parse_relative():
    parsed = parse_path("0'/1")
    assert not parsed.absolute
    assert list(parsed) == [DerivationStep(0, hardened=True), DerivationStep(1, hardened=False)]
    assert len(parsed) == 2


@pytest.mark.parametrize("path", ["m/44'/0'/0'/0/5", "0", "7'", "m/2147483647'/1"])
def test_render_round_trip(path):
    assert str(parse_path(path)) == path


@pytest.mark.parametrize("path", [
    "", "m", "m/", "/0", "0/", "0//1", "0''", "a", "m/0h", "m/0H", "M/0", " 0", "0 ", "0/1\n", "m/-1", "m/+1",
    "m/2147483648", "m/4294967295'",
])
def test_invalid_syntax(path):
    with pytest.raises(InvalidPathSyntaxError):
        parse_path(path)


def test_non_string_path():
    with pytest.raises(InvalidPathSyntaxError):
        parse_path(None)


def test_child_number_round_trip():
    step = DerivationStep(44, hardened=True)
    assert step.child_number() == 44 + XKEYS.HARDENED_OFFSET
    assert DerivationStep.from_child_number(step.child_number()) == step
    assert DerivationStep.from_child_number(5) == DerivationStep(5)
    with pytest.raises(ValidationError):
        DerivationStep.from_child_number(XKEYS.MAX_INDEX + 1)
    with pytest.raises(ValidationError):
        DerivationStep(-1)


def test_derive_path_matches_steps(master):
    expected = master.derive_child(0, hardened=True).derive_child(1).derive_child(2, hardened=True)
    assert master.derive_path("m/0'/1/2'") == expected
    assert master.derive_path("0'/1/2'") == expected
    assert master.derive_path(parse_path("m/0'/1/2'")) == expected
    assert master.derive_path([DerivationStep(0, True), DerivationStep(1), DerivationStep(2, True)]) == expected


def test_not_master_node(master):
    child = master.derive_child(0)
    with pytest.raises(NotMasterNodeError):
        child.derive_path("m/0'/1")
    assert child.derive_path("0'/1") == master.derive_path("m/0/0'/1")


def test_neutered_root_accepts_absolute_normal_path(neutered_master, master):
    assert neutered_master.derive_path("m/1/2") == master.derive_path("m/1/2").neuter()


def test_syntax_checked_before_derivation(master):
    """
    A malformed path fails before any derivation is attempted
    """
    with pytest.raises(InvalidPathSyntaxError):
        derive_path(master, "m/0'/x", engine=FailingEngine())


def test_empty_step_sequence(master):
    assert master.derive_path([]) is master
    assert master.derive_path(ParsedPath(absolute=True, steps=())) is master


@pytest.mark.parametrize("purpose, expected", [
    (PurposePath.BIP44, "m/44'/0'/0'/0/3"),
    (PurposePath.BIP49, "m/49'/0'/0'/0/3"),
    (PurposePath.BIP84, "m/84'/0'/0'/0/3"),
    (PurposePath.BIP86, "m/86'/0'/0'/0/3"),
])
def test_purpose_paths(purpose, expected):
    assert purpose.path(index=3) == expected
    assert str(purpose.steps(index=3)) == expected


def test_purpose_account_path(master):
    account = master.derive_path(PurposePath.BIP84.account_path(account=1, coin_type=1))
    assert account.depth == 3
    assert account.index == 1 + XKEYS.HARDENED_OFFSET


@pytest.mark.parametrize("steps", [[0, 1], [DerivationStep(0), "1"], 5, None])
def test_step_sequence_type_checked(master, steps):
    """
    Only DerivationStep elements are accepted, and all of them are checked before any derivation
    """
    with pytest.raises(ValidationError):
        derive_path(master, steps, engine=FailingEngine())


def test_parsed_path_steps_type_checked(master):
    with pytest.raises(ValidationError):
        master.derive_path(ParsedPath(absolute=False, steps=(0, 1)))


def test_purpose_numbers():
    assert [purpose.purpose for purpose in PurposePath] == [44, 49, 84, 86]
    assert PurposePath(84) is PurposePath.BIP84
