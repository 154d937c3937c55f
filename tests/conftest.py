"""
Fixtures used in the tests
"""
import pytest

from hdnode.core import BITCOIN
from hdnode.wallet import HDNode
from tests.utility import VECTOR1_SEED


@pytest.fixture()
def network():
    return BITCOIN


@pytest.fixture()
def master(network):
    return HDNode.from_seed(VECTOR1_SEED, network)


@pytest.fixture()
def neutered_master(master):
    return master.neuter()
