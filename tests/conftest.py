import pytest

from crypmon import algos

@pytest.fixture(scope="module")
def sp():
    return algos.setup()

@pytest.fixture(scope="module")
def keys(sp):
    """3 agents with 4-bit statuses."""
    return algos.gen(sp, 3, 4)

@pytest.fixture(scope="module")
def cts(keys):
    rg, agents = keys
    return [algos.enc(a, "X", m) for a,m in zip(agents, [5, 3, 7])]
