import pytest
from groupstake.protocol.types.staking import GroupStake, LockedBalances, StakingBalances, StakeSnapshot
from .helpers import GROUP_A, GROUP_B, GROUP_C, WEI, make_group


@pytest.fixture
def groups():
    """A has room, B is full, C has room and the most votes."""
    return [
        make_group(GROUP_A, "Alpha Group", votes=500 * WEI, capacity=1000 * WEI, scores=(96, 94)),
        make_group(GROUP_B, "beta-group", votes=1000 * WEI, capacity=1000 * WEI, scores=(99,)),
        make_group(GROUP_C, "Gamma_Validators", votes=2000 * WEI, capacity=5000 * WEI, scores=(80, 70)),
    ]


@pytest.fixture
def locked():
    return LockedBalances(locked=100 * WEI, total=100 * WEI)


@pytest.fixture
def staking():
    return StakingBalances(active=30 * WEI, pending=10 * WEI, total=40 * WEI)


@pytest.fixture
def group_to_stake():
    return {GROUP_A: GroupStake(active=30 * WEI, pending=10 * WEI, group_index=0)}


@pytest.fixture
def snapshot(groups, locked, staking, group_to_stake):
    return StakeSnapshot(groups=groups, locked=locked, staking=staking, group_to_stake=group_to_stake)
