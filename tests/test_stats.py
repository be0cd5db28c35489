from groupstake.protocol.types.common import ValidatorStatus
from groupstake.protocol.types.validator import ValidatorGroup
from groupstake.protocol.crypto.addresses import encode_address
from groupstake.staking.stats import (
    GroupStats,
    clean_group_name,
    find_group,
    get_group_stats,
    is_elected,
    sort_groups_by_score,
)
from .helpers import GROUP_A, GROUP_B, GROUP_C, PERCENT, make_group, make_member


def test_stats_average_only_elected_members():
    group = make_group(GROUP_A, "A", votes=0, capacity=1, scores=(90, 100))
    outsider = make_member(999, status=ValidatorStatus.NOT_ELECTED, score_pct=10)
    group.members[outsider.address] = outsider

    stats = get_group_stats(group)
    assert stats.num_members == 3
    assert stats.num_elected == 2
    assert stats.avg_score == 95.0


def test_stats_without_elected_members_scores_zero():
    group = ValidatorGroup(address=GROUP_A, name="new", capacity=10)
    assert get_group_stats(group) == GroupStats(0, 0, 0.0)

    group.members["0x" + "01" * 20] = make_member(1, status=ValidatorStatus.NOT_ELECTED, score_pct=99)
    stats = get_group_stats(group)
    assert stats.num_members == 1
    assert stats.num_elected == 0
    assert stats.avg_score == 0


def test_stats_for_missing_group():
    assert get_group_stats(None) == GroupStats()


def test_stats_round_down_to_whole_percent():
    group = make_group(GROUP_A, "A", votes=0, capacity=1, scores=())
    m = make_member(1)
    m.score = 9699 * PERCENT // 100   # 96.99%
    group.members[m.address] = m
    assert get_group_stats(group).avg_score == 96.0


def test_find_group_matches_any_address_form(groups):
    assert find_group(groups, GROUP_B.upper().replace("0X", "0x")).name == "beta-group"
    assert find_group(groups, encode_address(GROUP_C, "celo")).address == GROUP_C
    assert find_group(groups, "0x" + "ee" * 20) is None
    assert find_group(None, GROUP_A) is None
    assert find_group(groups, None) is None


def test_is_elected(groups):
    assert is_elected(groups[0])
    assert not is_elected(ValidatorGroup(address=GROUP_A))


def test_sort_groups_by_score(groups):
    assert [g.address for g in sort_groups_by_score(groups)] == [GROUP_B, GROUP_A, GROUP_C]
    assert sort_groups_by_score(None) == []


def test_clean_group_name():
    assert clean_group_name("Alpha Group") == "Alpha"
    assert clean_group_name("beta-group") == "Beta"
    assert clean_group_name("my_validators") == "My Validators"
    assert clean_group_name("a very long validator name here") == "A Very Long Validato..."
