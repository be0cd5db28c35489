from groupstake.protocol.types.common import ValidatorStatus
from groupstake.protocol.types.validator import GroupMember, ValidatorGroup

WEI = 10**18
PERCENT = 10**22   # member score unit: 10**24 == 100%

GROUP_A = "0x" + "aa" * 20
GROUP_B = "0x" + "bb" * 20
GROUP_C = "0x" + "cc" * 20
GROUP_D = "0x" + "dd" * 20


def make_member(index: int, status: ValidatorStatus = ValidatorStatus.ELECTED, score_pct: int = 95) -> GroupMember:
    return GroupMember(
        address="0x" + f"{index:040x}",
        name=f"validator-{index}",
        status=status,
        score=score_pct * PERCENT,
    )


def make_group(address: str, name: str, votes: int, capacity: int, scores=(95, 95), eligible: bool = True) -> ValidatorGroup:
    members = {}
    for i, score in enumerate(scores):
        m = make_member(int(address[2:4], 16) * 100 + i, score_pct=score)
        members[m.address] = m
    return ValidatorGroup(
        address=address,
        name=name,
        votes=votes,
        capacity=capacity,
        members=members,
        eligible=eligible,
    )
