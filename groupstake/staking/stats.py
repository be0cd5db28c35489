"""
Per-group summaries derived from raw group and member data.
"""
import re
from dataclasses import dataclass
from typing import List, Optional
from ..protocol.types.common import ValidatorStatus
from ..protocol.types.validator import ValidatorGroup
from ..protocol.crypto.addresses import eq_address_safe
from ..protocol.config.params import NetworkConfig, CURRENT_NETWORK
from ..utils.amount import big_int_mean, from_wei_rounded

MAX_GROUP_NAME_LENGTH = 20


@dataclass(frozen=True)
class GroupStats:
    num_members: int = 0
    num_elected: int = 0
    avg_score: float = 0.0    # Percent, averaged over elected members only


def get_group_stats(group: Optional[ValidatorGroup], config: NetworkConfig = None) -> GroupStats:
    """
    Member counts and average elected score of a group.

    A missing group, or one without elected members, scores 0.
    """
    if group is None:
        return GroupStats()
    config = config or CURRENT_NETWORK

    members = list(group.members.values())
    elected = [m for m in members if m.status == ValidatorStatus.ELECTED]
    avg_score = 0.0
    if elected:
        mean = big_int_mean(m.score for m in elected)
        avg_score = float(from_wei_rounded(mean, config.score_decimals, config.score_display_decimals))

    return GroupStats(num_members=len(members), num_elected=len(elected), avg_score=avg_score)


def find_group(groups: Optional[List[ValidatorGroup]], address: Optional[str]) -> Optional[ValidatorGroup]:
    if not groups or not address:
        return None
    return next((g for g in groups if eq_address_safe(g.address, address)), None)


def is_elected(group: ValidatorGroup) -> bool:
    return any(m.status == ValidatorStatus.ELECTED for m in group.members.values())


def sort_groups_by_score(groups: Optional[List[ValidatorGroup]], config: NetworkConfig = None) -> List[ValidatorGroup]:
    """Groups ordered by average score, best first. Ties keep input order."""
    if not groups:
        return []
    return sorted(groups, key=lambda g: get_group_stats(g, config).avg_score, reverse=True)


def _to_title_case(text: str) -> str:
    return " ".join(w[:1].upper() + w[1:].lower() for w in text.split(" "))


def clean_group_name(name: str) -> str:
    """Display name: drops the word "group", separators become spaces."""
    cleaned = _to_title_case(re.sub(r"[-_]", " ", re.sub(r"group|Group", "", name))).strip()
    if len(cleaned) > MAX_GROUP_NAME_LENGTH:
        return cleaned[:MAX_GROUP_NAME_LENGTH] + "..."
    return cleaned
