# MIT License
# Copyright (c) 2025 Hashborn

"""
Balance aggregation for one holder.

Turns raw LockedGold/Election read results into LockedBalances,
StakingBalances and the per-group stake breakdown. Missing data
aggregates to zeros; telling "not loaded" apart is up to the caller.
"""
from typing import Iterable, Optional, Sequence, Tuple
import logging
from ..protocol.types.staking import GroupStake, GroupToStake, LockedBalances, StakingBalances
from ..protocol.crypto.addresses import normalize_address

logger = logging.getLogger(__name__)


def aggregate_group_to_stake(
    groups_voted_for: Optional[Sequence[str]],
    pending_votes: Optional[Sequence[int]] = None,
    active_votes: Optional[Sequence[int]] = None,
) -> GroupToStake:
    """
    Builds the per-group breakdown from parallel arrays.

    Args:
        groups_voted_for: Groups the holder has voted for, in contract order
        pending_votes: Pending votes per group (same order)
        active_votes: Active votes per group (same order)

    Returns:
        Normalized group address -> GroupStake, keeping contract order
    """
    if not groups_voted_for:
        return {}
    pending_votes = list(pending_votes) if pending_votes is not None else [0] * len(groups_voted_for)
    active_votes = list(active_votes) if active_votes is not None else [0] * len(groups_voted_for)

    if not (len(groups_voted_for) == len(pending_votes) == len(active_votes)):
        raise ValueError(
            f"Vote arrays length mismatch: {len(groups_voted_for)} groups, "
            f"{len(pending_votes)} pending, {len(active_votes)} active"
        )

    group_to_stake: GroupToStake = {}
    for index, (group, pending, active) in enumerate(zip(groups_voted_for, pending_votes, active_votes)):
        try:
            key = normalize_address(group)
        except ValueError:
            logger.debug(f"Skipping malformed group address at index {index}: {group!r}")
            continue
        existing = group_to_stake.get(key)
        if existing is not None:
            # Same group under another spelling; keep the first index
            existing.active += active
            existing.pending += pending
            continue
        group_to_stake[key] = GroupStake(
            active=active,
            pending=pending,
            group_index=index,
        )
    return group_to_stake


def compute_staking_balances(group_to_stake: Optional[GroupToStake]) -> StakingBalances:
    """Sums active and pending votes across all groups."""
    if not group_to_stake:
        return StakingBalances()
    active = sum(s.active for s in group_to_stake.values())
    pending = sum(s.pending for s in group_to_stake.values())
    return StakingBalances(active=active, pending=pending, total=active + pending)


def aggregate_locked_balances(
    locked: Optional[int],
    pending_withdrawals: Optional[Iterable[Tuple[int, int]]] = None,
    now: int = 0,
) -> LockedBalances:
    """
    Args:
        locked: Total non-voting plus voting locked gold
        pending_withdrawals: (value, available_timestamp) pairs
        now: Current unix time; withdrawals due at or before it are free
    """
    if locked is None:
        return LockedBalances()

    pending_free = 0
    pending_blocked = 0
    for value, timestamp in pending_withdrawals or []:
        if timestamp <= now:
            pending_free += value
        else:
            pending_blocked += value

    return LockedBalances(
        locked=locked,
        pending_blocked=pending_blocked,
        pending_free=pending_free,
        total=locked + pending_blocked + pending_free,
    )


def get_stake_for_group(group_to_stake: Optional[GroupToStake], group: Optional[str]) -> Optional[GroupStake]:
    """Stake record for a group, matching any address form. None if absent."""
    if not group_to_stake or not group:
        return None
    try:
        key = normalize_address(group)
    except ValueError:
        logger.debug(f"Ignoring malformed group address: {group}")
        return None
    if key in group_to_stake:
        return group_to_stake[key]
    # Tolerate maps built with non-normalized keys
    for addr, stake in group_to_stake.items():
        try:
            if normalize_address(addr) == key:
                return stake
        except ValueError:
            continue
    return None
