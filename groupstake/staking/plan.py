# MIT License
# Copyright (c) 2025 Hashborn

"""
Stake Action Planner.

Decomposes a validated stake intent into ordered Election transactions:

    stake    -> [vote(group)]
    unstake  -> [revoke(group)]
    transfer -> [revoke(group), vote(transfer_group)]

A transfer is not atomic on-chain: the revoked votes must be free before
they can be cast again, so step 1 of a transfer is only ever built from a
snapshot taken after step 0 was confirmed. Steps are built one at a time
with `build_stake_tx`; `iter_stake_tx_plan` drives that with fresh state.
"""
from typing import Callable, Dict, Generator, List, Tuple
import logging
from ..protocol.types.common import StakeActionType, InvalidStakeActionError, PlanError
from ..protocol.types.staking import GroupToStake, StakeFormValues, StakeSnapshot
from ..protocol.types.tx import TransactionDescriptor
from ..protocol.types.validator import ValidatorGroup
from ..protocol.crypto.addresses import ZERO_ADDRESS, normalize_address, eq_address_safe, is_zero_address
from ..protocol.config.params import NetworkConfig, CURRENT_NETWORK, ELECTION_CONTRACT
from ..utils.amount import to_wei
from .balances import get_stake_for_group

logger = logging.getLogger(__name__)

NUM_TXS: Dict[StakeActionType, int] = {
    StakeActionType.STAKE: 1,
    StakeActionType.UNSTAKE: 1,
    StakeActionType.TRANSFER: 2,
}


def get_num_txs(action: StakeActionType) -> int:
    if action not in NUM_TXS:
        raise InvalidStakeActionError(action)
    return NUM_TXS[action]


def find_lesser_and_greater(
    groups: List[ValidatorGroup], group: str, vote_delta: int
) -> Tuple[str, str]:
    """
    Neighbours of `group` in the Election's eligible-group list after its
    votes change by `vote_delta`.

    The contract keeps eligible groups sorted by votes and needs the group
    just below (lesser) and just above (greater) to re-insert the target.
    ZERO_ADDRESS marks either end, or a group that is not eligible.
    """
    adjusted = []
    target_index = None
    for g in groups:
        if not g.eligible:
            continue
        votes = g.votes
        if eq_address_safe(g.address, group):
            votes = max(0, votes + vote_delta)
            target_index = len(adjusted)
        adjusted.append((votes, len(adjusted), g.address))

    if target_index is None:
        return ZERO_ADDRESS, ZERO_ADDRESS

    # Sort by votes descending; ties keep list order
    ordered = sorted(adjusted, key=lambda item: (-item[0], item[1]))
    position = next(i for i, item in enumerate(ordered) if item[1] == target_index)

    greater = ordered[position - 1][2] if position > 0 else ZERO_ADDRESS
    lesser = ordered[position + 1][2] if position < len(ordered) - 1 else ZERO_ADDRESS
    return lesser, greater


def _amount_wei(values: StakeFormValues, config: NetworkConfig) -> int:
    amount = to_wei(values.amount, config.decimals)
    if not amount or amount <= 0:
        raise PlanError(f"Invalid amount: {values.amount!r}")
    return amount


def _vote_tx(
    values: StakeFormValues,
    tx_index: int,
    group: str,
    amount: int,
    groups: List[ValidatorGroup],
    config: NetworkConfig,
) -> TransactionDescriptor:
    if is_zero_address(group):
        raise PlanError("Cannot vote for an unset group")
    group = normalize_address(group)
    lesser, greater = find_lesser_and_greater(groups, group, amount)
    return TransactionDescriptor(
        action=values.action,
        tx_index=tx_index,
        contract=ELECTION_CONTRACT,
        address=config.election_address,
        function_name="vote",
        args=[group, amount],
        payload={"lesser": lesser, "greater": greater},
    )


def _revoke_tx(
    values: StakeFormValues,
    tx_index: int,
    group: str,
    amount: int,
    groups: List[ValidatorGroup],
    group_to_stake: GroupToStake,
    config: NetworkConfig,
) -> TransactionDescriptor:
    stake = get_stake_for_group(group_to_stake, group)
    if not stake:
        raise PlanError(f"No stake found for group {group}")

    # Pending votes earn nothing yet, so they go first
    pending = min(stake.pending, amount)
    active = amount - pending
    if active > stake.active:
        raise PlanError(f"Revoke amount {amount} exceeds stake {stake.total} in group {group}")

    group = normalize_address(group)
    lesser, greater = find_lesser_and_greater(groups, group, -amount)
    return TransactionDescriptor(
        action=values.action,
        tx_index=tx_index,
        contract=ELECTION_CONTRACT,
        address=config.election_address,
        function_name="revoke",
        args=[group, amount],
        payload={
            "pending": pending,
            "active": active,
            "group_index": stake.group_index,
            "lesser": lesser,
            "greater": greater,
        },
    )


def build_stake_tx(
    values: StakeFormValues,
    tx_index: int,
    groups: List[ValidatorGroup],
    group_to_stake: GroupToStake,
    config: NetworkConfig = None,
) -> TransactionDescriptor:
    """
    Builds plan step `tx_index` from the current chain state.

    Args:
        values: The validated intent (replayed verbatim for every step)
        tx_index: Step to build, 0-based
        groups: Current validator groups
        group_to_stake: Current per-group stake of the holder
        config: Network to target (defaults to CURRENT_NETWORK)

    Raises:
        InvalidStakeActionError: unknown action
        PlanError: step out of range, or the state cannot support it
    """
    config = config or CURRENT_NETWORK
    action = values.action
    num_txs = get_num_txs(action)
    if tx_index < 0 or tx_index >= num_txs:
        raise PlanError(f"Step {tx_index} out of range for {action.value} plan of {num_txs}")

    amount = _amount_wei(values, config)
    logger.debug(f"Building {action.value} step {tx_index + 1}/{num_txs} for {amount} wei")

    if action == StakeActionType.STAKE:
        return _vote_tx(values, tx_index, values.group, amount, groups, config)
    elif action == StakeActionType.UNSTAKE:
        return _revoke_tx(values, tx_index, values.group, amount, groups, group_to_stake, config)
    elif action == StakeActionType.TRANSFER:
        if tx_index == 0:
            return _revoke_tx(values, tx_index, values.group, amount, groups, group_to_stake, config)
        return _vote_tx(values, tx_index, values.transfer_group, amount, groups, config)
    else:
        raise InvalidStakeActionError(action)


def iter_stake_tx_plan(
    values: StakeFormValues,
    fetch_snapshot: Callable[[], StakeSnapshot],
    config: NetworkConfig = None,
) -> Generator[TransactionDescriptor, None, None]:
    """
    Yields plan steps in order, each built from a freshly fetched snapshot.

    The generator is suspended between steps: resume it only once the
    previous descriptor's transaction is confirmed.
    """
    for tx_index in range(get_num_txs(values.action)):
        snapshot = fetch_snapshot()
        yield build_stake_tx(
            values,
            tx_index,
            snapshot.groups or [],
            snapshot.group_to_stake or {},
            config,
        )
