# MIT License
# Copyright (c) 2025 Hashborn

"""
Stake form validation and the maximum-amount rule.

Validation problems are returned per field, never raised. Rules run in a
fixed order and the first failing rule is the only one reported.
"""
from dataclasses import dataclass, field
from typing import Dict, List, Optional
import logging
from ..protocol.types.common import StakeActionType, InvalidStakeActionError
from ..protocol.types.staking import (
    GroupToStake,
    LockedBalances,
    StakeFormValues,
    StakeSnapshot,
    StakingBalances,
)
from ..protocol.types.validator import ValidatorGroup
from ..protocol.crypto.addresses import eq_address_safe, is_zero_address
from ..protocol.config.params import NetworkConfig, CURRENT_NETWORK
from ..utils.amount import to_wei
from .balances import get_stake_for_group
from .stats import find_group

logger = logging.getLogger(__name__)


@dataclass
class ValidationResult:
    """Field name -> message. No errors means the intent is valid."""
    errors: Dict[str, str] = field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @classmethod
    def error(cls, field_name: str, message: str) -> 'ValidationResult':
        return cls(errors={field_name: message})


def get_max_amount(
    action: StakeActionType,
    group: Optional[str],
    locked: Optional[LockedBalances] = None,
    staking: Optional[StakingBalances] = None,
    group_to_stake: Optional[GroupToStake] = None,
) -> int:
    """
    Largest amount (wei) the action may move.

    Stake is bounded by unused locked balance across all groups and can
    come out negative when more is voted than locked; callers treat that
    as zero. Unstake and transfer are bounded by the stake in `group`.

    Raises:
        InvalidStakeActionError: action is not a StakeActionType
    """
    if action == StakeActionType.STAKE:
        return (locked.locked if locked else 0) - (staking.total if staking else 0)
    elif action == StakeActionType.UNSTAKE or action == StakeActionType.TRANSFER:
        if is_zero_address(group):
            return 0
        stake = get_stake_for_group(group_to_stake, group)
        return stake.total if stake else 0
    else:
        raise InvalidStakeActionError(action)


def _check_capacity(group: Optional[ValidatorGroup], not_found: str, at_capacity: str) -> Optional[str]:
    if not group:
        return not_found
    if group.is_at_capacity:
        return at_capacity
    return None


def validate_stake_form(
    values: StakeFormValues,
    locked: LockedBalances,
    staking: StakingBalances,
    group_to_stake: GroupToStake,
    groups: List[ValidatorGroup],
    config: NetworkConfig = None,
) -> ValidationResult:
    config = config or CURRENT_NETWORK
    action, group, transfer_group = values.action, values.group, values.transfer_group

    if is_zero_address(group):
        return ValidationResult.error("group", "Validator group required")

    if action == StakeActionType.STAKE:
        problem = _check_capacity(find_group(groups, group), "Group not found", "Group has max votes")
        if problem:
            return ValidationResult.error("group", problem)

    if action == StakeActionType.TRANSFER:
        if is_zero_address(transfer_group):
            return ValidationResult.error("transfer_group", "Transfer group required")
        if eq_address_safe(transfer_group, group) or transfer_group == group:
            return ValidationResult.error("transfer_group", "Groups must be different")
        problem = _check_capacity(
            find_group(groups, transfer_group), "Transfer group not found", "Transfer group has max votes"
        )
        if problem:
            return ValidationResult.error("group", problem)

    amount_wei = to_wei(values.amount, config.decimals)
    if not amount_wei or amount_wei <= 0:
        return ValidationResult.error("amount", "Invalid amount")

    max_amount_wei = max(0, get_max_amount(action, group, locked, staking, group_to_stake))
    if amount_wei > max_amount_wei:
        return ValidationResult.error("amount", "Amount exceeds max")

    return ValidationResult()


def validate_stake_context(
    values: StakeFormValues,
    snapshot: StakeSnapshot,
    plan_started: bool = False,
    config: NetworkConfig = None,
) -> ValidationResult:
    """
    Validates against a snapshot, as done before the first plan step.

    Once a plan has started, later steps replay the committed intent and
    are not re-validated against the shifted balances.
    """
    if not snapshot.is_loaded:
        return ValidationResult.error("amount", "Form data not ready")
    if plan_started:
        return ValidationResult()

    result = validate_stake_form(
        values,
        snapshot.locked,
        snapshot.staking,
        snapshot.group_to_stake,
        snapshot.groups,
        config,
    )
    if not result.is_valid:
        logger.warning(f"Rejected {values.action.value} intent: {result.errors}")
    return result
