# MIT License
# Copyright (c) 2025 Hashborn

"""
Staking core: group statistics, balance aggregation, validation,
planning and plan execution tracking.
"""

from .stats import GroupStats, get_group_stats, find_group
from .balances import aggregate_group_to_stake, aggregate_locked_balances, compute_staking_balances
from .validation import ValidationResult, get_max_amount, validate_stake_form, validate_stake_context
from .plan import build_stake_tx, get_num_txs, iter_stake_tx_plan
from .selection import pick_random_group
from .tracker import PlanState, TransactionPlanTracker

__all__ = [
    "GroupStats",
    "get_group_stats",
    "find_group",
    "aggregate_group_to_stake",
    "aggregate_locked_balances",
    "compute_staking_balances",
    "ValidationResult",
    "get_max_amount",
    "validate_stake_form",
    "validate_stake_context",
    "build_stake_tx",
    "get_num_txs",
    "iter_stake_tx_plan",
    "pick_random_group",
    "PlanState",
    "TransactionPlanTracker",
]
