# MIT License
# Copyright (c) 2025 Hashborn

"""
Plan Execution Tracker.

Steps a stake plan through its transactions one at a time:

    idle -> validating -> plan_ready -> step_in_flight(i)
         -> step_confirmed(i) -> step_in_flight(i+1) -> ... -> complete
    step_in_flight(i) -> failed(i) -> step_in_flight(i)   (retry)
    any state but validating -> idle                        (reset)

The tracker owns the step index; submission and confirmation happen
elsewhere and are reported back through on_tx_success/on_tx_failure.
Every descriptor is built from a snapshot fetched right before it is
requested, so step i+1 always reflects the confirmed step i.
"""
from enum import Enum
from typing import Callable, Optional
import logging
from ..protocol.types.common import PlanStateError
from ..protocol.types.staking import StakeFormValues, StakeSnapshot
from ..protocol.types.tx import TransactionDescriptor
from ..protocol.config.params import NetworkConfig, CURRENT_NETWORK
from .events import (
    EventBus,
    PLAN_READY,
    STEP_SUBMITTED,
    STEP_CONFIRMED,
    STEP_FAILED,
    PLAN_COMPLETE,
    PLAN_RESET,
)
from .plan import build_stake_tx, get_num_txs
from .validation import ValidationResult, validate_stake_context

logger = logging.getLogger(__name__)


class PlanState(str, Enum):
    IDLE = "idle"
    VALIDATING = "validating"
    PLAN_READY = "plan_ready"
    STEP_IN_FLIGHT = "step_in_flight"
    STEP_CONFIRMED = "step_confirmed"
    COMPLETE = "complete"
    FAILED = "failed"


class TransactionPlanTracker:
    def __init__(
        self,
        fetch_snapshot: Callable[[], StakeSnapshot],
        events: Optional[EventBus] = None,
        config: NetworkConfig = None,
    ):
        """
        Args:
            fetch_snapshot: Returns current chain state; called before
                validating and before building every step
            events: Bus receiving plan lifecycle events
            config: Network to build transactions for
        """
        self.fetch_snapshot = fetch_snapshot
        self.events = events or EventBus()
        self.config = config or CURRENT_NETWORK

        self.state = PlanState.IDLE
        self.tx_index = 0
        self.num_txs = 0
        self.values: Optional[StakeFormValues] = None
        self.last_error: Optional[str] = None

    @property
    def is_plan_started(self) -> bool:
        return self.tx_index > 0

    def validate(self, values: StakeFormValues) -> ValidationResult:
        """Validates an intent; always valid once the plan is under way."""
        return validate_stake_context(
            values, self.fetch_snapshot(), plan_started=self.is_plan_started, config=self.config
        )

    def start(self, values: StakeFormValues) -> ValidationResult:
        """
        Validates `values` and, if valid, prepares its plan.

        Returns the validation result; on errors the tracker stays idle.

        Raises:
            PlanStateError: a plan is already under way
        """
        if self.is_plan_started or self.state in (PlanState.VALIDATING, PlanState.STEP_IN_FLIGHT):
            raise PlanStateError(f"Cannot start a new plan while {self.state.value} at step {self.tx_index}")

        self.state = PlanState.VALIDATING
        try:
            result = self.validate(values)
        except Exception:
            self.state = PlanState.IDLE
            raise
        if not result.is_valid:
            self.state = PlanState.IDLE
            return result

        self.values = values
        self.num_txs = get_num_txs(values.action)
        self.tx_index = 0
        self.last_error = None
        self.state = PlanState.PLAN_READY
        logger.info(f"Plan ready: {values.action.value} in {self.num_txs} step(s)")
        self.events.emit(PLAN_READY, values=values, num_txs=self.num_txs)
        return result

    def next_tx(self) -> TransactionDescriptor:
        """
        Builds the descriptor for the current step and marks it in flight.

        Also used to retry a failed step; the descriptor is rebuilt from
        fresh state rather than reused.

        Raises:
            PlanStateError: no plan, or the previous step is not confirmed
        """
        if self.state not in (PlanState.PLAN_READY, PlanState.STEP_CONFIRMED, PlanState.FAILED):
            raise PlanStateError(f"Cannot request a transaction while {self.state.value}")

        snapshot = self.fetch_snapshot()
        tx = build_stake_tx(
            self.values,
            self.tx_index,
            snapshot.groups or [],
            snapshot.group_to_stake or {},
            self.config,
        )
        self.state = PlanState.STEP_IN_FLIGHT
        logger.info(f"Step {self.tx_index + 1}/{self.num_txs} in flight: {tx.function_name} {tx.args}")
        self.events.emit(STEP_SUBMITTED, tx=tx, tx_index=self.tx_index)
        return tx

    def on_tx_success(self) -> None:
        """Records confirmation of the in-flight step."""
        self._require_in_flight()
        confirmed_index = self.tx_index
        self.tx_index += 1
        self.last_error = None

        if self.tx_index >= self.num_txs:
            self.state = PlanState.COMPLETE
            self.tx_index = 0
            logger.info(f"Plan complete: {self.values.action.value}")
            self.events.emit(STEP_CONFIRMED, tx_index=confirmed_index)
            self.events.emit(PLAN_COMPLETE, values=self.values)
        else:
            self.state = PlanState.STEP_CONFIRMED
            logger.info(f"Step {confirmed_index + 1}/{self.num_txs} confirmed")
            self.events.emit(STEP_CONFIRMED, tx_index=confirmed_index)

    def on_tx_failure(self, error: str = "") -> None:
        """Records failure of the in-flight step. The index does not advance."""
        self._require_in_flight()
        self.state = PlanState.FAILED
        self.last_error = error
        logger.warning(f"Step {self.tx_index + 1}/{self.num_txs} failed: {error}")
        self.events.emit(STEP_FAILED, tx_index=self.tx_index, error=error)

    def reset(self) -> None:
        """
        Abandons the current plan.

        Confirmed steps stay applied on-chain; nothing is rolled back.
        """
        if self.state == PlanState.VALIDATING:
            raise PlanStateError("Cannot reset while validating")
        if self.is_plan_started:
            logger.warning(f"Abandoning plan after {self.tx_index}/{self.num_txs} confirmed step(s)")
        self.state = PlanState.IDLE
        self.tx_index = 0
        self.num_txs = 0
        self.values = None
        self.last_error = None
        self.events.emit(PLAN_RESET)

    def _require_in_flight(self) -> None:
        if self.state != PlanState.STEP_IN_FLIGHT:
            raise PlanStateError(f"No transaction in flight (state: {self.state.value})")
