"""
Event system for stake plan lifecycle events.

Provides a simple pub/sub mechanism so callers can refetch balances or
update a UI when plan steps are submitted, confirmed or fail.
"""
from typing import Dict, List, Callable, Any
import logging

logger = logging.getLogger(__name__)

PLAN_READY = "plan_ready"
STEP_SUBMITTED = "step_submitted"
STEP_CONFIRMED = "step_confirmed"
STEP_FAILED = "step_failed"
PLAN_COMPLETE = "plan_complete"
PLAN_RESET = "plan_reset"

PLAN_EVENTS = (PLAN_READY, STEP_SUBMITTED, STEP_CONFIRMED, STEP_FAILED, PLAN_COMPLETE, PLAN_RESET)


class EventBus:
    """
    Simple event bus for plan events.

    Only the names in PLAN_EVENTS are emitted by the tracker; any other
    name is logged as a warning.

    Events are delivered synchronously in the caller's thread.
    """

    def __init__(self):
        self.listeners: Dict[str, List[Callable]] = {}

    def subscribe(self, event_type: str, callback: Callable) -> None:
        """
        Subscribe to an event type.

        Args:
            event_type: Event name (e.g., 'step_confirmed', 'step_failed')
            callback: Function to call when event is emitted
        """
        self._check_event_type(event_type)
        if event_type not in self.listeners:
            self.listeners[event_type] = []

        self.listeners[event_type].append(callback)
        logger.debug(f"Subscribed to event: {event_type}")

    def unsubscribe(self, event_type: str, callback: Callable) -> None:
        if event_type in self.listeners:
            try:
                self.listeners[event_type].remove(callback)
                logger.debug(f"Unsubscribed from event: {event_type}")
            except ValueError:
                logger.warning(f"Callback not found for event: {event_type}")

    def emit(self, event_type: str, **data: Any) -> None:
        """
        Emit an event to all subscribers.

        A failing listener is logged and does not stop the others.

        Args:
            event_type: Event name
            **data: Event data as keyword arguments
        """
        self._check_event_type(event_type)
        listeners = self.listeners.get(event_type, [])

        if not listeners:
            logger.debug(f"No listeners for event: {event_type}")
            return

        logger.debug(f"Emitting event: {event_type} to {len(listeners)} listener(s)")

        for callback in listeners:
            try:
                callback(**data)
            except Exception as e:
                logger.error(f"Error in event callback for {event_type}: {e}", exc_info=True)

    def clear(self, event_type: str = None) -> None:
        """Clear listeners for one event type, or all of them."""
        if event_type:
            self.listeners.pop(event_type, None)
        else:
            self.listeners.clear()

    def _check_event_type(self, event_type: str) -> None:
        if event_type not in PLAN_EVENTS:
            logger.warning(f"Unknown plan event: {event_type} (expected one of {', '.join(PLAN_EVENTS)})")
