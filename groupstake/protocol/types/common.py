from enum import Enum

class StakeActionType(str, Enum):
    STAKE = "stake"
    UNSTAKE = "unstake"
    TRANSFER = "transfer"

class ValidatorStatus(str, Enum):
    ELECTED = "elected"
    NOT_ELECTED = "notElected"

class ProtocolError(Exception):
    pass

class InvalidStakeActionError(ProtocolError):
    """Raised for an action value outside StakeActionType. Always a caller bug."""

    def __init__(self, action):
        super().__init__(f"Invalid stake action: {action}")
        self.action = action

class PlanError(ProtocolError):
    pass

class PlanStateError(ProtocolError):
    pass
