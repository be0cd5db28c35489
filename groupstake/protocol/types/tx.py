from pydantic import BaseModel, Field
from typing import Any, Dict, List
from .common import StakeActionType

class TransactionDescriptor(BaseModel):
    """
    One contract call of a stake plan.

    Built by the planner and handed as-is to whatever encodes and submits it.
    """
    action: StakeActionType
    tx_index: int                 # Position in the plan
    contract: str                 # Contract name, e.g. "Election"
    address: str                  # Contract address
    function_name: str            # "vote" or "revoke"
    args: List[Any] = Field(default_factory=list)
    payload: Dict[str, Any] = Field(default_factory=dict) # Extra data (sorted-list hints, revoke split)
