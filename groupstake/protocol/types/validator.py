from pydantic import BaseModel, Field
from typing import Dict, Optional
from .common import ValidatorStatus

class GroupMember(BaseModel):
    """A validator belonging to a group."""
    address: str                 # Validator address (0x...)
    name: str = ""
    status: ValidatorStatus = ValidatorStatus.NOT_ELECTED
    score: int = Field(default=0, ge=0)              # Fixed-point, 10**24 == 100%

class ValidatorGroup(BaseModel):
    address: str                 # Group address (0x...)
    name: str = ""
    url: Optional[str] = None
    eligible: bool = True        # Only eligible groups take part in the Election vote ordering
    capacity: int = Field(default=0, ge=0)           # Max votes the group can receive
    votes: int = Field(default=0, ge=0)              # Votes currently cast for the group (may exceed capacity)

    # Members keyed by validator address
    members: Dict[str, GroupMember] = Field(default_factory=dict)

    @property
    def is_at_capacity(self) -> bool:
        return self.votes >= self.capacity
