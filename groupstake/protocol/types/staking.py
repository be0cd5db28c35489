from decimal import Decimal
from pydantic import BaseModel, Field
from typing import Dict, List, Optional, Union
from .common import StakeActionType
from .validator import ValidatorGroup
from ..crypto.addresses import ZERO_ADDRESS

class LockedBalances(BaseModel):
    """Locked token balances of one holder, in wei."""
    locked: int = Field(default=0, ge=0)              # Locked and available to stake
    pending_blocked: int = Field(default=0, ge=0)     # Unlocking, withdrawal not yet available
    pending_free: int = Field(default=0, ge=0)        # Unlocking, ready to withdraw
    total: int = Field(default=0, ge=0)               # locked + pending_blocked + pending_free

class GroupStake(BaseModel):
    """Votes a holder has cast for a single group."""
    active: int = Field(default=0, ge=0)
    pending: int = Field(default=0, ge=0)
    group_index: int = Field(default=0, ge=0)         # Index of the group in the holder's voted-for list

    @property
    def total(self) -> int:
        return self.active + self.pending

# Group address (normalized) -> stake, in voted-for order
GroupToStake = Dict[str, GroupStake]

class StakingBalances(BaseModel):
    active: int = Field(default=0, ge=0)
    pending: int = Field(default=0, ge=0)
    total: int = Field(default=0, ge=0)

class StakeFormValues(BaseModel):
    """A holder's stake intent as entered, before amount conversion."""
    action: StakeActionType = StakeActionType.STAKE
    amount: Union[str, int, float, Decimal] = 0   # Decimal units, converted to wei on use
    group: str = ZERO_ADDRESS
    transfer_group: str = ZERO_ADDRESS

class StakeSnapshot(BaseModel):
    """
    Chain state the validator and planner read, fetched once per pass.

    Any part left as None has not been loaded yet.
    """
    groups: Optional[List[ValidatorGroup]] = None
    locked: Optional[LockedBalances] = None
    staking: Optional[StakingBalances] = None
    group_to_stake: Optional[GroupToStake] = None

    @property
    def is_loaded(self) -> bool:
        return (
            self.groups is not None
            and self.locked is not None
            and self.staking is not None
            and self.group_to_stake is not None
        )
