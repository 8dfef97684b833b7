"""
Transaction domain model.
"""

from datetime import date as date_type
from enum import Enum
from typing import Optional

from pydantic import Field, field_validator

from .base import BaseModel


class TransactionType(str, Enum):
    """Direction of money relative to the business."""
    IN = "in"
    OUT = "out"


class Transaction(BaseModel):
    """A single payment received from or made to a party."""

    id: Optional[str] = None
    amount: float = Field(..., ge=0, description="Transaction amount in rupees")
    party_name: str = Field(default="", alias="partyName")
    material: str = Field(..., min_length=1)
    project: str = Field(..., min_length=1)
    type: TransactionType
    date: date_type = Field(default_factory=date_type.today)

    @field_validator("type", mode="before")
    @classmethod
    def normalize_type(cls, v):
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @property
    def is_income(self) -> bool:
        return self.type == TransactionType.IN.value

    @property
    def signed_amount(self) -> float:
        return self.amount if self.is_income else -self.amount
