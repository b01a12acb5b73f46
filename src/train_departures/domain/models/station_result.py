"""Outcome of station operations that can be refused."""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict

T = TypeVar("T")


class RejectionReason(str, Enum):
    """Why the station refused an operation."""

    INVALID_TRAIN_NUMBER = "invalid_train_number"
    DUPLICATE_TRAIN_NUMBER = "duplicate_train_number"
    NOT_AFTER_CLOCK = "not_after_clock"
    CLOCK_BACKWARDS = "clock_backwards"
    TRAIN_NOT_FOUND = "train_not_found"
    DESTINATION_NOT_FOUND = "destination_not_found"


class Rejection(BaseModel):
    """Details about a refused operation."""

    model_config = ConfigDict(frozen=True)

    reason: RejectionReason
    message: str


@dataclass(frozen=True)
class StationResult(Generic[T]):
    """Either the value produced by an operation or the reason it was refused.

    A refused operation leaves the station unchanged.
    """

    value: T | None = None
    rejection: Rejection | None = None

    @property
    def ok(self) -> bool:
        return self.rejection is None

    def __bool__(self) -> bool:
        return self.ok

    @classmethod
    def success(cls, value: T | None = None) -> "StationResult[T]":
        return cls(value=value)

    @classmethod
    def rejected(cls, reason: RejectionReason, message: str) -> "StationResult[T]":
        return cls(rejection=Rejection(reason=reason, message=message))
