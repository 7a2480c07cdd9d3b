"""Leased offices."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from coworking.spaces.common import (
    DomainError,
    Status,
    format_timestamp,
    local_now,
    parse_status,
)


class InvalidOfficeNumberError(DomainError):
    default_message = "el número de la oficina debe ser mayor a 0"


class InvalidOfficeLeasePeriodError(DomainError):
    default_message = "el período de alquiler de la oficina debe ser mayor a 0"


class OfficeAlreadyExistsError(DomainError):
    default_message = "la oficina ya existe"


@dataclass(frozen=True)
class OfficeNumber:
    value: int

    def __post_init__(self) -> None:
        if self.value <= 0:
            raise InvalidOfficeNumberError()


@dataclass(frozen=True)
class LeasePeriod:
    value: int

    def __post_init__(self) -> None:
        if self.value <= 0:
            raise InvalidOfficeLeasePeriodError()


@dataclass
class Office:
    number: OfficeNumber
    lease_period: LeasePeriod
    status: Status = Status.ACTIVE
    id: uuid.UUID = field(default_factory=uuid.uuid4)
    created_at: datetime = field(default_factory=local_now)
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        if self.updated_at is None:
            self.updated_at = self.created_at

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": str(self.id),
            "number": self.number.value,
            "status": self.status.value,
            "lease_period": self.lease_period.value,
            "created_at": format_timestamp(self.created_at),
            "updated_at": format_timestamp(self.updated_at),
        }


def create_office(number: int, lease_period: int, status: str | None = "") -> Office:
    """Create an office; an empty status means Active."""
    office_number = OfficeNumber(number)
    office_lease = LeasePeriod(lease_period)
    parsed_status = parse_status(status or Status.ACTIVE.value)
    return Office(number=office_number, lease_period=office_lease, status=parsed_status)