"""Hot desks and hot-desk reservations."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from coworking.spaces.common import DomainError, Status, format_timestamp, local_now


class InvalidHotdeskNumberError(DomainError):
    default_message = "el número del hotdesk debe ser mayor a 0"


class HotdeskAlreadyExistsError(DomainError):
    default_message = "el hotdesk ya existe"


class HotdeskAlreadyReservedError(DomainError):
    default_message = "el hotdesk ya está reservado for that date for that user"


@dataclass(frozen=True)
class HotdeskNumber:
    """A hot desk number; always greater than zero."""

    value: int

    def __post_init__(self) -> None:
        if self.value <= 0:
            raise InvalidHotdeskNumberError()


@dataclass
class Hotdesk:
    number: HotdeskNumber
    id: uuid.UUID = field(default_factory=uuid.uuid4)
    status: Status = Status.ACTIVE
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
            "created_at": format_timestamp(self.created_at),
            "updated_at": format_timestamp(self.updated_at),
        }


@dataclass
class HotdeskReservation:
    user_id: uuid.UUID
    date: datetime
    included_in_membership: bool
    id: uuid.UUID = field(default_factory=uuid.uuid4)
    status: Status = Status.ACTIVE
    created_at: datetime = field(default_factory=local_now)
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        if self.updated_at is None:
            self.updated_at = self.created_at

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": str(self.id),
            "user_id": str(self.user_id),
            "date": format_timestamp(self.date),
            "status": self.status.value,
            "created_at": format_timestamp(self.created_at),
            "updated_at": format_timestamp(self.updated_at),
            "included_in_membership": self.included_in_membership,
        }


def create_hotdesk(number: int) -> Hotdesk:
    """Create an active hot desk with a fresh id."""
    return Hotdesk(number=HotdeskNumber(number))


def create_reservation(
    user_id: uuid.UUID, date: datetime, included_in_membership: bool
) -> HotdeskReservation:
    """Create an active hot-desk reservation for ``user_id`` on ``date``."""
    return HotdeskReservation(
        user_id=user_id, date=date, included_in_membership=included_in_membership
    )