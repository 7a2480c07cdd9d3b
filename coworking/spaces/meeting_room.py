"""Meeting rooms and meeting-room reservations."""

from __future__ import annotations

import re
import uuid
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any

from coworking.spaces.common import DomainError, Status, format_timestamp, local_now


class InvalidMeetingRoomNameError(DomainError):
    default_message = "el nombre de la sala de reuniones no puede estar vacío"


class MeetingRoomAlreadyExistsError(DomainError):
    default_message = "la sala de reuniones ya existe"


class InvalidMeetingRoomCapacityError(DomainError):
    default_message = "la capacidad de la sala de reuniones debe ser mayor a 0"


class InvalidHoursError(DomainError):
    default_message = "las horas deben estar en el rango de 0 a 23"


class InvalidDurationError(DomainError):
    default_message = "la duración debe ser mayor a 0 y menor de 12"


class InvalidDateError(DomainError):
    default_message = "error de input en la fecha, esta mal formateada"


class InvalidMeetingRoomIdError(DomainError):
    default_message = "el id de la sala de reuniones no puede estar vacío"


class InvalidMeetingRoomUUIDError(DomainError):
    default_message = "el id de la sala de reuniones no es un UUID válido"


class MeetingRoomNotFoundError(DomainError):
    default_message = "sala de reuniones no encontrada"


class InvalidUserUUIDError(DomainError):
    default_message = "el id del usuario no es un UUID válido"


class InvalidReservationHourError(DomainError):
    default_message = "la hora de la reserva no es válida"


_DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}")


def _parse_calendar_date(text: str) -> date | None:
    if not isinstance(text, str) or not _DATE_PATTERN.fullmatch(text):
        return None
    try:
        return date.fromisoformat(text)
    except ValueError:
        return None


@dataclass(frozen=True)
class MeetingRoomName:
    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise InvalidMeetingRoomNameError()


@dataclass(frozen=True)
class Capacity:
    value: int

    def __post_init__(self) -> None:
        if self.value <= 0:
            raise InvalidMeetingRoomCapacityError()


@dataclass(frozen=True)
class Hour:
    """Starting hour of a reservation, 0 to 23."""

    value: int

    def __post_init__(self) -> None:
        if not 0 <= self.value <= 23:
            raise InvalidHoursError()


@dataclass(frozen=True)
class Duration:
    """Length of a reservation in hours, 1 to 12."""

    value: int

    def __post_init__(self) -> None:
        if not 1 <= self.value <= 12:
            raise InvalidDurationError()


@dataclass(frozen=True)
class ReservationDate:
    value: date

    def isoformat(self) -> str:
        return self.value.isoformat()


def parse_date(text: str) -> ReservationDate:
    """Parse a YYYY-MM-DD date."""
    parsed = _parse_calendar_date(text)
    if parsed is None:
        raise InvalidDateError("invalid date format, expected YYYY-MM-DD")
    return ReservationDate(parsed)


@dataclass
class MeetingRoom:
    name: MeetingRoomName
    capacity: Capacity
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
            "name": self.name.value,
            "capacity": self.capacity.value,
            "status": self.status.value,
            "created_at": format_timestamp(self.created_at),
            "updated_at": format_timestamp(self.updated_at),
        }


@dataclass
class MeetingRoomReservation:
    meeting_room_id: uuid.UUID
    user_id: uuid.UUID
    date: ReservationDate
    hour: Hour
    duration: Duration
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
            "meetingRoomId": str(self.meeting_room_id),
            "userId": str(self.user_id),
            "date": self.date.isoformat(),
            "hour": self.hour.value,
            "duration": self.duration.value,
            "status": self.status.value,
            "createdAt": format_timestamp(self.created_at),
            "updatedAt": format_timestamp(self.updated_at),
        }


def create_meeting_room(name: str, capacity: int) -> MeetingRoom:
    """Create an active meeting room; the name is checked before the capacity."""
    room_name = MeetingRoomName(name)
    room_capacity = Capacity(capacity)
    return MeetingRoom(name=room_name, capacity=room_capacity)


def create_reservation(
    meeting_room_id: uuid.UUID,
    user_id: uuid.UUID,
    date: str,
    hour: int,
    duration: int,
) -> MeetingRoomReservation:
    """Create an active reservation; date, hour and duration are checked in that order."""
    parsed = _parse_calendar_date(date)
    if parsed is None:
        raise InvalidDateError()
    return MeetingRoomReservation(
        meeting_room_id=meeting_room_id,
        user_id=user_id,
        date=ReservationDate(parsed),
        hour=Hour(hour),
        duration=Duration(duration),
    )