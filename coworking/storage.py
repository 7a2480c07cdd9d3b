"""In-memory repositories for spaces and reservations."""

from __future__ import annotations

import copy
import uuid
from datetime import datetime
from typing import Generic, TypeVar

from coworking.ports import (
    HotdeskRepositoryPort,
    HotdeskReservationRepositoryPort,
    MeetingRoomRepositoryPort,
    MeetingRoomReservationRepositoryPort,
    OfficeRepositoryPort,
)
from coworking.spaces.common import format_timestamp
from coworking.spaces.hotdesk import Hotdesk, HotdeskNumber, HotdeskReservation
from coworking.spaces.meeting_room import (
    MeetingRoom,
    MeetingRoomName,
    MeetingRoomReservation,
    ReservationDate,
)
from coworking.spaces.office import Office, OfficeNumber

T = TypeVar("T")


class MeetingRoomNotFoundError(LookupError):
    def __init__(self, message: str = "meeting room not found") -> None:
        super().__init__(message)


class OfficeNotFoundError(LookupError):
    def __init__(self, message: str = "office not found") -> None:
        super().__init__(message)


class ReservationNotFoundError(LookupError):
    def __init__(self, message: str = "reservation not found") -> None:
        super().__init__(message)


class _ListRepository(Generic[T]):
    """Keeps entities in insertion order."""

    def __init__(self) -> None:
        self._items: list[T] = []

    def _add(self, entity: T | None, nil_message: str) -> None:
        if entity is None:
            raise ValueError(nil_message)
        self._items.append(entity)

    def find_all(self) -> list[T]:
        return list(self._items)


class HotdeskRepository(_ListRepository[Hotdesk]):
    def save(self, hotdesk: Hotdesk | None) -> None:
        self._add(hotdesk, "cannot save a nil hotdesk")

    def find_all(self) -> list[Hotdesk]:
        return super().find_all()

    def find_by_number(self, number: HotdeskNumber | None) -> Hotdesk | None:
        """Return the hot desk with ``number``, or None if there is none."""
        if number is None:
            raise ValueError("number cannot be nil")
        return next(
            (desk for desk in self._items if desk.number.value == number.value), None
        )


class MeetingRoomRepository(_ListRepository[MeetingRoom]):
    def save(self, room: MeetingRoom | None) -> None:
        self._add(room, "meeting room cannot be nil")

    def find_all(self) -> list[MeetingRoom]:
        return super().find_all()

    def find_by_name(self, name: MeetingRoomName | None) -> MeetingRoom:
        if name is None:
            raise ValueError("name cannot be empty")
        for room in self._items:
            if room.name.value == name.value:
                return room
        raise MeetingRoomNotFoundError()

    def find_by_id(self, room_id: uuid.UUID) -> MeetingRoom:
        for room in self._items:
            if str(room.id) == str(room_id):
                return room
        raise MeetingRoomNotFoundError()


class OfficeRepository(_ListRepository[Office]):
    def save(self, office: Office | None) -> None:
        self._add(office, "office cannot be nil")

    def find_all(self) -> list[Office]:
        return super().find_all()

    def find_by_number(self, number: OfficeNumber | None) -> Office:
        if number is None:
            raise ValueError("office cannot be nil")
        for office in self._items:
            if office.number.value == number.value:
                return office
        raise OfficeNotFoundError()


class HotdeskReservationRepository(_ListRepository[HotdeskReservation]):
    def save(self, reservation: HotdeskReservation | None) -> None:
        """Store a shallow copy, so later changes to the caller's object are not seen."""
        if reservation is None:
            raise ValueError("reservation cannot be nil")
        self._items.append(copy.copy(reservation))

    def find_all(self) -> list[HotdeskReservation]:
        return super().find_all()

    def find_by_user_id_and_date(
        self, user_id: uuid.UUID, date: datetime
    ) -> list[HotdeskReservation]:
        wanted = format_timestamp(date)
        return [
            reservation
            for reservation in self._items
            if reservation.user_id == user_id
            and format_timestamp(reservation.date) == wanted
        ]


class MeetingRoomReservationRepository(_ListRepository[MeetingRoomReservation]):
    def save(self, reservation: MeetingRoomReservation | None) -> None:
        self._add(reservation, "reservation cannot be nil")

    def find_by_meeting_room_and_date(
        self, meeting_room_id: uuid.UUID, date: ReservationDate
    ) -> list[MeetingRoomReservation]:
        return [
            reservation
            for reservation in self._items
            if str(reservation.meeting_room_id) == str(meeting_room_id)
            and reservation.date.isoformat() == date.isoformat()
        ]

    def find_by_user(self, user_id: uuid.UUID) -> list[MeetingRoomReservation]:
        return [
            reservation
            for reservation in self._items
            if str(reservation.user_id) == str(user_id)
        ]


_hotdesk_port: type[HotdeskRepositoryPort] = HotdeskRepository
_meeting_room_port: type[MeetingRoomRepositoryPort] = MeetingRoomRepository
_office_port: type[OfficeRepositoryPort] = OfficeRepository
_hotdesk_reservation_port: type[HotdeskReservationRepositoryPort] = (
    HotdeskReservationRepository
)
_meeting_room_reservation_port: type[MeetingRoomReservationRepositoryPort] = (
    MeetingRoomReservationRepository
)