"""Interfaces the core expects from storage, membership and HTTP adapters."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Protocol, TypeVar, runtime_checkable

from coworking.spaces.hotdesk import Hotdesk, HotdeskNumber, HotdeskReservation
from coworking.spaces.meeting_room import (
    MeetingRoom,
    MeetingRoomName,
    MeetingRoomReservation,
    ReservationDate,
)
from coworking.spaces.office import Office, OfficeNumber

T = TypeVar("T")


@runtime_checkable
class RepositoryPort(Protocol[T]):
    def save(self, entity: T) -> None: ...

    def find_all(self) -> list[T]: ...


@runtime_checkable
class HotdeskRepositoryPort(RepositoryPort[Hotdesk], Protocol):
    def find_by_number(self, number: HotdeskNumber) -> Hotdesk | None: ...


@runtime_checkable
class MeetingRoomRepositoryPort(RepositoryPort[MeetingRoom], Protocol):
    def find_by_name(self, name: MeetingRoomName) -> MeetingRoom: ...

    def find_by_id(self, room_id: uuid.UUID) -> MeetingRoom: ...


@runtime_checkable
class OfficeRepositoryPort(RepositoryPort[Office], Protocol):
    def find_by_number(self, number: OfficeNumber) -> Office: ...


@runtime_checkable
class HotdeskReservationRepositoryPort(RepositoryPort[HotdeskReservation], Protocol):
    def find_by_user_id_and_date(
        self, user_id: uuid.UUID, date: datetime
    ) -> list[HotdeskReservation]: ...


@runtime_checkable
class MeetingRoomReservationRepositoryPort(Protocol):
    def save(self, reservation: MeetingRoomReservation) -> None: ...

    def find_by_meeting_room_and_date(
        self, meeting_room_id: uuid.UUID, date: ReservationDate
    ) -> list[MeetingRoomReservation]: ...


@dataclass(frozen=True)
class MembershipResponse:
    membership_id: uuid.UUID
    remaining_credits: int


@runtime_checkable
class MembershipService(Protocol):
    def check_membership(
        self, user_id: uuid.UUID, date: datetime
    ) -> MembershipResponse | None: ...


@runtime_checkable
class HttpPort(Protocol):
    def register_routes(self, app: Any) -> None: ...