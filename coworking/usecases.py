"""Commands that register spaces and take reservations."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import date as calendar_date
from datetime import datetime
from typing import Callable

from coworking.ports import (
    HotdeskRepositoryPort,
    HotdeskReservationRepositoryPort,
    MeetingRoomRepositoryPort,
    MeetingRoomReservationRepositoryPort,
    MembershipService,
)
from coworking.spaces import hotdesk, meeting_room, office
from coworking.spaces.common import DomainError

_LOOKUP_FAILURES = (LookupError, ValueError)


class ReservationError(DomainError):
    default_message = "reservation cannot be made"


@dataclass(frozen=True)
class RegisterHotdeskParams:
    number: int


class RegisterHotdeskUsecase:
    def __init__(self, storage: HotdeskRepositoryPort) -> None:
        self.storage = storage

    def handle(self, params: RegisterHotdeskParams) -> None:
        number = hotdesk.HotdeskNumber(params.number)
        if self._already_exists(number):
            raise hotdesk.HotdeskAlreadyExistsError()
        self.storage.save(hotdesk.create_hotdesk(params.number))

    def _already_exists(self, number: hotdesk.HotdeskNumber) -> bool:
        try:
            return self.storage.find_by_number(number) is not None
        except _LOOKUP_FAILURES:
            return False


@dataclass(frozen=True)
class RegisterMeetingRoomParams:
    name: str
    capacity: int


class RegisterMeetingRoomUsecase:
    def __init__(self, storage: MeetingRoomRepositoryPort) -> None:
        self.storage = storage

    def handle(self, params: RegisterMeetingRoomParams) -> None:
        name = meeting_room.MeetingRoomName(params.name)
        if self._already_exists(name):
            raise meeting_room.MeetingRoomAlreadyExistsError()
        self.storage.save(meeting_room.create_meeting_room(params.name, params.capacity))

    def _already_exists(self, name: meeting_room.MeetingRoomName) -> bool:
        try:
            return self.storage.find_by_name(name) is not None
        except _LOOKUP_FAILURES:
            return False


@dataclass(frozen=True)
class RegisterOfficeParams:
    number: int
    lease_period: int
    status: str = ""


class RegisterOfficeUsecase:
    def __init__(self, storage) -> None:
        self.storage = storage

    def handle(self, params: RegisterOfficeParams) -> None:
        number = office.OfficeNumber(params.number)
        if self._already_exists(number):
            raise office.OfficeAlreadyExistsError()
        self.storage.save(
            office.create_office(params.number, params.lease_period, params.status)
        )

    def _already_exists(self, number: office.OfficeNumber) -> bool:
        try:
            return self.storage.find_by_number(number) is not None
        except _LOOKUP_FAILURES:
            return False


@dataclass(frozen=True)
class ReserveHotdeskParams:
    user_id: uuid.UUID
    date: datetime


class ReserveHotdeskUsecase:
    def __init__(
        self,
        storage: HotdeskReservationRepositoryPort,
        membership_service: MembershipService,
    ) -> None:
        self.storage = storage
        self.membership_service = membership_service

    def handle(self, params: ReserveHotdeskParams) -> None:
        reservation = hotdesk.create_reservation(params.user_id, params.date, True)
        if self._already_exists(params.user_id, params.date):
            raise ReservationError(
                "a reservation already exists for this user on the specified date"
            )
        membership = self.membership_service.check_membership(
            params.user_id, params.date
        )
        if membership is None:
            raise ReservationError("no membership information found")
        if membership.remaining_credits <= 0:
            raise ReservationError(
                "reservation cannot be made: no remaining credits in membership"
            )
        self.storage.save(reservation)

    def _already_exists(self, user_id: uuid.UUID, date: datetime) -> bool:
        try:
            return bool(self.storage.find_by_user_id_and_date(user_id, date))
        except _LOOKUP_FAILURES:
            return False


@dataclass(frozen=True)
class ReserveMeetingRoomParams:
    meeting_room: str
    user_id: str
    date: str
    hour: int
    duration: int


class ReserveMeetingRoomUsecase:
    """Books a meeting room; only later hours of the current day are accepted."""

    def __init__(
        self,
        reservation_storage: MeetingRoomReservationRepositoryPort,
        meeting_room_storage: MeetingRoomRepositoryPort,
        hotdesk_reservation_storage: HotdeskReservationRepositoryPort | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.reservation_storage = reservation_storage
        self.meeting_room_storage = meeting_room_storage
        self.hotdesk_reservation_storage = hotdesk_reservation_storage
        self.clock = clock

    def handle(self, params: ReserveMeetingRoomParams) -> None:
        try:
            room_id = uuid.UUID(params.meeting_room)
        except (ValueError, TypeError, AttributeError):
            raise meeting_room.InvalidMeetingRoomUUIDError() from None
        try:
            user_id = uuid.UUID(params.user_id)
        except (ValueError, TypeError, AttributeError):
            raise meeting_room.InvalidUserUUIDError() from None

        if not self._room_exists(room_id):
            raise meeting_room.MeetingRoomNotFoundError()

        try:
            date = meeting_room.parse_date(params.date)
        except meeting_room.InvalidDateError:
            # An unreadable date falls back to the earliest day, which never passes
            # the hour check below.
            date = meeting_room.ReservationDate(calendar_date.min)

        if self._reservation_exists(room_id, date):
            raise meeting_room.MeetingRoomAlreadyExistsError()
        if not self._is_valid_hour(params.hour, date):
            raise meeting_room.InvalidReservationHourError()

        reservation = meeting_room.create_reservation(
            room_id, user_id, params.date, params.hour, params.duration
        )
        self.reservation_storage.save(reservation)

    def _room_exists(self, room_id: uuid.UUID) -> bool:
        try:
            self.meeting_room_storage.find_by_id(room_id)
        except _LOOKUP_FAILURES:
            return False
        return True

    def _reservation_exists(
        self, room_id: uuid.UUID, date: meeting_room.ReservationDate
    ) -> bool:
        try:
            return bool(
                self.reservation_storage.find_by_meeting_room_and_date(room_id, date)
            )
        except _LOOKUP_FAILURES:
            return False

    def _is_valid_hour(self, hour: int, date: meeting_room.ReservationDate) -> bool:
        now = self.clock()
        if now.strftime("%Y-%m-%d") == date.isoformat():
            return hour >= now.hour + 1
        return False


@dataclass
class HotdeskUsecases:
    register_hotdesk: RegisterHotdeskUsecase


@dataclass
class MeetingRoomUsecases:
    register_meeting_room: RegisterMeetingRoomUsecase


@dataclass
class OfficeUsecases:
    register_office: RegisterOfficeUsecase


@dataclass
class HotdeskReservationUsecases:
    register_reservation: ReserveHotdeskUsecase


@dataclass
class MeetingRoomReservationUsecases:
    register_reservation: ReserveMeetingRoomUsecase