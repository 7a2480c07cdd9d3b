import uuid
from datetime import datetime, timezone

import pytest

from coworking.ports import MembershipResponse
from coworking.spaces.common import InvalidStatusError, Status
from coworking.spaces.hotdesk import (
    HotdeskAlreadyExistsError,
    InvalidHotdeskNumberError,
)
from coworking.spaces.meeting_room import (
    InvalidDurationError,
    InvalidMeetingRoomCapacityError,
    InvalidMeetingRoomNameError,
    InvalidMeetingRoomUUIDError,
    InvalidReservationHourError,
    InvalidUserUUIDError,
    MeetingRoomAlreadyExistsError,
    MeetingRoomNotFoundError,
    create_meeting_room,
)
from coworking.spaces.office import InvalidOfficeNumberError, OfficeAlreadyExistsError
from coworking.storage import (
    HotdeskRepository,
    HotdeskReservationRepository,
    MeetingRoomRepository,
    MeetingRoomReservationRepository,
    OfficeRepository,
)
from coworking.usecases import (
    HotdeskUsecases,
    RegisterHotdeskParams,
    RegisterHotdeskUsecase,
    RegisterMeetingRoomParams,
    RegisterMeetingRoomUsecase,
    RegisterOfficeParams,
    RegisterOfficeUsecase,
    ReservationError,
    ReserveHotdeskParams,
    ReserveHotdeskUsecase,
    ReserveMeetingRoomParams,
    ReserveMeetingRoomUsecase,
)

MORNING = datetime(2025, 3, 1, 9, 0, tzinfo=timezone.utc)
NOW = datetime(2025, 3, 10, 9, 30)
TODAY = "2025-03-10"


class FakeMembership:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def check_membership(self, user_id, date):
        self.calls.append((user_id, date))
        if self.error is not None:
            raise self.error
        return self.response


def credits(amount):
    return MembershipResponse(membership_id=uuid.uuid4(), remaining_credits=amount)


def test_register_hotdesk_saves_and_rejects_duplicates():
    repo = HotdeskRepository()
    usecases = HotdeskUsecases(register_hotdesk=RegisterHotdeskUsecase(repo))
    usecases.register_hotdesk.handle(RegisterHotdeskParams(number=4))
    assert [d.number.value for d in repo.find_all()] == [4]
    with pytest.raises(HotdeskAlreadyExistsError):
        usecases.register_hotdesk.handle(RegisterHotdeskParams(number=4))
    assert len(repo.find_all()) == 1


def test_register_hotdesk_invalid_number():
    repo = HotdeskRepository()
    with pytest.raises(InvalidHotdeskNumberError):
        RegisterHotdeskUsecase(repo).handle(RegisterHotdeskParams(number=0))
    assert repo.find_all() == []


def test_register_meeting_room():
    repo = MeetingRoomRepository()
    usecase = RegisterMeetingRoomUsecase(repo)
    usecase.handle(RegisterMeetingRoomParams(name="Sala Azul", capacity=6))
    assert [r.to_dict()["name"] for r in repo.find_all()] == ["Sala Azul"]
    with pytest.raises(MeetingRoomAlreadyExistsError):
        usecase.handle(RegisterMeetingRoomParams(name="Sala Azul", capacity=3))


@pytest.mark.parametrize(
    "name, capacity, error",
    [("", 5, InvalidMeetingRoomNameError), ("Sala", 0, InvalidMeetingRoomCapacityError)],
)
def test_register_meeting_room_invalid(name, capacity, error):
    repo = MeetingRoomRepository()
    with pytest.raises(error):
        RegisterMeetingRoomUsecase(repo).handle(
            RegisterMeetingRoomParams(name=name, capacity=capacity)
        )
    assert repo.find_all() == []


def test_register_office_defaults_to_active_and_rejects_duplicates():
    repo = OfficeRepository()
    usecase = RegisterOfficeUsecase(repo)
    usecase.handle(RegisterOfficeParams(number=2, lease_period=12))
    assert [o.status for o in repo.find_all()] == [Status.ACTIVE]
    with pytest.raises(OfficeAlreadyExistsError):
        usecase.handle(RegisterOfficeParams(number=2, lease_period=6, status="Inactive"))


def test_register_office_errors():
    repo = OfficeRepository()
    usecase = RegisterOfficeUsecase(repo)
    with pytest.raises(InvalidOfficeNumberError):
        usecase.handle(RegisterOfficeParams(number=0, lease_period=12))
    with pytest.raises(InvalidStatusError):
        usecase.handle(RegisterOfficeParams(number=1, lease_period=12, status="Closed"))
    assert repo.find_all() == []


def test_reserve_hotdesk_success():
    repo = HotdeskReservationRepository()
    membership = FakeMembership(credits(3))
    user = uuid.uuid4()
    ReserveHotdeskUsecase(repo, membership).handle(ReserveHotdeskParams(user, MORNING))
    saved = repo.find_all()
    assert [(r.user_id, r.included_in_membership) for r in saved] == [(user, True)]
    assert membership.calls == [(user, MORNING)]


def test_reserve_hotdesk_duplicate_is_rejected():
    repo = HotdeskReservationRepository()
    usecase = ReserveHotdeskUsecase(repo, FakeMembership(credits(3)))
    user = uuid.uuid4()
    usecase.handle(ReserveHotdeskParams(user, MORNING))
    with pytest.raises(ReservationError, match="already exists"):
        usecase.handle(ReserveHotdeskParams(user, MORNING))
    assert len(repo.find_all()) == 1


@pytest.mark.parametrize(
    "membership, message",
    [
        (FakeMembership(None), "no membership information found"),
        (FakeMembership(credits(0)), "no remaining credits"),
    ],
)
def test_reserve_hotdesk_membership_rejections(membership, message):
    repo = HotdeskReservationRepository()
    with pytest.raises(ReservationError, match=message):
        ReserveHotdeskUsecase(repo, membership).handle(
            ReserveHotdeskParams(uuid.uuid4(), MORNING)
        )
    assert repo.find_all() == []


def test_reserve_hotdesk_membership_error_propagates():
    failure = RuntimeError("membership down")
    repo = HotdeskReservationRepository()
    with pytest.raises(RuntimeError) as caught:
        ReserveHotdeskUsecase(repo, FakeMembership(error=failure)).handle(
            ReserveHotdeskParams(uuid.uuid4(), MORNING)
        )
    assert caught.value is failure


@pytest.fixture
def room_setup():
    rooms = MeetingRoomRepository()
    room = create_meeting_room("Sala Azul", 6)
    rooms.save(room)
    reservations = MeetingRoomReservationRepository()
    usecase = ReserveMeetingRoomUsecase(
        reservations, rooms, HotdeskReservationRepository(), clock=lambda: NOW
    )
    return usecase, reservations, room


def params(room_id, user_id=None, date=TODAY, hour=10, duration=2):
    return ReserveMeetingRoomParams(
        meeting_room=str(room_id),
        user_id=str(user_id or uuid.uuid4()),
        date=date,
        hour=hour,
        duration=duration,
    )


def test_reserve_meeting_room_success(room_setup):
    usecase, reservations, room = room_setup
    user = uuid.uuid4()
    usecase.handle(params(room.id, user))
    saved = reservations.find_by_user(user)
    assert [(r.meeting_room_id, r.date.isoformat(), r.hour.value) for r in saved] == [
        (room.id, TODAY, 10)
    ]


def test_reserve_meeting_room_second_booking_same_day(room_setup):
    usecase, reservations, room = room_setup
    usecase.handle(params(room.id))
    with pytest.raises(MeetingRoomAlreadyExistsError):
        usecase.handle(params(room.id, hour=12))


@pytest.mark.parametrize(
    "overrides",
    [{"hour": 9}, {"date": "2025-03-11"}, {"date": "10-03-2025"}],
)
def test_reserve_meeting_room_invalid_hour(room_setup, overrides):
    usecase, reservations, room = room_setup
    with pytest.raises(InvalidReservationHourError):
        usecase.handle(params(room.id, **overrides))
    assert reservations.find_all() == []


def test_reserve_meeting_room_bad_identifiers(room_setup):
    usecase, _, room = room_setup
    with pytest.raises(InvalidMeetingRoomUUIDError):
        usecase.handle(params("not-a-uuid"))
    with pytest.raises(InvalidUserUUIDError):
        usecase.handle(params(room.id, user_id="nobody"))
    with pytest.raises(MeetingRoomNotFoundError):
        usecase.handle(params(uuid.uuid4()))


def test_reserve_meeting_room_invalid_duration(room_setup):
    usecase, reservations, room = room_setup
    with pytest.raises(InvalidDurationError):
        usecase.handle(params(room.id, duration=0))
    assert reservations.find_all() == []