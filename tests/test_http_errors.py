import pytest

from coworking.spaces import hotdesk, meeting_room, office
from coworking.spaces.common import InvalidStatusError
from coworking.storage import MeetingRoomNotFoundError
from coworking.usecases import ReservationError
from coworking.web.http_errors import map_domain_error_to_http_status


@pytest.mark.parametrize(
    "error",
    [
        hotdesk.InvalidHotdeskNumberError(),
        meeting_room.InvalidMeetingRoomCapacityError(),
        meeting_room.InvalidMeetingRoomNameError(),
        office.InvalidOfficeLeasePeriodError(),
        office.InvalidOfficeNumberError(),
    ],
)
def test_bad_request_errors(error):
    assert map_domain_error_to_http_status(error) == 400


@pytest.mark.parametrize(
    "error",
    [
        hotdesk.HotdeskAlreadyExistsError(),
        meeting_room.MeetingRoomAlreadyExistsError(),
        office.OfficeAlreadyExistsError(),
        hotdesk.HotdeskAlreadyReservedError(),
    ],
)
def test_conflict_errors(error):
    assert map_domain_error_to_http_status(error) == 409


@pytest.mark.parametrize(
    "error",
    [
        ValueError("boom"),
        InvalidStatusError(),
        MeetingRoomNotFoundError(),
        ReservationError(),
        meeting_room.InvalidDateError(),
        meeting_room.InvalidReservationHourError(),
    ],
)
def test_unmapped_errors_are_internal(error):
    assert map_domain_error_to_http_status(error) == 500


def test_custom_message_keeps_mapping():
    error = hotdesk.HotdeskAlreadyExistsError("otro mensaje")
    assert map_domain_error_to_http_status(error) == 409


def test_result_is_plain_int():
    result = map_domain_error_to_http_status(office.OfficeAlreadyExistsError())
    assert type(result) is int and result == 409