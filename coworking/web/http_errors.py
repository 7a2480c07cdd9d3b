"""Mapping of domain errors to HTTP status codes."""

from __future__ import annotations

from http import HTTPStatus

from coworking.spaces import hotdesk, meeting_room, office

HTTP_ERROR_MAPPING: dict[type[BaseException], int] = {
    hotdesk.InvalidHotdeskNumberError: HTTPStatus.BAD_REQUEST,
    hotdesk.HotdeskAlreadyExistsError: HTTPStatus.CONFLICT,
    meeting_room.InvalidMeetingRoomCapacityError: HTTPStatus.BAD_REQUEST,
    meeting_room.MeetingRoomAlreadyExistsError: HTTPStatus.CONFLICT,
    meeting_room.InvalidMeetingRoomNameError: HTTPStatus.BAD_REQUEST,
    office.InvalidOfficeLeasePeriodError: HTTPStatus.BAD_REQUEST,
    office.InvalidOfficeNumberError: HTTPStatus.BAD_REQUEST,
    office.OfficeAlreadyExistsError: HTTPStatus.CONFLICT,
    hotdesk.HotdeskAlreadyReservedError: HTTPStatus.CONFLICT,
}


def map_domain_error_to_http_status(error: BaseException) -> int:
    """Return the HTTP status for ``error``; unknown errors give 500."""
    status = HTTP_ERROR_MAPPING.get(type(error), HTTPStatus.INTERNAL_SERVER_ERROR)
    return int(status)