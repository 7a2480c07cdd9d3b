"""HTTP handlers that turn JSON request bodies into use-case calls."""

from __future__ import annotations

import functools
import json
import uuid
from http import HTTPStatus
from typing import Any, Callable, TypeVar

from flask import Flask, Response, request

from coworking.spaces.common import DomainError
from coworking.usecases import (
    HotdeskReservationUsecases,
    HotdeskUsecases,
    MeetingRoomReservationUsecases,
    MeetingRoomUsecases,
    OfficeUsecases,
    RegisterHotdeskParams,
    RegisterMeetingRoomParams,
    RegisterOfficeParams,
    ReserveHotdeskParams,
    ReserveMeetingRoomParams,
)
from coworking.web.http_errors import map_domain_error_to_http_status
from coworking.web.models import (
    RFC3339_LAYOUT,
    BodyParseError,
    HotdeskDTO,
    MeetingRoomDTO,
    MeetingRoomReservationDTO,
    OfficeDTO,
    ReservationDTO,
    ValidationErrorResponse,
    _parse_rfc3339,
)

_USECASE_FAILURES = (DomainError, LookupError, ValueError)

D = TypeVar("D")


def _jsonable(details: Any) -> Any:
    if isinstance(details, (list, tuple)):
        return [
            item.to_dict() if isinstance(item, ValidationErrorResponse) else item
            for item in details
        ]
    return details


def format_error_response(status_code: int, message: str, details: Any) -> Response:
    """Build a JSON error response of the form {"error": ..., "details": ...}."""
    payload = {"error": message, "details": _jsonable(details)}
    return Response(
        json.dumps(payload, ensure_ascii=False, separators=(",", ":")),
        status=int(status_code),
        mimetype="application/json",
    )


def _json_response(payload: dict[str, Any], status_code: int) -> Response:
    return Response(
        json.dumps(payload, separators=(",", ":")),
        status=int(status_code),
        mimetype="application/json",
    )


def _created() -> Response:
    return Response(
        HTTPStatus.CREATED.phrase,
        status=int(HTTPStatus.CREATED),
        content_type="text/plain; charset=utf-8",
    )


class _Rejected(Exception):
    """Carries the error response that ends the current request."""

    def __init__(self, response: Response) -> None:
        super().__init__(response.status)
        self.response = response


def _reject(status_code: int, message: str, details: Any) -> _Rejected:
    return _Rejected(format_error_response(status_code, message, details))


def _answers_rejections(view: Callable[..., Response]) -> Callable[..., Response]:
    @functools.wraps(view)
    def wrapper(*args: Any, **kwargs: Any) -> Response:
        try:
            return view(*args, **kwargs)
        except _Rejected as rejected:
            return rejected.response

    return wrapper


def _decode_json() -> Any:
    if request.mimetype != "application/json":
        raise BodyParseError(HTTPStatus.UNPROCESSABLE_ENTITY.phrase)
    try:
        return json.loads(request.get_data())
    except ValueError as exc:
        raise BodyParseError(str(exc)) from None


def _parse_body(dto_cls: type[D]) -> D:
    """Decode and validate the request body, rejecting the request on failure."""
    try:
        body = dto_cls.from_dict(_decode_json())  # type: ignore[attr-defined]
    except BodyParseError as exc:
        raise _reject(HTTPStatus.BAD_REQUEST, "Invalid request body", str(exc)) from None
    errors = body.validate()
    if errors:
        raise _reject(HTTPStatus.BAD_REQUEST, "Validation failed", errors)
    return body


def _run(action: Callable[[Any], Any], params: Any, message: str) -> None:
    try:
        action(params)
    except _USECASE_FAILURES as exc:
        raise _reject(map_domain_error_to_http_status(exc), message, str(exc)) from None


def _parse_user_id(text: str) -> uuid.UUID:
    try:
        return uuid.UUID(text)
    except ValueError as exc:
        raise _reject(HTTPStatus.BAD_REQUEST, "Invalid user ID format", str(exc)) from None


def _parse_moment(text: str):
    moment = _parse_rfc3339(text)
    if moment is None:
        raise _reject(
            HTTPStatus.BAD_REQUEST,
            "Invalid date format",
            f'parsing time "{text}" as "{RFC3339_LAYOUT}": cannot parse',
        )
    return moment


def _post_route(app: Flask, path: str, endpoint: str, view: Callable[[], Response]) -> None:
    app.add_url_rule(
        path, endpoint=endpoint, view_func=view, methods=["POST"], strict_slashes=False
    )


class HotdeskHandler:
    def __init__(self, usecases: HotdeskUsecases) -> None:
        self.usecases = usecases

    def register_routes(self, app: Flask) -> None:
        _post_route(app, "/hotdesks/", "hotdesks.register", self.register_hotdesk)

    @_answers_rejections
    def register_hotdesk(self) -> Response:
        body = _parse_body(HotdeskDTO)
        _run(
            self.usecases.register_hotdesk.handle,
            RegisterHotdeskParams(number=body.number),
            "Failed to register hotdesk",
        )
        return _created()


class MeetingRoomHandler:
    def __init__(self, usecases: MeetingRoomUsecases) -> None:
        self.usecases = usecases

    def register_routes(self, app: Flask) -> None:
        _post_route(
            app, "/meeting-rooms/", "meeting_rooms.register", self.register_meeting_room
        )

    @_answers_rejections
    def register_meeting_room(self) -> Response:
        body = _parse_body(MeetingRoomDTO)
        _run(
            self.usecases.register_meeting_room.handle,
            RegisterMeetingRoomParams(name=body.name, capacity=body.capacity),
            "Failed to register meeting room",
        )
        return _created()


class OfficeHandler:
    def __init__(self, usecases: OfficeUsecases) -> None:
        self.usecases = usecases

    def register_routes(self, app: Flask) -> None:
        _post_route(app, "/offices/", "offices.register", self.register_entity)

    @_answers_rejections
    def register_entity(self) -> Response:
        body = _parse_body(OfficeDTO)
        _run(
            self.usecases.register_office.handle,
            RegisterOfficeParams(
                number=body.number, lease_period=body.lease_period, status=body.status
            ),
            "Failed to register office",
        )
        return _created()


class HotdeskReservationHandler:
    def __init__(self, usecases: HotdeskReservationUsecases) -> None:
        self.usecases = usecases

    def register_routes(self, app: Flask) -> None:
        _post_route(app, "/reservations/", "reservations.register", self.register_entity)

    @_answers_rejections
    def register_entity(self) -> Response:
        body = _parse_body(ReservationDTO)
        user_id = _parse_user_id(body.user_id)
        moment = _parse_moment(body.date)
        _run(
            self.usecases.register_reservation.handle,
            ReserveHotdeskParams(user_id=user_id, date=moment),
            "Failed to register reservation",
        )
        return _created()


class ReserveMeetingRoomHandler:
    """Books a meeting room and then tries to book a hot desk for the same user."""

    def __init__(
        self,
        meeting_room_usecases: MeetingRoomReservationUsecases,
        hotdesk_usecases: HotdeskReservationUsecases,
    ) -> None:
        self.meeting_room_usecases = meeting_room_usecases
        self.hotdesk_usecases = hotdesk_usecases

    def register_routes(self, app: Flask) -> None:
        _post_route(
            app,
            "/meeting-room-reservations/",
            "meeting_room_reservations.register",
            self.register_entity,
        )

    @_answers_rejections
    def register_entity(self) -> Response:
        body = _parse_body(MeetingRoomReservationDTO)
        params = ReserveMeetingRoomParams(
            meeting_room=body.meeting_room_id,
            user_id=body.user_id,
            date=body.date,
            hour=body.hour,
            duration=body.duration,
        )
        try:
            self.meeting_room_usecases.register_reservation.handle(params)
        except _USECASE_FAILURES as exc:
            raise _reject(
                HTTPStatus.BAD_REQUEST, "Failed to register reservation", str(exc)
            ) from None

        user_id = _parse_user_id(body.user_id)
        moment = _parse_moment(body.date)
        try:
            self.hotdesk_usecases.register_reservation.handle(
                ReserveHotdeskParams(user_id=user_id, date=moment)
            )
            hotdesk_registered = True
        except _USECASE_FAILURES:
            hotdesk_registered = False
        return _json_response({"hotdesk_registered": hotdesk_registered}, HTTPStatus.CREATED)