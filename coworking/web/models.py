"""Request bodies accepted by the HTTP API and their validation rules."""

from __future__ import annotations

import re
from dataclasses import dataclass, field, fields
from datetime import datetime, timedelta, timezone
from typing import Any

RFC3339_LAYOUT = "2006-01-02T15:04:05Z07:00"

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1

_UUID_PATTERN = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}"
)
_RFC3339_PATTERN = re.compile(
    r"(\d{4})-(\d{2})-(\d{2})T(\d{2}):(\d{2}):(\d{2})(?:\.(\d+))?"
    r"(Z|[+-]\d{2}:\d{2})"
)


class BodyParseError(ValueError):
    """The request body could not be decoded into the expected shape."""


@dataclass(frozen=True)
class ValidationErrorResponse:
    """One failed validation rule on one field."""

    field: str
    rule: str
    value: str = ""

    def to_dict(self) -> dict[str, str]:
        result = {"field": self.field, "rule": self.rule}
        if self.value:
            result["value"] = self.value
        return result


def _parse_rfc3339(text: str) -> datetime | None:
    """Parse an RFC 3339 timestamp, or return None if it is not one."""
    if not isinstance(text, str):
        return None
    match = _RFC3339_PATTERN.fullmatch(text)
    if match is None:
        return None
    year, month, day, hour, minute, second, fraction, zone = match.groups()
    if zone == "Z":
        tz = timezone.utc
    else:
        sign = -1 if zone[0] == "-" else 1
        off_hours, off_minutes = int(zone[1:3]), int(zone[4:6])
        if off_hours >= 24 or off_minutes >= 60:
            return None
        tz = timezone(sign * timedelta(hours=off_hours, minutes=off_minutes))
    microsecond = int((fraction or "0")[:6].ljust(6, "0"))
    try:
        return datetime(
            int(year),
            int(month),
            int(day),
            int(hour),
            int(minute),
            int(second),
            microsecond,
            tzinfo=tz,
        )
    except ValueError:
        return None


def _json_kind(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    return "object"


def _accepts(expected: type, value: Any) -> bool:
    if expected is int:
        return (
            isinstance(value, int)
            and not isinstance(value, bool)
            and _INT64_MIN <= value <= _INT64_MAX
        )
    return isinstance(value, str)


def _decode(cls: type, data: Any) -> Any:
    """Fill a body dataclass from decoded JSON; keys match case-insensitively."""
    if not isinstance(data, dict):
        raise BodyParseError(
            f"cannot unmarshal {_json_kind(data)} into {cls.__name__}"
        )
    body_fields = fields(cls)
    values: dict[str, Any] = {}
    for key, raw in data.items():
        if not isinstance(key, str):
            continue
        target = next((f for f in body_fields if f.metadata["json"] == key), None)
        if target is None:
            target = next(
                (f for f in body_fields if f.metadata["json"].lower() == key.lower()),
                None,
            )
        if target is None or raw is None:
            continue
        expected = target.metadata["type"]
        if not _accepts(expected, raw):
            raise BodyParseError(
                f"cannot unmarshal {_json_kind(raw)} into field "
                f"{cls.__name__}.{target.metadata['json']} of type {expected.__name__}"
            )
        values[target.name] = raw
    return cls(**values)


def _body_field(json_name: str, kind: type) -> Any:
    return field(
        default=kind(), metadata={"json": json_name, "type": kind}
    )


def _first_failure(
    name: str, checks: list[tuple[str, str, bool]]
) -> ValidationErrorResponse | None:
    for rule, param, passed in checks:
        if not passed:
            return ValidationErrorResponse(name, rule, param)
    return None


def _collect(*results: ValidationErrorResponse | None) -> list[ValidationErrorResponse]:
    return [result for result in results if result is not None]


@dataclass
class HotdeskDTO:
    number: int = _body_field("number", int)

    @classmethod
    def from_dict(cls, data: Any) -> HotdeskDTO:
        return _decode(cls, data)

    def validate(self) -> list[ValidationErrorResponse]:
        """A zero number is let through here and rejected by the domain."""
        if self.number == 0:
            return []
        return _collect(
            _first_failure(
                "Number",
                [("required", "", self.number != 0), ("gte", "0", self.number >= 0)],
            )
        )


@dataclass
class ReservationDTO:
    user_id: str = _body_field("user_id", str)
    date: str = _body_field("date", str)

    @classmethod
    def from_dict(cls, data: Any) -> ReservationDTO:
        return _decode(cls, data)

    def validate(self) -> list[ValidationErrorResponse]:
        return _collect(
            _first_failure(
                "UserId",
                [
                    ("required", "", self.user_id != ""),
                    ("uuid", "", bool(_UUID_PATTERN.fullmatch(self.user_id))),
                ],
            ),
            _first_failure(
                "Date",
                [
                    ("required", "", self.date != ""),
                    ("datetime", RFC3339_LAYOUT, _parse_rfc3339(self.date) is not None),
                ],
            ),
        )


@dataclass
class MeetingRoomDTO:
    name: str = _body_field("name", str)
    capacity: int = _body_field("capacity", int)

    @classmethod
    def from_dict(cls, data: Any) -> MeetingRoomDTO:
        return _decode(cls, data)

    def validate(self) -> list[ValidationErrorResponse]:
        return _collect(
            _first_failure("Name", [("required", "", self.name != "")]),
            _first_failure("Capacity", [("gte", "0", self.capacity >= 0)]),
        )


@dataclass
class MeetingRoomReservationDTO:
    meeting_room_id: str = _body_field("meeting_room_id", str)
    date: str = _body_field("date", str)
    hour: int = _body_field("hour", int)
    duration: int = _body_field("duration", int)
    user_id: str = _body_field("user_id", str)

    @classmethod
    def from_dict(cls, data: Any) -> MeetingRoomReservationDTO:
        return _decode(cls, data)

    def validate(self) -> list[ValidationErrorResponse]:
        """Every field is required; zero counts as missing, so hour 0 is refused."""
        return _collect(
            _first_failure("MeetingRoomId", [("required", "", self.meeting_room_id != "")]),
            _first_failure("Date", [("required", "", self.date != "")]),
            _first_failure("Hour", [("required", "", self.hour != 0)]),
            _first_failure("Duration", [("required", "", self.duration != 0)]),
            _first_failure("UserId", [("required", "", self.user_id != "")]),
        )


_OFFICE_STATUSES = ("Active", "Inactive")


@dataclass
class OfficeDTO:
    number: int = _body_field("number", int)
    lease_period: int = _body_field("leasePeriod", int)
    status: str = _body_field("status", str)

    @classmethod
    def from_dict(cls, data: Any) -> OfficeDTO:
        return _decode(cls, data)

    def validate(self) -> list[ValidationErrorResponse]:
        lease_error = None
        if self.lease_period != 0:
            lease_error = _first_failure(
                "LeasePeriod", [("gte", "0", self.lease_period >= 0)]
            )
        status_error = None
        if self.status != "":
            status_error = _first_failure(
                "Status",
                [("oneof", " ".join(_OFFICE_STATUSES), self.status in _OFFICE_STATUSES)],
            )
        return _collect(
            _first_failure(
                "Number",
                [("required", "", self.number != 0), ("gte", "0", self.number >= 0)],
            ),
            lease_error,
            status_error,
        )