"""Shared building blocks for every kind of space: statuses and domain errors."""

from __future__ import annotations

from datetime import datetime
from enum import Enum


class DomainError(Exception):
    """Base class for every business-rule violation."""

    default_message = "error de dominio"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class InvalidStatusError(DomainError):
    default_message = "el estado no es válido"


class Status(str, Enum):
    """Lifecycle status of a space or reservation."""

    ACTIVE = "Active"
    INACTIVE = "Inactive"
    OCCUPIED = "Occupied"
    UNDER_MAINTENANCE = "Under_maintenance"

    def __str__(self) -> str:
        return self.value


def parse_status(value: str) -> Status:
    """Return the status named by ``value`` or raise InvalidStatusError."""
    try:
        return Status(value)
    except ValueError:
        raise InvalidStatusError() from None


def format_timestamp(moment: datetime) -> str:
    """Format a moment as an RFC 3339 timestamp with second precision."""
    if moment.tzinfo is None:
        moment = moment.astimezone()
    text = moment.replace(microsecond=0).isoformat()
    if text.endswith("+00:00"):
        text = text[: -len("+00:00")] + "Z"
    return text


def local_now() -> datetime:
    """The current moment as a timezone-aware local datetime."""
    return datetime.now().astimezone()