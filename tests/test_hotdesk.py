import uuid
from datetime import datetime, timezone

import pytest

from coworking.spaces.common import Status
from coworking.spaces.hotdesk import (
    HotdeskNumber,
    InvalidHotdeskNumberError,
    create_hotdesk,
    create_reservation,
)


@pytest.mark.parametrize("value", [0, -1, -100])
def test_hotdesk_number_must_be_positive(value):
    with pytest.raises(InvalidHotdeskNumberError) as excinfo:
        HotdeskNumber(value)
    assert str(excinfo.value) == "el número del hotdesk debe ser mayor a 0"


def test_hotdesk_number_keeps_value():
    assert HotdeskNumber(3).value == 3
    assert HotdeskNumber(3) == HotdeskNumber(3)


def test_create_hotdesk_rejects_bad_number():
    with pytest.raises(InvalidHotdeskNumberError):
        create_hotdesk(0)


def test_create_hotdesk_to_dict():
    desk = create_hotdesk(7)
    data = desk.to_dict()
    assert data["number"] == 7
    assert data["status"] == "Active"
    assert uuid.UUID(data["id"]) == desk.id
    assert data["created_at"] == data["updated_at"]
    assert set(data) == {"id", "number", "status", "created_at", "updated_at"}


def test_created_at_round_trips():
    desk = create_hotdesk(1)
    text = desk.to_dict()["created_at"]
    parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
    assert parsed == desk.created_at.replace(microsecond=0)


def test_hotdesks_get_distinct_ids():
    ids = {create_hotdesk(1).id for _ in range(10)}
    assert len(ids) == 10


def test_hotdesk_ids_differ():
    first, second = create_hotdesk(1), create_hotdesk(2)
    assert first.to_dict()["id"] != second.to_dict()["id"]
    assert first.status is Status.ACTIVE


def test_create_reservation_to_dict():
    user = uuid.uuid4()
    moment = datetime(2024, 5, 1, 9, 30, tzinfo=timezone.utc)
    reservation = create_reservation(user, moment, True)
    data = reservation.to_dict()
    assert data["user_id"] == str(user)
    assert data["date"] == "2024-05-01T09:30:00Z"
    assert data["status"] == "Active"
    assert data["included_in_membership"] is True
    assert uuid.UUID(data["id"]) == reservation.id


def test_reservation_membership_flag_false():
    reservation = create_reservation(uuid.uuid4(), datetime.now(timezone.utc), False)
    assert reservation.to_dict()["included_in_membership"] is False
    assert reservation.created_at == reservation.updated_at