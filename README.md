# coworking

A small HTTP service for a coworking space. It keeps an in-memory register of
hotdesks, meeting rooms and offices, and accepts new entries over a JSON API
built with Flask. The package also contains use cases and handlers for
reserving hotdesks and meeting rooms. You can use them from your own code, as
described below.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Running the server

```
PORT=8080 coworking
```

The `coworking` command does the following:

- If a `.env` file exists in the working directory, it loads that file first.
- It reads the port from the `PORT` environment variable. If `PORT` is missing
  or is not an integer, the command logs an error and exits with status 1.
- It listens on all interfaces (`0.0.0.0`).
- It adds a `Server: Coworking` header to every response.

SIGINT (Ctrl+C) or SIGTERM starts a graceful shutdown. A second Ctrl+C forces
the process to stop.

## API

Every endpoint takes a JSON body and must be sent with
`Content-Type: application/json`. A successful request gets `201 Created`.
A failed request gets a JSON error of this form:

```json
{"error": "Validation failed", "details": [{"field": "Number", "rule": "gte", "value": "0"}]}
```

| Method | Path              | Body                                                   |
|--------|-------------------|--------------------------------------------------------|
| POST   | `/hotdesks/`      | `{"number": 1}`                                        |
| POST   | `/meeting-rooms/` | `{"name": "Sala A", "capacity": 8}`                    |
| POST   | `/offices/`       | `{"number": 3, "leasePeriod": 12, "status": "Active"}` |

A trailing slash on the path is optional.

### Status codes

- `400 Invalid request body`: the body is not JSON, or a field has the wrong
  JSON type.
- `400 Validation failed`: a field breaks a validation rule. Examples are a
  negative number, an empty meeting-room name, or an office `status` other
  than `Active` or `Inactive`.
- `400`: a domain rule was broken. Examples are a hotdesk or office number
  that is not greater than 0, a capacity or lease period that is not greater
  than 0, or an empty name.
- `409`: a hotdesk or office with the same number, or a meeting room with the
  same name, already exists.
- `500`: any other failure.

An office's `status` defaults to `Active` when it is left out. Domain error
messages are in Spanish, for example `"el hotdesk ya existe"`.

## Using it as a library

`coworking.web.server.create_app()` returns a Flask application with fresh
in-memory storage. Any WSGI server can serve it.

The building blocks can also be used without HTTP:

```python
from coworking.storage import HotdeskRepository
from coworking.usecases import RegisterHotdeskParams, RegisterHotdeskUsecase

repo = HotdeskRepository()
RegisterHotdeskUsecase(repo).handle(RegisterHotdeskParams(number=1))
print(repo.find_all()[0].to_dict())
```

Where each part lives:

- `coworking.spaces.hotdesk`, `coworking.spaces.meeting_room` and
  `coworking.spaces.office` hold the entities, value objects and factories,
  such as `create_hotdesk`, `create_meeting_room`, `create_office` and the
  `create_reservation` functions.
- `coworking.spaces.common` holds `Status` and `DomainError`, the base of
  every domain error.
- `coworking.ports` defines the repository, membership and HTTP interfaces.
- `coworking.storage` implements the repositories in memory.
- `coworking.usecases` holds the commands.
- `coworking.web.models` holds the request bodies and their validation.
- `coworking.web.http_errors` maps domain errors to status codes.

## Reservations

`ReserveHotdeskUsecase` needs a `MembershipService`. This is any object with a
`check_membership(user_id, date)` method that returns a `MembershipResponse`
or `None`. A reservation is refused in these cases:

- the user already has a reservation at that moment;
- no membership is found;
- the membership has no remaining credits.

`ReserveMeetingRoomUsecase` accepts a reservation only when all of the
following hold:

- the room exists;
- the room has no reservation yet on that date;
- the date (`YYYY-MM-DD`) is today;
- the hour is later than the current hour.

The duration must be 1 to 12 hours.

To expose hotdesk reservations over HTTP, add the handler to the app yourself:

```python
import uuid

from coworking.ports import MembershipResponse
from coworking.storage import HotdeskReservationRepository
from coworking.usecases import HotdeskReservationUsecases, ReserveHotdeskUsecase
from coworking.web.handlers import HotdeskReservationHandler
from coworking.web.server import create_app


class Memberships:
    def check_membership(self, user_id, date):
        return MembershipResponse(membership_id=uuid.uuid4(), remaining_credits=5)


app = create_app()
usecase = ReserveHotdeskUsecase(HotdeskReservationRepository(), Memberships())
HotdeskReservationHandler(
    HotdeskReservationUsecases(register_reservation=usecase)
).register_routes(app)
```

That adds `POST /reservations/` with a body such as
`{"user_id": "<uuid>", "date": "2025-01-01T09:00:00Z"}`. The date must be an
RFC 3339 timestamp. A refused reservation answers `500`.

`ReserveMeetingRoomHandler` adds `POST /meeting-room-reservations/` and is
wired in the same way. It reserves the room first and then tries to reserve a
hotdesk for the same user. Its answer reports the result as
`{"hotdesk_registered": true|false}`.

## What it does not do

- Data lives only in memory and is lost when the process stops.
- There are no endpoints for reading, listing, updating or deleting spaces.
- The package contains no membership service. Because of that, the
  application built by `create_app()` and the `coworking` command do not
  expose any reservation endpoints.