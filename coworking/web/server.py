"""Application factory wiring repositories, use cases and handlers together."""

from __future__ import annotations

from flask import Flask, Response

from coworking.storage import HotdeskRepository, MeetingRoomRepository, OfficeRepository
from coworking.usecases import (
    HotdeskUsecases,
    MeetingRoomUsecases,
    OfficeUsecases,
    RegisterHotdeskUsecase,
    RegisterMeetingRoomUsecase,
    RegisterOfficeUsecase,
)
from coworking.web.handlers import HotdeskHandler, MeetingRoomHandler, OfficeHandler

SERVER_NAME = "Coworking"


class HandlerFactory:
    """Registers every handler that can run without outside services."""

    def __init__(self, app: Flask) -> None:
        self.app = app

    def register_routes(self) -> None:
        self._register_hotdesk_routes()
        self._register_meeting_room_routes()
        self._register_office_routes()

    def _register_hotdesk_routes(self) -> None:
        usecase = RegisterHotdeskUsecase(HotdeskRepository())
        HotdeskHandler(HotdeskUsecases(register_hotdesk=usecase)).register_routes(self.app)

    def _register_meeting_room_routes(self) -> None:
        usecase = RegisterMeetingRoomUsecase(MeetingRoomRepository())
        MeetingRoomHandler(
            MeetingRoomUsecases(register_meeting_room=usecase)
        ).register_routes(self.app)

    def _register_office_routes(self) -> None:
        usecase = RegisterOfficeUsecase(OfficeRepository())
        OfficeHandler(OfficeUsecases(register_office=usecase)).register_routes(self.app)


def create_app() -> Flask:
    """Create the application with fresh in-memory storage."""
    app = Flask(__name__)
    app.config["APP_NAME"] = SERVER_NAME

    @app.after_request
    def _server_header(response: Response) -> Response:
        response.headers["Server"] = SERVER_NAME
        return response

    HandlerFactory(app).register_routes()
    return app