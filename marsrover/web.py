"""HTTP layer: JSON helpers, controllers and the router serving the API."""

from __future__ import annotations

import json
import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from http import HTTPStatus
from typing import Any, TypeVar

from marsrover.domain import DomainError
from marsrover.dto import (
    CreateMissionControlRequest,
    GetMissionControlRequest,
    HealthCheckResponse,
    MoveRoversRequest,
)
from marsrover.ports import CreateMissionControlPort, GetMissionControlPort, MoveRoversPort
from marsrover.usecases import UseCaseError

T = TypeVar("T")

_JSON_TYPE = "application/json"
_TEXT_TYPE = "text/plain; charset=utf-8"

# Errors a use case may raise that become a 500 response.
_FAILURES = (UseCaseError, DomainError, LookupError)

_HTML_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


@dataclass
class Request:
    """An incoming request as seen by a controller."""

    method: str = "GET"
    path: str = "/"
    body: bytes = b""
    path_params: dict[str, str] = field(default_factory=dict)


@dataclass
class Response:
    """An outgoing response: status, headers and raw body."""

    status: int
    body: bytes = b""
    headers: dict[str, str] = field(default_factory=dict)

    @property
    def text(self) -> str:
        return self.body.decode("utf-8")

    def json(self) -> Any:
        return json.loads(self.body)


def _error(status: int, message: str) -> Response:
    return Response(
        status,
        f"{message}\n".encode(),
        {"Content-Type": _TEXT_TYPE, "X-Content-Type-Options": "nosniff"},
    )


def _encode(payload: Any) -> bytes:
    text = json.dumps(payload, ensure_ascii=False, separators=(",", ":"))
    text = "".join(_HTML_ESCAPES.get(char, char) for char in text)
    return f"{text}\n".encode()


def parse_json_body(body: bytes | str, factory: Callable[[Any], T]) -> T:
    """Decode the first JSON value in ``body`` and build an object from it.

    Raises ValueError when the body is empty, is not JSON, or does not fit
    the shape ``factory`` expects.
    """
    text = body.decode("utf-8", errors="replace") if isinstance(body, bytes) else body
    text = text.lstrip(" \t\r\n")
    if not text:
        raise ValueError("EOF")
    data, _ = json.JSONDecoder().raw_decode(text)
    return factory(data)


def handle_response(data: Any, error: BaseException | None) -> Response:
    """Turn a result into a JSON response, or an error into a 500."""
    if error is not None:
        return _error(HTTPStatus.INTERNAL_SERVER_ERROR, str(error))
    payload = data.to_dict() if hasattr(data, "to_dict") else data
    try:
        body = _encode(payload)
    except (TypeError, ValueError) as err:
        return _error(HTTPStatus.INTERNAL_SERVER_ERROR, str(err))
    return Response(HTTPStatus.OK, body, {"Content-Type": _JSON_TYPE})


class HealthCheckController:
    """Reports that the service is up."""

    def handle_request(self, request: Request) -> Response:
        return handle_response(HealthCheckResponse(status="OK"), None)


class CreateMissionControlController:
    """Creates a mission control from a JSON body."""

    def __init__(self, use_case: CreateMissionControlPort) -> None:
        self.use_case = use_case

    def handle_request(self, request: Request) -> Response:
        try:
            payload = parse_json_body(request.body, CreateMissionControlRequest.from_dict)
        except ValueError as err:
            return _error(HTTPStatus.BAD_REQUEST, str(err))
        try:
            response = self.use_case.execute(payload)
        except _FAILURES as err:
            return handle_response(None, err)
        return handle_response(response, None)


class GetMissionControlController:
    """Describes the mission control of the user named in the path."""

    def __init__(self, use_case: GetMissionControlPort) -> None:
        self.use_case = use_case

    def handle_request(self, request: Request) -> Response:
        username = request.path_params.get("username", "")
        if not username:
            return _error(HTTPStatus.BAD_REQUEST, "Mission control not found")
        try:
            response = self.use_case.execute(GetMissionControlRequest(username=username))
        except _FAILURES as err:
            return handle_response(None, err)
        return handle_response(response, None)


class MoveRoversController:
    """Runs rover commands for the user named in the path."""

    def __init__(self, use_case: MoveRoversPort) -> None:
        self.use_case = use_case

    def handle_request(self, request: Request) -> Response:
        username = request.path_params.get("username", "")
        if not username:
            return _error(HTTPStatus.BAD_REQUEST, "Mission control not found")
        try:
            payload = parse_json_body(request.body, MoveRoversRequest.from_dict)
        except ValueError as err:
            return _error(HTTPStatus.BAD_REQUEST, str(err))
        payload.username = username
        try:
            response = self.use_case.execute(payload)
        except _FAILURES as err:
            return handle_response(None, err)
        return handle_response(response, None)


_Handler = Callable[[Request], Response]


class Router:
    """Maps method and path to a controller; also a WSGI application."""

    def __init__(
        self,
        health_check: HealthCheckController,
        create_mission_control: CreateMissionControlController,
        get_mission_control: GetMissionControlController,
        move_rovers: MoveRoversController,
    ) -> None:
        self._routes: list[tuple[str, re.Pattern[str], _Handler]] = [
            ("GET", re.compile(r"/api/health"), health_check.handle_request),
            ("POST", re.compile(r"/api/mission-control"), create_mission_control.handle_request),
            (
                "GET",
                re.compile(r"/api/mission-control/(?P<username>[^/]+)"),
                get_mission_control.handle_request,
            ),
            (
                "POST",
                re.compile(r"/api/mission-control/(?P<username>[^/]+)/move-rovers"),
                move_rovers.handle_request,
            ),
        ]

    def dispatch(self, method: str, path: str, body: bytes = b"") -> Response:
        """Route one request and return the controller's response."""
        wrong_method = False
        for route_method, pattern, handler in self._routes:
            match = pattern.fullmatch(path)
            if match is None:
                continue
            if route_method != method:
                wrong_method = True
                continue
            return handler(Request(method, path, body, match.groupdict()))
        if wrong_method:
            return Response(HTTPStatus.METHOD_NOT_ALLOWED)
        return _error(HTTPStatus.NOT_FOUND, "404 page not found")

    def __call__(self, environ: dict[str, Any], start_response: Callable[..., Any]) -> Iterable[bytes]:
        raw_path = environ.get("PATH_INFO") or "/"
        path = raw_path.encode("latin-1").decode("utf-8", errors="replace")
        try:
            length = int(environ.get("CONTENT_LENGTH") or 0)
        except ValueError:
            length = 0
        body = environ["wsgi.input"].read(length) if length > 0 else b""

        response = self.dispatch(environ.get("REQUEST_METHOD", "GET"), path, body)
        status = HTTPStatus(response.status)
        headers = [*response.headers.items(), ("Content-Length", str(len(response.body)))]
        start_response(f"{status.value} {status.phrase}", headers)
        return [response.body]