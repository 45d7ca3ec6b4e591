import logging
from datetime import datetime
from typing import Callable

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import Response
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.types import Receive, Scope, Send

from settings import get_settings
from shuttlebot.clock import get_now
from shuttlebot.middleware import RequestLoggingMiddleware
from shuttlebot.schedule import LocationNotFoundError, departures_message, upcoming_departures
from shuttlebot.web import FormParseError, error_response, parse_form
from shuttlebot.web.errors import (
    FORM_PARSE_ERROR,
    INTERNAL_ERROR,
    LOCATION_NOT_FOUND,
    NO_SUCH_PAGE,
    TEXT_CONTENT_TYPE,
)
from shuttlebot.web.forms import BODY_METHODS

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(levelname)s %(name)s %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.app_name,
    debug=settings.debug,
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
)


@app.exception_handler(StarletteHTTPException)
def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Unmatched paths get the "No such page" envelope; other framework errors keep their status."""
    if exc.status_code == 404:
        return error_response(NO_SUCH_PAGE, 404)
    return error_response(str(exc.detail), exc.status_code)


@app.exception_handler(Exception)
def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("telemetry unhandled_exception path=%s", request.url.path)
    return error_response(INTERNAL_ERROR, 500)


app.add_middleware(RequestLoggingMiddleware)


async def slack_departures(request: Request, now: datetime) -> Response:
    """
    Slash-command handler: form field `text` names the shuttle location.
    Replies in plain text with up to three departures still to come today.
    """
    body = b""
    if request.method in BODY_METHODS:
        body = await request.body()
    try:
        form = parse_form(
            request.url.query,
            body,
            content_type=request.headers.get("content-type"),
            max_bytes=settings.max_form_bytes,
        )
    except FormParseError as e:
        logger.warning("telemetry form_parse_error path=%s error=%s", request.url.path, str(e))
        return error_response(FORM_PARSE_ERROR, 500)

    location = form.get("text").lower()
    try:
        times = upcoming_departures(location, now)
    except LocationNotFoundError:
        logger.warning(
            "telemetry location_not_found location=%s user=%s team=%s",
            location[:64],
            form.get("user_name"),
            form.get("team_domain"),
        )
        return error_response(LOCATION_NOT_FOUND, 500)

    logger.info(
        "telemetry route=slack command=%s location=%s user=%s upcoming=%s",
        form.get("command"),
        location,
        form.get("user_name"),
        len(times),
    )
    return Response(
        content=departures_message(times),
        status_code=200,
        headers={"Content-Type": TEXT_CONTENT_TYPE},
    )


class SlackCommandApp:
    """
    ASGI endpoint for the /slack/ prefix. Registered as a bare app rather than a
    function route so the router matches it for every HTTP method.
    """

    def __init__(self, clock: Callable[[], datetime] = get_now):
        self.clock = clock

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        request = Request(scope, receive)
        response = await slack_departures(request, self.clock())
        await response(scope, receive, send)


slack_command = SlackCommandApp()
app.add_route("/slack/{rest:path}", slack_command, include_in_schema=False)


if __name__ == "__main__":
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
