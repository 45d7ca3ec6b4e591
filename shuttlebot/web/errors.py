"""JSON error responses: {"errors": [{"message": ...}]}."""
import logging

from starlette.responses import JSONResponse, Response

from shuttlebot.web.models import ErrorEnvelope, ErrorMessage

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json; charset=UTF-8"
TEXT_CONTENT_TYPE = "text/plain; charset=UTF-8"

NO_SUCH_PAGE = "No such page"
FORM_PARSE_ERROR = "Error parsing form"
LOCATION_NOT_FOUND = "Shuttle location not found"
INTERNAL_ERROR = "Internal server error"


def error_envelope(message: str) -> dict:
    return ErrorEnvelope(errors=[ErrorMessage(message=message)]).model_dump()


def error_response(message: str, status_code: int) -> Response:
    """Best effort: if the envelope cannot be rendered, return an empty body with the same status."""
    try:
        return JSONResponse(
            content=error_envelope(message),
            status_code=status_code,
            headers={"Content-Type": JSON_CONTENT_TYPE},
        )
    except (TypeError, ValueError) as e:
        logger.warning("telemetry error_body_failed status=%s error=%s", status_code, str(e))
        return Response(status_code=status_code, headers={"Content-Type": JSON_CONTENT_TYPE})
