"""Reference timezone for all departure times. Loaded once at import; a missing tz database fails startup."""
import logging
from datetime import datetime
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

logger = logging.getLogger(__name__)

REFERENCE_TIMEZONE_NAME = "America/New_York"


class ReferenceTimezoneError(RuntimeError):
    pass


def load_reference_timezone(name: str = REFERENCE_TIMEZONE_NAME) -> ZoneInfo:
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        logger.error("telemetry timezone_load_failed name=%s error=%s", name, str(e))
        raise ReferenceTimezoneError(f"Cannot load timezone {name!r}; install the tzdata package") from e


REFERENCE_TZ = load_reference_timezone()


def get_now() -> datetime:
    """Current time in the reference timezone."""
    return datetime.now(REFERENCE_TZ)
