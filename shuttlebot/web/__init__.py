from shuttlebot.web.errors import error_response
from shuttlebot.web.forms import FormData, FormParseError, parse_form

__all__ = ["FormData", "FormParseError", "error_response", "parse_form"]
