"""
Strict application/x-www-form-urlencoded decoding for slash-command requests.
urllib's parser tolerates malformed input (stray '%', bad UTF-8); here those
are rejected so a garbled submission is reported instead of misread.
"""
import re
from urllib.parse import parse_qsl

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
BODY_METHODS = frozenset({"POST", "PUT", "PATCH"})
DEFAULT_MAX_BYTES = 10 * 1024 * 1024

_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


class FormParseError(ValueError):
    pass


class FormData:
    """Multi-valued form fields; get() returns the first value or ""."""

    def __init__(self, fields: dict[str, list[str]] | None = None):
        self.fields = fields or {}

    def get(self, key: str, default: str = "") -> str:
        values = self.fields.get(key)
        return values[0] if values else default


def _parse_pairs(raw: str, source: str) -> list[tuple[str, str]]:
    if ";" in raw:
        raise FormParseError(f"invalid semicolon separator in {source}")
    m = _BAD_ESCAPE.search(raw)
    if m:
        raise FormParseError(f"invalid URL escape {raw[m.start():m.start() + 3]!r} in {source}")
    try:
        return parse_qsl(raw, keep_blank_values=True, encoding="utf-8", errors="strict")
    except ValueError as e:
        # UnicodeDecodeError is a ValueError
        raise FormParseError(f"invalid encoding in {source}: {e}") from e


def is_form_content_type(content_type: str | None) -> bool:
    if not content_type:
        return False
    return content_type.split(";", 1)[0].strip().lower() == FORM_CONTENT_TYPE


def parse_form(
    query_string: str,
    body: bytes = b"",
    content_type: str | None = None,
    max_bytes: int = DEFAULT_MAX_BYTES,
) -> FormData:
    """
    Merge body fields (urlencoded content type only) and query fields.
    Body values come first, so they win over query values for get().
    Raises FormParseError on any malformed input.
    """
    fields: dict[str, list[str]] = {}
    pairs: list[tuple[str, str]] = []

    if body and is_form_content_type(content_type):
        if len(body) > max_bytes:
            raise FormParseError(f"request body too large ({len(body)} > {max_bytes} bytes)")
        try:
            raw_body = body.decode("utf-8")
        except UnicodeDecodeError as e:
            raise FormParseError(f"invalid encoding in body: {e}") from e
        pairs.extend(_parse_pairs(raw_body, "body"))

    pairs.extend(_parse_pairs(query_string or "", "query"))

    for key, value in pairs:
        fields.setdefault(key, []).append(value)
    return FormData(fields)
