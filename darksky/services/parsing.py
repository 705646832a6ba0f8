from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from darksky.core.errors import ParseError
from darksky.schemas.forecast import Forecast

logger = logging.getLogger(__name__)


def parse_forecast(payload: bytes | str | Mapping[str, Any]) -> Forecast:
    """Validate a provider response into a :class:`Forecast`.

    Raw bytes and strings are decoded as JSON first. Anything that is not a
    JSON object, or that lacks latitude, longitude or timezone (or a required
    field of a nested block), raises :class:`ParseError`.
    """
    try:
        if isinstance(payload, (bytes, bytearray, str)):
            return Forecast.model_validate_json(payload)
        if not isinstance(payload, Mapping):
            raise ParseError(
                f"Forecast payload must be a JSON object, got {type(payload).__name__}"
            )
        return Forecast.model_validate(dict(payload))
    except ValidationError as e:
        raise _to_parse_error(e) from e


def dump_forecast(forecast: Forecast) -> str:
    return forecast.model_dump_json(by_alias=True, exclude_none=True)


def _to_parse_error(error: ValidationError) -> ParseError:
    first = error.errors(include_url=False)[0]
    loc = first.get("loc") or ()
    field = ".".join(str(part) for part in loc) or None
    kind = first.get("type", "")
    logger.debug("Forecast payload rejected: %s", error)

    if kind == "json_invalid":
        return ParseError(f"Response is not valid JSON: {first.get('msg')}")
    if kind == "model_type" and field is None:
        return ParseError("Forecast payload must be a JSON object")
    if field is None:
        return ParseError(f"Invalid forecast payload: {first.get('msg')}")
    return ParseError(f"Invalid field {field!r}: {first.get('msg')}", field=field)
