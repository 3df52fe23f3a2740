"""
Extraction of a JSON value embedded in free-text model output.

The scan takes everything from the first opening bracket to the last closing
bracket, which tolerates markdown code fences and commentary around the
payload. A stray bracket before or after the real JSON breaks it; there is
no second attempt.

Every failure surfaces as the same ExtractionError message; the specific
reason only goes to the log.
"""

import json
import logging
from typing import Any, NoReturn, Optional

from labelcheck.core.errors import ExtractionError

logger = logging.getLogger("labelcheck.extraction")

UNEXPECTED_FORMAT = "The AI returned a response in an unexpected format."


def _first_of(text: str, *chars: str) -> int:
    found = [i for i in (text.find(c) for c in chars) if i != -1]
    return min(found) if found else -1


def _reject_constant(name: str) -> NoReturn:
    # NaN, Infinity and -Infinity are not JSON
    raise ValueError(f"invalid JSON constant {name}")


def _fail(reason: str, cause: Optional[Exception] = None) -> NoReturn:
    logger.warning(f"JSON extraction failed: {reason}")
    raise ExtractionError(UNEXPECTED_FORMAT) from cause


def extract_json(text: str) -> Any:
    """Return the JSON value spanning the outermost brackets of ``text``."""
    start = _first_of(text, "[", "{")
    if start == -1:
        _fail("no JSON found")

    end = max(text.rfind("]"), text.rfind("}"))
    if end == -1:
        _fail("no JSON end found")

    candidate = text[start:end + 1]
    try:
        return json.loads(candidate, parse_constant=_reject_constant)
    except ValueError as e:
        _fail(f"parse error in offsets {start}..{end}: {e}", e)
