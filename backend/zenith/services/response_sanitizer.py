"""Narrow raw model replies down to the JSON object they are supposed to be."""
from __future__ import annotations

import re

# Opening or closing markdown fence, with an optional language tag (```json, ```JSON, ```).
CODE_FENCE_PATTERN = re.compile(r"```[A-Za-z0-9_+-]*\s*")


def strip_code_fences(raw_text: str) -> str:
    return CODE_FENCE_PATTERN.sub("", raw_text)


def extract_json_object(raw_text: str | None) -> str | None:
    """
    Return the span from the first ``{`` to the last ``}`` once fences are removed.

    No parsing happens here and braces are not balanced: prose with stray
    braces on either side of the object will widen the span. Returns None when
    there is no ``{`` ... ``}`` pair.
    """
    if not raw_text:
        return None
    text = strip_code_fences(raw_text)
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end < start:
        return None
    return text[start : end + 1]
