# utils/ids.py
from __future__ import annotations

from typing import Union

from utils.errors import NotFound


def parse_id(raw: Union[int, str, None], message: str = "Not found") -> int:
    """
    Turn a path/body identifier into a primary key.

    A malformed id is reported exactly like a missing row, so callers cannot
    tell "bad input" from "does not exist".
    """
    if isinstance(raw, bool):
        raise NotFound(message)
    if isinstance(raw, int):
        value = raw
    else:
        text = (raw or "").strip()
        if not text.isascii() or not text.isdigit():
            raise NotFound(message)
        value = int(text)
    if value <= 0:
        raise NotFound(message)
    return value
