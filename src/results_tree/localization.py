"""Default localized-string provider backed by a key -> template mapping."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Mapping, Optional

from config.messages import DEFAULT_MESSAGES

logger = logging.getLogger(__name__)


class MessageBundle:
    """Format message templates with positional ``{0}``-style arguments.

    Unknown keys resolve to the key itself so label text never drives
    control flow.
    """

    def __init__(self, messages: Optional[Mapping[str, str]] = None):
        self._messages = dict(DEFAULT_MESSAGES)
        if messages:
            self._messages.update(messages)

    @classmethod
    def from_json(cls, path: Path) -> "MessageBundle":
        """Load templates from a JSON object; missing keys fall back to English."""
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"Message file {path} must contain a JSON object")
        logger.debug("Loaded %d message(s) from %s", len(data), path)
        return cls({str(k): str(v) for k, v in data.items()})

    def get(self, key: str) -> str:
        template = self._messages.get(key)
        if template is None:
            logger.warning("Missing message key: %s", key)
            return key
        return template

    def format(self, key: str, *args: Any) -> str:
        template = self.get(key)
        try:
            return template.format(*args)
        except (IndexError, KeyError, ValueError) as e:
            logger.warning("Could not format message %s with %r: %s", key, args, e)
            return template

    def __contains__(self, key: str) -> bool:
        return key in self._messages
