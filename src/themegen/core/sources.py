"""
Input document sources.

The token and style documents are produced outside themegen (a REST API
export or a plugin copy/paste). A source hands both over as parsed JSON;
processing starts only once both are loaded.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Protocol

from .errors import ErrorContext, SourceError

logger = logging.getLogger(__name__)


class TokenSource(Protocol):
    """Anything that can supply the token and style documents."""

    def load_tokens(self) -> Any: ...

    def load_styles(self) -> Any: ...


def read_json(path: Path) -> Any:
    """
    Read and parse a JSON file.

    Raises:
        SourceError: If the file can't be read or isn't valid JSON.
    """
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise SourceError(f"Cannot read {path}: {e}") from e
    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        raise SourceError(
            f"Invalid JSON (line {e.lineno}, column {e.colno}): {e.msg}",
            ErrorContext(file=path),
        ) from e


class JsonFileSource:
    """Token and style documents stored as JSON files on disk."""

    def __init__(self, tokens_path: Path, styles_path: Path | None = None):
        self.tokens_path = tokens_path
        self.styles_path = styles_path

    def load_tokens(self) -> Any:
        return read_json(self.tokens_path)

    def load_styles(self) -> Any:
        """Styles are optional: no path or no file means no styles."""
        if self.styles_path is None:
            logger.debug("No styles file configured")
            return []
        if not self.styles_path.exists():
            logger.warning("Styles file %s not found, building without styles", self.styles_path)
            return []
        return read_json(self.styles_path)
