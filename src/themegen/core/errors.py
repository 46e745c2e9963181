"""
Error types for themegen configuration, token and style document processing.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


class ThemegenError(Exception):
    """Base exception for all themegen errors."""

    def __init__(self, message: str, context: Optional["ErrorContext"] = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}\n{self.message}"
        return self.message


class ConfigError(ThemegenError):
    """
    Raised when the build configuration cannot be loaded.

    Examples:
    - Manifest file missing or not valid TOML
    - Collection settings with wrong field types
    - Duplicate collection keys
    """

    pass


class SourceError(ThemegenError):
    """
    Raised when an input document cannot be acquired.

    Examples:
    - Token or style file missing
    - File content is not valid JSON
    """

    pass


class TokenDocumentError(ThemegenError):
    """
    Raised when the token document is structurally invalid.

    Examples:
    - Document root is not a JSON object
    - A token group is a scalar where an object is required
    """

    pass


class StyleDocumentError(ThemegenError):
    """
    Raised when the style document is structurally invalid.

    Examples:
    - Document root is not a JSON array
    - A style record has fields of the wrong shape
    """

    pass


@dataclass
class ErrorContext:
    """
    Location of an error inside an input document.

    Attributes:
        file: Path of the document, when it came from disk
        token_path: Dotted path of the offending node (e.g. "@color.brand.500")
    """

    file: Path | None = None
    token_path: str | None = None

    def format(self) -> str:
        """
        Format error context as a human-readable string.

        Returns:
            Formatted string like: "tokens.json at @color.brand"
        """
        parts = []
        if self.file:
            parts.append(str(self.file))
        if self.token_path:
            parts.append(f"at {self.token_path}")
        return " ".join(parts)


def make_token_error(message: str, path: list[str] | tuple[str, ...]) -> TokenDocumentError:
    """
    Helper to create a TokenDocumentError pointing at a token path.

    Args:
        message: Error description
        path: Path segments from the document root to the node

    Returns:
        TokenDocumentError with context attached
    """
    return TokenDocumentError(message, ErrorContext(token_path=".".join(path) or "<root>"))
