"""Root of the codescope error hierarchy.

Per-file problems met during a multi-file analysis (an unreadable file, a
failed parse) are logged and skipped by the analyzers. Everything that
reaches a caller derives from CodescopeError, which the CLI turns into a
one-line message and exit status 1.
"""

from typing import Dict, Optional


class CodescopeError(Exception):
    """Base exception for all codescope errors.

    Args:
        message: Human-readable summary
        details: Context such as the offending path or config key; shown
            after the message as ``key=value`` pairs
    """

    def __init__(self, message: str, details: Optional[Dict[str, str]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if not self.details:
            return self.message
        return f"{self.message} ({self._format_details()})"

    def _format_details(self) -> str:
        return ", ".join(f"{key}={value}" for key, value in self.details.items())
