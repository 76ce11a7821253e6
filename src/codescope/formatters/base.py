"""Base formatter interface for codescope output rendering."""

from abc import ABC, abstractmethod
from typing import Any


class BaseFormatter(ABC):
    """Abstract base class for output formatters.

    ``result`` is any analysis value object (or list of them) offering
    ``to_dict()``.
    """

    @abstractmethod
    def render(self, result: Any) -> None:
        """Write the result to stdout."""

    @abstractmethod
    def format(self, result: Any) -> str:
        """Return formatted string representation of the result."""
