"""Base formatter interface for Code Census output rendering."""

from abc import ABC, abstractmethod

from ..analysis.models import CodeStatistics


class BaseFormatter(ABC):
    """Abstract base class for output formatters."""

    @abstractmethod
    def render(self, stats: CodeStatistics) -> None:
        """Render the report to stdout/stderr as appropriate."""

    @abstractmethod
    def format(self, stats: CodeStatistics) -> str:
        """Return formatted string representation of the report."""
