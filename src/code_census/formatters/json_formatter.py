"""JSON formatter for Code Census."""

import json

from ..analysis.models import CodeStatistics
from .base import BaseFormatter


class JsonFormatter(BaseFormatter):
    """Render the report as pretty-printed JSON."""

    def render(self, stats: CodeStatistics) -> None:
        print(self.format(stats))

    def format(self, stats: CodeStatistics) -> str:
        return json.dumps(stats.to_dict(), indent=2)
