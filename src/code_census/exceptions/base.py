"""Root of the Code Census exception hierarchy."""

from typing import Dict, Optional


class CodeCensusError(Exception):
    """Any error Code Census raises on purpose.

    ``message`` is the one-line summary; ``details`` is structured context
    appended in ``str()`` as ``key=value`` pairs. Populated keys:

        FileAccessError     filepath, reason
        InvalidPathError    path, reason
        InvalidConfigError  key, value, reason
    """

    def __init__(self, message: str, details: Optional[Dict[str, str]] = None):
        super().__init__(message)
        self.message = message
        self.details = dict(details) if details else {}

    def __str__(self) -> str:
        if not self.details:
            return self.message
        context = ", ".join(f"{key}={value}" for key, value in self.details.items())
        return f"{self.message} ({context})"
