"""Protocol for surfacing build failures to the user."""

from typing import Protocol


class ErrorReporterProtocol(Protocol):
    """Protocol for showing an announcement failure to the user."""

    def report(self, message: str) -> None:
        """Show a user-visible error message."""
        ...
