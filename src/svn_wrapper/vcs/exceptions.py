"""VCS exceptions for svn-wrapper."""


class VCSError(Exception):
    """Base exception for all VCS-related errors."""


class CommandFailedError(VCSError):
    """Raised when an svn command cannot be run, exits non-zero, or its output cannot be parsed."""

    def __init__(self, detail: str) -> None:
        """Initialize command failure.

        Args:
            detail: Spawn error message, captured stderr, or parse failure message
        """
        super().__init__(f"Failed to run svn command: {detail}")
        self.detail = detail
