"""Abstract base class for working copy operations.

Defines the interface the Subversion manager implements, so callers can
depend on it without knowing how commands are run or parsed.
"""

from abc import ABC, abstractmethod

from svn_wrapper.models import RepositoryInfo, StatusEntry


class VCSManager(ABC):
    """Abstract base class for version control system managers.

    Every operation is a single blocking call against the external tool.
    Failures raise CommandFailedError.
    """

    @abstractmethod
    def version(self) -> str:
        """Get the version banner of the external tool.

        Returns:
            Raw text printed by the tool's version command
        """

    @abstractmethod
    def checkout(self, url: str, path: str) -> None:
        """Check out a repository URL into a local path.

        Args:
            url: Repository URL to check out
            path: Destination working copy path
        """

    @abstractmethod
    def commit(self, path: str) -> None:
        """Commit local changes under a path.

        Args:
            path: Working copy path to commit
        """

    @abstractmethod
    def update(self, path: str) -> None:
        """Bring a working copy up to date.

        Args:
            path: Working copy path to update
        """

    @abstractmethod
    def log(self, path: str) -> str:
        """Get the revision log for a path.

        Args:
            path: Working copy path or URL

        Returns:
            Log text as printed by the tool
        """

    @abstractmethod
    def info(self, path: str) -> RepositoryInfo:
        """Get repository information for a path.

        Args:
            path: Working copy path or URL

        Returns:
            Parsed repository information
        """

    @abstractmethod
    def status(self, path: str) -> list[StatusEntry]:
        """Get working copy status, including out-of-date information.

        Args:
            path: Working copy path

        Returns:
            Status entries in output order
        """
