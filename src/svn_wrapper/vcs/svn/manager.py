"""Subversion operations manager."""

import logging

from svn_wrapper.config import SvnWrapperConfig
from svn_wrapper.models import RepositoryInfo, StatusEntry
from svn_wrapper.vcs.base import VCSManager
from svn_wrapper.vcs.exceptions import CommandFailedError
from svn_wrapper.vcs.runner import CommandRunner, SubprocessRunner, decode_output
from svn_wrapper.vcs.svn.parsers import InfoParser, StatusParser, TextInfoParser, TextStatusParser

logger = logging.getLogger(__name__)


class SvnManager(VCSManager):
    """Manages Subversion operations by shelling out to the svn client.

    Each method runs exactly one svn process and blocks until it exits.
    The manager holds no state between calls; concurrent calls against the
    same working copy must be serialized by the caller.
    """

    def __init__(
        self,
        config: SvnWrapperConfig | None = None,
        runner: CommandRunner | None = None,
        info_parser: InfoParser | None = None,
        status_parser: StatusParser | None = None,
    ) -> None:
        """Initialize Subversion manager.

        Args:
            config: Configuration (default: loaded from environment)
            runner: Process runner (default: SubprocessRunner)
            info_parser: Parser for `svn info` output (default: TextInfoParser)
            status_parser: Parser for `svn status` output (default: TextStatusParser
                using the configured split mode)
        """
        self.config = config or SvnWrapperConfig()
        self.runner = runner or SubprocessRunner()
        self.info_parser = info_parser or TextInfoParser()
        self.status_parser = status_parser or TextStatusParser(self.config.status_split)

    def _run(self, *args: str) -> str:
        """Run svn with the given arguments.

        Args:
            *args: Subcommand and its arguments

        Returns:
            Decoded stdout of the command

        Raises:
            CommandFailedError: If svn cannot be spawned or exits non-zero
        """
        cmd = [self.config.svn_executable, *args]
        logger.debug(f"Running: {' '.join(cmd)}")

        try:
            result = self.runner.run(cmd)
        except OSError as e:
            logger.debug(f"Unable to start {cmd[0]}: {e}")
            raise CommandFailedError(str(e)) from e

        if not result.success:
            stderr = decode_output(result.stderr)
            logger.debug(f"{cmd[0]} exited with status {result.exit_code}: {stderr.strip()}")
            raise CommandFailedError(stderr)

        return decode_output(result.stdout)

    def version(self) -> str:
        return self._run("--version")

    def checkout(self, url: str, path: str) -> None:
        self._run("checkout", url, path)

    def commit(self, path: str) -> None:
        """Commit local changes under a path using the configured commit message.

        Args:
            path: Working copy path to commit

        Raises:
            CommandFailedError: If the commit fails
        """
        self._run("commit", "-m", self.config.commit_message, path)

    def update(self, path: str) -> None:
        self._run("update", path)

    def log(self, path: str) -> str:
        return self._run("log", path)

    def info(self, path: str) -> RepositoryInfo:
        """Get repository information for a path.

        Args:
            path: Working copy path or URL

        Returns:
            Parsed repository information

        Raises:
            CommandFailedError: If svn fails or its output lacks a required field
        """
        return self.info_parser.parse(self._run("info", path))

    def status(self, path: str) -> list[StatusEntry]:
        """Get working copy status, including out-of-date information.

        Args:
            path: Working copy path

        Returns:
            Status entries in output order

        Raises:
            CommandFailedError: If svn fails
        """
        return self.status_parser.parse(self._run("status", "--show-updates", path))
