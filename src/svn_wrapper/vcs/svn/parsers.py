"""Parsers for the human-readable output of `svn info` and `svn status`.

The text formats are owned by svn and may change between releases or be
localized, so parsing sits behind small interfaces that a structured
(e.g. `--xml`) implementation could replace.
"""

import re
from abc import ABC, abstractmethod

from pydantic import ValidationError

from svn_wrapper.config.models import StatusSplitMode
from svn_wrapper.models import RepositoryInfo, StatusEntry
from svn_wrapper.vcs.exceptions import CommandFailedError

INFO_PARSE_ERROR = "Unable to parse svn info output"

URL_LABEL = "URL: "
REPOSITORY_ROOT_LABEL = "Repository Root: "
LAST_CHANGED_AUTHOR_LABEL = "Last Changed Author: "
LAST_CHANGED_REV_LABEL = "Last Changed Rev: "
LAST_CHANGED_DATE_LABEL = "Last Changed Date: "

_REVISION_PATTERN = re.compile(r"\+?[0-9]+")


class InfoParser(ABC):
    """Turns `svn info` output into a RepositoryInfo."""

    @abstractmethod
    def parse(self, output: str) -> RepositoryInfo:
        """Parse captured `svn info` output.

        Args:
            output: Decoded stdout of the command

        Returns:
            Parsed repository information

        Raises:
            CommandFailedError: If the output cannot be parsed
        """


class StatusParser(ABC):
    """Turns `svn status --show-updates` output into StatusEntry records."""

    @abstractmethod
    def parse(self, output: str) -> list[StatusEntry]:
        """Parse captured `svn status` output.

        Args:
            output: Decoded stdout of the command

        Returns:
            One entry per line with at least two columns, in output order
        """


def split_lines(output: str) -> list[str]:
    """Split output into lines on `\\n`, dropping one trailing `\\r` per line.

    Unlike `str.splitlines()`, other Unicode line separators (such as
    `\\x1c` or `\\u2028`) stay inside the line they appear in.

    Args:
        output: Decoded command output

    Returns:
        Lines without their terminators; a final empty line is not returned
    """
    lines = output.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


def _find_labeled_value(lines: list[str], label: str) -> str | None:
    for line in lines:
        if line.startswith(label):
            return line[len(label) :]
    return None


class TextInfoParser(InfoParser):
    """Parses the labeled `Key: value` lines printed by `svn info`.

    Each field comes from the first line starting with its label. Any missing
    label or a malformed revision fails the whole parse with one generic error.
    """

    def parse(self, output: str) -> RepositoryInfo:
        lines = split_lines(output)

        url = _find_labeled_value(lines, URL_LABEL)
        repository_root = _find_labeled_value(lines, REPOSITORY_ROOT_LABEL)
        last_changed_author = _find_labeled_value(lines, LAST_CHANGED_AUTHOR_LABEL)
        last_changed_rev = _find_labeled_value(lines, LAST_CHANGED_REV_LABEL)
        last_changed_date = _find_labeled_value(lines, LAST_CHANGED_DATE_LABEL)

        if (
            url is None
            or repository_root is None
            or last_changed_author is None
            or last_changed_rev is None
            or last_changed_date is None
            or not _REVISION_PATTERN.fullmatch(last_changed_rev)
        ):
            raise CommandFailedError(INFO_PARSE_ERROR)

        try:
            return RepositoryInfo(
                url=url,
                repository_root=repository_root,
                last_changed_author=last_changed_author,
                last_changed_rev=int(last_changed_rev),
                last_changed_date=last_changed_date,
            )
        except ValidationError as e:
            # Revision outside the unsigned 32-bit range
            raise CommandFailedError(INFO_PARSE_ERROR) from e


class TextStatusParser(StatusParser):
    """Parses the columnar lines printed by `svn status --show-updates`.

    Columns are status, item, then optional repository and working copy
    columns. Lines with fewer than two columns (blank lines) are dropped.
    """

    def __init__(self, split_mode: StatusSplitMode = StatusSplitMode.COLLAPSE_SPACES) -> None:
        """Initialize the status parser.

        Args:
            split_mode: How lines are split into columns
        """
        self.split_mode = split_mode

    def split_line(self, line: str) -> list[str]:
        """Split one status line into columns.

        Args:
            line: A single output line

        Returns:
            Column values; with SINGLE_SPACE, runs of spaces produce empty columns.
            Tabs and other whitespace never separate columns.
        """
        if self.split_mode == StatusSplitMode.SINGLE_SPACE:
            return line.split(" ")
        return [part for part in line.split(" ") if part]

    def parse(self, output: str) -> list[StatusEntry]:
        entries: list[StatusEntry] = []

        for line in split_lines(output):
            parts = self.split_line(line)
            if len(parts) < 2:
                continue

            entries.append(
                StatusEntry(
                    status=parts[0],
                    item=parts[1],
                    repository_status=parts[2] if len(parts) > 2 else "",
                    working_copy_status=parts[3] if len(parts) > 3 else "",
                )
            )

        return entries
