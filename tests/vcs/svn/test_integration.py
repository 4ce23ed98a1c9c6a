"""Integration tests against a real Subversion installation."""

import shutil
import subprocess
from pathlib import Path

import pytest

from svn_wrapper.config import SvnWrapperConfig
from svn_wrapper.vcs.exceptions import CommandFailedError
from svn_wrapper.vcs.svn.manager import SvnManager

# Skip all tests in this module if Subversion is not installed
pytestmark = pytest.mark.skipif(
    shutil.which("svn") is None or shutil.which("svnadmin") is None,
    reason="Subversion (svn, svnadmin) is not installed",
)


@pytest.fixture
def repo_url(tmp_path: Path) -> str:
    """Create a temporary Subversion repository.

    Args:
        tmp_path: Pytest temporary directory fixture

    Returns:
        file:// URL of the repository
    """
    repo_dir = tmp_path / "repo"
    subprocess.run(["svnadmin", "create", str(repo_dir)], check=True)  # noqa: S603, S607
    return repo_dir.as_uri()


@pytest.fixture
def manager(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> SvnManager:
    """Create a manager with a C locale so svn prints untranslated labels."""
    monkeypatch.setenv("LC_ALL", "C")
    monkeypatch.chdir(tmp_path)
    return SvnManager(SvnWrapperConfig(commit_message="Integration commit"))


@pytest.fixture
def working_copy(manager: SvnManager, repo_url: str, tmp_path: Path) -> Path:
    """Check out the repository and commit one file.

    Returns:
        Path to the working copy
    """
    wc = tmp_path / "wc"
    manager.checkout(repo_url, str(wc))

    (wc / "hello.txt").write_text("hello\n")
    subprocess.run(["svn", "add", str(wc / "hello.txt")], check=True, capture_output=True)  # noqa: S603, S607
    manager.commit(str(wc))
    manager.update(str(wc))
    return wc


class TestSvnManagerIntegration:
    """End-to-end tests for SvnManager."""

    def test_version(self, manager: SvnManager) -> None:
        """Test that the version banner is returned."""
        assert "svn" in manager.version().lower()

    def test_info_after_commit(self, manager: SvnManager, working_copy: Path, repo_url: str) -> None:
        """Test info on a working copy with one commit."""
        info = manager.info(str(working_copy))

        assert info.url == repo_url
        assert info.repository_root == repo_url
        assert info.last_changed_rev == 1
        assert info.last_changed_date

    def test_log_contains_commit_message(self, manager: SvnManager, working_copy: Path) -> None:
        """Test that log output includes the configured commit message."""
        assert "Integration commit" in manager.log(str(working_copy))

    def test_status_reports_modification(self, manager: SvnManager, working_copy: Path) -> None:
        """Test that a modified file is reported with status M."""
        (working_copy / "hello.txt").write_text("changed\n")

        entries = manager.status(str(working_copy))

        modified = [e for e in entries if e.status == "M"]
        assert len(modified) == 1

    def test_info_on_non_working_copy(self, manager: SvnManager, tmp_path: Path) -> None:
        """Test that svn's error text is surfaced."""
        plain_dir = tmp_path / "plain"
        plain_dir.mkdir()

        with pytest.raises(CommandFailedError, match="svn: E"):
            manager.info(str(plain_dir))
