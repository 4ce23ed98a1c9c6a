"""Tests for top-level models."""

import pytest
from pydantic import ValidationError

from svn_wrapper.models import MAX_REVISION, RepositoryInfo, StatusEntry


@pytest.fixture
def repo_info() -> RepositoryInfo:
    """Create sample repository info."""
    return RepositoryInfo(
        url="https://svn.example.com/repo/trunk",
        repository_root="https://svn.example.com/repo",
        last_changed_author="alice",
        last_changed_rev=42,
        last_changed_date="2024-01-01",
    )


class TestRepositoryInfo:
    """Tests for RepositoryInfo model."""

    def test_is_immutable(self, repo_info: RepositoryInfo) -> None:
        """Test that fields cannot be reassigned."""
        with pytest.raises(ValidationError):
            repo_info.url = "https://elsewhere"  # type: ignore[misc]

    def test_negative_revision_rejected(self) -> None:
        """Test that revisions must be unsigned."""
        with pytest.raises(ValidationError):
            RepositoryInfo(
                url="u",
                repository_root="r",
                last_changed_author="a",
                last_changed_rev=-1,
                last_changed_date="d",
            )

    def test_revision_upper_bound(self) -> None:
        """Test that revisions beyond 32 bits are rejected."""
        with pytest.raises(ValidationError):
            RepositoryInfo(
                url="u",
                repository_root="r",
                last_changed_author="a",
                last_changed_rev=MAX_REVISION + 1,
                last_changed_date="d",
            )


class TestStatusEntry:
    """Tests for StatusEntry model."""

    def test_trailing_columns_default_to_empty(self) -> None:
        """Test default values for optional columns."""
        entry = StatusEntry(status="M", item="a.txt")

        assert entry.repository_status == ""
        assert entry.working_copy_status == ""

    def test_is_immutable(self) -> None:
        """Test that fields cannot be reassigned."""
        entry = StatusEntry(status="M", item="a.txt")

        with pytest.raises(ValidationError):
            entry.status = "A"  # type: ignore[misc]

    @pytest.mark.parametrize(
        ("repository_status", "working_copy_status", "expected"),
        [
            ("*", "", True),
            ("965", "*", True),
            ("965", "", False),
            ("", "", False),
        ],
    )
    def test_is_out_of_date(self, repository_status: str, working_copy_status: str, expected: bool) -> None:
        """Test detection of the out-of-date marker."""
        entry = StatusEntry(
            status="M",
            item="a.txt",
            repository_status=repository_status,
            working_copy_status=working_copy_status,
        )

        assert entry.is_out_of_date is expected
