"""Top-level models for svn-wrapper."""

from pydantic import BaseModel, Field

MAX_REVISION = 2**32 - 1


class RepositoryInfo(BaseModel):
    """Repository information reported by `svn info`."""

    model_config = {"frozen": True}

    url: str = Field(description="URL of the item")
    repository_root: str = Field(description="URL of the repository root")
    last_changed_author: str = Field(description="Author of the last change")
    last_changed_rev: int = Field(ge=0, le=MAX_REVISION, description="Revision of the last change")
    last_changed_date: str = Field(description="Date of the last change, as printed by svn")


class StatusEntry(BaseModel):
    """One line of `svn status --show-updates` output."""

    model_config = {"frozen": True}

    item: str = Field(description="Path of the item")
    status: str = Field(description="Status code column")
    repository_status: str = Field(default="", description="Third column, empty when absent")
    working_copy_status: str = Field(default="", description="Fourth column, empty when absent")

    @property
    def is_out_of_date(self) -> bool:
        """Check if svn flagged the item as having a newer revision on the server.

        Returns:
            True if any trailing column holds the `*` marker
        """
        return "*" in (self.repository_status, self.working_copy_status)
