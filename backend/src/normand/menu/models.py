"""Menu document and sync report models.

Field names on the wire are camelCase (the JSON document is also edited by
the browser admin panel), so models declare aliases and accept either form.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, Field


class MenuEntry(BaseModel):
    """A navigation entry. Depth is at most two (top level plus one sub-menu)."""

    model_config = {"extra": "allow"}

    id: str = Field(..., min_length=1, description="Unique across the whole tree")
    title: str = Field("", description="Visible link text")
    url: str = Field("#", description="Normalized path, or '#' for placeholders")
    order: int = Field(0, description="1-based position within its sibling list")
    children: list[MenuEntry] = Field(default_factory=list)


class MenuDocument(BaseModel):
    """The JSON menu document stored on disk."""

    model_config = {"extra": "allow", "populate_by_name": True}

    main_menu: list[MenuEntry] = Field(default_factory=list, alias="mainMenu")
    last_updated: Optional[str] = Field(None, alias="lastUpdated")
    last_synced_at: Optional[str] = Field(None, alias="lastSyncedAt")

    def to_json_dict(self) -> dict:
        """Serialize with camelCase keys, dropping unset timestamps."""
        return self.model_dump(by_alias=True, exclude_none=True)


class DiscrepancyType(str, Enum):
    """Kinds of drift between the HTML navigation and the JSON document."""

    MISSING_IN_JSON = "missing_in_json"
    MISSING_IN_HTML = "missing_in_html"
    TITLE_MISMATCH = "title_mismatch"
    URL_MISMATCH = "url_mismatch"
    CHILDREN_COUNT_MISMATCH = "children_count_mismatch"


class Severity(str, Enum):
    """Discrepancy severity."""

    ERROR = "error"
    WARNING = "warning"


class MenuDiscrepancy(BaseModel):
    """A single difference found by the reconciler. Never persisted."""

    model_config = {"populate_by_name": True}

    type: DiscrepancyType
    id: str
    description: str
    severity: Severity
    title: Optional[str] = None
    html_value: Optional[Union[int, str]] = Field(None, alias="htmlValue")
    json_value: Optional[Union[int, str]] = Field(None, alias="jsonValue")


class SyncReport(BaseModel):
    """Result of comparing the HTML and JSON menu trees."""

    model_config = {"populate_by_name": True}

    is_in_sync: bool = Field(..., alias="isInSync")
    issues: list[MenuDiscrepancy] = Field(default_factory=list)
    total_issues: int = Field(0, alias="totalIssues")
    error_count: int = Field(0, alias="errorCount")
    warning_count: int = Field(0, alias="warningCount")

    @classmethod
    def from_issues(cls, issues: list[MenuDiscrepancy]) -> SyncReport:
        return cls(
            is_in_sync=not issues,
            issues=issues,
            total_issues=len(issues),
            error_count=sum(1 for issue in issues if issue.severity == Severity.ERROR),
            warning_count=sum(1 for issue in issues if issue.severity == Severity.WARNING),
        )


MenuEntry.model_rebuild()
