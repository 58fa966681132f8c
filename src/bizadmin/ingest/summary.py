from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from bizadmin.config import DEFAULT_ERROR_CAP
from bizadmin.parsing.types import ValidationIssue

ImportStatus = Literal["succeeded", "rejected"]


@dataclass(frozen=True)
class ImportReport:
    """Everything the caller learns about one import attempt."""
    entity: str
    status: ImportStatus
    total: int                  # data rows in the file (header excluded)
    added: int                  # records appended, `total` on success, 0 otherwise
    issues: list[ValidationIssue] = field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return self.status == "succeeded"

    def render_one_line(self) -> str:
        """How each line of summary is formatted for the terminal."""
        if self.succeeded:
            return f"{self.entity}: imported {self.added} record(s)"
        return f"{self.entity}: import aborted, {len(self.issues)} error(s) found, no records added"

    def render_issues(self, cap: int = DEFAULT_ERROR_CAP) -> list[str]:
        """At most `cap` issue lines, plus a trailing `...and N more` when truncated."""
        lines = [f"- {i.render()}" for i in self.issues[:cap]]
        rest = len(self.issues) - cap
        if rest > 0:
            lines.append(f"...and {rest} more")
        return lines

    def render(self, cap: int = DEFAULT_ERROR_CAP) -> str:
        """Full feedback text: summary line, then the capped issue list on failure."""
        return "\n".join([self.render_one_line(), *self.render_issues(cap)])
