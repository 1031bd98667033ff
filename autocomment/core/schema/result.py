from dataclasses import dataclass
from enum import Enum
from typing import Optional


class SyncOutcome(Enum):
    POSTED = "posted"
    ALREADY_PRESENT = "already_present"
    NO_REFERENCE_FOUND = "no_reference_found"
    MISSING_DESCRIPTION = "missing_description"


@dataclass(frozen=True, slots=True)
class SyncResult:
    outcome: SyncOutcome
    pr_url: str
    issue_key: Optional[str] = None
    issue_url: Optional[str] = None

    def render(self) -> str:
        if self.outcome is SyncOutcome.POSTED:
            return f"Added comment to {self.issue_url} for {self.pr_url}"
        if self.outcome is SyncOutcome.ALREADY_PRESENT:
            return f"Jira ticket {self.issue_key} already has comment for {self.pr_url}"
        if self.outcome is SyncOutcome.NO_REFERENCE_FOUND:
            return f"PR {self.pr_url} does not contain a Jira ticket!"
        return f"PR {self.pr_url} does not have a description!"

    def __str__(self) -> str:
        return self.render()
