from autocomment.core.ports.issue_tracker import IssueTracker
from autocomment.core.ports.logger import Logger
from autocomment.core.ports.pr_source import PRSource

__all__ = [
    "Logger",
    "PRSource",
    "IssueTracker",
]
