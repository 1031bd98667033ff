from tests.fakes.github import (
    FakeGitHubClient,
    FakePullRequest,
    FakePullRequestPart,
    FakeRepo,
    FakeRepository,
    FakeUser,
)
from tests.fakes.issue_tracker import FakeIssueTracker
from tests.fakes.jira import FakeResponse, FakeSession
from tests.fakes.logger import FakeLogger
from tests.fakes.pr_source import FakePRSource

__all__ = [
    "FakeGitHubClient",
    "FakeIssueTracker",
    "FakeLogger",
    "FakePRSource",
    "FakePullRequest",
    "FakePullRequestPart",
    "FakeRepo",
    "FakeRepository",
    "FakeResponse",
    "FakeSession",
    "FakeUser",
]
