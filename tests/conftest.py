import pytest

from autocomment.config.credentials import Credentials
from autocomment.core.schema.pr import PullRequest
from tests.settings import get_test_settings


@pytest.fixture
def test_settings(tmp_path):
    return get_test_settings(tmp_path / ".autocomment" / "config.yaml")


@pytest.fixture
def complete_credentials():
    return Credentials(
        jira_user="jira-user",
        jira_pass="jira-pass",
        jira_domain="jira.domain",
        github_user="octocat",
        github_pass="gh-token",
        github_domain="api.github.com",
    )


@pytest.fixture
def make_pr():
    def _make_pr(
        number: int = 1,
        description: str | None = "test body [A-1](https://jira.domain/browse/A-1)",
        title: str = "test title",
    ) -> PullRequest:
        return PullRequest(
            url=f"https://url/org/repo/{number}",
            repository_full_name="org/repo",
            title=title,
            description=description,
            created_at="2024-01-15T12:00:00Z",
            author_login="octocat",
        )

    return _make_pr
