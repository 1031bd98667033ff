from autocomment.infra.github.client import DEFAULT_GITHUB_DOMAIN, GitHubClient
from autocomment.infra.github.pr_source import (
    GitHubPRSource,
    parse_filter_expression,
)

__all__ = [
    "DEFAULT_GITHUB_DOMAIN",
    "GitHubClient",
    "GitHubPRSource",
    "parse_filter_expression",
]
