from autocomment.infra.github import GitHubClient, GitHubPRSource
from autocomment.infra.jira import JiraClient, JiraIssueTracker
from autocomment.infra.logging import ConsoleLogger, LogfireLogger, configure_logfire

__all__ = [
    'GitHubClient',
    'GitHubPRSource',
    'JiraClient',
    'JiraIssueTracker',
    'ConsoleLogger',
    'LogfireLogger',
    'configure_logfire',
]
