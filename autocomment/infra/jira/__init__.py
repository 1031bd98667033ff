from autocomment.infra.jira.client import JiraClient
from autocomment.infra.jira.issue_tracker import JiraIssueTracker, comments_endpoint

__all__ = ["JiraClient", "JiraIssueTracker", "comments_endpoint"]
