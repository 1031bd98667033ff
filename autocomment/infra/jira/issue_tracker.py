import requests

from autocomment.core.exceptions import (
    IssueNotFoundError,
    TrackerAuthenticationError,
    TrackerError,
)
from autocomment.core.ports.issue_tracker import IssueTracker
from autocomment.core.ports.logger import Logger
from autocomment.core.schema.comment import CommentPage, ExistingComment
from autocomment.infra.jira.client import JiraClient


def comments_endpoint(issue_key: str) -> str:
    return f"issue/{issue_key}/comment?expand=renderedBody"


class JiraIssueTracker(IssueTracker):
    def __init__(self, client: JiraClient, logger: Logger | None = None) -> None:
        self._client = client
        self._logger = logger

    def domain(self) -> str:
        return self._client.domain

    def get_comments(self, issue_key: str) -> CommentPage:
        try:
            response = self._client.get(comments_endpoint(issue_key))
        except requests.RequestException as error:
            self._raise_connection_error("Unable to fetch Jira comments", issue_key, error)
        self._check_status("Unable to fetch Jira comments", issue_key, response)
        try:
            payload = response.json()
        except ValueError as error:
            raise TrackerError(
                "Jira returned an invalid comment listing",
                issue_key,
                response.status_code,
            ) from error
        return _to_comment_page(payload)

    def post_comment(self, issue_key: str, serialized_document: str) -> None:
        try:
            response = self._client.post(comments_endpoint(issue_key), serialized_document)
        except requests.RequestException as error:
            self._raise_connection_error("Unable to post Jira comment", issue_key, error)
        self._check_status("Unable to post Jira comment", issue_key, response)

    def _check_status(
        self, message: str, issue_key: str, response: requests.Response
    ) -> None:
        if response.ok:
            return
        status = response.status_code
        detail = f"{message}: {status} {response.text}".strip()
        if self._logger is not None:
            self._logger.error(message, issue_key=issue_key, status=status)
        if status in (401, 403):
            raise TrackerAuthenticationError(detail, issue_key, status)
        if status == 404:
            raise IssueNotFoundError(detail, issue_key, status)
        raise TrackerError(detail, issue_key, status)

    def _raise_connection_error(
        self, message: str, issue_key: str, error: requests.RequestException
    ) -> None:
        if self._logger is not None:
            self._logger.error(message, issue_key=issue_key, error=str(error))
        raise TrackerError(f"{message}: {error}", issue_key) from error


def _to_comment_page(payload) -> CommentPage:  # noqa: ANN001
    if not isinstance(payload, dict):
        payload = {}
    comments = tuple(
        ExistingComment(rendered_body=comment.get("renderedBody") or "")
        for comment in payload.get("comments") or ()
    )
    return CommentPage(total=int(payload.get("total", len(comments))), comments=comments)
