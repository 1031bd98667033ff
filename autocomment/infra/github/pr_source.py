from datetime import datetime, timezone
from typing import Dict, List
from urllib.parse import parse_qsl

import requests
from github import GithubException

from autocomment.core.exceptions import (
    ConfigurationError,
    SourceAuthenticationError,
    SourceError,
    SourceNotFoundError,
    SourceRateLimitError,
)
from autocomment.core.ports.logger import Logger
from autocomment.core.ports.pr_source import PRSource
from autocomment.core.schema.pr import PullRequest
from autocomment.infra.github.client import GitHubClient

SUPPORTED_FILTERS = ("state", "sort", "direction", "base", "head")


def parse_filter_expression(filter_expression: str) -> Dict[str, str]:
    query = (filter_expression or "").strip().lstrip("?")
    filters = dict(parse_qsl(query, keep_blank_values=False))
    unknown = sorted(set(filters) - set(SUPPORTED_FILTERS))
    if unknown:
        raise ConfigurationError(
            f"Unsupported pull request filter(s): {', '.join(unknown)}"
        )
    return filters


class GitHubPRSource(PRSource):
    def __init__(
        self,
        client: GitHubClient,
        author_login: str,
        logger: Logger | None = None,
    ) -> None:
        self._client = client
        self._author_login = author_login
        self._logger = logger

    def list_pull_requests(
        self, repository_full_name: str, filter_expression: str
    ) -> List[PullRequest]:
        filters = parse_filter_expression(filter_expression)
        try:
            repo = self._client.get_repo(repository_full_name)
            pulls = [
                self._to_pull_request(pr)
                for pr in repo.get_pulls(**filters)
                if pr.user is not None and pr.user.login == self._author_login
            ]
        except GithubException as error:
            self._translate_exception(
                "Failed to fetch pull requests",
                error,
                resource=repository_full_name,
            )
        except requests.RequestException as error:
            if self._logger is not None:
                self._logger.error(
                    "Failed to reach GitHub",
                    resource=repository_full_name,
                    error=str(error),
                )
            raise SourceError(f"Failed to fetch pull requests: {error}") from error
        if self._logger is not None:
            self._logger.debug(
                "Fetched pull requests",
                repo=repository_full_name,
                author=self._author_login,
                count=len(pulls),
            )
        return pulls

    def _to_pull_request(self, pr) -> PullRequest:  # noqa: ANN001
        base_repo = pr.base.repo if pr.base else None
        return PullRequest(
            url=pr.html_url,
            repository_full_name=base_repo.full_name if base_repo else "",
            title=pr.title or "",
            description=pr.body,
            created_at=_format_timestamp(pr.created_at),
            author_login=pr.user.login if pr.user else "",
        )

    def _translate_exception(
        self,
        message: str,
        error: GithubException,
        resource: str | None = None,
    ) -> None:
        status = getattr(error, "status", None)
        headers = getattr(error, "headers", {}) or {}
        if self._logger is not None:
            self._logger.error(message, status=status, resource=resource)
        if status == 401:
            raise SourceAuthenticationError(message) from error
        if status == 404:
            raise SourceNotFoundError(
                message,
                resource or "resource",
            ) from error
        if status == 403:
            retry_after = self._retry_after_from_headers(headers)
            if retry_after:
                raise SourceRateLimitError(message, retry_after) from error
        raise SourceError(f"{message}: {status}") from error

    def _retry_after_from_headers(self, headers) -> datetime | None:  # noqa: ANN001
        reset = headers.get("Retry-After") or headers.get("X-RateLimit-Reset")
        if reset is None:
            return None
        try:
            reset_time = float(reset)
            return datetime.fromtimestamp(reset_time, tz=timezone.utc)
        except (TypeError, ValueError):
            return None


def _format_timestamp(value) -> str:  # noqa: ANN001
    if value is None:
        return ""
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.strftime("%Y-%m-%dT%H:%M:%SZ")
    return str(value)
