from collections import Counter
from typing import List, Optional, Sequence

from autocomment.core.comments import (
    build_comment_document,
    has_prior_comment,
    serialize_comment,
)
from autocomment.core.ports.issue_tracker import IssueTracker
from autocomment.core.ports.logger import Logger
from autocomment.core.ports.pr_source import PRSource
from autocomment.core.references import extract_issue_key
from autocomment.core.schema.pr import PullRequest
from autocomment.core.schema.result import SyncOutcome, SyncResult


class _SilentLogger(Logger):
    def debug(self, message: str, **context: object) -> None:
        return

    def info(self, message: str, **context: object) -> None:
        return

    def warning(self, message: str, **context: object) -> None:
        return

    def error(self, message: str, **context: object) -> None:
        return

    def exception(self, message: str, **context: object) -> None:
        return


def issue_url(tracker_domain: str, issue_key: str) -> str:
    return f"https://{tracker_domain}/browse/{issue_key}"


class CommentSync:
    """Links pull requests to the tracker issues their descriptions reference.

    Pull requests are handled one at a time, in the order the source
    returns them. Missing descriptions and missing references become
    result lines; any other error propagates and ends the run.
    """

    def __init__(
        self,
        logger: Logger,
        pr_source: PRSource,
        issue_tracker: IssueTracker,
    ) -> None:
        self._logger = logger
        self._pr_source = pr_source
        self._issue_tracker = issue_tracker

    def run(
        self, repository_full_name: str, filter_expression: str = ""
    ) -> List[SyncResult]:
        self._logger.info(
            "Sync starting",
            repo=repository_full_name,
            filter=filter_expression,
        )
        pull_requests: Sequence[PullRequest] = self._pr_source.list_pull_requests(
            repository_full_name, filter_expression
        )
        results = [self.reconcile_one(pr) for pr in pull_requests]
        counts = Counter(result.outcome.value for result in results)
        self._logger.info(
            "Sync complete",
            repo=repository_full_name,
            processed=len(results),
            **dict(counts),
        )
        return results

    def reconcile_one(self, pr: PullRequest) -> SyncResult:
        if pr.description is None:
            return self._record(SyncResult(SyncOutcome.MISSING_DESCRIPTION, pr.url))

        domain = self._issue_tracker.domain()
        issue_key = extract_issue_key(pr.description, domain)
        if issue_key is None:
            return self._record(SyncResult(SyncOutcome.NO_REFERENCE_FOUND, pr.url))

        existing = self._issue_tracker.get_comments(issue_key)
        if has_prior_comment(existing, pr.url):
            return self._record(
                SyncResult(SyncOutcome.ALREADY_PRESENT, pr.url, issue_key=issue_key)
            )

        document = build_comment_document(pr)
        self._issue_tracker.post_comment(issue_key, serialize_comment(document))
        self._logger.info("Comment posted", issue_key=issue_key, pr_url=pr.url)
        return self._record(
            SyncResult(
                SyncOutcome.POSTED,
                pr.url,
                issue_key=issue_key,
                issue_url=issue_url(domain, issue_key),
            )
        )

    def _record(self, result: SyncResult) -> SyncResult:
        self._logger.info(
            "Pull request reconciled",
            outcome=result.outcome.value,
            pr_url=result.pr_url,
            issue_key=result.issue_key,
        )
        return result


def sync_comments(
    repository_full_name: str,
    filter_expression: str,
    pr_source: PRSource,
    issue_tracker: IssueTracker,
    logger: Optional[Logger] = None,
) -> List[str]:
    if logger is None:
        logger = _SilentLogger()
    sync = CommentSync(logger, pr_source, issue_tracker)
    results = sync.run(repository_full_name, filter_expression)
    return [result.render() for result in results]
