from typing import Protocol, Sequence, runtime_checkable

from autocomment.core.schema.pr import PullRequest


@runtime_checkable
class PRSource(Protocol):
    def list_pull_requests(
        self, repository_full_name: str, filter_expression: str
    ) -> Sequence[PullRequest]:
        ...
