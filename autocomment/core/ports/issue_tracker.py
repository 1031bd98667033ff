from typing import Protocol, runtime_checkable

from autocomment.core.schema.comment import CommentPage


@runtime_checkable
class IssueTracker(Protocol):
    def domain(self) -> str:
        ...

    def get_comments(self, issue_key: str) -> CommentPage:
        ...

    def post_comment(self, issue_key: str, serialized_document: str) -> None:
        ...
