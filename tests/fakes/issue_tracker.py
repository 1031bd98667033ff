from typing import Dict, Iterable, List

from autocomment.core.exceptions import TrackerError
from autocomment.core.ports.issue_tracker import IssueTracker
from autocomment.core.schema.comment import CommentPage, ExistingComment


class FakeIssueTracker(IssueTracker):
    """In-memory tracker. Posted comments are stored as raw JSON text.

    ``reflect_posts`` makes later reads see earlier posts, the way the
    real tracker does between runs.
    """

    def __init__(
        self,
        domain: str = "jira.domain",
        comments: Dict[str, Iterable[str]] | None = None,
        *,
        reflect_posts: bool = False,
        fail_on_get: Iterable[str] = (),
        fail_on_post: Iterable[str] = (),
    ) -> None:
        self._domain = domain
        self._comments: Dict[str, List[str]] = {
            key: list(bodies) for key, bodies in (comments or {}).items()
        }
        self._reflect_posts = reflect_posts
        self._fail_on_get = set(fail_on_get)
        self._fail_on_post = set(fail_on_post)
        self.get_calls: list[str] = []
        self.posted: list[tuple[str, str]] = []

    def domain(self) -> str:
        return self._domain

    def get_comments(self, issue_key: str) -> CommentPage:
        self.get_calls.append(issue_key)
        if issue_key in self._fail_on_get:
            raise TrackerError("Unable to fetch Jira comments", issue_key, 500)
        bodies = self._comments.get(issue_key, [])
        return CommentPage(
            total=len(bodies),
            comments=tuple(ExistingComment(rendered_body=body) for body in bodies),
        )

    def post_comment(self, issue_key: str, serialized_document: str) -> None:
        if issue_key in self._fail_on_post:
            raise TrackerError("Unable to post Jira comment", issue_key, 400)
        self.posted.append((issue_key, serialized_document))
        if self._reflect_posts:
            self._comments.setdefault(issue_key, []).append(serialized_document)
