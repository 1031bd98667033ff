from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True, slots=True)
class ExistingComment:
    rendered_body: str


@dataclass(frozen=True, slots=True)
class CommentPage:
    """Comments already attached to an issue, as returned by the tracker."""

    total: int
    comments: Tuple[ExistingComment, ...]

    def contains_text(self, text: str) -> bool:
        return any(text in comment.rendered_body for comment in self.comments)
