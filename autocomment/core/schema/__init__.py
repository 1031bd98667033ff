from autocomment.core.schema.comment import CommentPage, ExistingComment
from autocomment.core.schema.document import (
    CommentNode,
    DocumentNode,
    LinkMark,
    ParagraphNode,
    TextNode,
)
from autocomment.core.schema.pr import PullRequest
from autocomment.core.schema.result import SyncOutcome, SyncResult

__all__ = [
    "PullRequest",
    "ExistingComment",
    "CommentPage",
    "CommentNode",
    "DocumentNode",
    "ParagraphNode",
    "TextNode",
    "LinkMark",
    "SyncOutcome",
    "SyncResult",
]
