from autocomment.core.exceptions import MissingDescriptionError
from autocomment.core.schema.document import (
    DocumentNode,
    LinkMark,
    ParagraphNode,
    TextNode,
)
from autocomment.core.schema.pr import PullRequest

DOCUMENT_VERSION = 1


def first_line(text: str) -> str:
    head, _, _ = text.partition("\n")
    return head.strip()


def build_comment_document(pr: PullRequest) -> DocumentNode:
    if pr.description is None:
        raise MissingDescriptionError(pr.url)

    heading = ParagraphNode(
        content=(
            TextNode(text=f"Pull Request in {pr.repository_full_name}: "),
            TextNode(text=pr.title, marks=(LinkMark(href=pr.url),)),
        )
    )
    summary = ParagraphNode(content=(TextNode(text=first_line(pr.description)),))
    created = ParagraphNode(content=(TextNode(text=f"Created at: {pr.created_at}"),))
    return DocumentNode(
        content=(heading, summary, created),
        version=DOCUMENT_VERSION,
    )
