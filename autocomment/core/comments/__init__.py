from autocomment.core.comments.builder import (
    DOCUMENT_VERSION,
    build_comment_document,
    first_line,
)
from autocomment.core.comments.duplicates import has_prior_comment
from autocomment.core.comments.serializer import (
    comment_payload,
    serialize_comment,
    to_adf,
)

__all__ = [
    "DOCUMENT_VERSION",
    "build_comment_document",
    "first_line",
    "has_prior_comment",
    "comment_payload",
    "serialize_comment",
    "to_adf",
]
