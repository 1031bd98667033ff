from typing import Iterable, Union

from autocomment.core.schema.comment import CommentPage, ExistingComment


def has_prior_comment(
    existing: Union[CommentPage, Iterable[ExistingComment]],
    needle_url: str,
) -> bool:
    if isinstance(existing, CommentPage):
        return existing.contains_text(needle_url)
    return any(needle_url in comment.rendered_body for comment in existing)
