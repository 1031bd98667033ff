"""Serialization of comment documents into Atlassian Document Format.

Only the fields a node owns are emitted, and empty ``content`` or
``marks`` sequences are left out entirely; the comment endpoint rejects
null placeholders.
"""
import json
from typing import Any, Dict

from autocomment.core.exceptions import SerializationError
from autocomment.core.schema.document import (
    CommentNode,
    DocumentNode,
    LinkMark,
    ParagraphNode,
    TextNode,
)

_NODE_TYPES = (DocumentNode, ParagraphNode, TextNode, LinkMark)


def to_adf(node: CommentNode) -> Dict[str, Any]:
    if not isinstance(node, _NODE_TYPES):
        raise SerializationError(f"Unsupported comment node {type(node).__name__}")
    data: Dict[str, Any] = {"type": node.kind}
    if isinstance(node, DocumentNode):
        data["version"] = node.version
        if node.content:
            data["content"] = [to_adf(child) for child in node.content]
    elif isinstance(node, ParagraphNode):
        if node.content:
            data["content"] = [to_adf(child) for child in node.content]
    elif isinstance(node, TextNode):
        data["text"] = node.text
        if node.marks:
            data["marks"] = [to_adf(mark) for mark in node.marks]
    else:
        data["attrs"] = {"href": node.href}
    return data


def comment_payload(document: DocumentNode) -> Dict[str, Any]:
    return {"body": to_adf(document)}


def serialize_comment(document: DocumentNode) -> str:
    try:
        return json.dumps(comment_payload(document), ensure_ascii=False)
    except (TypeError, ValueError) as error:
        raise SerializationError(f"Unable to encode comment: {error}") from error
