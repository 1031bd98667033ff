"""Nodes of a rich-text comment document.

A document is a tree: the root holds paragraphs, paragraphs hold text
runs and text runs may carry marks. Each node type only has the fields
that belong to it, so serialization never has to decide which optional
fields to drop.
"""
from dataclasses import dataclass
from typing import ClassVar, Tuple, Union


@dataclass(frozen=True, slots=True)
class LinkMark:
    kind: ClassVar[str] = "link"

    href: str


Mark = LinkMark


@dataclass(frozen=True, slots=True)
class TextNode:
    kind: ClassVar[str] = "text"

    text: str
    marks: Tuple[Mark, ...] = ()


@dataclass(frozen=True, slots=True)
class ParagraphNode:
    kind: ClassVar[str] = "paragraph"

    content: Tuple[TextNode, ...] = ()


@dataclass(frozen=True, slots=True)
class DocumentNode:
    kind: ClassVar[str] = "doc"

    content: Tuple[ParagraphNode, ...] = ()
    version: int = 1


CommentNode = Union[DocumentNode, ParagraphNode, TextNode, LinkMark]
