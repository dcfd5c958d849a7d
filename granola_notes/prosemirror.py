"""
Plain-text extraction from ProseMirror-style rich documents.

Granola stores AI-generated panels as a tree of nodes. We turn that tree into
lightweight Markdown for the terminal: headings become `## ...`, paragraphs
and lists end with a newline and list items get a `- ` bullet. The output is
for display only and cannot be parsed back into a document.

Raw JSON is first classified into one of four node shapes by `parse_node`;
`render_node` then handles each shape in its own branch.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Tuple, Union


@dataclass(frozen=True)
class EmptyNode:
    pass


@dataclass(frozen=True)
class TextNode:
    text: str


@dataclass(frozen=True)
class NodeList:
    children: Tuple["Node", ...]


@dataclass(frozen=True)
class ContainerNode:
    type: str
    content: "Node"


Node = Union[EmptyNode, TextNode, NodeList, ContainerNode]

EMPTY = EmptyNode()


def has_content(value: Any) -> bool:
    # Empty lists and objects still count as content; an empty string does not.
    if isinstance(value, (list, tuple, dict)):
        return True
    return bool(value)


def parse_node(raw: Any) -> Node:
    """Classify a raw JSON value. Never raises."""
    if not raw and not isinstance(raw, (list, tuple)):
        return EMPTY
    if isinstance(raw, str):
        return TextNode(raw)
    if isinstance(raw, dict) and raw.get("text"):
        text = raw["text"]
        return TextNode(text if isinstance(text, str) else str(text))
    if isinstance(raw, (list, tuple)):
        return NodeList(tuple(parse_node(child) for child in raw))
    if isinstance(raw, dict) and has_content(raw.get("content")):
        node_type = raw.get("type")
        return ContainerNode(
            type=node_type if isinstance(node_type, str) else "",
            content=parse_node(raw["content"]),
        )
    return EMPTY


def render_node(node: Node) -> str:
    if isinstance(node, TextNode):
        return node.text
    if isinstance(node, NodeList):
        return "".join(render_node(child) for child in node.children)
    if isinstance(node, ContainerNode):
        return _wrap(node.type, render_node(node.content))
    return ""


def _wrap(node_type: str, text: str) -> str:
    if node_type == "heading":
        return f"\n## {text}\n"
    if node_type in ("paragraph", "bulletList", "orderedList"):
        return f"{text}\n"
    if node_type == "listItem":
        # no newline: the enclosing list adds it
        return f"- {text}"
    return text


def extract_text(raw: Any) -> str:
    """Convert a rich-document tree (or any fragment of one) to plain text."""
    return render_node(parse_node(raw))
