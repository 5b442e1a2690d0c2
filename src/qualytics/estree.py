"""Build SyntaxNode trees from ESTree JSON documents.

The input is the JSON form of an ESTree / typescript-estree program as
produced with ``loc: true`` (for example ``JSON.stringify(parse(code, {loc:
true}))``). Every object with a string ``type`` becomes a node; objects and
lists of objects under other keys become child fields in document order;
everything else becomes a scalar attribute. Location bookkeeping keys never
become children.

Conversion is iterative so deeply nested documents do not exhaust the
interpreter stack.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

from .exceptions import FileAccessError, TreeFormatError
from .logging_config import get_logger
from .nodes import NodeKind, Span, SyntaxNode, SyntaxTree

logger = get_logger(__name__)

NON_CHILD_KEYS = frozenset({"type", "loc", "range", "parent", "tokens", "comments"})

# (child document, owner node, field name, list index or None, location)
_Pending = Tuple[Dict[str, Any], SyntaxNode, str, Optional[int], str]


def _is_node(value: Any) -> bool:
    return isinstance(value, dict) and isinstance(value.get("type"), str)


def _span(obj: Dict[str, Any], location: str) -> Optional[Span]:
    loc = obj.get("loc")
    if loc is None:
        return None
    try:
        start = loc["start"]["line"]
        end = loc["end"]["line"]
    except (KeyError, TypeError):
        raise TreeFormatError("loc must have start.line and end.line", location)
    if not isinstance(start, int) or not isinstance(end, int):
        raise TreeFormatError("loc lines must be integers", location)
    try:
        return Span(start_line=start, end_line=end)
    except ValueError as e:
        raise TreeFormatError(str(e), location)


def _make_node(obj: Dict[str, Any], location: str) -> Tuple[SyntaxNode, List[_Pending]]:
    tag = obj.get("type")
    if not isinstance(tag, str):
        raise TreeFormatError("node is missing a string 'type'", location)

    node = SyntaxNode(kind=NodeKind.from_tag(tag), span=_span(obj, location), tag=tag)
    pending: List[_Pending] = []

    for key, value in obj.items():
        if key in NON_CHILD_KEYS:
            continue
        where = f"{location}.{key}"
        if _is_node(value):
            node.fields[key] = None
            pending.append((value, node, key, None, where))
        elif isinstance(value, list) and (not value or any(_is_node(v) for v in value)):
            # Holes (`[a, , b]`) and stray scalars are dropped from node lists
            items = [v for v in value if _is_node(v)]
            node.fields[key] = [None] * len(items)
            for index, item in enumerate(items):
                pending.append((item, node, key, index, f"{where}[{index}]"))
        elif value is None and key in ("body", "superClass", "test", "id"):
            node.fields[key] = None
        else:
            node.attrs[key] = value

    return node, pending


def load_tree(document: Dict[str, Any]) -> SyntaxTree:
    """Convert a parsed ESTree document into a SyntaxTree.

    Raises:
        TreeFormatError: If the document is not a tree of typed nodes
    """
    if not isinstance(document, dict):
        raise TreeFormatError(f"expected a JSON object, got {type(document).__name__}", "$")

    root, stack = _make_node(document, "$")
    count = 1
    while stack:
        child_doc, owner, key, index, location = stack.pop()
        child, more = _make_node(child_doc, location)
        if index is None:
            owner.fields[key] = child
        else:
            owner.fields[key][index] = child  # type: ignore[index]
        stack.extend(more)
        count += 1

    logger.debug(f"Loaded {count} nodes (root {root.tag})")
    return SyntaxTree.from_root(root)


def load_tree_file(path: Union[str, Path]) -> SyntaxTree:
    """Read and convert an ESTree JSON file.

    Raises:
        FileAccessError: If the file cannot be read
        TreeFormatError: If the content is not valid JSON or not a tree
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise FileAccessError(path, str(e))
    try:
        document = json.loads(text)
    except json.JSONDecodeError as e:
        raise TreeFormatError(f"invalid JSON: {e.msg} at line {e.lineno}", str(path))
    return load_tree(document)
