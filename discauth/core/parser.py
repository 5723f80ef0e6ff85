"""JSON helpers for Discord API response bodies."""

import json
from typing import Any

from discauth.exceptions import ParseError


def parse_body(body: str | bytes | None) -> Any:
    """
    Decode a raw response body.

    Raises:
        ParseError: If the body is empty or not valid JSON
    """
    if not body:
        raise ParseError("Empty response body")
    try:
        return json.loads(body)
    except (TypeError, ValueError, RecursionError) as e:
        raise ParseError(f"Invalid JSON body: {e}") from e


def _unwrap(tree: Any) -> dict | None:
    if isinstance(tree, list):
        if tree and isinstance(tree[0], dict):
            return tree[0]
        return None

    if not isinstance(tree, dict):
        return None

    # {"user": {...}} style envelope
    if "id" not in tree and len(tree) == 1:
        (inner,) = tree.values()
        if isinstance(inner, dict):
            return inner

    return tree


def get_first_node(body: str | bytes | None, path: str | None = None) -> dict | None:
    """
    Locate the first JSON object in a response body.

    Accepts a bare object, an array whose first element is an object, or an
    object wrapping the profile under a single key.

    Args:
        body: Raw response body
        path: Optional dotted path to descend into before unwrapping

    Returns:
        The object node, or None if the body holds no usable object
    """
    try:
        tree = parse_body(body)
    except ParseError:
        return None

    if path:
        tree = get_element(tree, path)
    return _unwrap(tree)


def get_element(node: Any, name: str) -> Any:
    """
    Read a (possibly dotted) field from a JSON object node.

    Returns None when any segment is missing or the value is null.
    """
    current = node
    for part in name.split("."):
        if not isinstance(current, dict):
            return None
        current = current.get(part)
        if current is None:
            return None
    return current
