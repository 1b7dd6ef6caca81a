"""Key resolution against a single message tree.

Two kinds of lookup keys are supported:

- Phrase keys contain more than one whitespace-separated word. They are
  looked up verbatim as a top-level entry, and serve as their own default
  text when the entry is absent ("Save changes" -> "Save changes").
- Path keys are a single token. They are split on ``.`` and walked through
  nested nodes ("errors.not_found" -> tree["errors"]["not_found"]).

Example:
    >>> tree = {"errors": {"not_found": "Not found"}}
    >>> resolve_key("errors.not_found", tree)
    'Not found'
    >>> resolve_key("errors.missing", tree) is None
    True
    >>> resolve_key("Save changes", tree)
    'Save changes'
"""

from __future__ import annotations

from transchoice.types import MessageTree, is_message_tree

PATH_SEPARATOR = "."


def word_count(key: str) -> int:
    """Count whitespace-delimited words, ignoring repeated whitespace."""
    return len(key.split())


def is_phrase_key(key: str) -> bool:
    """Check whether a key is compared verbatim rather than walked as a path."""
    return word_count(key) > 1


def resolve_path(tree: MessageTree, key: str) -> str | None:
    """Walk a dotted path through nested message nodes.

    Args:
        tree: Message tree to walk
        key: Dotted path (e.g., "user.profile.name")

    Returns:
        The leaf string, or None when a segment is missing or the path
        ends on a nested node instead of a string.
    """
    node: object = tree
    for segment in key.split(PATH_SEPARATOR):
        if not is_message_tree(node) or segment not in node:
            return None
        node = node[segment]

    if isinstance(node, str):
        return node
    return None


def resolve_phrase(tree: MessageTree, key: str) -> str:
    """Look up a phrase key as a literal top-level entry, defaulting to itself."""
    value = tree.get(key)
    if isinstance(value, str):
        return value
    return key


def resolve_key(key: str, tree: MessageTree) -> str | None:
    """Resolve a lookup key against one message tree.

    Args:
        key: Phrase key or path key
        tree: Message tree of a single locale

    Returns:
        Stored string. Phrase keys always resolve (to themselves at worst);
        path keys return None when not found.
    """
    if is_phrase_key(key):
        return resolve_phrase(tree, key)
    return resolve_path(tree, key)


__all__ = [
    "PATH_SEPARATOR",
    "word_count",
    "is_phrase_key",
    "resolve_path",
    "resolve_phrase",
    "resolve_key",
]
