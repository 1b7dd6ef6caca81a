"""Message tree types.

A message tree is a mapping whose values are either strings (leaves) or
nested message trees (nodes). Dot-delimited keys such as ``errors.not_found``
address leaves through the nested nodes.
"""

from __future__ import annotations

from typing import Any, Mapping, Union

MessageValue = Union[str, "MessageTree"]
MessageTree = Mapping[str, MessageValue]


def is_message_tree(value: Any) -> bool:
    """Check whether a value is a node (rather than a leaf) of a message tree."""
    return isinstance(value, Mapping)


__all__ = ["MessageValue", "MessageTree", "is_message_tree"]
