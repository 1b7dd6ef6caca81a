"""Named placeholder substitution.

Placeholders are written ``{name}``. Each option replaces every literal
occurrence of its own marker; markers without a matching option are left
as they are. Replacement is plain substring replacement, so a substituted
value that itself contains another option's marker is replaced again when
that option comes later in the mapping's order.
"""

from __future__ import annotations

from typing import Any, Mapping


def placeholder(name: str) -> str:
    """Build the marker for a placeholder name."""
    return "{" + name + "}"


def substitute(text: str, options: Mapping[str, Any] | None = None) -> str:
    """Replace ``{name}`` markers with option values.

    Args:
        text: Template text
        options: Placeholder values, applied in iteration order

    Returns:
        Text with every known marker replaced by ``str(value)``

    Example:
        >>> substitute("Hello, {name}!", {"name": "Ada"})
        'Hello, Ada!'
        >>> substitute("{a} and {b}", {"a": 1})
        '1 and {b}'
    """
    if not options:
        return text

    result = text
    for name, value in options.items():
        result = result.replace(placeholder(name), str(value))
    return result


__all__ = ["placeholder", "substitute"]
