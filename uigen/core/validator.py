"""Whitelist gate for generated markup.

Scans for opening-tag signatures (``<`` followed by an uppercase-initial
identifier) and checks each identifier against the allowed set.

This is a syntactic pre-filter, not a parser. It never builds an element tree,
so it cannot see a component referenced outside a tag-open position (e.g.
``{React.createElement(Widget)}``), and it does not check attributes or
nesting. Lowercase tags (``<div>``) are not components and pass through.
"""

import re
from typing import Iterable, Optional

from uigen.components import format_component_list
from uigen.exceptions import WhitelistViolation

TAG_OPEN_PATTERN = re.compile(r"<([A-Z][A-Za-z0-9]*)")


def find_disallowed(markup: str, allowed: Iterable[str]) -> Optional[str]:
    """Return the first component identifier not in `allowed`, or None."""
    allowed_set = set(allowed)
    for match in TAG_OPEN_PATTERN.finditer(markup or ""):
        name = match.group(1)
        if name not in allowed_set:
            return name
    return None


def validate(markup: str, allowed: Iterable[str]) -> bool:
    """True when every opening tag names an allowed component.

    Markup with no component tags at all is valid.
    """
    return find_disallowed(markup, allowed) is None


def ensure_allowed(markup: str, allowed: Iterable[str]) -> None:
    """Raise WhitelistViolation for the first disallowed component."""
    allowed = list(allowed)
    name = find_disallowed(markup, allowed)
    if name is not None:
        raise WhitelistViolation(
            f"Component {name!r} is not in the allowed set",
            component=name,
            details={"allowed": allowed},
        )


def whitelist_warning(allowed: Iterable[str]) -> str:
    """The fixed user-facing message shown when generated markup is rejected."""
    return f"⚠ Invalid component detected. Only {format_component_list(allowed)} are allowed."
