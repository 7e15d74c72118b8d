"""The closed vocabulary of UI primitives the generator may use.

The catalog doubles as the default whitelist and as prompt context, so the
model sees the same names the validator enforces.
"""

import json
from typing import Iterable, Optional

from pydantic import BaseModel


class ComponentSpec(BaseModel):
    """One renderable primitive and the props it accepts."""
    name: str
    description: str
    props: dict[str, str] = {}

    model_config = {"frozen": True}


DEFAULT_COMPONENTS: tuple[ComponentSpec, ...] = (
    ComponentSpec(
        name="Card",
        description="Rounded white container with padding and a shadow",
        props={"children": "nested components"},
    ),
    ComponentSpec(
        name="Input",
        description="Full-width text field",
        props={"placeholder": "string"},
    ),
    ComponentSpec(
        name="Button",
        description="Primary action button",
        props={"label": "string", "onClick": "handler"},
    ),
    ComponentSpec(
        name="Navbar",
        description="Full-width top bar with a title",
        props={"title": "string"},
    ),
    ComponentSpec(
        name="Sidebar",
        description="Vertical navigation column",
        props={"items": "array of strings"},
    ),
    ComponentSpec(
        name="Table",
        description="Bordered data table",
        props={"headers": "array of strings", "rows": "array of arrays of strings"},
    ),
    ComponentSpec(
        name="Modal",
        description="Centered dialog over a dimmed backdrop",
        props={"title": "string", "children": "nested components"},
    ),
    ComponentSpec(
        name="Chart",
        description="Chart placeholder with a heading",
        props={"title": "string"},
    ),
)

_BY_NAME = {c.name: c for c in DEFAULT_COMPONENTS}


def component_names() -> list[str]:
    """Names of every component in the default catalog, in catalog order."""
    return [c.name for c in DEFAULT_COMPONENTS]


def get_component(name: str) -> Optional[ComponentSpec]:
    return _BY_NAME.get(name)


def format_component_list(names: Iterable[str]) -> str:
    """Render names as prose: "Card, Input, and Button"."""
    names = list(names)
    if not names:
        return ""
    if len(names) == 1:
        return names[0]
    if len(names) == 2:
        return f"{names[0]} and {names[1]}"
    return ", ".join(names[:-1]) + f", and {names[-1]}"


def build_component_context(names: Iterable[str]) -> str:
    """Return a JSON listing of the allowed components for prompt injection.

    Names without a catalog entry are listed with an empty description so a
    custom whitelist still reaches the model verbatim.
    """
    items = []
    for name in names:
        spec = _BY_NAME.get(name)
        items.append({
            "name": name,
            "description": spec.description if spec else "",
            "props": dict(spec.props) if spec else {},
        })
    return json.dumps(items, indent=2)
