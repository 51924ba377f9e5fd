# c4_gen/model_view.py
"""Turn a loaded YAML architecture model into a Diagram.

Schema (all sections optional except `elements`):

    diagram:   {title, layout, sketch, legend, hide_element_types}
    theme:     {system|container|component|person: {background, font}}
    elements:  [{kind, id, name, description, technologies, external,
                 type, properties: [{name, value}], elements: [...]}]
    relations: [{from, to, description, technologies, direction}]
    steps:     same shape as relations
"""
from __future__ import annotations

from typing import Any, Callable, Optional

from .constants import THEME_CATEGORIES
from .diagram import Diagram, Layout
from .elements import (
    Boundary,
    Component,
    Container,
    Database,
    DeploymentNode,
    Element,
    EnterpriseBoundary,
    Person,
    Property,
    Queue,
    System,
    iter_elements,
)
from .errors import ModelError
from .relations import Direction, Relation, Step
from .theme import Palette, Theme

Model = dict[str, Any]


def _require_mapping(val: object, *, path: str) -> dict[str, Any]:
    if not isinstance(val, dict):
        raise ModelError(f"Expected mapping at {path}, got: {type(val).__name__}")
    return val


def _require_list(val: object, *, path: str) -> list[Any]:
    if val is None:
        return []
    if not isinstance(val, list):
        raise ModelError(f"Expected list at {path}, got: {type(val).__name__}")
    return val


def _require_str(val: object, *, path: str) -> str:
    if not isinstance(val, str) or not val:
        raise ModelError(f"Expected non-empty string at {path}, got: {val!r}")
    return val


def _opt_str(val: object, *, path: str) -> str:
    if val is None:
        return ""
    if not isinstance(val, (str, int, float)) or isinstance(val, bool):
        raise ModelError(f"Expected string at {path}, got: {type(val).__name__}")
    return str(val)


def _opt_bool(val: object, *, path: str) -> bool:
    if val is None:
        return False
    if not isinstance(val, bool):
        raise ModelError(f"Expected true/false at {path}, got: {val!r}")
    return val


def _technologies(val: object, *, path: str) -> tuple[str, ...]:
    # A single technology may be written as a bare string.
    if isinstance(val, str):
        return (val,)
    return tuple(
        _opt_str(t, path=f"{path}/{i}") for i, t in enumerate(_require_list(val, path=path))
    )


def _leaf(cls: type) -> Callable[[dict[str, Any], str], Element]:
    def build(item: dict[str, Any], path: str) -> Element:
        kwargs: dict[str, Any] = {
            "name": _opt_str(item.get("name"), path=f"{path}/name"),
            "description": _opt_str(item.get("description"), path=f"{path}/description"),
            "external": _opt_bool(item.get("external"), path=f"{path}/external"),
        }
        if cls not in (Person, System):
            kwargs["technologies"] = _technologies(
                item.get("technologies"), path=f"{path}/technologies"
            )
        return cls(_require_str(item.get("id"), path=f"{path}/id"), **kwargs)

    return build


def _system_boundary(item: dict[str, Any], path: str) -> Element:
    return _leaf(System)(item, path).boundary()  # type: ignore[union-attr]


def _container_boundary(item: dict[str, Any], path: str) -> Element:
    return _leaf(Container)(item, path).boundary()  # type: ignore[union-attr]


def _enterprise_boundary(item: dict[str, Any], path: str) -> Element:
    return EnterpriseBoundary(
        _require_str(item.get("id"), path=f"{path}/id"),
        name=_opt_str(item.get("name"), path=f"{path}/name"),
    )


def _deployment_node(item: dict[str, Any], path: str) -> Element:
    properties = []
    for i, prop in enumerate(_require_list(item.get("properties"), path=f"{path}/properties")):
        prop_path = f"{path}/properties/{i}"
        prop = _require_mapping(prop, path=prop_path)
        properties.append(
            Property(
                name=_opt_str(prop.get("name"), path=f"{prop_path}/name"),
                value=_opt_str(prop.get("value"), path=f"{prop_path}/value"),
            )
        )
    return DeploymentNode(
        _require_str(item.get("id"), path=f"{path}/id"),
        name=_opt_str(item.get("name"), path=f"{path}/name"),
        node_type=_opt_str(item.get("type"), path=f"{path}/type"),
        description=_opt_str(item.get("description"), path=f"{path}/description"),
        properties=properties,
    )


ELEMENT_BUILDERS: dict[str, Callable[[dict[str, Any], str], Element]] = {
    "person": _leaf(Person),
    "system": _leaf(System),
    "container": _leaf(Container),
    "database": _leaf(Database),
    "queue": _leaf(Queue),
    "component": _leaf(Component),
    "system_boundary": _system_boundary,
    "container_boundary": _container_boundary,
    "enterprise_boundary": _enterprise_boundary,
    "deployment_node": _deployment_node,
}


def build_element(item: object, *, path: str) -> Element:
    """Build one element (recursively, for boundaries and deployment nodes)."""
    item = _require_mapping(item, path=path)
    kind = _require_str(item.get("kind"), path=f"{path}/kind")
    builder = ELEMENT_BUILDERS.get(kind)
    if builder is None:
        raise ModelError(
            f"Unknown element kind {kind!r} at {path}/kind "
            f"(expected one of: {', '.join(ELEMENT_BUILDERS)})"
        )

    el = builder(item, path)
    children = _require_list(item.get("elements"), path=f"{path}/elements")
    if children and not isinstance(el, Boundary):
        raise ModelError(f"Element kind {kind!r} cannot have children at {path}/elements")
    for i, child in enumerate(children):
        el.add_element(build_element(child, path=f"{path}/elements/{i}"))  # type: ignore[union-attr]
    return el


def build_theme(val: object) -> Optional[Theme]:
    if val is None:
        return None
    theme_map = _require_mapping(val, path="/theme")
    palettes: dict[str, Palette] = {}
    for category, raw in theme_map.items():
        if category not in THEME_CATEGORIES:
            raise ModelError(
                f"Unknown theme category {category!r} "
                f"(expected one of: {', '.join(THEME_CATEGORIES)})"
            )
        entry = _require_mapping(raw, path=f"/theme/{category}")
        palettes[category] = Palette(
            background_color=_require_str(
                entry.get("background"), path=f"/theme/{category}/background"
            ),
            font_color=_require_str(entry.get("font"), path=f"/theme/{category}/font"),
        )
    return Theme(**palettes)


def _layout(val: object) -> Layout:
    if val is None:
        return Layout.TOP_DOWN
    name = _require_str(val, path="/diagram/layout")
    try:
        return Layout[name.upper().replace("-", "_")]
    except KeyError:
        pass
    try:
        return Layout(name)
    except ValueError:
        raise ModelError(f"Unknown layout {name!r} at /diagram/layout") from None


def _direction(val: object, *, path: str) -> Optional[Direction | str]:
    if val is None or val == "":
        return None
    name = _require_str(val, path=path)
    try:
        return Direction(name.capitalize())
    except ValueError:
        # Passed through unchanged; the validator reports it.
        return name


def _edges(
    model: Model, section: str, cls: type, index: dict[str, Element]
) -> list[Relation]:
    out: list[Relation] = []
    for i, raw in enumerate(_require_list(model.get(section), path=f"/{section}")):
        path = f"/{section}/{i}"
        edge = _require_mapping(raw, path=path)
        ends = []
        for key in ("from", "to"):
            ref = _require_str(edge.get(key), path=f"{path}/{key}")
            if ref not in index:
                raise ModelError(f"{path}/{key} references unknown element id {ref!r}")
            ends.append(index[ref])
        out.append(
            cls(
                src=ends[0],
                dst=ends[1],
                description=_opt_str(edge.get("description"), path=f"{path}/description"),
                technologies=_technologies(
                    edge.get("technologies"), path=f"{path}/technologies"
                ),
                direction=_direction(edge.get("direction"), path=f"{path}/direction"),
            )
        )
    return out


def build_diagram(model: Model, *, title: Optional[str] = None) -> Diagram:
    """Build a Diagram from a loaded YAML model."""
    meta = model.get("diagram")
    meta = _require_mapping(meta, path="/diagram") if meta is not None else {}

    d = Diagram(
        title if title is not None else _opt_str(meta.get("title"), path="/diagram/title"),
        layout=_layout(meta.get("layout")),
        theme=build_theme(model.get("theme")),
        sketch=_opt_bool(meta.get("sketch"), path="/diagram/sketch"),
        legend=_opt_bool(meta.get("legend"), path="/diagram/legend"),
        hide_element_types=_opt_bool(meta.get("hide_element_types"), path="/diagram/hide_element_types"),
    )

    for i, item in enumerate(_require_list(model.get("elements"), path="/elements")):
        d.add_element(build_element(item, path=f"/elements/{i}"))

    # First definition wins; duplicates are left for the validator to report.
    index: dict[str, Element] = {}
    for el in iter_elements(d.elements):
        index.setdefault(el.id, el)

    for rel in _edges(model, "relations", Relation, index):
        d.add_relation(rel)
    d.add_steps(*_edges(model, "steps", Step, index))  # type: ignore[arg-type]
    return d
