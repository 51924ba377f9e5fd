# c4_gen/render.py
"""C4-PlantUML serialization engine.

Every element, relation and step maps to exactly one macro call (boundaries
and deployment nodes to an opening block, their children, and a closing
brace). The walk preserves insertion order everywhere, so the same model
always renders to the same bytes.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from .constants import (
    C4_INCLUDES,
    EDGE_TECH_SEP,
    ELEMENT_TECH_SEP,
    EXT_SUFFIX,
)
from .elements import (
    Component,
    Container,
    ContainerBoundary,
    Database,
    DeploymentNode,
    EnterpriseBoundary,
    Person,
    Queue,
    System,
    SystemBoundary,
)
from .errors import UnsupportedElementError
from .puml_fmt import (
    join_technologies,
    puml_block_close,
    puml_block_open,
    puml_call,
    puml_include,
    puml_indent,
    puml_named_arg,
    puml_str,
)
from .relations import Relation

if TYPE_CHECKING:
    from .diagram import Diagram
    from .theme import Theme

# Leaf macro names by type. Databases and queues use the dedicated container
# macros.
LEAF_MACROS: dict[type, str] = {
    Person: "Person",
    System: "System",
    Container: "Container",
    Database: "ContainerDb",
    Queue: "ContainerQueue",
    Component: "Component",
}

BOUNDARY_MACROS: dict[type, str] = {
    SystemBoundary: "System_Boundary",
    ContainerBoundary: "Container_Boundary",
    EnterpriseBoundary: "Enterprise_Boundary",
}


def _macro_for(el: object, macros: dict[type, str]) -> str:
    for cls, macro in macros.items():
        if isinstance(el, cls):
            return macro
    raise UnsupportedElementError(el)


def _token(value: object) -> str:
    # Enum members render as their value; plain strings pass through.
    return str(getattr(value, "value", value))


def _leaf_macro(el: object) -> str:
    macro = _macro_for(el, LEAF_MACROS)
    if getattr(el, "external", False):
        macro += EXT_SUFFIX
    return macro


def _children_lines(children: Iterable[object], depth: int) -> list[str]:
    lines: list[str] = []
    for child in children:
        lines.extend(element_lines(child, depth=depth))
    return lines


def element_lines(el: object, *, depth: int = 0) -> list[str]:
    """Render one element (and, for boundaries and nodes, its subtree).

    Children are indented one tab deeper than their parent.
    Raises UnsupportedElementError for anything outside the element model.
    """

    if isinstance(el, (Person, System)):
        line = puml_call(
            _leaf_macro(el), el.id, puml_str(el.name), puml_str(el.description)
        )
        return [puml_indent(line, depth)]

    if isinstance(el, (Container, Database, Queue, Component)):
        technologies = join_technologies(el.technologies, ELEMENT_TECH_SEP)
        line = puml_call(
            _leaf_macro(el),
            el.id,
            puml_str(el.name),
            puml_str(technologies),
            puml_str(el.description),
        )
        return [puml_indent(line, depth)]

    if isinstance(el, (SystemBoundary, ContainerBoundary, EnterpriseBoundary)):
        macro = _macro_for(el, BOUNDARY_MACROS)
        lines = [puml_indent(puml_block_open(macro, el.id, puml_str(el.name)), depth)]
        lines.extend(_children_lines(el.elements, depth + 1))
        lines.append(puml_indent(puml_block_close(), depth))
        return lines

    if isinstance(el, DeploymentNode):
        lines = [
            puml_indent(
                puml_call("AddProperty", puml_str(prop.name), puml_str(prop.value)),
                depth,
            )
            for prop in el.properties
        ]
        lines.append(
            puml_indent(
                puml_block_open(
                    "Deployment_Node",
                    el.id,
                    puml_str(el.name),
                    puml_str(el.node_type),
                    puml_str(el.description),
                ),
                depth,
            )
        )
        lines.extend(_children_lines(el.elements, depth + 1))
        lines.append(puml_indent(puml_block_close(), depth))
        return lines

    raise UnsupportedElementError(el)


def edge_line(edge: object) -> str:
    """Render a Relation or Step as a single Rel / Rel_<Direction> call."""
    if not isinstance(edge, Relation):
        raise UnsupportedElementError(edge)

    macro = "Rel"
    if edge.direction:
        macro = f"Rel_{_token(edge.direction)}"
    return puml_call(
        macro,
        edge.src.id,
        edge.dst.id,
        puml_str(edge.description),
        puml_str(join_technologies(edge.technologies, EDGE_TECH_SEP)),
    )


def preamble_lines(title: str, layout: object, theme: "Theme", *, sketch: bool = False) -> list[str]:
    lines: list[str] = [f"@startuml {title}"]
    lines.extend(puml_include(url) for url in C4_INCLUDES)
    lines += ["", "WithoutPropertyHeader()", "", f"{_token(layout)}()"]
    if sketch:
        lines.append("LAYOUT_AS_SKETCH()")
    lines.append("")
    for category, palette in theme.palettes():
        lines.append(
            puml_call(
                "UpdateElementStyle",
                category,
                puml_named_arg("bgColor", palette.background_color),
                puml_named_arg("fontColor", palette.font_color),
            )
        )
    return lines


def epilogue_lines(*, hide_element_types: bool = False, legend: bool = False) -> list[str]:
    lines: list[str] = []
    if hide_element_types:
        lines += ["HIDE_STEREOTYPE()", ""]
    if legend:
        # Always false: hiding stereotypes is its own option.
        lines += ["SHOW_LEGEND($hideStereotype=false)", ""]
    lines.append("@enduml")
    return lines


def render_diagram(diagram: "Diagram") -> str:
    """Render a whole diagram to a C4-PlantUML document.

    Pure with respect to the model. Either the complete document is returned
    or an exception propagates; there is no partial result.
    """

    lines = preamble_lines(
        diagram.title, diagram.layout, diagram.theme, sketch=diagram.sketch
    )
    for el in diagram.elements:
        lines.extend(element_lines(el))
    lines.extend(edge_line(rel) for rel in diagram.relations)
    lines.extend(edge_line(step) for step in diagram.steps)
    lines.extend(
        epilogue_lines(
            hide_element_types=diagram.hide_element_types, legend=diagram.legend
        )
    )
    return "\n".join(lines) + "\n"
