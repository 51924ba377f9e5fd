# c4_gen/validate.py
from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterable, Literal, Optional, Tuple

from .constants import DIRECTIONS
from .elements import Boundary, DeploymentNode, Element, Person, System
from .puml_fmt import PUML_ALIAS_RE
from .relations import Relation

if TYPE_CHECKING:
    from .diagram import Diagram

Severity = Literal["error", "warning"]


@dataclass(frozen=True)
class ValidationIssue:
    """Structured validation issue for callers that want more than strings."""

    severity: Severity
    code: str
    message: str
    path: str = ""
    hint: Optional[str] = None


@dataclass(frozen=True)
class ValidateConfig:
    """Validation configuration.

    Rendering never runs these checks; they are for callers (the CLI, CI) that
    want to catch diagrams PlantUML would draw wrongly.
    """

    # Rule controls
    ignore: set[str] = field(default_factory=set)
    escalate: set[str] = field(default_factory=set)

    # PlantUML-breaker guards
    check_alias_safe_ids: bool = True
    check_quotes_in_text: bool = True


def _walk(
    elements: Iterable[Element], path: str
) -> Iterable[tuple[str, Element]]:
    for i, el in enumerate(elements):
        el_path = f"{path}/{i}"
        yield el_path, el
        if isinstance(el, Boundary):
            yield from _walk(el.elements, f"{el_path}/elements")


def _text_fields(el: Element) -> list[tuple[str, str]]:
    out = [("name", getattr(el, "name", ""))]
    if not isinstance(el, Boundary) or isinstance(el, DeploymentNode):
        out.append(("description", getattr(el, "description", "")))
    if isinstance(el, DeploymentNode):
        out.append(("type", el.node_type))
        for i, prop in enumerate(el.properties):
            out.append((f"properties/{i}/name", prop.name))
            out.append((f"properties/{i}/value", prop.value))
    if not isinstance(el, (Person, System)):
        out.extend(("technologies", t) for t in getattr(el, "technologies", ()))
    return out


def validate_diagram_issues(
    diagram: "Diagram", cfg: Optional[ValidateConfig] = None
) -> list[ValidationIssue]:
    """Return structured validation issues.

    This is the canonical validator. `validate_diagram()` is the string-based
    wrapper used by the CLI.
    """

    cfg = cfg or ValidateConfig()
    issues: list[ValidationIssue] = []

    def emit(
        severity: Severity,
        code: str,
        message: str,
        path: str = "",
        hint: Optional[str] = None,
    ) -> None:
        if code in cfg.ignore:
            return
        final_severity: Severity = (
            "error" if (severity == "warning" and code in cfg.escalate) else severity
        )
        issues.append(
            ValidationIssue(
                severity=final_severity,
                code=code,
                message=message,
                path=path,
                hint=hint,
            )
        )

    walked = list(_walk(diagram.elements, "/elements"))
    counts = Counter(el.id for _, el in walked)
    reported: set[str] = set()
    registered: set[str] = set()

    for path, el in walked:
        registered.add(el.id)
        if counts[el.id] > 1 and el.id not in reported:
            reported.add(el.id)
            emit(
                "error",
                "E_DUPLICATE_ID",
                f"element id {el.id!r} is used {counts[el.id]} times; "
                "PlantUML will merge these shapes",
                path=path,
                hint="give every element a unique id",
            )

        if cfg.check_alias_safe_ids and not PUML_ALIAS_RE.match(el.id):
            emit(
                "error",
                "E_ID_NOT_ALIAS_SAFE",
                f"element id {el.id!r} is not a valid PlantUML alias "
                "(use [A-Za-z0-9_] and cannot start with a digit)",
                path=f"{path}/id",
            )

        if cfg.check_quotes_in_text:
            for name, text in _text_fields(el):
                if '"' in text:
                    emit(
                        "warning",
                        "W_QUOTE_IN_TEXT",
                        f"element {el.id!r} {name} contains a double quote; "
                        "this ends the macro argument early",
                        path=f"{path}/{name}",
                    )

        if isinstance(el, Boundary) and not el.elements:
            emit(
                "warning",
                "W_EMPTY_BOUNDARY",
                f"{type(el).__name__} {el.id!r} has no children",
                path=f"{path}/elements",
            )

    def check_edges(section: str, edges: Iterable[Relation]) -> None:
        for i, edge in enumerate(edges):
            path = f"/{section}/{i}"
            for end, el in (("src", edge.src), ("dst", edge.dst)):
                if el.id not in registered:
                    emit(
                        "warning",
                        "W_DANGLING_EDGE",
                        f"{section[:-1]} {end} {el.id!r} is not part of the diagram; "
                        "it will not be drawn",
                        path=f"{path}/{end}",
                    )
            if edge.src is edge.dst:
                emit(
                    "warning",
                    "W_SELF_RELATION",
                    f"{section[:-1]} from {edge.src.id!r} to itself",
                    path=path,
                )
            direction = getattr(edge.direction, "value", edge.direction)
            if direction and direction not in DIRECTIONS:
                emit(
                    "warning",
                    "W_UNKNOWN_DIRECTION",
                    f"{section[:-1]} direction {direction!r} is not one of "
                    f"{', '.join(DIRECTIONS)}",
                    path=f"{path}/direction",
                )
            if cfg.check_quotes_in_text and '"' in edge.description:
                emit(
                    "warning",
                    "W_QUOTE_IN_TEXT",
                    f"{section[:-1]} description contains a double quote; "
                    "this ends the macro argument early",
                    path=f"{path}/description",
                )

    check_edges("relations", diagram.relations)
    check_edges("steps", diagram.steps)

    return issues


def validate_diagram(diagram: "Diagram") -> Tuple[list[str], list[str]]:
    """Lightweight structural checks; returns (errors, warnings) as strings."""
    issues = validate_diagram_issues(diagram)
    errors = [iss.message for iss in issues if iss.severity == "error"]
    warnings = [iss.message for iss in issues if iss.severity == "warning"]
    return errors, warnings
