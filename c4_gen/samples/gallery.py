from __future__ import annotations

from dataclasses import dataclass

from ..diagram import Diagram
from ..elements import (
    Component,
    Container,
    Database,
    DeploymentNode,
    EnterpriseBoundary,
    Person,
    Property,
    Queue,
    System,
)

OPTIONAL = "Optional Description"
TECH = ["Technology"]


@dataclass(frozen=True)
class GalleryConfig:
    sketch: bool = False


def gen_gallery(cfg: GalleryConfig = GalleryConfig()) -> Diagram:
    """One of every element kind, internal and external, plus nesting."""

    d = Diagram("Sketch" if cfg.sketch else "Gallery", legend=True, sketch=cfg.sketch)

    for prefix, external in (("internal", False), ("external", True)):
        label = prefix.capitalize()
        d.add_elements(
            System(f"{prefix}System", f"{label} System", OPTIONAL, external=external),
            Person(f"{prefix}Person", f"{label} Person", OPTIONAL, external=external),
            Container(f"{prefix}Container", f"{label} Container", OPTIONAL, TECH, external),
            Database(f"{prefix}Database", f"{label} Database", OPTIONAL, TECH, external),
            Queue(f"{prefix}Queue", f"{label} Queue", OPTIONAL, TECH, external),
            Component(f"{prefix}Component", f"{label} Component", OPTIONAL, TECH, external),
        )

    system_boundary = System("boundingSystem", "Bounding System", OPTIONAL).boundary()
    system_boundary.add_element(
        Container("boundedContainer", "Bounded Container", OPTIONAL, TECH)
    )
    d.add_element(system_boundary)

    container_boundary = Container("boundingContainer", "Bounding Container", OPTIONAL).boundary()
    container_boundary.add_element(
        Component("boundedComponent", "Bounded Component", OPTIONAL, TECH)
    )
    d.add_element(container_boundary)

    enterprise = EnterpriseBoundary("enterpriseBoundary", "Enterprise Boundary")
    enterprise.add_element(System("boundedSystem", "Bounded System", OPTIONAL))
    d.add_element(enterprise)

    child = DeploymentNode(
        "childNode",
        name="Child Node",
        description="A deployment node inside another node.",
        properties=[Property("Memory", "100Mb"), Property("Storage", "50Gb")],
    )
    child.add_element(
        Container(
            "childContainer",
            "Child Container",
            "A container inside a deployment node.",
            TECH,
        )
    )
    parent = DeploymentNode(
        "parentNode",
        name="Parent Node",
        description="A deployment node containing another node.",
        properties=[Property("Location", "New York")],
    )
    parent.add_element(child)
    d.add_element(parent)

    return d
