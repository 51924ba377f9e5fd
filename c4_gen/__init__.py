"""Describe software architecture with the C4 model and render it as C4-PlantUML.

    >>> from c4_gen import Diagram, Person, System, Direction
    >>> alice = Person("alice", "Alice", "A customer")
    >>> orders = System("orders", "Orders", "Order management")
    >>> d = Diagram("Context")
    >>> d.add_elements(alice, orders)
    >>> _ = d.new_relation(alice, orders, "Places orders using", ["HTTPS"], Direction.DOWN)
    >>> print(d.to_plantuml())  # doctest: +SKIP

Identifiers must be unique within a diagram; PlantUML merges shapes that share
one. Use c4_gen.validate to check a diagram before rendering.
"""
from .diagram import DEFAULT_LAYOUT, Diagram, Layout
from .elements import (
    Boundary,
    Component,
    Container,
    ContainerBoundary,
    Database,
    DeploymentNode,
    Element,
    EnterpriseBoundary,
    Person,
    Property,
    Queue,
    System,
    SystemBoundary,
)
from .errors import C4Error, ModelError, UnsupportedElementError
from .relations import Direction, Relation, Step
from .theme import Palette, Theme, default_theme

__all__ = [
    "DEFAULT_LAYOUT",
    "Boundary",
    "C4Error",
    "Component",
    "Container",
    "ContainerBoundary",
    "Database",
    "DeploymentNode",
    "Diagram",
    "Direction",
    "Element",
    "EnterpriseBoundary",
    "Layout",
    "ModelError",
    "Palette",
    "Person",
    "Property",
    "Queue",
    "Relation",
    "Step",
    "System",
    "SystemBoundary",
    "Theme",
    "UnsupportedElementError",
    "default_theme",
]
