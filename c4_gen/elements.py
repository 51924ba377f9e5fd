# c4_gen/elements.py
"""C4 element model.

Leaf elements (Person, System, Container, Database, Queue, Component) are
immutable values. Boundaries and deployment nodes own an ordered list of child
elements and can be nested to any depth.

Nothing here validates identifiers: an id must be unique across a diagram for
PlantUML to draw every shape, but that is left to the caller (see
c4_gen.validate for an opt-in check).
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Sequence, Union


def freeze_technologies(values: Iterable[str] | str | None) -> tuple[str, ...]:
    """Return technologies as a tuple; a bare string is one technology."""
    if isinstance(values, str):
        return (values,)
    return tuple(values or ())


@dataclass(frozen=True)
class Person:
    """A user or persona that interacts with the system."""

    id: str
    name: str = ""
    description: str = ""
    external: bool = False


@dataclass(frozen=True)
class System:
    """The highest level of abstraction: something that delivers value to its users."""

    id: str
    name: str = ""
    description: str = ""
    external: bool = False

    def boundary(self) -> "SystemBoundary":
        """Return an empty system boundary that groups containers of this system."""
        return SystemBoundary(self)


@dataclass(frozen=True)
class Container:
    """A separately runnable/deployable unit (SPA, API, mobile app, ...).

    Databases and queues have their own types since they render with
    dedicated macros.
    """

    id: str
    name: str = ""
    description: str = ""
    technologies: Sequence[str] = ()
    external: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "technologies", freeze_technologies(self.technologies))

    def boundary(self) -> "ContainerBoundary":
        """Return an empty container boundary that groups components of this container."""
        return ContainerBoundary(self)


@dataclass(frozen=True)
class Database:
    id: str
    name: str = ""
    description: str = ""
    technologies: Sequence[str] = ()
    external: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "technologies", freeze_technologies(self.technologies))


@dataclass(frozen=True)
class Queue:
    id: str
    name: str = ""
    description: str = ""
    technologies: Sequence[str] = ()
    external: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "technologies", freeze_technologies(self.technologies))


@dataclass(frozen=True)
class Component:
    """A constituent piece of a container (controller, model, package, ...)."""

    id: str
    name: str = ""
    description: str = ""
    technologies: Sequence[str] = ()
    external: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "technologies", freeze_technologies(self.technologies))


@dataclass(frozen=True)
class Property:
    """A name/value pair describing an aspect of a deployment node."""

    name: str
    value: str


class Boundary:
    """Mixin for elements that own an ordered list of children.

    Appending never touches the child: no back-reference is kept, so the same
    element may be added to several parents (it will then be drawn twice).
    """

    elements: list["Element"]

    def add_element(self, el: "Element") -> None:
        self.elements.append(el)

    def add_elements(self, *els: "Element") -> None:
        for el in els:
            self.add_element(el)


@dataclass(eq=False)
class SystemBoundary(Boundary):
    system: System
    elements: list["Element"] = field(default_factory=list)

    @property
    def id(self) -> str:
        return self.system.id

    @property
    def name(self) -> str:
        return self.system.name


@dataclass(eq=False)
class ContainerBoundary(Boundary):
    container: Container
    elements: list["Element"] = field(default_factory=list)

    @property
    def id(self) -> str:
        return self.container.id

    @property
    def name(self) -> str:
        return self.container.name


@dataclass(eq=False)
class EnterpriseBoundary(Boundary):
    """Groups elements belonging to a common enterprise."""

    id: str
    name: str = ""
    elements: list["Element"] = field(default_factory=list)


@dataclass(eq=False)
class DeploymentNode(Boundary):
    """Where an instance of a system/container runs (VM, pod, server, ...)."""

    id: str
    name: str = ""
    node_type: str = ""
    description: str = ""
    properties: list[Property] = field(default_factory=list)
    elements: list["Element"] = field(default_factory=list)

    def __post_init__(self) -> None:
        # Never alias the caller's lists.
        self.properties = list(self.properties)
        self.elements = list(self.elements)


Element = Union[
    Person,
    System,
    Container,
    Database,
    Queue,
    Component,
    DeploymentNode,
    SystemBoundary,
    ContainerBoundary,
    EnterpriseBoundary,
]


def iter_elements(elements: Iterable[Element]) -> Iterable[Element]:
    """Yield every element of a tree depth-first, parents before children."""
    for el in elements:
        yield el
        if isinstance(el, Boundary):
            yield from iter_elements(el.elements)
