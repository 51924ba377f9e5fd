# c4_gen/diagram.py
from __future__ import annotations

from enum import Enum
from typing import Iterable, Optional, TextIO, Union

from .elements import Element
from .relations import Direction, Relation, Step
from .render import render_diagram
from .theme import Theme, default_theme


class Layout(str, Enum):
    """Overall layout flow of the rendered diagram."""

    TOP_DOWN = "LAYOUT_TOP_DOWN"
    PORTRAIT = "LAYOUT_TOP_DOWN"
    LANDSCAPE = "LAYOUT_LANDSCAPE"
    # PlantUML's LAYOUT_LEFT_RIGHT reflects relation directions, so
    # Rel_Down no longer points down. Prefer LANDSCAPE.
    LEFT_RIGHT = "LAYOUT_LEFT_RIGHT"

    def __str__(self) -> str:
        return self.value


DEFAULT_LAYOUT = Layout.TOP_DOWN


class Diagram:
    """Top-level container for elements, relations and steps.

    Elements are only drawn once added with add_element(); relations may point
    at elements that were never added, in which case PlantUML shows nothing
    for them. All sequences keep insertion order, and rendering never mutates
    the diagram, so rendering twice yields identical documents.

    Not thread-safe while being built.
    """

    def __init__(
        self,
        title: str,
        *,
        layout: Union[Layout, str] = DEFAULT_LAYOUT,
        theme: Optional[Theme] = None,
        sketch: bool = False,
        legend: bool = False,
        hide_element_types: bool = False,
    ) -> None:
        self.title = title
        self.layout = layout
        self.theme = theme if theme is not None else default_theme()
        # Sketch style also stamps a "for discussion only" disclaimer.
        self.sketch = sketch
        self.legend = legend
        self.hide_element_types = hide_element_types
        self.elements: list[Element] = []
        self.relations: list[Relation] = []
        self.steps: list[Step] = []

    def __repr__(self) -> str:
        return (
            f"Diagram(title={self.title!r}, elements={len(self.elements)}, "
            f"relations={len(self.relations)}, steps={len(self.steps)})"
        )

    def add_element(self, el: Element) -> None:
        self.elements.append(el)

    def add_elements(self, *els: Element) -> None:
        for el in els:
            self.add_element(el)

    def add_relation(self, rel: Relation) -> None:
        self.relations.append(rel)

    def new_relation(
        self,
        src: Element,
        dst: Element,
        description: str = "",
        technologies: Union[Iterable[str], str] = (),
        direction: Optional[Union[Direction, str]] = None,
    ) -> Relation:
        """Create a relation, add it to the diagram, and return it."""
        rel = Relation(
            src=src,
            dst=dst,
            description=description,
            technologies=technologies,
            direction=direction,
        )
        self.add_relation(rel)
        return rel

    def add_steps(self, *steps: Step) -> None:
        self.steps.extend(steps)

    def new_step(
        self,
        src: Element,
        dst: Element,
        description: str = "",
        technologies: Union[Iterable[str], str] = (),
        direction: Optional[Union[Direction, str]] = None,
    ) -> Step:
        """Create a step, append it to the step sequence, and return it."""
        step = Step(
            src=src,
            dst=dst,
            description=description,
            technologies=technologies,
            direction=direction,
        )
        self.add_steps(step)
        return step

    def to_plantuml(self) -> str:
        """Render the diagram as a C4-PlantUML document."""
        return render_diagram(self)

    def plantuml(self, sink: TextIO) -> None:
        """Render the diagram to a writable text sink.

        The document is rendered completely before anything is written, so a
        failing render leaves the sink untouched.
        """
        sink.write(self.to_plantuml())
