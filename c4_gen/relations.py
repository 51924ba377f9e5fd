# c4_gen/relations.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence, Union

from .elements import Element, freeze_technologies


class Direction(str, Enum):
    """Arrow-key hint PlantUML uses when laying out a relation."""

    UP = "Up"
    DOWN = "Down"
    LEFT = "Left"
    RIGHT = "Right"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Relation:
    """A directed, described edge between two elements.

    The description is the verb phrase in the indicative tense from the
    perspective of the source ("Src uses Dst"). Technologies describe the
    interaction, e.g. "JSON/HTTPS".

    Direction is interpolated as-is into the macro name; only the Direction
    members are meaningful to PlantUML, but other strings are not rejected.
    """

    src: Element
    dst: Element
    description: str = ""
    technologies: Sequence[str] = ()
    direction: Optional[Union[Direction, str]] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "technologies", freeze_technologies(self.technologies))


@dataclass(frozen=True)
class Step(Relation):
    """A relation that is part of an ordered, dynamic narrative."""

