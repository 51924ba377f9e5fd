from __future__ import annotations


class C4Error(Exception):
    """Base class for errors raised by c4_gen."""


class UnsupportedElementError(C4Error, TypeError):
    """Raised when the renderer meets a value outside its closed element set.

    This indicates a programming error (a new element type that the renderer
    does not know about), not bad input data.
    """

    def __init__(self, item: object) -> None:
        self.item = item
        super().__init__(
            f"cannot create plantuml: invalid item type: {type(item).__name__}"
        )


class ModelError(C4Error, ValueError):
    """Raised for malformed YAML architecture models."""
