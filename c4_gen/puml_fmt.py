from __future__ import annotations

import re
from typing import Iterable

# PlantUML aliases must be word characters and must not start with a digit.
PUML_ALIAS_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def puml_block(code: str) -> str:
    """Wrap PlantUML source in a Markdown PlantUML code fence."""
    return "```plantuml\n" + code.rstrip() + "\n```\n"


def puml_str(text: object) -> str:
    """Quote text as a PlantUML macro string argument.

    Text is passed through verbatim; the C4 macros accept whatever PlantUML
    accepts inside double quotes.
    """
    return f'"{text}"'


def join_technologies(technologies: Iterable[str], sep: str) -> str:
    return sep.join(technologies)


def puml_call(macro: str, *args: str) -> str:
    # e.g. Container(api, "API", "Go", "Serves the UI")
    return f"{macro}({', '.join(args)})"


def puml_named_arg(name: str, value: object) -> str:
    return f"${name}={puml_str(value)}"


def puml_include(url: str) -> str:
    return f"!include {url}"


def puml_block_open(macro: str, *args: str) -> str:
    # e.g. System_Boundary(c1, "Sample System") {
    return puml_call(macro, *args) + " {"


def puml_block_close() -> str:
    return "}"


def puml_indent(line: str, depth: int) -> str:
    return "\t" * depth + line
