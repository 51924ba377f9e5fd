from __future__ import annotations

from pathlib import Path

from .puml_fmt import puml_block


def write_puml(path: Path, document: str) -> None:
    """Write a rendered PlantUML document as-is."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(document, encoding="utf-8")


def write_md(path: Path, title: str, document: str) -> None:
    """Write a titled Markdown file containing a PlantUML diagram block."""
    path.parent.mkdir(parents=True, exist_ok=True)
    content = f"# {title}\n\n{puml_block(document)}"
    path.write_text(content, encoding="utf-8")


def write_document(path: Path, title: str, document: str) -> None:
    """Dispatch on the file suffix: `.md` gets a Markdown wrapper."""
    if path.suffix.lower() == ".md":
        write_md(path, title, document)
    else:
        write_puml(path, document)
