# c4_gen/cli.py
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from .diagram import Diagram
from .io import load_model
from .model_view import build_diagram
from .samples import SAMPLES, SampleConfig, get_sample
from .validate import validate_diagram
from .writer import write_document


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="c4-gen",
        description="Render C4-PlantUML diagrams from a YAML architecture model.",
    )
    parser.add_argument(
        "model",
        type=Path,
        nargs="?",
        help="Path to a YAML model file or a split model directory.",
    )
    parser.add_argument(
        "--sample",
        type=str,
        default=None,
        help="Render a built-in sample diagram instead of a model.",
    )
    parser.add_argument(
        "--list-samples",
        action="store_true",
        help="List the built-in sample diagrams and exit.",
    )
    parser.add_argument(
        "--all-samples",
        action="store_true",
        help="Write every built-in sample into --out-dir.",
    )
    parser.add_argument(
        "--out",
        type=Path,
        default=None,
        help="Output file (default: stdout). A .md suffix wraps the document in Markdown.",
    )
    parser.add_argument(
        "--out-dir",
        type=Path,
        default=Path("diagrams"),
        help="Output directory for --all-samples.",
    )
    parser.add_argument(
        "--title",
        type=str,
        default=None,
        help="Override the diagram title from the model.",
    )
    parser.add_argument(
        "--sketch",
        action="store_true",
        help="Render in sketch style.",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help=(
            "Fail on validation warnings (e.g. dangling relations, unknown "
            "directions). Errors always fail."
        ),
    )
    return parser


def _check(diagram: Diagram, *, strict: bool, label: str) -> None:
    errors, warnings = validate_diagram(diagram)
    for warning in warnings:
        print(f"warning: {label}: {warning}", file=sys.stderr)

    if errors or (strict and warnings):
        for error in errors:
            print(f"error: {label}: {error}", file=sys.stderr)
        raise SystemExit(2)


def main(argv: Optional[Sequence[str]] = None) -> None:
    """CLI entrypoint."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.list_samples:
        for spec in SAMPLES:
            print(f"{spec.sample_id}\t{spec.title}")
        return

    cfg = SampleConfig(sketch=args.sketch)

    if args.all_samples:
        for spec in SAMPLES:
            diagram = spec.build(cfg)
            _check(diagram, strict=args.strict, label=spec.sample_id)
            write_document(args.out_dir / spec.filename, spec.title, diagram.to_plantuml())
        return

    if args.sample:
        try:
            spec = get_sample(args.sample)
        except KeyError as e:
            parser.error(str(e.args[0]))
        diagram = spec.build(cfg)
        label = spec.sample_id
    elif args.model is not None:
        diagram = build_diagram(load_model(args.model), title=args.title)
        label = str(args.model)
    else:
        parser.error("either a model path or --sample is required")

    if args.sketch:
        diagram.sketch = True
    if args.title is not None:
        diagram.title = args.title

    _check(diagram, strict=args.strict, label=label)

    document = diagram.to_plantuml()
    if args.out is None:
        sys.stdout.write(document)
    else:
        write_document(args.out, diagram.title, document)
