# shadowgen/cli.py
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional

from .constants import GEN_CLASS
from .generator import GenerationError, GeneratorConfig, ShadowProviderGenerator
from .io import load_model
from .java_fmt import assert_java_ident, assert_java_name
from .model_view import build_shadow_model
from .validate import validate_model
from .writer import write_shadow_provider


def build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate a shadow provider class from a YAML shadow model."
    )
    parser.add_argument(
        "--model",
        type=Path,
        required=True,
        help="Path to a split model directory or a single YAML model file.",
    )
    parser.add_argument(
        "--out-dir",
        type=Path,
        default=Path("generated"),
        help="Source root the provider is written under (package path is appended).",
    )
    parser.add_argument(
        "--package",
        type=str,
        default=None,
        help="Target package of the generated class. Omit to disable generation.",
    )
    parser.add_argument(
        "--class-name",
        type=str,
        default=GEN_CLASS,
        help="Simple name of the generated class.",
    )
    parser.add_argument(
        "--no-instrument-packages",
        dest="instrument_packages",
        action="store_false",
        help="Emit an empty getProvidedPackageNames() regardless of the model.",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail generation on validation warnings (e.g., duplicate real types).",
    )
    parser.add_argument(
        "--stdout",
        action="store_true",
        help="Print the generated source instead of writing it under --out-dir.",
    )
    return parser


def main(argv: Optional[list[str]] = None) -> None:
    """CLI entrypoint."""
    args = build_argument_parser().parse_args(argv)

    cfg = GeneratorConfig(
        package=args.package,
        instrument_packages=args.instrument_packages,
        class_name=args.class_name,
    )
    if cfg.package is None:
        print("no --package given; shadow provider generation skipped")
        return

    try:
        assert_java_name(cfg.package)
        assert_java_ident(cfg.class_name)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        raise SystemExit(2) from e

    try:
        raw_model = load_model(args.model)
    except (OSError, TypeError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        raise SystemExit(2) from e

    errors, warnings = validate_model(raw_model)
    for warning in warnings:
        print(f"warning: {warning}", file=sys.stderr)

    if errors or (args.strict and warnings):
        for error in errors:
            print(f"error: {error}", file=sys.stderr)
        raise SystemExit(2)

    try:
        model = build_shadow_model(raw_model)
    except (TypeError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        raise SystemExit(2) from e

    try:
        if args.stdout:
            ShadowProviderGenerator(cfg).generate(model, sys.stdout)
            return
        path = write_shadow_provider(args.out_dir, model, cfg)
    except GenerationError as e:
        # write_shadow_provider has already reported to stderr.
        if args.stdout:
            print(f"error: {e}", file=sys.stderr)
        raise SystemExit(1) from e
    except ValueError as e:
        # Rendering rejected a name the validator let through.
        print(f"error: {e}", file=sys.stderr)
        raise SystemExit(1) from e

    print(
        f"wrote {path} ({model.association_count} shadows, "
        f"{len(model.resetters)} resetters)"
    )


if __name__ == "__main__":
    main()
