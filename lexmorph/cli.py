# lexmorph/cli.py
"""
Command line front end.

Usage:
    lexmorph classify -- -ing un- "kick the bucket"
    lexmorph classify --json -- =lo
    lexmorph markers --types path/to/morph_types.json
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import List, Optional

from lexmorph.adapters.persistence.morph_types.loader import load_morph_type_repository
from lexmorph.core.domain.exceptions import DomainError
from lexmorph.core.domain.morphology.classifier import MorphTypeClassifier
from lexmorph.shared.container import container
from lexmorph.shared.logging_config import configure_logging
from lexmorph.shared.observability import setup_observability


def _classifier(types_path: Optional[str]) -> MorphTypeClassifier:
    if types_path:
        container.morph_type_repository.override(load_morph_type_repository(types_path))
    return container.classifier()


def cmd_classify(args: argparse.Namespace) -> int:
    classifier = _classifier(args.types)
    failures = 0
    rows = []
    for form in args.forms:
        try:
            result = classifier.classify(form)
        except DomainError as e:
            failures += 1
            rows.append({"input": form, "error": e.message})
            continue
        rows.append({
            "input": form,
            "morph_type": result.morph_type.id,
            "form_class": result.form_class.value,
            "prefix": result.prefix,
            "postfix": result.postfix,
            "form": result.form,
        })

    if args.json:
        print(json.dumps(rows, ensure_ascii=False, indent=2))
    else:
        for row in rows:
            if "error" in row:
                print(f"{row['input']!r}: ERROR {row['error']}")
            else:
                print(
                    f"{row['input']!r}: {row['morph_type']} ({row['form_class']}) "
                    f"form={row['form']!r} prefix={row['prefix']!r} postfix={row['postfix']!r}"
                )
    return 1 if failures else 0


def cmd_markers(args: argparse.Namespace) -> int:
    marker_set = _classifier(args.types).marker_set
    if args.json:
        print(json.dumps({
            "prefix_markers": list(marker_set.prefix_markers),
            "postfix_markers": list(marker_set.postfix_markers),
        }, ensure_ascii=False))
    else:
        print("Prefix markers:  " + " ".join(marker_set.prefix_markers))
        print("Postfix markers: " + " ".join(marker_set.postfix_markers))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="lexmorph", description="Morph-type classification tools.")
    sub = parser.add_subparsers(dest="command", required=True)

    p_classify = sub.add_parser("classify", help="Classify marked forms")
    p_classify.add_argument("forms", nargs="+", help="Forms with their type markers, e.g. -ing")
    p_classify.set_defaults(func=cmd_classify)

    p_markers = sub.add_parser("markers", help="Show the configured marker sets")
    p_markers.set_defaults(func=cmd_markers)

    for p in (p_classify, p_markers):
        p.add_argument("--types", help="Morph-type table JSON (default: configured table)")
        p.add_argument("--json", action="store_true", help="Emit JSON")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    configure_logging()
    setup_observability()
    args = build_parser().parse_args(argv)
    try:
        return args.func(args)
    except DomainError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 2
    finally:
        # --types overrides are per invocation
        container.reset_override()
        container.reset_singletons()


if __name__ == "__main__":
    sys.exit(main())
