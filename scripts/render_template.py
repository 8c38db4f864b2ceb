#!/usr/bin/env python3
"""
Render a Liquid template with the ``t`` translation filter.

Usage:
    # Render with a translation table
    python scripts/render_template.py welcome.liquid --translations en.json

    # Pass template variables as JSON
    python scripts/render_template.py welcome.liquid -T en.json --vars '{"first_name": "John"}'

    # Variables from a file, JSON logs on stderr
    python scripts/render_template.py welcome.liquid -T en.json --vars-file vars.json --json-logs

Translation table format:
    {"$_layout": {"header": {"hello_user": "Hello {{name}}!"}}}

    {{ 'layout:header.hello_user' | t: name: first_name }}
"""
import argparse
import json
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from liquid.exceptions import LiquidError

from liquid_translate.config import settings, validate_or_warn
from liquid_translate.engine import build_environment, render
from liquid_translate.infra.logging_config import get_logger, setup_logging

logger = get_logger("render_template")


def load_json(path: Path) -> dict:
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a JSON object, got {type(data).__name__}")
    return data


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Render a Liquid template with translations",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    parser.add_argument("template", type=Path, help="Liquid template file")
    parser.add_argument("--translations", "-T", type=Path, required=True, help="Translation table (JSON)")
    parser.add_argument("--vars", "-v", default=None, help="Template variables as a JSON object")
    parser.add_argument("--vars-file", type=Path, default=None, help="Template variables (JSON file)")
    parser.add_argument("--log-level", default=settings.log_level, help="Log level (default: LOG_LEVEL)")
    parser.add_argument("--json-logs", action="store_true", default=settings.log_json, help="JSON log output")

    args = parser.parse_args(argv)

    setup_logging(args.log_level.upper(), use_json=args.json_logs)

    try:
        validate_or_warn(settings)
    except RuntimeError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    try:
        source = args.template.read_text(encoding="utf-8")
        translations = load_json(args.translations)
        variables = load_json(args.vars_file) if args.vars_file else {}
        if args.vars:
            inline = json.loads(args.vars)
            if not isinstance(inline, dict):
                raise ValueError("--vars: expected a JSON object")
            variables.update(inline)
    except (OSError, ValueError) as exc:
        # json.JSONDecodeError is a ValueError
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    try:
        output = render(
            source,
            variables,
            translations,
            environment=build_environment(settings),
        )
    except LiquidError as exc:
        logger.error("Template error in %s: %s", args.template, exc)
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
