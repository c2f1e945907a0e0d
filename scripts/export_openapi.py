from __future__ import annotations

import argparse
import json
from pathlib import Path

from input_guard.api.app import create_app
from input_guard.shared.config import settings


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Export the Input Guard OpenAPI document.")
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("docs/openapi.json"),
        help="Destination file for the OpenAPI JSON document.",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Exit with status 1 when the destination differs from the generated document.",
    )
    return parser.parse_args()


def render_openapi() -> str:
    document = create_app().openapi()
    return json.dumps(document, indent=2, ensure_ascii=False, sort_keys=True) + "\n"


def main() -> int:
    args = parse_args()
    rendered = render_openapi()
    output: Path = args.output

    if args.check:
        current = output.read_text(encoding="utf-8") if output.exists() else ""
        if current != rendered:
            print(f"{output} is out of date; run scripts/export_openapi.py")
            return 1
        print(f"{output} is up to date")
        return 0

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(rendered, encoding="utf-8")
    print(f"OpenAPI for {settings.app_name} {settings.app_version} exported to {output}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
