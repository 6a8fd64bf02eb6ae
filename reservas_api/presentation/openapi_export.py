from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any

import yaml
from fastapi import FastAPI


def export_openapi(app: FastAPI, path: str | Path) -> dict[str, Any]:
    """
    Write the OpenAPI document generated from the app's routes to a YAML file
    """
    doc = app.openapi()
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        yaml.safe_dump(doc, f, allow_unicode=True, sort_keys=False)
    return doc


def main() -> None:
    parser = argparse.ArgumentParser(description="Export the reservations API OpenAPI document as YAML.")
    parser.add_argument("output", nargs="?", default="openapi.yaml", help="destination file")
    args = parser.parse_args()

    from reservas_api.main import app
    export_openapi(app, args.output)
    print(f"OpenAPI document written to {args.output}")


if __name__ == "__main__":
    main()
