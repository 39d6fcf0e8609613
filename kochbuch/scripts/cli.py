"""CLI tool for Kochbuch."""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from pathlib import Path

import httpx

from kochbuch.config import config
from kochbuch.importing import RecipeImporter, RecipeImportError
from kochbuch.logging_config import configure_logging


def _write_output(payload: dict, output: str | None) -> None:
    text = json.dumps(payload, indent=2, ensure_ascii=False)
    if output:
        Path(output).write_text(text + "\n", encoding="utf-8")
        print(f"Wrote recipe to {output}")
        return
    print(text)


async def import_recipe(url: str, output: str | None) -> int:
    """Run the import pipeline locally and print the recipe."""
    try:
        recipe = await RecipeImporter().import_from_url(url)
    except RecipeImportError as exc:
        print(f"Import failed: {exc}", file=sys.stderr)
        return 1

    _write_output(recipe.to_dict(), output)
    return 0


async def api_import(server: str, url: str, output: str | None) -> int:
    """Ask a running service to import ``url``."""
    async with httpx.AsyncClient(timeout=60) as client:
        try:
            resp = await client.post(
                f"{server.rstrip('/')}/api/import",
                json={"url": url},
                headers={"Accept": "application/json"},
            )
        except httpx.HTTPError as exc:
            print(f"Request failed: {exc}", file=sys.stderr)
            return 1

    if resp.status_code == 200:
        _write_output(resp.json(), output)
        return 0

    print(f"Error: {resp.status_code}", file=sys.stderr)
    try:
        print(resp.json().get("detail", resp.text), file=sys.stderr)
    except json.JSONDecodeError:
        print(resp.text, file=sys.stderr)
    return 1


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Kochbuch CLI tool.")
    parser.add_argument("--debug", action="store_true", help="Verbose logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # import
    import_parser = subparsers.add_parser(
        "import", help="Import a recipe from a web page"
    )
    import_parser.add_argument("recipe_url", help="Recipe page URL")
    import_parser.add_argument("--output", "-o", help="Write JSON to this file")

    # API interaction
    api_parser = subparsers.add_parser("api", help="Interact with the API")
    api_parser.add_argument(
        "--url", default=f"http://localhost:{config.PORT}", help="API URL"
    )
    api_subparsers = api_parser.add_subparsers(dest="api_command", required=True)

    api_import_parser = api_subparsers.add_parser(
        "import", help="Import a recipe through the service"
    )
    api_import_parser.add_argument("recipe_url", help="Recipe page URL")
    api_import_parser.add_argument("--output", "-o", help="Write JSON to this file")

    args = parser.parse_args(argv)
    configure_logging(debug=args.debug or config.DEBUG)

    exit_code = 0
    if args.command == "import":
        exit_code = asyncio.run(import_recipe(args.recipe_url, args.output))
    elif args.command == "api":
        if args.api_command == "import":
            exit_code = asyncio.run(
                api_import(args.url, args.recipe_url, args.output)
            )

    if exit_code:
        sys.exit(exit_code)


if __name__ == "__main__":
    main()
