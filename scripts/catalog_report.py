#!/usr/bin/env python
# ruff: noqa: E402
"""Validate the seed location catalog and print or dump its hierarchy."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any

SCRIPT_DIR = Path(__file__).resolve().parent
REPO_ROOT = SCRIPT_DIR.parent
if str(REPO_ROOT) not in sys.path:
    sys.path.append(str(REPO_ROOT))

from address_catalog.core.config import get_settings
from address_catalog.core.exceptions import CatalogIntegrityError
from address_catalog.core.logging import configure_logging, get_logger
from address_catalog.location import LocationCatalog

LOGGER = get_logger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--region", help="Only include this region code.")
    parser.add_argument("--query", default="", help="Filter subregion names by substring.")
    parser.add_argument("--output", type=Path, help="Write the hierarchy as JSON to this path.")
    parser.add_argument("--validate-only", action="store_true", help="Run integrity checks and exit.")
    parser.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Override the configured log level.")
    return parser.parse_args(argv)


def build_tree(catalog: LocationCatalog, region_code: str | None = None, query: str = "") -> list[dict[str, Any]]:
    """Return nested region/subregion/locality dicts for JSON export."""
    regions = catalog.list_regions()
    if region_code:
        regions = [region for region in regions if region.code == region_code]
    tree: list[dict[str, Any]] = []
    for region in regions:
        subregions = []
        for subregion in catalog.search_subregions(region.code, query):
            node = subregion.as_dict()
            node["localities"] = [locality.as_dict() for locality in catalog.list_localities_by_subregion(subregion.code)]
            subregions.append(node)
        region_node = region.as_dict()
        region_node["subregions"] = subregions
        tree.append(region_node)
    return tree


def dump_json(data: Any, path: Path) -> None:
    """Write JSON to disk with UTF-8 encoding, creating parent directories as needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")


def _print_tree(tree: list[dict[str, Any]]) -> None:
    for region in tree:
        print(f"{region['code']}\t{region['name']}")
        for subregion in region["subregions"]:
            print(f"  {subregion['code']}\t{subregion['name']}")
            for locality in subregion["localities"]:
                print(f"    {locality['code']}\t{locality['name']}")


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    configure_logging(args.log_level, settings=get_settings())
    try:
        catalog = LocationCatalog(strict=True)
    except CatalogIntegrityError as exc:
        LOGGER.error("location.catalog.invalid", issues=exc.issues)
        print(str(exc), file=sys.stderr)
        return 1

    LOGGER.info("location.catalog.valid", **catalog.counts())
    if args.validate_only:
        return 0

    tree = build_tree(catalog, args.region, args.query)
    if args.output:
        dump_json(tree, args.output)
        LOGGER.info("location.catalog.exported", path=str(args.output), regions=len(tree))
    else:
        _print_tree(tree)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
