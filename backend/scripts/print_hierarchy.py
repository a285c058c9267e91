#!/usr/bin/env python3
"""Print the reporting tree under one employee.

Run from the backend/ directory with Cosmos DB credentials in .env:

    python3 scripts/print_hierarchy.py ROOT_ID [--search TEXT] [--verbose]

Reads ALL employees from Cosmos DB (read-only), builds the hierarchy under
ROOT_ID, optionally filters it by name/designation and prints it as an
indented tree followed by the member count.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import os
import sys

_project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from orgchart.core.config import Settings  # noqa: E402
from orgchart.models.hierarchy import HierarchyNode  # noqa: E402
from orgchart.services.employee_service import EmployeeDirectoryError, EmployeeService  # noqa: E402
from orgchart.services.hierarchy_builder import RootNotFoundError  # noqa: E402
from orgchart.services.hierarchy_service import HierarchyService  # noqa: E402

logger = logging.getLogger(__name__)

INDENT = "    "


def format_node(node: HierarchyNode) -> str:
    label = node.name or node.id
    details = [part for part in (node.designation, node.branch) if part]
    if details:
        label = f"{label} ({', '.join(details)})"
    return label


def render_tree(node: HierarchyNode, depth: int = 0) -> list[str]:
    lines = [f"{INDENT * depth}{format_node(node)}"]
    for child in node.children:
        lines.extend(render_tree(child, depth + 1))
    return lines


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Print the reporting hierarchy under an employee",
    )
    parser.add_argument("root_id", help="Identifier of the employee at the top of the tree")
    parser.add_argument(
        "--search",
        default="",
        help="Only show members whose name or designation contains this text",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose (DEBUG) logging",
    )
    return parser.parse_args(argv)


async def print_hierarchy(args: argparse.Namespace) -> int:
    settings = Settings()
    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(message)s")

    directory = EmployeeService()
    await directory.initialize(settings)
    try:
        service = HierarchyService(directory)
        result = await service.search(args.root_id, args.search)
    except RootNotFoundError as err:
        logger.error("%s", err)
        return 1
    except EmployeeDirectoryError as err:
        logger.error("Employee directory unavailable: %s", err)
        return 2
    finally:
        await directory.close()

    if result.tree is None:
        print(f"No members match '{args.search}'")
    else:
        print("\n".join(render_tree(result.tree)))

    if args.search.strip():
        print(f"{result.visible_count} shown of {result.total_count} members")
    else:
        print(f"{result.total_count} members")
    return 0


def main() -> None:
    args = parse_args()
    sys.exit(asyncio.run(print_hierarchy(args)))


if __name__ == "__main__":
    main()
