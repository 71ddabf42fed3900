#!/usr/bin/env python3
"""
CLI workflow runner for the org chart pipeline.

Provides command-line access to hierarchy building, search and view fitting
for an employee CSV.
"""
import argparse
import json
import logging
import os
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent))

from config.settings import settings
from core.exceptions import EmptyInputError
from hierarchy.index import SearchField
from serving.chart_service import ChartService
from view.controller import ViewStateController


def _load(file_path: str):
    """Read a CSV and return a loaded ChartService, or None on failure."""
    if not os.path.exists(file_path):
        print(f"❌ Error: File not found: {file_path}")
        return None

    with open(file_path, 'r', encoding='utf-8-sig') as f:
        text = f.read()

    service = ChartService(ViewStateController(config=settings))
    try:
        service.load_csv(text)
    except EmptyInputError as e:
        print(f"❌ Error: {e}")
        return None
    return service


def _select(service: ChartService, root_id: str) -> bool:
    if root_id is None:
        return True
    if service.controller.select_root_by_id(root_id) is None:
        print(f"❌ Employee not found: {root_id}")
        return False
    return True


def show_cli(file_path: str, root_id: str = None) -> int:
    """Print the reporting tree under a root."""
    service = _load(file_path)
    if service is None:
        return 1
    if not _select(service, root_id):
        return 1

    index = service.controller.index
    report = index.report

    print(f"\nEmployees: {len(index)}")
    print(f"Root candidates: {len(index.root_candidate_ids)}")
    if report.unresolved_managers:
        print(f"⚠️  Unresolved managers: {len(report.unresolved_managers)}")
    if report.cyclic_ids:
        print(f"⚠️  Reporting cycles: {', '.join(report.cyclic_ids)}")
    if report.duplicate_count:
        print(f"⚠️  Duplicate ids replaced: {report.duplicate_count}")
    print("-" * 60)

    for line in service.render_outline():
        print(line)
    return 0


def search_cli(file_path: str, query: str, field: str) -> int:
    """Search employees and print matches."""
    service = _load(file_path)
    if service is None:
        return 1

    results = service.controller.index.search(query, SearchField.parse(field))
    if not results:
        print("No matching employees.")
        return 0

    print(f"\nFound {len(results)} employees:")
    print("-" * 60)
    print(f"{'ID':<16} {'Name':<30} {'Manager'}")
    print("-" * 60)
    for node in results:
        print(f"{node.id:<16} {node.name:<30} {node.manager_id or '-'}")
    return 0


def fit_cli(file_path: str, width: float, height: float, root_id: str = None) -> int:
    """Print layout and fit transform for a viewport as JSON."""
    service = _load(file_path)
    if service is None:
        return 1
    if not _select(service, root_id):
        return 1

    view = service.build_view(width, height)
    print(json.dumps(view, indent=2))
    return 0


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description='Org chart CLI workflow'
    )
    parser.add_argument('--log-level', type=str, default=settings.log_level, help='Logging level')
    subparsers = parser.add_subparsers(dest='command', help='Command to run')

    # Show command
    show_parser = subparsers.add_parser('show', help='Print the reporting tree')
    show_parser.add_argument('file', type=str, help='Employee CSV file')
    show_parser.add_argument('--root', type=str, help='Employee id to use as root')

    # Search command
    search_parser = subparsers.add_parser('search', help='Search employees')
    search_parser.add_argument('file', type=str, help='Employee CSV file')
    search_parser.add_argument('query', type=str, help='Text to search for')
    search_parser.add_argument('--field', type=str, default='name', choices=[f.value for f in SearchField], help='Field to search')

    # Fit command
    fit_parser = subparsers.add_parser('fit', help='Lay out a subtree and fit it into a viewport')
    fit_parser.add_argument('file', type=str, help='Employee CSV file')
    fit_parser.add_argument('--width', type=float, default=1280, help='Viewport width')
    fit_parser.add_argument('--height', type=float, default=800, help='Viewport height')
    fit_parser.add_argument('--root', type=str, help='Employee id to use as root')

    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level.upper())

    if args.command == 'show':
        return show_cli(args.file, args.root)
    elif args.command == 'search':
        return search_cli(args.file, args.query, args.field)
    elif args.command == 'fit':
        return fit_cli(args.file, args.width, args.height, args.root)
    else:
        parser.print_help()
        return 0


if __name__ == '__main__':
    sys.exit(main())
