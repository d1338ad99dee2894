"""CLI commands for compiling tag criteria and managing the item collection."""

import argparse
import json
import sys
from pathlib import Path

from pydantic import ValidationError

from ..adapters.memory_item_store import MemoryItemStore, load_items_file
from ..config.runtime import get_settings
from ..domain.compiler import compile_criteria
from ..domain.predicates import describe
from ..models.requests import PageRequest, SearchCriteria, SearchRequest
from ..wiring import build_item_store, build_search_service
from .observability import configure_logging
from .validation import validate_criteria


def _parse_tags(text: str) -> list:
    """Parse and validate a JSON tags argument. Exits on invalid input."""
    try:
        tags = json.loads(text)
    except json.JSONDecodeError as e:
        print(f"Error: tags must be JSON, e.g. '[5, [3, -7]]': {e}", file=sys.stderr)
        sys.exit(2)
    result = validate_criteria(tags)
    for warning in result.warnings:
        print(f"Warning: {warning}", file=sys.stderr)
    if not result.is_valid:
        for error in result.errors:
            print(f"Error: {error}", file=sys.stderr)
        sys.exit(2)
    return tags


def _load_items(path: Path):
    if not path.exists():
        print(f"Error: items file not found: {path}", file=sys.stderr)
        sys.exit(1)
    try:
        return load_items_file(path)
    except ValueError as e:
        print(f"Error: invalid items file {path}: {e}", file=sys.stderr)
        sys.exit(1)


def cmd_compile(args: argparse.Namespace) -> None:
    predicate = compile_criteria(_parse_tags(args.tags))
    if args.text:
        print(describe(predicate))
    else:
        print(predicate.model_dump_json(indent=2))


def cmd_validate(args: argparse.Namespace) -> None:
    try:
        tags = json.loads(args.tags)
    except json.JSONDecodeError as e:
        print(json.dumps({"valid": False, "errors": [f"invalid JSON: {e}"], "warnings": []}, indent=2))
        sys.exit(2)
    result = validate_criteria(tags)
    print(json.dumps(result.to_dict(), indent=2))
    if not result.is_valid:
        sys.exit(2)


def cmd_search(args: argparse.Namespace) -> None:
    tags = _parse_tags(args.tags) if args.tags is not None else None
    try:
        request = SearchRequest(
            data=SearchCriteria(tags=tags, title=args.title),
            metadata=PageRequest(page=args.page, **({} if args.size is None else {"size": args.size})),
        )
    except ValidationError as e:
        for err in e.errors():
            location = ".".join(str(part) for part in err["loc"])
            print(f"Error: {location}: {err['msg']}", file=sys.stderr)
        sys.exit(2)
    store = MemoryItemStore(_load_items(args.file)) if args.file else None
    svc = build_search_service(item_store=store)
    response = svc.search(request)
    print(response.model_dump_json(indent=2))


def cmd_seed(args: argparse.Namespace) -> None:
    items = _load_items(args.file)
    print(f"Adding {len(items)} items from {args.file}...")
    count = build_item_store().upsert_items(items)
    print(f"Successfully added {count} items.")


def main():
    parser = argparse.ArgumentParser(description="Compile tag criteria and search tagged items")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    compile_parser = subparsers.add_parser("compile", help="Compile tag criteria into a predicate")
    compile_parser.add_argument("tags", help="JSON criteria, e.g. '[5, [3, -7]]'")
    compile_parser.add_argument("--text", action="store_true", help="Print compact text instead of JSON")

    validate_parser = subparsers.add_parser("validate", help="Validate tag criteria")
    validate_parser.add_argument("tags", help="JSON criteria, e.g. '[5, [3, -7]]'")

    subparsers.add_parser("create", help="Create the items collection")
    subparsers.add_parser("delete", help="Delete the items collection")

    seed_parser = subparsers.add_parser("seed", help="Load items from a JSON file into the collection")
    seed_parser.add_argument("--file", type=Path, required=True, help="JSON list of {item_id, title, tag_ids}")

    search_parser = subparsers.add_parser("search", help="Search items by tag criteria")
    search_parser.add_argument("--tags", default=None, help="JSON criteria; omit for no tag filter")
    search_parser.add_argument("--title", default=None, help="Title substring")
    search_parser.add_argument("--page", type=int, default=1, help="1-based page number (default: 1)")
    search_parser.add_argument("--size", type=int, default=None, help="Page size (default: DEFAULT_PAGE_SIZE setting)")
    search_parser.add_argument(
        "--file",
        type=Path,
        default=None,
        help="Search an items JSON file in memory instead of the configured store",
    )

    args = parser.parse_args()
    settings = get_settings()
    configure_logging(settings.log_level)

    if args.command == "compile":
        cmd_compile(args)
    elif args.command == "validate":
        cmd_validate(args)
    elif args.command == "create":
        result = build_item_store().ensure_collection()
        if result["created"]:
            print(f"Created collection: {result['name']}")
        else:
            print(f"Collection already exists: {result['name']}")
    elif args.command == "delete":
        build_item_store().delete_collection()
        print("Deleted collection.")
    elif args.command == "seed":
        cmd_seed(args)
    elif args.command == "search":
        cmd_search(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
