"""Command line interface for exploring EDM metadata documents."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import pydantic
from dotenv import load_dotenv

from config.settings import Settings, get_settings
from src.ingestion.plugins.edmx_metadata import EdmxMetadataPlugin
from src.metadata.parser import EdmMetadataParser
from src.utils.exceptions import ConfigurationError, EdmGraphError, ValidationError
from src.utils.exporters import (
    entity_to_dict,
    graph_to_dict,
    paths_to_dicts,
    relationship_to_dict,
    render_mermaid,
    summarize_relationships,
    to_json,
)
from src.utils.logging_config import setup_logging
from src.utils.validators import (
    validate_entity_name,
    validate_file_path,
    validate_max_depth,
)

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="edm-graph",
        description="Inspect entities and relationship paths in EDM metadata.",
    )
    parser.add_argument("--log-level", help="Log level (default: from settings)")
    parser.add_argument("--output", help="Write output to this file instead of stdout")
    subparsers = parser.add_subparsers(dest="command", required=True)

    relationships = subparsers.add_parser(
        "relationships", help="List relationship edges"
    )
    relationships.add_argument("file", help="EDMX/CSDL metadata file")
    relationships.add_argument(
        "--format",
        choices=["json", "mermaid"],
        default="json",
        help="Output format (default: json)",
    )

    entities = subparsers.add_parser("entities", help="Describe entity types")
    entities.add_argument("file", help="EDMX/CSDL metadata file")
    entities.add_argument(
        "--name",
        action="append",
        default=[],
        help="Only describe this entity (repeatable, case-insensitive)",
    )

    paths = subparsers.add_parser("paths", help="Find paths between two entities")
    paths.add_argument("file", help="EDMX/CSDL metadata file")
    paths.add_argument("start", help="Start entity name")
    paths.add_argument("end", help="End entity name")
    paths.add_argument(
        "--max-depth",
        type=int,
        default=None,
        help="Maximum number of hops (default: from settings)",
    )

    graph = subparsers.add_parser(
        "graph", help="Print entity nodes and labelled relationship edges"
    )
    graph.add_argument("file", help="EDMX/CSDL metadata file")

    return parser


def load_settings() -> Settings:
    """Read settings, reporting invalid environment values as ConfigurationError."""
    try:
        return get_settings()
    except pydantic.ValidationError as exc:
        raise ConfigurationError(f"Invalid configuration: {exc}") from exc


def run(args: argparse.Namespace) -> str:
    settings = load_settings()
    path = validate_file_path(args.file)
    indent = settings.edm.json_indent

    if args.command == "graph":
        plugin = EdmxMetadataPlugin(settings.edm.namespace)
        if not plugin.handles(path):
            raise ValidationError(f"Unsupported metadata file extension: {path.suffix}")
        # Raw bytes so the XML declaration decides the encoding.
        graph = plugin.parse(path.read_bytes(), source=str(path))
        return to_json(graph_to_dict(graph), indent=indent)

    parser = EdmMetadataParser.from_file(path, namespace=settings.edm.namespace)

    if args.command == "relationships":
        relationships = parser.parse_relationships()
        logger.info("Relationships by kind: %s", summarize_relationships(relationships))
        if args.format == "mermaid":
            return render_mermaid(relationships)
        return to_json([relationship_to_dict(r) for r in relationships], indent=indent)

    if args.command == "entities":
        names = [validate_entity_name(name) for name in args.name]
        entities = parser.get_all_entities_info(*names)
        return to_json([entity_to_dict(entity) for entity in entities], indent=indent)

    start = validate_entity_name(args.start)
    end = validate_entity_name(args.end)
    max_depth = validate_max_depth(
        settings.edm.default_max_depth if args.max_depth is None else args.max_depth
    )
    found = parser.find_paths(start, end, max_depth)
    logger.info("Found %d paths from %s to %s", len(found), start, end)
    return to_json(paths_to_dicts(found), indent=indent)


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings()
        setup_logging(level=args.log_level or settings.log_level, stream=sys.stderr)
        output = run(args)
    except ValidationError as exc:
        print(f"[!] {exc}", file=sys.stderr)
        return 2
    except EdmGraphError as exc:
        print(f"[!] {exc}", file=sys.stderr)
        return 1

    if args.output:
        Path(args.output).write_text(output + "\n", encoding="utf-8")
        print(f"[+] Output saved to {args.output}", file=sys.stderr)
    else:
        print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
