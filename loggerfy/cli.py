"""Command line entry point: emit records and inspect JSON-lines stores."""

import argparse
import asyncio
import json
import logging
import sys

from loggerfy.factory import Loggerfy
from loggerfy.file_store import JsonLinesRepository
from loggerfy.models import LogLevel
from loggerfy.repository import wait_for_saves

logger = logging.getLogger(__name__)

LEVEL_CHOICES = {
    "info": LogLevel.INFO,
    "warn": LogLevel.WARNING,
    "error": LogLevel.ERROR,
}


def _parse_payload(value: str) -> dict:
    try:
        payload = json.loads(value)
    except json.JSONDecodeError as e:
        raise argparse.ArgumentTypeError(f"invalid JSON payload: {e}")
    if not isinstance(payload, dict):
        raise argparse.ArgumentTypeError("payload must be a JSON object")
    return payload


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="loggerfy",
        description="Emit and inspect structured JSON log records.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    emit = subparsers.add_parser("emit", help="Build a record and write it to stdout")
    emit.add_argument("level", choices=sorted(LEVEL_CHOICES), help="Record severity")
    emit.add_argument("--code", default="", help="Event code (e.g. AUTH_001)")
    emit.add_argument("--message", default="", help="Human-readable message")
    emit.add_argument("--detail", default="", help="Event detail")
    emit.add_argument(
        "--payload",
        type=_parse_payload,
        default=None,
        help="Supplementary data as a JSON object",
    )
    emit.add_argument("--id", dest="record_id", help="Use this id instead of a generated one")
    emit.add_argument("--store", help="Also append the record to this JSON-lines file")
    emit.add_argument(
        "--render",
        action="store_true",
        help="Print the rendered record without persisting it",
    )

    show = subparsers.add_parser("show", help="Print records from a JSON-lines file")
    show.add_argument("file", help="JSON-lines file written by --store")
    show.add_argument("--id", dest="record_id", help="Print only the record with this id")
    show.add_argument("--level", choices=sorted(LEVEL_CHOICES), help="Filter by severity")
    show.add_argument("--code", help="Filter by event code")
    return parser


def run_emit(args) -> int:
    repository = JsonLinesRepository(args.store) if args.store and not args.render else None
    factory = Loggerfy(repository)
    builder = getattr(factory, args.level)()
    builder.set_code(args.code).set_message(args.message).set_detail(args.detail)
    if args.payload is not None:
        builder.set_metadata(args.payload)

    if args.render:
        print(builder.get_log())
        return 0

    if not args.code or not args.message or not args.detail:
        logger.warning("Record not written: --code, --message and --detail are required")

    builder.write(args.record_id)
    if repository is not None and not wait_for_saves(timeout=10.0):
        logger.error("Timed out waiting for %s to be written", args.store)
        return 1
    return 0


def run_show(args) -> int:
    repository = JsonLinesRepository(args.file)

    if args.record_id:
        record = asyncio.run(repository.get_by_id(args.record_id))
        if record is None:
            logger.error("No record with id %s in %s", args.record_id, args.file)
            return 1
        print(record.to_json())
        return 0

    criteria = {}
    if args.level:
        criteria["level"] = LEVEL_CHOICES[args.level]
    if args.code:
        criteria["code"] = args.code

    for record in asyncio.run(repository.get_all(criteria)):
        print(record.to_json())
    return 0


def main(argv=None) -> int:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [loggerfy] %(levelname)s %(message)s",
        stream=sys.stderr,
    )
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "emit":
        return run_emit(args)
    return run_show(args)
