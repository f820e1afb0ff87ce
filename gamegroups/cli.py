"""
gamegroups-validate: check game group request payloads from JSON files.

Usage:
    gamegroups-validate request.json [more.json ...]
    cat request.json | gamegroups-validate -
    gamegroups-validate --create --enforce-player-order new_group.json

Exit status: 0 when every file is valid, 1 when any payload is rejected,
2 when a file cannot be read or is not JSON.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from gamegroups.config import settings
from gamegroups.services.game_group_service import (
    ValidationFailure,
    build_create_request,
    build_update_request,
    to_payload,
)

logger = logging.getLogger("gamegroups.cli")

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_UNREADABLE = 2


def _load(source: str):
    if source == "-":
        return json.load(sys.stdin)
    return json.loads(Path(source).read_text(encoding="utf-8"))


def validate_source(source: str, *, create: bool, enforce_player_order: bool | None, as_json: bool) -> int:
    """Validate one file and print the outcome. Returns its exit status."""
    try:
        data = _load(source)
    except (OSError, ValueError) as e:
        print(f"{source}: cannot read JSON ({e})", file=sys.stderr)
        return EXIT_UNREADABLE

    build = build_create_request if create else build_update_request
    try:
        request = build(data, enforce_player_order=enforce_player_order)
    except ValidationFailure as failure:
        for violation in failure.violations:
            print(f"{source}: {violation}")
        return EXIT_INVALID

    if as_json:
        print(json.dumps(to_payload(request), ensure_ascii=False))
    else:
        print(f"OK {source}")
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="gamegroups-validate",
        description="Validate game group create/update payloads stored as JSON.",
    )
    parser.add_argument(
        "files",
        nargs="+",
        help="JSON files to validate ('-' reads standard input).",
    )
    parser.add_argument(
        "--create",
        action="store_true",
        help="Validate as a creation payload instead of an update.",
    )
    parser.add_argument(
        "--enforce-player-order",
        action="store_true",
        default=None,
        help="Reject payloads where minPlayers is greater than maxPlayers.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the normalized payload of each valid file.",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    status = EXIT_OK
    for source in args.files:
        result = validate_source(
            source,
            create=args.create,
            enforce_player_order=args.enforce_player_order,
            as_json=args.json,
        )
        status = max(status, result)

    logger.debug("Checked %d file(s), exit status %d", len(args.files), status)
    return status


if __name__ == "__main__":
    sys.exit(main())
