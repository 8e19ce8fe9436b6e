"""Command-line entry point printing Project Euler progress."""

import asyncio
import json
import sys
from typing import Optional

from loguru import logger

import config
from domain.exceptions import ParsingError, ProgressFetchError
from domain.models import Progress
from infrastructure.session import resolve_session_id
from services import create_progress_service

USAGE = "usage: euler-progress [SESSION_ID] [--json]"


def format_progress(progress: Progress) -> str:
    """Render progress as readable text."""
    lines = [
        f"Levels completed: {len(progress.completed_levels)}/{len(progress.levels)}",
    ]
    for number, level in enumerate(progress.levels, start=1):
        mark = "x" if level.completed else " "
        lines.append(f"  [{mark}] Level {number}: {level.description.strip()}")

    lines.append(f"Problems solved: {progress.solved_count}/{len(progress.problems)}")
    if progress.solved_numbers:
        lines.append("  " + ", ".join(str(n) for n in progress.solved_numbers))
    return "\n".join(lines)


def progress_to_dict(progress: Progress) -> dict:
    return {
        "levels": [
            {"number": number, "description": level.description, "completed": level.completed}
            for number, level in enumerate(progress.levels, start=1)
        ],
        "problems": list(progress.problems),
    }


async def run(session_id: Optional[str], as_json: bool) -> int:
    try:
        session = resolve_session_id(session_id)
        progress = await create_progress_service().get_progress(session)
    except (ParsingError, ProgressFetchError) as e:
        logger.error(str(e))
        return 1

    if as_json:
        print(json.dumps(progress_to_dict(progress), indent=2))
    else:
        print(format_progress(progress))
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    args = list(sys.argv[1:] if argv is None else argv)
    config.configure_logging()

    if "-h" in args or "--help" in args:
        print(USAGE)
        return 0

    as_json = "--json" in args
    positional = [a for a in args if a != "--json"]
    if len(positional) > 1 or any(a.startswith("-") for a in positional):
        logger.error(USAGE)
        return 2

    session_id = positional[0] if positional else None
    return asyncio.run(run(session_id, as_json))


if __name__ == "__main__":
    sys.exit(main())
