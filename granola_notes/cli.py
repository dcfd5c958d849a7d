"""
CLI entrypoint for granola_notes.

Each subcommand loads the cache fresh, runs one query and prints the result.
Run as `granola <command>` or `python -m granola_notes <command>`.
"""
from __future__ import annotations

import argparse
import sys
from collections import Counter
from typing import Callable, Dict, List, Optional

from . import __version__ as VERSION
from . import config
from . import query
from . import render
from . import timing
from . import utils
from .errors import CacheMalformed, CacheUnavailable, GranolaError, MissingArgument, NoMatch, UsageError
from .repository import MeetingRepository

HELP_TEXT = f"""
granola - CLI tool for Granola meeting notes

USAGE:
  granola list [--limit N]       List recent meetings (default {config.DEFAULT_LIST_LIMIT})
  granola show <search>          Show meeting summary by title search
  granola transcript <search>    Show full transcript
  granola search <query>         Search across all meeting content
  granola dump [options]         Dump all meetings for AI context
    --limit N                    Limit to N most recent meetings
    --transcripts                Include full transcripts (large!)
  granola context <id> [ids...]  Load specific meetings by ID
    --transcripts                Include full transcripts
  granola help                   Show this help message
  granola --version              Print version and exit

OPTIONS (all commands):
  --cache PATH                   Read this cache file instead of the default
                                 (or set ${config.CACHE_ENV_VAR})
  --debug-timing                 Print timestamped loading steps

EXAMPLES:
  granola list --limit 5
  granola show "wedding"
  granola transcript "standup"
  granola search "project deadline"
  granola dump --limit 20
  granola context 26f3f793 90209d18 --transcripts
"""

HELP_WORDS = ("help", "--help", "-h")
FREE_TEXT_COMMANDS = ("show", "transcript", "search")


def parse_limit(raw: Optional[str], default: Optional[int]) -> Optional[int]:
    """Missing, non-numeric or non-positive values fall back to `default`."""
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value > 0 else default


def _joined(terms: List[str]) -> str:
    return " ".join(terms)


def cmd_list(repo: MeetingRepository, args: argparse.Namespace) -> int:
    limit = parse_limit(args.limit, config.DEFAULT_LIST_LIMIT)
    meetings = repo.load()
    print(render.render_list(query.select_recent(meetings, limit), len(meetings)))
    return 0


def _find_titled(repo: MeetingRepository, args: argparse.Namespace):
    search = _joined(args.terms)
    if not search:
        raise MissingArgument(f"Usage: granola {args.command} <search>")
    meeting = query.find_by_title(repo.load(), search)
    if meeting is None:
        raise NoMatch(f'No meeting found matching: "{search}"')
    return meeting


def cmd_show(repo: MeetingRepository, args: argparse.Namespace) -> int:
    print(render.render_show(_find_titled(repo, args)))
    return 0


def cmd_transcript(repo: MeetingRepository, args: argparse.Namespace) -> int:
    print(render.render_transcript(_find_titled(repo, args)))
    return 0


def cmd_search(repo: MeetingRepository, args: argparse.Namespace) -> int:
    q = _joined(args.terms)
    if not q:
        raise MissingArgument("Usage: granola search <query>")
    hits = query.search(repo.load(), q)
    print(render.render_search(q, hits))
    return 0


def cmd_dump(repo: MeetingRepository, args: argparse.Namespace) -> int:
    limit = parse_limit(args.limit, None)
    meetings = repo.load()
    print(render.render_dump(
        query.select_recent(meetings, limit),
        len(meetings),
        include_transcripts=args.transcripts,
        limited=limit is not None,
        generated_at=utils.iso_timestamp_utc(),
    ))
    return 0


def cmd_context(repo: MeetingRepository, args: argparse.Namespace) -> int:
    if not args.ids:
        raise MissingArgument("Usage: granola context <id> [id2] [id3]... [--transcripts]")
    selected, missing = query.find_by_id_prefixes(repo.load(), args.ids)
    for wanted in missing:
        print(f'Warning: No meeting found for ID "{wanted}"', file=sys.stderr)
    if not selected:
        raise NoMatch("No meetings found for provided IDs")
    print(render.render_context(
        selected,
        include_transcripts=args.transcripts,
        generated_at=utils.iso_timestamp_utc(),
    ))
    return 0


HANDLERS: Dict[str, Callable[[MeetingRepository, argparse.Namespace], int]] = {
    "list": cmd_list,
    "show": cmd_show,
    "transcript": cmd_transcript,
    "search": cmd_search,
    "dump": cmd_dump,
    "context": cmd_context,
}


class _CommandParser(argparse.ArgumentParser):
    """Raises instead of exiting so bad options end with status 1 like every other error."""

    def error(self, message: str):
        raise UsageError(f"{self.prog}: {message}")


def build_parser(command: str) -> argparse.ArgumentParser:
    """
    Parser for one command's arguments (everything after the command name).
    Help flags are handled by main(), so -h is free to appear in search text.
    """
    p = _CommandParser(prog=f"granola {command}", add_help=False, allow_abbrev=False)
    p.add_argument("--cache", type=str, default=None,
                   help=f"Path to cache-v3.json (default: ${config.CACHE_ENV_VAR} or the Granola app folder)")
    p.add_argument("--debug-timing", action="store_true",
                   help="Enable timestamped step/timing logs.")

    if command in ("list", "dump"):
        p.add_argument("--limit", nargs="?", default=None, help="Number of meetings to show")
    if command in ("dump", "context"):
        p.add_argument("--transcripts", action="store_true", help="Include full transcripts")
    if command in FREE_TEXT_COMMANDS:
        p.add_argument("terms", nargs="*", help="Text to look for")
    if command == "context":
        p.add_argument("ids", nargs="*", help="Full or short (8-char) meeting ids")

    return p


def in_argv_order(tokens: List[str], wanted: List[str]) -> List[str]:
    """`wanted` re-ordered to match where each token appeared in `tokens`."""
    remaining = Counter(wanted)
    ordered = []
    for tok in tokens:
        if remaining[tok] > 0:
            ordered.append(tok)
            remaining[tok] -= 1
    return ordered


def parse_command(command: str, rest: List[str]) -> argparse.Namespace:
    """
    Options may appear anywhere. Unknown tokens are kept: as search text for
    show/transcript/search, as ids for context (unless they start with --),
    and ignored for list/dump.
    """
    args, extras = build_parser(command).parse_known_intermixed_args(rest)
    args.command = command
    if command in FREE_TEXT_COMMANDS:
        args.terms = in_argv_order(rest, args.terms + extras)
    elif command == "context":
        args.ids = in_argv_order(rest, args.ids + [e for e in extras if not e.startswith("--")])
    return args


def main(argv: Optional[List[str]] = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    command = argv[0] if argv else None

    if command is None or command in HELP_WORDS:
        print(HELP_TEXT)
        return 0
    if command == "--version":
        print(f"granola {VERSION}")
        return 0
    if command not in HANDLERS:
        print(f"Unknown command: {command}", file=sys.stderr)
        print(HELP_TEXT)
        return 1

    try:
        args = parse_command(command, argv[1:])
        timing.configure(args.debug_timing)
        repo = MeetingRepository(config.resolve_cache_path(args.cache))
        return HANDLERS[command](repo, args)
    except (CacheUnavailable, CacheMalformed) as e:
        print(f"Error loading cache: {e}", file=sys.stderr)
        return 1
    except GranolaError as e:
        print(str(e), file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
