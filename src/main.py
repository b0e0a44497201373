"""CLI entry point for the Zuluru roster scraper."""

from __future__ import annotations
import argparse
import json
import logging
import sys
from pathlib import Path

from config import settings
from core.errors import AuthConfigError, ScrapeError
from domain.models import Credentials, roster_index_to_json
from parsing import directory_parser, roster_parser
from services.pipeline import RosterPipeline

_log = logging.getLogger(__name__)


def _write_output(text: str, out: str | None) -> None:
    if out:
        path = Path(out)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        _log.info("Wrote %s", path)
    else:
        print(text)


def _emit_json(payload: object, out: str | None) -> None:
    _write_output(json.dumps(payload, indent=2, ensure_ascii=False), out)


def _progress(event: str, payload: dict) -> None:
    if event == "team_fetched":
        _log.info("Fetched team %s (%d/%d)", payload["team_id"], payload["position"], payload["total"])


def cmd_run(args: argparse.Namespace) -> int:
    pipeline = RosterPipeline(concurrency=args.concurrency, progress=_progress)
    index = pipeline.run(args.division, Credentials.from_env())
    _write_output(roster_index_to_json(index), args.out)
    return 0


def cmd_parse_team(args: argparse.Namespace) -> int:
    roster = roster_parser.parse_team(Path(args.file).read_text(encoding="utf-8"))
    _emit_json({roster.team_name: roster.to_dict()}, args.out)
    return 0


def cmd_list_teams(args: argparse.Namespace) -> int:
    team_ids = directory_parser.list_team_ids(Path(args.file).read_text(encoding="utf-8"))
    _emit_json(team_ids, args.out)
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="zuluru-rosters")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="command", required=True)

    run = sub.add_parser("run", help="Log in and scrape every team roster of a division")
    run.add_argument("--division", default=settings.DEFAULT_DIVISION_ID, help="Division ID")
    run.add_argument(
        "--concurrency",
        type=int,
        default=settings.DEFAULT_CONCURRENCY,
        help="Team pages fetched at once (1 = sequential)",
    )
    run.add_argument("--out", required=False, help="Write JSON to this file instead of stdout")
    run.set_defaults(func=cmd_run)

    parse_team = sub.add_parser("parse-team", help="Parse a saved team page")
    parse_team.add_argument("file", help="Team page HTML file")
    parse_team.add_argument("--out", required=False, help="Output JSON path")
    parse_team.set_defaults(func=cmd_parse_team)

    list_teams = sub.add_parser("list-teams", help="List team ids from a saved division page")
    list_teams.add_argument("file", help="Division page HTML file")
    list_teams.add_argument("--out", required=False, help="Output JSON path")
    list_teams.set_defaults(func=cmd_list_teams)

    return p


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        return args.func(args)
    except AuthConfigError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    except ScrapeError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
