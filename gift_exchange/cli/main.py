from __future__ import annotations

import argparse
import logging
import os
from typing import List

from ..engine.feasibility import valid_solution_exists
from ..io.roster_loader import load_roster
from ..io.rule_loader import load_rule_objects
from ..io.state_store import load_session, save_session
from ..reporting.rationale import explain_unmatched
from ..reporting.results import export_csv, export_yaml
from ..rules import ExclusionRule, Predicate, combine, default_rules, valid_pair
from ..session import DrawSession

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _rules(rules_path: str | None) -> List[ExclusionRule]:
    """Return the rules in ``rules_path``, or the default rules without one."""
    if not rules_path:
        return default_rules()
    return load_rule_objects(rules_path)


def _predicate(rules_path: str | None) -> Predicate:
    """Return the exclusion predicate configured by ``rules_path``."""
    if not rules_path:
        return valid_pair
    return combine(_rules(rules_path))


def _open_session(state: str, rules_path: str | None) -> DrawSession:
    """Load the session in ``state`` with the rules it was started with.

    An explicit ``rules_path`` replaces the saved one.
    """
    session = load_session(state)
    if rules_path:
        session.rules_path = os.path.abspath(rules_path)
    session.validate = _predicate(session.rules_path)
    return session


def _print_pool(title: str, people) -> None:
    print(f"{title} ({len(people)}):")
    for person in people:
        print(f"  {person}")


# ---------------------------------------------------------------------------
# Command implementations
# ---------------------------------------------------------------------------

def cmd_start(args: argparse.Namespace) -> None:
    roster = load_roster(args.roster)
    rules_path = os.path.abspath(args.rules) if args.rules else None
    session = DrawSession(
        roster=roster, validate=_predicate(rules_path), rules_path=rules_path
    )
    session.reset()
    save_session(session, args.state)
    print(f"Started a draw for {len(roster)} participants in {args.state}")


def cmd_draw(args: argparse.Namespace) -> None:
    session = _open_session(args.state, args.rules)
    result = session.draw()
    save_session(session, args.state)
    if result.ok:
        print(str(result.pair))
    else:
        print(session.message)


def cmd_draw_all(args: argparse.Namespace) -> None:
    session = _open_session(args.state, args.rules)
    for result in session.draw_all():
        if result.ok:
            print(str(result.pair))
        else:
            print(session.message)
    save_session(session, args.state)


def cmd_status(args: argparse.Namespace) -> None:
    session = load_session(args.state)
    _print_pool("Remaining givers", session.hat.givers)
    _print_pool("Remaining receivers", session.hat.receivers)
    print(f"Results ({len(session.drawn)}):")
    for pair in session.drawn:
        print(f"  {pair}")
    if session.message:
        print(session.message)


def cmd_reset(args: argparse.Namespace) -> None:
    session = load_session(args.state)
    session.reset()
    save_session(session, args.state)
    print(f"Reset draw for {len(session.roster)} participants")


def cmd_export(args: argparse.Namespace) -> None:
    session = load_session(args.state)
    directory = os.path.dirname(args.output)
    if directory:
        os.makedirs(directory, exist_ok=True)
    if args.format == "csv":
        export_csv(session.drawn, args.output)
    else:
        export_yaml(session.drawn, args.output)
    print(f"Wrote {len(session.drawn)} pairs to {args.output}")


def cmd_check(args: argparse.Namespace) -> None:
    roster = load_roster(args.roster)
    rules = _rules(args.rules)
    if valid_solution_exists(list(roster), list(roster), combine(rules)):
        print(f"A complete assignment exists for {len(roster)} participants")
        return

    print("It isn't possible to assign everyone")
    for giver, reasons in explain_unmatched(roster, rules).items():
        print(f"{giver} has no one to give to:")
        for reason in reasons:
            print(f"  {reason}")


# ---------------------------------------------------------------------------
# Argument parser setup
# ---------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="gift-exchange")
    sub = parser.add_subparsers(dest="command", required=True)

    # start
    p_start = sub.add_parser("start", help="Start a new draw from a roster")
    p_start.add_argument("roster", help="Roster CSV path")
    p_start.add_argument("state", help="Session state YAML path")
    p_start.add_argument("--rules", help="Rules YAML path")
    p_start.set_defaults(func=cmd_start)

    # draw
    p_draw = sub.add_parser("draw", help="Draw the next pair")
    p_draw.add_argument("state", help="Session state YAML path")
    p_draw.add_argument("--rules", help="Rules YAML path")
    p_draw.set_defaults(func=cmd_draw)

    # draw-all
    p_all = sub.add_parser("draw-all", help="Draw until no givers are left")
    p_all.add_argument("state", help="Session state YAML path")
    p_all.add_argument("--rules", help="Rules YAML path")
    p_all.set_defaults(func=cmd_draw_all)

    # status
    p_status = sub.add_parser("status", help="Show remaining participants and results")
    p_status.add_argument("state", help="Session state YAML path")
    p_status.set_defaults(func=cmd_status)

    # reset
    p_reset = sub.add_parser("reset", help="Restart the draw with the saved roster")
    p_reset.add_argument("state", help="Session state YAML path")
    p_reset.set_defaults(func=cmd_reset)

    # export
    p_export = sub.add_parser("export", help="Export drawn pairs")
    p_export.add_argument("state", help="Session state YAML path")
    p_export.add_argument("--output", required=True, help="Output file path")
    p_export.add_argument(
        "--format",
        choices=["yaml", "csv"],
        default="yaml",
        help="Output format (default: yaml)",
    )
    p_export.set_defaults(func=cmd_export)

    # check
    p_check = sub.add_parser("check", help="Check that a roster can be fully assigned")
    p_check.add_argument("roster", help="Roster CSV path")
    p_check.add_argument("--rules", help="Rules YAML path")
    p_check.set_defaults(func=cmd_check)

    return parser


def main(argv: List[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        args.func(args)
    except (ValueError, KeyError, OSError) as exc:
        logger.error("%s failed: %s", args.command, exc)
        raise SystemExit(1) from exc


if __name__ == "__main__":
    main()
