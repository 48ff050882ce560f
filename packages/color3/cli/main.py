"""Command-line interface for Color³."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
import sys
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from color3.core.aggregation import (
    AggregateData,
    CalendarUnit,
    aggregate,
    community_matches,
    consensus_report,
)
from color3.core.calendar import (
    TriColorDayMatch,
    UnitMapping,
    day_of_week_name,
    find_matches,
    format_match_date,
    month_name,
)
from color3.core.colors import classify, hex_to_hsl, normalize_hex
from color3.core.config import AppConfig, configure_logging, load_app_config
from color3.core.errors import Color3Error
from color3.core.submissions import (
    JsonDirSubmissionStore,
    generate_fake_submissions,
    validate_payload,
)

console = Console()
logger = logging.getLogger(__name__)


def _slot_name(unit: CalendarUnit, slot: int) -> str:
    if unit is CalendarUnit.MONTHS:
        return month_name(slot)
    if unit is CalendarUnit.DAYS_OF_WEEK:
        return day_of_week_name(slot)
    return str(slot)


def _read_payload(path: Path) -> Any:
    if not path.exists():
        raise FileNotFoundError(f"Submission file not found: {path}")
    try:
        with path.open("r", encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {path}: {e}") from e


def _print_matches(title: str, matches: list[TriColorDayMatch]) -> None:
    if not matches:
        console.print(f"[yellow]{title}: no tri-color days in range[/yellow]")
        return

    table = Table(title=f"{title} ({len(matches)})")
    table.add_column("Date")
    table.add_column("Family")
    for match in matches:
        table.add_row(format_match_date(match.date), match.family.label)
    console.print(table)


def cmd_classify(args: argparse.Namespace, config: AppConfig) -> int:
    """Classify one or more hex colors."""
    table = Table(title="Color families")
    table.add_column("Hex")
    table.add_column("HSL")
    table.add_column("Family")
    for value in args.hex:
        hue, saturation, lightness = hex_to_hsl(value)
        table.add_row(
            normalize_hex(value), f"{hue}° {saturation}% {lightness}%", classify(value).label
        )
    console.print(table)
    return 0


def cmd_matches(args: argparse.Namespace, config: AppConfig) -> int:
    """List personal tri-color days for a submission file."""
    submission = validate_payload(_read_payload(Path(args.submission)))
    mapping = UnitMapping.from_submission(submission)
    matches = find_matches(mapping, args.months or config.horizon_months)
    _print_matches("Your tri-color days", matches)
    return 0


def cmd_submit(args: argparse.Namespace, config: AppConfig) -> int:
    """Validate a submission file and store it."""
    submission = validate_payload(_read_payload(Path(args.submission)))
    store = JsonDirSubmissionStore(config.store_dir)
    if args.id:
        record = store.update(args.id, submission)
        console.print(f"[green]Updated submission {record.id}[/green]")
    else:
        record = store.create(submission)
        console.print(f"[green]Created submission {record.id}[/green]")
    return 0


def cmd_seed(args: argparse.Namespace, config: AppConfig) -> int:
    """Populate the store with synthetic submissions."""
    store = JsonDirSubmissionStore(config.store_dir)
    for submission in generate_fake_submissions(args.count, seed=args.seed):
        store.create(submission)
    console.print(f"[green]Created {args.count} fake submissions[/green]")
    console.print(f"Total submissions in store: {store.count()}")
    return 0


def _print_aggregate(data: AggregateData, with_consensus: bool, min_sample: int) -> None:
    report = consensus_report(data, min_sample=min_sample) if with_consensus else None

    for unit in (CalendarUnit.DAYS_OF_WEEK, CalendarUnit.MONTHS, CalendarUnit.DAYS_OF_MONTH):
        table = Table(title=unit.value.replace("_", " ").title())
        table.add_column("Slot")
        table.add_column("Top families")
        if report is not None:
            table.add_column("Consensus")
        for slot, counts in sorted(data.unit(unit).items()):
            summary = ", ".join(f"{fc.family.label} {fc.percentage}%" for fc in counts[:3]) or "-"
            row = [_slot_name(unit, slot), summary]
            if report is not None:
                row.append(report.unit(unit)[slot].consensus.status.value)
            table.add_row(*row)
        console.print(table)


def cmd_aggregate(args: argparse.Namespace, config: AppConfig) -> int:
    """Print population statistics for all stored submissions."""
    store = JsonDirSubmissionStore(config.store_dir)
    data = aggregate(store.submissions())
    min_sample = config.consensus.min_sample

    if args.json:
        payload = consensus_report(data, min_sample=min_sample) if args.consensus else data
        print(payload.model_dump_json(indent=2))
        return 0

    if data.total_submissions == 0:
        console.print("[yellow]No submissions yet.[/yellow]")
        return 0

    console.print(f"[bold]Aggregate of {data.total_submissions} submissions[/bold]")
    _print_aggregate(data, args.consensus, min_sample)
    return 0


def cmd_community(args: argparse.Namespace, config: AppConfig) -> int:
    """List tri-color days of the population best-guess mapping."""
    store = JsonDirSubmissionStore(config.store_dir)
    matches = community_matches(store.submissions(), args.months or config.horizon_months)
    _print_matches("Community tri-color days", matches)
    return 0


def _positive_int(value: str) -> int:
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be positive, got {value}")
    return number


def build_arg_parser() -> argparse.ArgumentParser:
    """Build argument parser for CLI."""
    p = argparse.ArgumentParser(
        prog="color3",
        description="Color³ - find days where month, date and weekday share a color",
    )
    p.add_argument("--config", default=None, help="Path to app config (.json/.yaml)")
    p.add_argument("--log-level", default=None, help="Override the configured log level")
    p.add_argument("--store-dir", default=None, help="Override the submission store directory")
    sub = p.add_subparsers(dest="cmd", required=True)

    classify_p = sub.add_parser("classify", help="Classify hex colors into families")
    classify_p.add_argument("hex", nargs="+", help="Hex colors, e.g. '#2563EB'")
    classify_p.set_defaults(func=cmd_classify)

    matches_p = sub.add_parser("matches", help="Tri-color days for a submission file")
    matches_p.add_argument("submission", help="Path to submission JSON")
    matches_p.add_argument("--months", type=_positive_int, default=None, help="Months to search")
    matches_p.set_defaults(func=cmd_matches)

    submit_p = sub.add_parser("submit", help="Validate and store a submission")
    submit_p.add_argument("submission", help="Path to submission JSON")
    submit_p.add_argument("--id", default=None, help="Update this existing submission")
    submit_p.set_defaults(func=cmd_submit)

    seed_p = sub.add_parser("seed", help="Add synthetic submissions to the store")
    seed_p.add_argument("--count", type=int, default=50, help="Number of submissions")
    seed_p.add_argument("--seed", type=int, default=None, help="Random seed")
    seed_p.set_defaults(func=cmd_seed)

    aggregate_p = sub.add_parser("aggregate", help="Population family statistics")
    aggregate_p.add_argument("--consensus", action="store_true", help="Include consensus")
    aggregate_p.add_argument("--json", action="store_true", help="Print JSON")
    aggregate_p.set_defaults(func=cmd_aggregate)

    community_p = sub.add_parser("community", help="Tri-color days of the community mapping")
    community_p.add_argument("--months", type=_positive_int, default=None, help="Months to search")
    community_p.set_defaults(func=cmd_community)

    return p


def _load_config(args: argparse.Namespace) -> AppConfig:
    config = load_app_config(args.config)
    updates: dict[str, Any] = {}
    if args.store_dir:
        updates["store_dir"] = args.store_dir
    if args.log_level:
        updates["logging"] = {**config.logging.model_dump(), "level": args.log_level.upper()}
    if updates:
        config = AppConfig.model_validate({**config.model_dump(), **updates})
    return config


def main(argv: list[str] | None = None) -> int:
    """Main entry point for CLI.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    p = build_arg_parser()
    args = p.parse_args(argv)

    try:
        config = _load_config(args)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]ERROR: {escape(str(e))}[/red]")
        return 1

    configure_logging(config)

    try:
        return args.func(args, config)
    except (Color3Error, FileNotFoundError, ValueError) as e:
        logger.error(f"{args.cmd} failed: {e}")
        console.print(f"[red]ERROR: {escape(str(e))}[/red]")
        return 1


if __name__ == "__main__":
    sys.exit(main())
