"""Command-line access to the healthcare metrics query catalogue."""

import argparse
import logging
import sys

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from healthcare_metrics import config
from healthcare_metrics.database import SQLiteDataSource, init_database
from healthcare_metrics.exceptions import HealthcareMetricsError, InvalidParameter
from healthcare_metrics.executor import QueryCatalogue, ResultSet
from healthcare_metrics.scripts.seed_database import seed_database

console = Console()


def parse_params(pairs: list[str] | None) -> dict[str, str]:
    """Turn ['key=value', ...] into a dict."""
    params = {}
    for pair in pairs or []:
        key, sep, value = pair.partition("=")
        if not sep or not key.strip():
            raise InvalidParameter(pair, "expected key=value")
        params[key.strip()] = value
    return params


def render_catalogue(catalogue: QueryCatalogue) -> Table:
    table = Table(title="Catalogued queries")
    table.add_column("Name", style="bold cyan", no_wrap=True)
    table.add_column("Description")
    table.add_column("Parameters")
    table.add_column("Columns", style="dim")

    for query in catalogue.list_queries():
        params = ", ".join(
            f"{p.name}: {p.type}" + ("" if p.required else f" = {p.default!r}")
            for p in query.parameters
        )
        table.add_row(query.name, query.description, params or "-", ", ".join(query.columns))
    return table


def render_result(result: ResultSet) -> Table:
    table = Table(title=result.query)
    for column in result.columns:
        table.add_column(column)
    for row in result:
        table.add_row(*("" if value is None else str(value) for value in row.values()))
    return table


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="healthcare-metrics",
        description="Run catalogued analytic queries against the healthcare database",
    )
    parser.add_argument("--db", default=None, help=f"SQLite database path (default: {config.DB_PATH})")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("list", help="List catalogued queries")

    run_parser = subparsers.add_parser("run", help="Run a catalogued query")
    run_parser.add_argument("name", help="Query name, see 'list'")
    run_parser.add_argument(
        "-p", "--param",
        action="append",
        metavar="KEY=VALUE",
        help="Query parameter, may be repeated",
    )

    init_parser = subparsers.add_parser("init-db", help="Create the schema")
    init_parser.add_argument("--seed", action="store_true", help="Also load mock data")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )

    if args.command == "init-db":
        if args.seed:
            counts = seed_database(args.db)
            console.print("[bold blue]Database seeded successfully![/bold blue]")
            for table, count in counts.items():
                console.print(f"  - {count} {table}")
        else:
            init_database(args.db)
            console.print("[bold blue]Schema created.[/bold blue]")
        return 0

    with SQLiteDataSource(args.db) as data_source:
        catalogue = QueryCatalogue(data_source)
        try:
            if args.command == "list":
                console.print(render_catalogue(catalogue))
            else:
                result = catalogue.run(args.name, parse_params(args.param))
                console.print(render_result(result))
        except HealthcareMetricsError as e:
            console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
