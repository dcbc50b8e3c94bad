"""Command-line runner: compute analytics from a directory of CSV row sets."""

import argparse
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from merchandising.config import load_engine_config
from merchandising.domains import inventory, sales
from merchandising.engine import build_analytics, build_inventory_report
from merchandising.errors import AnalyticsError, ConfigError
from merchandising.report import AnalyticsReport
from merchandising.utils.io import ROW_SET_FILES, CsvRowSource, read_row_set, write_output

type ValidationRow = dict[str, bool | str | int]

console = Console()
logger = logging.getLogger("merchandising")


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def validate_all(data_dir: Path) -> list[ValidationRow]:
    results = []
    for row_set in ROW_SET_FILES:
        try:
            rows = read_row_set(data_dir, row_set)
        except FileNotFoundError as exc:
            results.append({"row_set": row_set, "valid": False, "error": str(exc)})
            continue

        match row_set:
            case "sales":
                outcome = sales.validate(rows)
            case _:
                outcome = inventory.validate(rows, schema_name=row_set)

        match outcome:
            case {"status": "ok", "row_count": n}:
                results.append({"row_set": row_set, "valid": True, "rows": n})
            case {"status": "error", "message": msg}:
                results.append({"row_set": row_set, "valid": False, "error": msg})
    return results


def print_validation(results: list[ValidationRow]) -> None:
    table = Table(title="Validation Results")
    table.add_column("Row set")
    table.add_column("Valid")
    table.add_column("Details")

    for r in results:
        status = "[green]✓[/green]" if r["valid"] else "[red]✗[/red]"
        detail = r.get("error", f"{r.get('rows', 0)} rows")
        table.add_row(str(r["row_set"]), status, str(detail))

    console.print(table)


def print_report(report: AnalyticsReport, days: int) -> None:
    overview = report.overview
    table = Table(title=f"Overview (last {days} days)")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right")
    table.add_row("Active products", f"{overview.total_products:,}")
    table.add_row("Inventory value", f"${overview.inventory_value:,.2f}")
    table.add_row("Low stock items", f"{overview.low_stock_items:,}")
    table.add_row("Total sales", f"${overview.total_sales:,.2f}")
    table.add_row("Units sold", f"{overview.total_units:,}")
    table.add_row("Revenue per unit", f"${overview.avg_order_value:,.2f}")
    console.print(table)

    top = Table(title="Top Products")
    top.add_column("Product")
    top.add_column("Category")
    top.add_column("Units", justify="right")
    top.add_column("Revenue", justify="right")
    for p in report.top_products:
        top.add_row(p.name, p.category, f"{p.total_quantity:,}", f"${p.total_revenue:,.2f}")
    console.print(top)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Compute merchandising analytics from CSV row sets")
    parser.add_argument("--env", default="development", help="Configuration profile")
    parser.add_argument("--data-dir", type=Path, help="Directory holding the row set CSVs")
    parser.add_argument("--days", help="Sales window in days")
    parser.add_argument("--location", help="Location id, or 'all'")
    parser.add_argument("--output", type=Path, help="Write the report JSON here")
    parser.add_argument("--inventory", action="store_true", help="Report the inventory listing instead")
    parser.add_argument("--search", help="Inventory listing search term")
    parser.add_argument("--validate", action="store_true", help="Only validate the row sets")
    args = parser.parse_args(argv)

    try:
        config = load_engine_config(args.env)
    except ConfigError as exc:
        console.print(f"[red]{exc}[/red]")
        return 1

    setup_logging(config.log_level)
    data_dir = args.data_dir or config.data_dir

    if args.validate:
        results = validate_all(data_dir)
        print_validation(results)
        return 0 if all(r["valid"] for r in results) else 1

    source = CsvRowSource(data_dir)
    try:
        if args.inventory:
            result = build_inventory_report(source, search=args.search, location=args.location)
            console.print(f"[bold]{len(result['items'])} stock rows[/bold] {result['summary']}")
        else:
            params = {"days": args.days, "location": args.location}
            report = build_analytics(source, params, config=config)
            print_report(report, len(report.sales_series))
            result = report.to_dict()
    except AnalyticsError as exc:
        logger.error(str(exc))
        console.print("[bold red]Analytics computation failed.[/bold red]")
        return 1

    if args.output:
        write_output(result, args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
