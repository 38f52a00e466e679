"""dm8-schema CLI - Main entry point."""

import json
import logging
from contextlib import contextmanager
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table
from typing_extensions import Annotated

from .config import settings
from .database import DmPlatform, DmSchemaManager, connect_dm8
from .errors import SchemaError

app = typer.Typer(
    name="dm8-schema",
    help="Inspect DM8 tables, columns and indexes",
    add_completion=False,
)

console = Console()
logger = logging.getLogger(__name__)

_state = {"schema": None}


def get_executor():
    """Open the query executor used by every command."""
    return connect_dm8(
        host=settings.host,
        port=settings.port,
        user=settings.user,
        password=settings.password,
    )


@contextmanager
def schema_manager():
    """Yield a DmSchemaManager bound to a fresh connection."""
    try:
        with get_executor() as executor:
            yield DmSchemaManager(
                executor,
                schema=_state["schema"] or settings.schema_name,
                database=settings.database,
            )
    except typer.Exit:
        raise
    except SchemaError as e:
        console.print(f"[red]Error: {e.message}[/red]")
        raise typer.Exit(1)
    except Exception as e:
        # Driver failures (connectivity, permissions, SQL errors)
        logger.debug("Catalog query failed", exc_info=True)
        console.print(f"[red]Database error: {e}[/red]")
        raise typer.Exit(1)


def _print_json(data):
    console.print_json(json.dumps(data, default=str))


@app.command()
def tables(
    as_json: Annotated[bool, typer.Option("--json", help="Print JSON")] = False,
):
    """List tables owned by the schema."""
    with schema_manager() as manager:
        names = manager.list_tables()

    if as_json:
        _print_json(names)
        return
    if not names:
        console.print(f"[yellow]No tables found in {manager.schema}[/yellow]")
        return
    for name in names:
        console.print(name)


@app.command()
def columns(
    table: Annotated[str, typer.Argument(help="Table name")],
    as_json: Annotated[bool, typer.Option("--json", help="Print JSON")] = False,
):
    """List the columns of a table."""
    with schema_manager() as manager:
        records = manager.list_columns(table)
        platform = manager.get_database_platform()

    if as_json:
        _print_json([record.to_dict() for record in records.values()])
        return
    if not records:
        console.print(f"[yellow]Table {table} not found or has no columns[/yellow]")
        raise typer.Exit(1)

    out = Table(title=f"{manager.schema}.{table.upper()}")
    out.add_column("Column", style="cyan")
    out.add_column("Type")
    out.add_column("Canonical", style="green")
    out.add_column("Length")
    out.add_column("Precision")
    out.add_column("Scale")
    out.add_column("Nullable")
    out.add_column("Default")
    for record in records.values():
        out.add_row(
            record.name,
            record.native_type,
            platform.type_mapping_for(record.native_type),
            _fmt(record.length),
            _fmt(record.precision),
            _fmt(record.scale),
            "yes" if record.nullable else "no",
            _fmt(record.default),
        )
    console.print(out)


@app.command()
def column(
    table: Annotated[str, typer.Argument(help="Table name")],
    name: Annotated[str, typer.Argument(help="Column name")],
):
    """Show a single column as JSON."""
    with schema_manager() as manager:
        record = manager.get_column(table, name)

    if record is None:
        console.print(f"[red]Column {name} not found in {table}[/red]")
        raise typer.Exit(1)
    _print_json(record.to_dict())


@app.command()
def indexes(
    table: Annotated[str, typer.Argument(help="Table name")],
    as_json: Annotated[bool, typer.Option("--json", help="Print JSON")] = False,
):
    """List the indexes of a table."""
    with schema_manager() as manager:
        records = manager.list_indexes(table)

    if as_json:
        _print_json([record.to_dict() for record in records.values()])
        return
    if not records:
        console.print(f"[yellow]No indexes found on {table}[/yellow]")
        return

    out = Table(title=f"Indexes on {table.upper()}")
    out.add_column("Index", style="cyan")
    out.add_column("Unique")
    out.add_column("Primary")
    out.add_column("Columns")
    for record in records.values():
        out.add_row(
            record.name,
            "yes" if record.is_unique else "no",
            "yes" if record.is_primary else "no",
            ", ".join(record.columns),
        )
    console.print(out)


@app.command()
def describe(
    table: Annotated[str, typer.Argument(help="Table name")],
):
    """Describe columns and indexes of a table as JSON."""
    with schema_manager() as manager:
        description = manager.introspect_table(table)

    _print_json({
        "table": description["table"],
        "columns": [record.to_dict() for record in description["columns"]],
        "indexes": [record.to_dict() for record in description["indexes"]],
    })


@app.command()
def types(
    native_type: Annotated[Optional[str], typer.Argument(help="Native type to resolve")] = None,
):
    """Show the canonical type for a native DM8 type, or the whole mapping."""
    platform = DmPlatform()
    if native_type:
        mapped = "" if platform.has_type_mapping_for(native_type) else " (fallback)"
        console.print(f"{native_type.lower()} -> {platform.type_mapping_for(native_type)}{mapped}")
        return

    out = Table(title=f"{platform.name} type mappings")
    out.add_column("Native", style="cyan")
    out.add_column("Canonical", style="green")
    for native, canonical in sorted(platform.all_type_mappings().items()):
        out.add_row(native, canonical)
    console.print(out)


@app.command()
def config():
    """Show current configuration."""
    console.print("[bold]Current Configuration[/bold]")
    console.print(f"  Server: {settings.host}:{settings.port}")
    console.print(f"  User: {settings.user or 'Not set'}")
    console.print(f"  Password configured: {'Yes' if settings.password else 'No'}")
    console.print(f"  Schema: {settings.schema_name or 'Not set'}")
    console.print(f"  Database: {settings.database or 'Not set'}")
    console.print(f"  Log level: {settings.log_level}")


def _fmt(value) -> str:
    return "" if value is None else str(value)


@app.callback()
def main(
    schema: Annotated[Optional[str], typer.Option("--schema", "-s", help="Schema (owner) to inspect")] = None,
    log_level: Annotated[Optional[str], typer.Option("--log-level", help="Logging level")] = None,
):
    """
    dm8-schema - Inspect DM8 catalog metadata.

    Connection settings come from DM8_* environment variables or a .env file.

    Examples:

        dm8-schema tables

        dm8-schema columns users

        dm8-schema --schema SYSDBA indexes users --json
    """
    _state["schema"] = schema
    level = (log_level or settings.log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


if __name__ == "__main__":
    app()
