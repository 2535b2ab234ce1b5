"""
MAVLink schema compiler - command line interface.
"""
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from .compiler import compile_dialects
from .emitter import IREmitter

console = Console()


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mavschema",
        description="Compile MAVLink dialect XML files into layout/checksum IR",
    )
    parser.add_argument(
        "xml_files",
        nargs="+",
        type=Path,
        help="Dialect XML files, processed in the given order",
    )
    parser.add_argument(
        "--output-dir", "-o",
        type=Path,
        default=Path("build"),
        help="Directory for <dialect>.json and magic_numbers.py (default: build)",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Show debug output",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    try:
        return run(args)
    except KeyboardInterrupt:
        console.print("\n\n[yellow]Operation cancelled.[/yellow]")
        return 1


def run(args: argparse.Namespace) -> int:
    """Compile the dialects named in `args` and write the outputs."""
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )

    console.print(Panel.fit(
        "[bold cyan]MAVLink Schema Compiler[/bold cyan]",
        border_style="cyan"
    ))

    console.print(f"\n[bold]Compiling {len(args.xml_files)} dialect(s)...[/bold]")
    result = compile_dialects(args.xml_files)

    for path, error in result.errors.items():
        console.print(f"  [red]✗[/red] {path}: {error.cause}")

    table = Table(title="Compiled Dialects")
    table.add_column("Dialect", style="cyan")
    table.add_column("Enums", style="yellow", justify="right")
    table.add_column("Messages", style="yellow", justify="right")
    table.add_column("Commands", style="yellow", justify="right")

    emitter = IREmitter()
    for dialect in result.dialects:
        emitter.write_dialect_json(dialect, args.output_dir)
        table.add_row(
            dialect.name,
            str(len(dialect.enums)),
            str(len(dialect.messages)),
            str(len(dialect.commands)),
        )
        console.print(f"  [green]✓[/green] {dialect.name}")

    emitter.write_magic_numbers(
        result.magic_numbers,
        args.output_dir,
        sources=[dialect.name for dialect in result.dialects],
    )

    console.print()
    console.print(table)

    if not result.ok:
        console.print(f"\n[bold red]✗ {len(result.errors)} dialect(s) failed[/bold red]")
        return 1

    console.print(Panel.fit(
        f"[bold green]Successfully completed![/bold green]\n\n"
        f"Output directory: [cyan]{args.output_dir}[/cyan]\n"
        f"Magic numbers: [yellow]{len(result.magic_numbers)}[/yellow] messages",
        border_style="green"
    ))
    return 0


if __name__ == "__main__":
    sys.exit(main())
