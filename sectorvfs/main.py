"""
Command-line interpreter for a SectorVFS medium.

Run with: python -m sectorvfs --root /usd ls /
"""

import argparse
import logging
from typing import Optional, Sequence

from rich.console import Console
from rich.table import Table
from rich import box
from rich.markup import escape

from .core.config import VFSConfig
from .core.exceptions import VFSException
from .core.logger import configure_logging
from .vfs import VirtualFileSystem


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sectorvfs",
        description="Manage virtual files stored in flat sector files.")
    parser.add_argument("--root", help="base directory of the sector store")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="log every index and sector operation")

    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("init", help="create the index file if it is missing")

    create = commands.add_parser("create", help="create an empty file")
    create.add_argument("path")
    create.add_argument("--no-overwrite", action="store_true",
                        help="fail if the file already exists")

    delete = commands.add_parser("delete", help="delete a file")
    delete.add_argument("path")

    exists = commands.add_parser("exists", help="check whether a file exists")
    exists.add_argument("path")

    sector = commands.add_parser("sector", help="print the sector of a file")
    sector.add_argument("path")

    ls = commands.add_parser("ls", help="list a directory")
    ls.add_argument("path", nargs="?", default="/")
    ls.add_argument("-r", "--recursive", action="store_true")

    cat = commands.add_parser("cat", help="print the content of a file")
    cat.add_argument("path")

    write = commands.add_parser("write", help="replace the content of a file")
    write.add_argument("path")
    write.add_argument("text")

    return parser


def run_command(vfs: VirtualFileSystem, args: argparse.Namespace, console: Console) -> int:
    """Execute one parsed command and return the process exit code."""
    if args.command == "init":
        vfs.init()
        console.print("[INIT] Initialized", markup=False)
    elif args.command == "create":
        sector = vfs.create_file(args.path, overwrite=not args.no_overwrite)
        console.print(f"[bold green]✓[/bold green] created {escape(args.path)} in sector {sector}")
    elif args.command == "delete":
        vfs.delete_file(args.path)
        console.print(f"[bold green]✓[/bold green] deleted {escape(args.path)}")
    elif args.command == "exists":
        found = vfs.file_exists(args.path)
        console.print("yes" if found else "no")
        return 0 if found else 1
    elif args.command == "sector":
        sector = vfs.get_sector(args.path)
        if sector is None:
            console.print(f"[bold yellow]⚠[/bold yellow] no such file: {escape(args.path)}")
            return 1
        console.print(str(sector))
    elif args.command == "ls":
        directory = vfs.read_index()
        table = Table(title=args.path, box=box.SIMPLE)
        table.add_column("Name", style="cyan")
        table.add_column("Sector", justify="right", style="magenta")
        base = args.path.rstrip("/")
        for name in directory.list_children(args.path, args.recursive):
            sector = None if name.endswith("/") else directory.lookup(f"{base}/{name}")
            table.add_row(name, "-" if sector is None else str(sector))
        console.print(table)
    elif args.command == "cat":
        data = vfs.read_file(args.path)
        console.print(data.decode(vfs.config.encoding, errors="replace"),
                      markup=False, highlight=False, end="")
    elif args.command == "write":
        sector = vfs.write_file(args.path, args.text)
        console.print(f"[bold green]✓[/bold green] wrote {escape(args.path)} (sector {sector})")
    return 0


def main(argv: Optional[Sequence[str]] = None, console: Optional[Console] = None) -> int:
    """Main entry point of the application."""
    args = build_parser().parse_args(argv)
    console = console or Console()

    config = VFSConfig.from_env()
    if args.root:
        config.base_directory = args.root
    try:
        configure_logging(logging.DEBUG if args.verbose else config.log_level)
        vfs = VirtualFileSystem(config)
        return run_command(vfs, args, console)
    except VFSException as e:
        console.print(f"[bold red]✗[/bold red] {escape(str(e))}", highlight=False)
        return 1
    except ValueError as e:
        console.print(f"[bold red]✗[/bold red] invalid argument: {escape(str(e))}", highlight=False)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
