#!/usr/bin/env python3
"""
Walkthrough of the SectorVFS virtual file system.

This example creates a throwaway sector store and demonstrates:
- Initializing the index file
- Creating virtual files and first-fit sector allocation
- Listing directories synthesized from path prefixes
- Writing and reading file content through sectors
- Deleting files and sector reuse
- Error handling

Run with: python examples/vfs_example.py
"""

import tempfile

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.rule import Rule
from rich import box

from sectorvfs import (
    VirtualFileSystem, VFSConfig, FileAlreadyExists, FileNotFound
)

console = Console()


def print_header(title: str, subtitle: str = ""):
    """Print a header panel"""
    if subtitle:
        full_title = f"[bold blue]{title}[/bold blue]\n[dim]{subtitle}[/dim]"
    else:
        full_title = f"[bold blue]{title}[/bold blue]"

    console.print(Panel(
        full_title,
        style="bright_blue",
        box=box.DOUBLE,
        padding=(1, 2)
    ))


def print_step(step_num: int, title: str, description: str = ""):
    """Print a step header"""
    step_text = f"[bold yellow]Step {step_num}: {title}[/bold yellow]"
    if description:
        step_text += f"\n[dim italic]{description}[/dim italic]"
    console.print(step_text)
    console.print()


def print_success(message: str):
    console.print(f"[bold green]✓[/bold green] {message}")


def print_info(message: str):
    console.print(f"[bold cyan]ℹ[/bold cyan] {message}")


def index_table(vfs: VirtualFileSystem) -> Table:
    """Render the current index as a table"""
    table = Table(title="Index", box=box.ROUNDED)
    table.add_column("Virtual path", style="cyan")
    table.add_column("Sector", style="magenta", justify="right")
    table.add_column("Bytes", style="green", justify="right")

    for entry in vfs.read_index():
        size = vfs.store.file_size(vfs.store.sector_name(entry.sector))
        table.add_row(entry.path, str(entry.sector), str(size))
    return table


def demonstrate_create(vfs: VirtualFileSystem):
    print_step(1, "Creating files",
               "Each file gets the smallest sector id not used by another file")
    for path in ["/a/b.txt", "/a/c.txt", "d.txt"]:
        sector = vfs.create_file(path)
        print_success(f"{path} -> sector {sector}")
    console.print(index_table(vfs))
    console.print()


def demonstrate_listing(vfs: VirtualFileSystem):
    print_step(2, "Listing directories",
               "Directories only exist as shared path prefixes")
    console.print(f"ls /      -> {vfs.list_directory('/')}")
    console.print(f"ls -r /a  -> {vfs.list_directory('/a', recursive=True)}")
    console.print()


def demonstrate_content(vfs: VirtualFileSystem):
    print_step(3, "Reading and writing content")
    vfs.write_file("/a/b.txt", "hello ")
    vfs.append_file("/a/b.txt", "sectors")
    print_info(f"/a/b.txt is stored at {vfs.sector_path('/a/b.txt')}")
    console.print(f"content: {vfs.read_file('/a/b.txt').decode()!r}")
    console.print()


def demonstrate_delete_and_reuse(vfs: VirtualFileSystem):
    print_step(4, "Deleting and reusing sectors")
    vfs.delete_file("/a/b.txt")
    print_success("deleted /a/b.txt, its sector is now empty and free")
    sector = vfs.create_file("/e.txt")
    print_success(f"/e.txt -> sector {sector}")
    console.print(index_table(vfs))
    console.print()


def demonstrate_errors(vfs: VirtualFileSystem):
    print_step(5, "Error handling")
    try:
        vfs.create_file("/e.txt", overwrite=False)
    except FileAlreadyExists as e:
        console.print(f"[bold red]✗[/bold red] {e}")
    try:
        vfs.delete_file("/missing.txt")
    except FileNotFound as e:
        console.print(f"[bold red]✗[/bold red] {e}")
    console.print()


def main():
    print_header("SectorVFS", "Named files on a medium of numbered sectors")

    with tempfile.TemporaryDirectory() as root:
        vfs = VirtualFileSystem(VFSConfig(base_directory=root))
        vfs.init()
        print_success(f"initialized index at {vfs.store.path_of(vfs.config.index_file_name)}")
        console.print()

        demonstrate_create(vfs)
        demonstrate_listing(vfs)
        demonstrate_content(vfs)
        demonstrate_delete_and_reuse(vfs)
        demonstrate_errors(vfs)

    console.print(Rule("[dim]Done[/dim]"))


if __name__ == "__main__":
    main()
