"""
CLI integration for code generation functionality.

Provides command-line interface for the codegen module.
"""

import argparse
from pathlib import Path
from typing import Any, Dict

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.syntax import Syntax
from rich.tree import Tree
from rich import box

from umlgen.logging_config import get_logger
from umlgen.utils import ModelLoaderError, load_model
from . import (
    EmitResult,
    EmitterConfig,
    GeneratorError,
    MemoryFileSink,
    ModelSnapshot,
    convert_mdj_document,
    generate_model,
    select_package,
)
from .core.config import ConfigError, get_config_manager
from .core.model import ModelNode, NodeKind

logger = get_logger(__name__)


class CLIError(Exception):
    """Exception raised for CLI-related errors."""

    pass


# Initialize rich console
console = Console()


def add_codegen_args(parser: argparse.ArgumentParser):
    """Add code generation arguments to a parser."""

    input_group = parser.add_mutually_exclusive_group(required=False)
    input_group.add_argument("file", nargs="?", help="Model file (.mdj) to generate from")
    input_group.add_argument("--url", help="URL to fetch the model document from")

    parser.add_argument(
        "--output",
        "-o",
        metavar="DIR",
        default=".",
        help="Directory receiving the generated package (default: current directory)",
    )

    parser.add_argument(
        "--package",
        "-p",
        metavar="NAME_OR_ID",
        help="Package to generate (default: first model of the project)",
    )

    parser.add_argument("--config", metavar="FILE", help="JSON configuration file")

    style_group = parser.add_argument_group("style options")
    style_group.add_argument(
        "--tab", action="store_true", default=None, help="Indent with tabs"
    )
    style_group.add_argument(
        "--indent-spaces", type=int, metavar="N", help="Spaces per indentation level"
    )
    style_group.add_argument(
        "--prefix", metavar="PREFIX", help="Prefix for generated class and file names"
    )
    style_group.add_argument(
        "--no-docs",
        action="store_true",
        help="Don't emit documentation comments",
    )

    run_group = parser.add_argument_group("run options")
    run_group.add_argument(
        "--dry-run",
        action="store_true",
        help="Print generated files instead of writing them",
    )
    run_group.add_argument(
        "--list-packages",
        action="store_true",
        help="Show the package tree of the model and exit",
    )
    run_group.add_argument(
        "--verbose", "-v", action="store_true", help="Show debug logging"
    )
    run_group.add_argument("--log-file", metavar="FILE", help="Also log to this file")


def handle_codegen_command(args: argparse.Namespace) -> int:
    """
    Handle code generation command from CLI arguments.

    Args:
        args: Parsed command line arguments

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    try:
        if not (args.file or args.url):
            raise CLIError("Input source required (file or --url)")

        snapshot = _load_snapshot(args)

        if args.list_packages:
            return _list_packages(snapshot)

        config = _build_config(args)
        snapshot = select_package(snapshot, args.package)

        if args.dry_run:
            return _preview(snapshot, config, args.output)

        return _generate(snapshot, config, args.output)

    except CLIError as e:
        console.print(f"[red]✗ Error:[/red] {e}")
        return 1
    except (ConfigError, GeneratorError, ModelLoaderError, FileNotFoundError) as e:
        logger.debug("Generation aborted", exc_info=True)
        console.print(f"[red]✗ Error:[/red] {e}")
        return 1


def _load_snapshot(args: argparse.Namespace) -> ModelSnapshot:
    """Load and convert the model document."""
    source, document = load_model(file_path=args.file, url=args.url)
    console.print(f"📄 Loaded: {source}")
    try:
        return convert_mdj_document(document)
    except ValueError as e:
        raise CLIError(str(e)) from e


def _build_config(args: argparse.Namespace) -> EmitterConfig:
    """Build configuration from file and command line overrides."""
    overrides: Dict[str, Any] = {}

    if args.tab:
        overrides["use_tabs"] = True
    if args.indent_spaces is not None:
        overrides["indent_spaces"] = args.indent_spaces
    if args.prefix is not None:
        overrides["name_prefix"] = args.prefix
    if args.no_docs:
        overrides["doc_string"] = False

    manager = get_config_manager()
    config = manager.get_config(overrides, args.config)

    for warning in manager.validate_config(config):
        console.print(f"[yellow]⚠️  {warning}[/yellow]")

    return config


def _generate(snapshot: ModelSnapshot, config: EmitterConfig, output: str) -> int:
    """Generate into the output directory and report."""
    output_dir = Path(output)
    if not output_dir.is_dir():
        raise CLIError(f"Output directory does not exist: {output_dir}")

    with console.status("[cyan]Generating code...[/cyan]"):
        result = generate_model(snapshot, output_dir, config)

    _print_result(result)
    return 0 if result.success else 1


def _preview(snapshot: ModelSnapshot, config: EmitterConfig, output: str) -> int:
    """Render into memory and print every file."""
    sink = MemoryFileSink()
    result = generate_model(snapshot, Path(output), config, sink)

    for path, content in sink.files.items():
        if not content:
            continue
        console.print(
            Panel(
                Syntax(content, "dart", theme="monokai", line_numbers=False),
                title=f"📄 {path}",
                border_style="blue",
            )
        )

    _print_result(result)
    return 0 if result.success else 1


def _print_result(result: EmitResult):
    """Print generated paths and failures."""
    summary = result.summary()

    if result.generated:
        table = Table(title="✅ Generated Files", box=box.ROUNDED, title_style="bold green")
        table.add_column("Path", style="cyan")
        for path in result.generated:
            table.add_row(str(path))
        console.print(table)

    if result.failures:
        table = Table(title="✗ Failures", box=box.ROUNDED, title_style="bold red")
        table.add_column("Element", style="bold")
        table.add_column("Error", style="red")
        for failure in result.failures:
            table.add_row(failure.node_path, str(failure.error))
        console.print(table)

    console.print(
        f"[bold]{summary['files']}[/bold] file(s), "
        f"[bold]{summary['directories']}[/bold] director(ies), "
        f"[bold]{summary['failures']}[/bold] failure(s)"
    )


def _list_packages(snapshot: ModelSnapshot) -> int:
    """Print the package tree."""
    tree = Tree(f"📦 [bold]{snapshot.root.name or '(unnamed)'}[/bold]")
    _add_tree_children(tree, snapshot.root)
    console.print(tree)
    return 0


def _add_tree_children(tree: Tree, node: ModelNode):
    icons = {
        NodeKind.PACKAGE: "📦",
        NodeKind.CLASS: "🔷",
        NodeKind.INTERFACE: "🔶",
        NodeKind.ENUMERATION: "🔢",
    }
    for child in node.children():
        icon = icons.get(child.kind)
        if icon is None:
            continue
        branch = tree.add(f"{icon} {child.name} [dim]({child.id})[/dim]")
        if child.kind == NodeKind.PACKAGE:
            _add_tree_children(branch, child)
