"""symindex CLI - Generate static symbol lookup tables."""

from __future__ import annotations

import logging

import click

from symindex.config import GenerationResult, GeneratorConfig
from symindex.errors import IndexGenerationError
from symindex.index.builder import build_index
from symindex.index.hasher import calc_hash
from symindex.index.verifier import search, search_depth, verify_table
from symindex.output import FORMATS, write_output
from symindex.pipeline import resolve_vocabulary, run_pipeline


def _setup_logging(verbose: bool) -> None:
    from rich.console import Console
    from rich.logging import RichHandler

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


@click.group()
def cli() -> None:
    """symindex - Build hash-ordered symbol tables for embedded runtimes."""
    pass


def _run_with_progress(config: GeneratorConfig) -> GenerationResult:
    """Run the pipeline with Rich progress display on stderr."""
    from rich.console import Console
    from rich.progress import Progress, SpinnerColumn, TextColumn, TimeElapsedColumn
    from rich.table import Table

    console = Console(stderr=True)

    with Progress(
        SpinnerColumn(),
        TextColumn("[bold blue]{task.description}"),
        TimeElapsedColumn(),
        console=console,
        transient=True,
    ) as progress:
        task = progress.add_task("Initialising...", total=None)

        def on_phase(name, label):
            progress.update(task, description=label)

        result = run_pipeline(config, progress_callback=on_phase)

    table = Table(title="Symbol Index", show_edge=False)
    table.add_column("Metric", style="bold")
    table.add_column("Value", justify="right")

    table.add_row("Symbols", str(result.stats["symbols"]))
    table.add_row("Max depth", str(result.stats["max_depth"]))
    table.add_row("Format", result.stats["format"])
    total_ms = sum(result.timings.values()) * 1000
    table.add_row("Duration", f"{total_ms:.1f}ms")

    console.print(table)

    if config.verbose and result.timings:
        timing_table = Table(title="Phase Timings", show_edge=False)
        timing_table.add_column("Phase", style="bold")
        timing_table.add_column("Time (ms)", justify="right")
        for phase, seconds in result.timings.items():
            timing_table.add_row(phase, f"{seconds * 1000:.1f}")
        console.print(timing_table)

    return result


@cli.command("generate")
@click.argument("vocabulary", required=False, type=click.Path(exists=True, dir_okay=False))
@click.option("-o", "--output", "output_path", default=None, help="Output file path (default: stdout)")
@click.option("-f", "--format", "output_format", default="c", type=click.Choice(FORMATS), help="Output format")
@click.option("--struct-name", default="SYM_INDEX", help="C struct type of each record")
@click.option("--table-name", default="base_index", help="C array name")
@click.option("--append", "append", multiple=True, help="Extra symbol to add after the vocabulary")
@click.option("--verbose", is_flag=True, help="Show debug logging and per-phase timings")
@click.option("--quiet", is_flag=True, help="Suppress all output except errors and the table")
def generate_cmd(
    vocabulary: str | None,
    output_path: str | None,
    output_format: str,
    struct_name: str,
    table_name: str,
    append: tuple[str, ...],
    verbose: bool,
    quiet: bool,
) -> None:
    """Build, verify and emit the symbol index.

    Uses the built-in mruby/c vocabulary unless VOCABULARY (one symbol per
    line) is given.
    """
    _setup_logging(verbose)

    config = GeneratorConfig(
        vocabulary_path=vocabulary,
        output_path=output_path,
        output_format=output_format,
        struct_name=struct_name,
        table_name=table_name,
        append=list(append),
        verbose=verbose,
        quiet=quiet,
    )

    try:
        if quiet:
            result = run_pipeline(config)
        else:
            result = _run_with_progress(config)
    except IndexGenerationError as e:
        raise click.ClickException(e.message) from e

    if output_path is None:
        click.echo(result.rendered, nl=False)
        return

    write_output(result.rendered, output_path)

    if not quiet:
        from rich.console import Console
        Console(stderr=True).print(f"[green]Output written to:[/green] {output_path}")


@cli.command("lookup")
@click.argument("names", nargs=-1, required=True)
@click.option("--vocabulary", default=None, type=click.Path(exists=True, dir_okay=False),
              help="Vocabulary file (default: built-in symbols)")
@click.option("--append", "append", multiple=True, help="Extra symbol to add after the vocabulary")
@click.pass_context
def lookup_cmd(ctx: click.Context, names: tuple[str, ...], vocabulary: str | None, append: tuple[str, ...]) -> None:
    """Search the index for NAMES the way the runtime does."""
    from rich.console import Console
    from rich.table import Table

    config = GeneratorConfig(vocabulary_path=vocabulary, append=list(append))
    try:
        symbols = resolve_vocabulary(config)
        index = build_index(symbols)
        verify_table(index, symbols)
    except IndexGenerationError as e:
        raise click.ClickException(e.message) from e

    table = Table(show_edge=False)
    table.add_column("Symbol", style="bold")
    table.add_column("Hash", justify="right")
    table.add_column("Position", justify="right")
    table.add_column("Depth", justify="right")

    missing = 0
    for name in names:
        position = search(index, name)
        if position is None:
            missing += 1
        table.add_row(
            name,
            f"0x{calc_hash(name):04x}",
            "-" if position is None else str(position),
            str(search_depth(index, name)),
        )

    Console().print(table)
    if missing:
        ctx.exit(1)


@cli.command("hash")
@click.argument("names", nargs=-1, required=True)
def hash_cmd(names: tuple[str, ...]) -> None:
    """Print the 16-bit hash of each of NAMES."""
    for name in names:
        h = calc_hash(name)
        click.echo(f"0x{h:04x} {h:5d} {name}")


if __name__ == "__main__":
    cli()
