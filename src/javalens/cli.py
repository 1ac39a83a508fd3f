"""
javalens Command Line Interface.

This module provides the CLI entry point for querying codeanalyzer output.
"""

import sys
from pathlib import Path

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from javalens.analysis import (
    AnalysisInputError,
    ApplicationBuilder,
    JavaAnalysis,
    JavalensError,
    SchemaValidationError,
    read_analysis_document,
)
from javalens.config import ConfigurationError, JavalensConfig, configure_logging, load_config
from javalens.version import __version__

console = Console()


def _fail(error: Exception) -> None:
    """Print an error and exit with status 1."""
    console.print(f"[red]Error:[/red] {error}")
    sys.exit(1)


def _analysis(ctx: click.Context, analysis_json: str) -> JavaAnalysis:
    """Create a JavaAnalysis from the loaded configuration."""
    config: JavalensConfig = ctx.obj["config"]
    return JavaAnalysis(
        analysis_json,
        analysis_level=config.analysis.level,
        analysis_file=config.analysis.analysis_file,
    )


@click.group()
@click.version_option(version=__version__, prog_name="javalens")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True),
    help="Path to configuration file",
)
@click.pass_context
def main(ctx: click.Context, verbose: bool, config_path: str | None) -> None:
    """javalens: query Java static analysis output.

    Loads the analysis.json written by the codeanalyzer tool and prints
    classes, methods and call relationships.
    """
    ctx.ensure_object(dict)
    try:
        config = load_config(config_path)
    except (ConfigurationError, FileNotFoundError) as e:
        _fail(e)
    configure_logging(config.logging, verbose=verbose or config.debug)
    ctx.obj["verbose"] = verbose
    ctx.obj["config"] = config


@main.command()
@click.argument("analysis_json", type=click.Path(exists=True))
@click.pass_context
def classes(ctx: click.Context, analysis_json: str) -> None:
    """List the classes declared in ANALYSIS_JSON."""
    analysis = _analysis(ctx, analysis_json)
    try:
        all_classes = analysis.get_all_classes()
        table = Table(title=f"Classes ({len(all_classes)})")
        table.add_column("Class", style="cyan")
        table.add_column("File", style="green")
        table.add_column("Methods", justify="right", style="yellow")
        for name in sorted(all_classes):
            table.add_row(
                name,
                analysis.get_file_path(name),
                str(len(all_classes[name].callable_declarations)),
            )
    except JavalensError as e:
        _fail(e)
    console.print(table)


@main.command()
@click.argument("analysis_json", type=click.Path(exists=True))
@click.argument("class_name")
@click.pass_context
def methods(ctx: click.Context, analysis_json: str, class_name: str) -> None:
    """List the methods of CLASS_NAME."""
    analysis = _analysis(ctx, analysis_json)
    try:
        callables = analysis.get_methods_of_class(class_name)
    except JavalensError as e:
        _fail(e)

    table = Table(title=class_name)
    table.add_column("Signature", style="cyan")
    table.add_column("Return", style="green")
    table.add_column("Lines", style="dim")
    table.add_column("Complexity", justify="right", style="yellow")
    for callable_ in callables:
        table.add_row(
            callable_.signature,
            callable_.return_type or "",
            f"{callable_.start_line}-{callable_.end_line}",
            "" if callable_.cyclomatic_complexity is None else str(callable_.cyclomatic_complexity),
        )
    console.print(table)


@main.command()
@click.argument("analysis_json", type=click.Path(exists=True))
@click.argument("class_name")
@click.argument("signature")
@click.pass_context
def method(ctx: click.Context, analysis_json: str, class_name: str, signature: str) -> None:
    """Show details of the method SIGNATURE in CLASS_NAME."""
    analysis = _analysis(ctx, analysis_json)
    try:
        callable_ = analysis.get_method(class_name, signature)
        file_path = analysis.get_file_path(class_name)
    except JavalensError as e:
        _fail(e)

    details = Table(show_header=False, box=None)
    details.add_column("Field", style="cyan")
    details.add_column("Value", style="green")
    details.add_row("File", file_path)
    details.add_row("Declaration", callable_.declaration)
    details.add_row("Return type", callable_.return_type or "")
    details.add_row("Lines", f"{callable_.start_line}-{callable_.end_line}")
    details.add_row("Constructor", str(callable_.is_constructor))
    details.add_row("Entry point", str(callable_.is_entrypoint))
    if callable_.thrown_exceptions:
        details.add_row("Throws", ", ".join(callable_.thrown_exceptions))
    console.print(Panel(details, title=f"{class_name}.{signature}"))

    params = Table(title="Parameters")
    params.add_column("Name", style="cyan")
    params.add_column("Type", style="green")
    for parameter in analysis.get_parameters(callable_):
        params.add_row(parameter.name or "", parameter.type)
    console.print(params)


@main.command()
@click.argument("analysis_json", type=click.Path(exists=True))
@click.argument("class_name")
@click.argument("signature")
@click.pass_context
def callees(ctx: click.Context, analysis_json: str, class_name: str, signature: str) -> None:
    """List the methods called by SIGNATURE in CLASS_NAME."""
    analysis = _analysis(ctx, analysis_json)
    try:
        details = analysis.get_callees(class_name, signature)
    except JavalensError as e:
        _fail(e)

    table = Table(title=f"Callees of {class_name}.{signature}")
    table.add_column("Class", style="cyan")
    table.add_column("Signature", style="green")
    table.add_column("Declared", style="yellow")
    for detail in details:
        table.add_row(
            detail.klass,
            detail.method.signature,
            "no" if detail.method.is_implicit else "yes",
        )
    console.print(table)


@main.command()
@click.argument("analysis_json", type=click.Path(exists=True))
@click.pass_context
def summary(ctx: click.Context, analysis_json: str) -> None:
    """Show build statistics for ANALYSIS_JSON."""
    config: JavalensConfig = ctx.obj["config"]
    builder = ApplicationBuilder()
    try:
        document = read_analysis_document(Path(analysis_json), config.analysis.analysis_file)
        builder.build(document)
    except (AnalysisInputError, SchemaValidationError) as e:
        _fail(e)

    stats = builder.last_stats
    table = Table(show_header=False, box=None)
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("Files", str(stats.files))
    table.add_row("Types", str(stats.types))
    table.add_row("Callables", str(stats.callables))
    table.add_row("Call graph edges", str(stats.call_graph_edges))
    table.add_row("Dependency edges", str(stats.dependency_edges))
    table.add_row("Synthesized callables", str(stats.synthesized))
    console.print(Panel(table, title=f"javalens v{__version__}"))


if __name__ == "__main__":
    main()
