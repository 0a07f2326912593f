"""
Command-Line Interface

CLI using rich for colored output and formatted reports.
Fetches a URL (or reads a local file), analyzes it and prints the
report either for humans (rich) or for tools (json).
"""

import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from . import __version__
from .checks import rule_names
from .config import load_config
from .errors import AnalyzerError
from .fetch import fetch_markup
from .models import Config, Report, Severity
from .scorer import A11yAnalyzer


console = Console()

BAND_COLORS = {"good": "green", "fair": "yellow", "poor": "red"}

SEVERITY_STYLES = {
    Severity.ERROR: ("red", "!", "Errors"),
    Severity.WARNING: ("yellow", "⚠", "Warnings"),
    Severity.NOTICE: ("blue", "i", "Notices"),
}


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@click.command()
@click.argument('url', required=False)
@click.option(
    '--file', 'file_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False),
    help='Analyze a local HTML file instead of fetching a URL'
)
@click.option(
    '--rules',
    default=None,
    help=f'Comma separated rules to run. Available: {", ".join(rule_names())}'
)
@click.option(
    '--output',
    default=None,
    type=click.Choice(['rich', 'json'], case_sensitive=False),
    help='Output format: rich (colored terminal) or json. Defaults to A11Y_OUTPUT from .env'
)
@click.option(
    '--parallel/--sequential',
    default=None,
    help='Run rules concurrently on worker threads'
)
@click.option(
    '--env-file',
    default=None,
    type=click.Path(exists=True),
    help='Path to .env file (defaults to ./.env)'
)
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
@click.option('--debug', is_flag=True, help='Show tracebacks for unexpected errors')
@click.version_option(version=__version__)
def main(
    url: Optional[str],
    file_path: Optional[str],
    rules: Optional[str],
    output: Optional[str],
    parallel: Optional[bool],
    env_file: Optional[str],
    verbose: bool,
    debug: bool
):
    """
    A11y Analyzer - static accessibility checks for web pages

    Fetches URL (or reads --file), checks images, form labels, heading
    order and landmarks, and prints a scored report.

    Examples:

      # Analyze a live page
      a11y-analyzer https://example.com

      # Local file, JSON for scripts
      a11y-analyzer --file index.html --output json

      # Only some rules
      a11y-analyzer https://example.com --rules image-alt,form-label
    """
    _setup_logging(verbose)

    if bool(url) == bool(file_path):
        raise click.UsageError("Provide exactly one of URL or --file.")

    try:
        # Load configuration, CLI flags win over environment
        config = load_config(Path(env_file) if env_file else None)
        updates = {}
        if rules is not None:
            updates["rules"] = rules
        if parallel is not None:
            updates["parallel_rules"] = parallel
        if updates:
            config = Config(**{**config.model_dump(), **updates})
        output = (output or config.output).lower()

        analyzer = A11yAnalyzer(config)

        if file_path:
            markup = Path(file_path).read_bytes()
            source = Path(file_path).name
        elif output == 'json':
            markup = fetch_markup(url, config)
            source = url
        else:
            with console.status(f"[cyan]Fetching {escape(url)}...", spinner="dots"):
                markup = fetch_markup(url, config)
            source = url

        if config.parallel_rules:
            report = asyncio.run(analyzer.analyze_async(markup, source))
        else:
            report = analyzer.analyze(markup, source)

        if output == 'json':
            _output_json(report)
        else:
            _output_rich(report)

    except KeyboardInterrupt:
        console.print("\n[yellow]⚠️  Interrupted by user[/yellow]")
        sys.exit(130)
    except AnalyzerError as e:
        console.print(f"[red]❌ {escape(str(e))}[/red]")
        sys.exit(1)
    except Exception as e:
        console.print(f"[red]❌ Error: {escape(str(e))}[/red]")
        if debug:
            console.print_exception()
        sys.exit(1)


def _output_rich(report: Report):
    """Output report in rich formatted terminal output"""
    color = BAND_COLORS[report.band]

    console.print()
    console.print(Panel.fit(
        f"[bold]Accessibility Report[/bold]\n"
        f"Source: {escape(report.source)}\n"
        f"Compliance score: [bold {color}]{report.score}/100[/]",
        border_style="cyan"
    ))

    counts = Table(show_header=True, header_style="bold magenta")
    counts.add_column("Severity", style="cyan")
    counts.add_column("Count", justify="right")
    for severity, (style, _, label) in SEVERITY_STYLES.items():
        counts.add_row(label, f"[{style}]{len(report.findings(severity))}[/]")
    counts.add_row("[bold]Total[/bold]", f"[bold]{report.total}[/bold]")
    console.print(counts)

    # Summary of critical issues
    console.print("\n[bold]Critical Issues[/bold]")
    if report.errors:
        for finding in report.errors[:3]:
            console.print(f"  • {finding.title}")
        if len(report.errors) > 3:
            console.print(f"  [blue]+ {len(report.errors) - 3} more errors[/blue]")
    else:
        console.print("  [green]No critical issues found![/green]")

    for severity, (style, marker, label) in SEVERITY_STYLES.items():
        findings = report.findings(severity)
        console.print(f"\n[bold {style}]{label} ({len(findings)})[/]")
        if not findings:
            console.print(f"  [green]No {label.lower()} found. Great job![/green]")
            continue

        for finding in findings:
            console.print(f"  [{style}]{marker}[/] [bold]{finding.title}[/bold]")
            console.print(f"     {finding.description}")
            if finding.locator:
                console.print(f"     Element: [dim]{escape(finding.locator)}[/dim]")
            if finding.recommendation:
                console.print(f"     💡 {finding.recommendation}")

    console.print(
        "\n[dim]Automated checks only; they cannot capture every accessibility issue.[/dim]"
    )
    console.print()


def _output_json(report: Report):
    """Output report as JSON"""
    print(json.dumps(report.to_payload(), indent=2))


if __name__ == "__main__":
    main()
