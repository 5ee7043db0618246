"""Command-line interface for snippetscope"""

import click
from pathlib import Path
from rich.console import Console
from rich.panel import Panel
import json
import logging

from .core.config import settings, configure_logging
from .core.analysis_engine import AnalysisEngine
from .analyzers.analyzer import AnalysisResult
from .reports.console_reporter import render_snippet
from .reports.report_generator import create_report_generator
from .utils.snippet_extractor import extract_snippet


console = Console()
logger = logging.getLogger(__name__)


@click.group()
@click.version_option(version='0.1.0')
@click.option('--verbose', '-v', is_flag=True, help='🔧 Enable debug logging')
def main(verbose):
    """🔍 snippetscope - code excerpts for analysis reports

    Extract context-aware snippets around reported lines and render them
    in console or JSON reports.
    """
    configure_logging(verbose=verbose)


@main.command()
@click.argument('path', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument('line', type=int)
@click.option('--context', '-c', type=click.IntRange(min=0), default=None,
              help='📏 Lines of context above and below the target line')
@click.option('--format', '-f', 'output_format', type=click.Choice(['console', 'json']), default='console',
              help='📊 Output format')
def snippet(path, line, context, output_format):
    """✂️  Show the snippet for LINE of the file at PATH"""
    if line < 1:
        raise click.BadParameter("line numbers start at 1", param_hint="LINE")

    radius = context if context is not None else settings.snippet_context_lines
    result = extract_snippet(path, line, radius)
    if result is None:
        raise click.ClickException(f"Could not read a snippet from {path}")

    if output_format == 'json':
        click.echo(json.dumps(result.to_dict(), indent=2))
        return

    console.print(Panel(
        render_snippet(result),
        title=f"[bold]{path}:{line}[/bold]",
        border_style="cyan"
    ))


@main.command()
@click.argument('path', type=click.Path(exists=True, path_type=Path))
@click.option('--output', '-o', type=click.Path(path_type=Path), help='💾 Output file for report')
@click.option('--format', '-f', 'output_format', type=click.Choice(['console', 'json']), default='console',
              help='📊 Output format')
@click.option('--no-snippets', is_flag=True, help='🚫 Leave code snippets out of the report')
def analyze(path, output, output_format, no_snippets):
    """🎯 Analyze PATH and report issues with code snippets"""
    try:
        settings.validate_settings()
    except ValueError as e:
        raise click.ClickException(str(e))

    engine = AnalysisEngine({'show_code_snippets': False} if no_snippets else None)
    result = engine.analyze_path(path)

    generator = create_report_generator(console)
    generator.generate_report(result, output_format, output)
    if output:
        console.print(f"[green]Report saved to {output}[/green]")


@main.command()
@click.argument('report', type=click.Path(exists=True, dir_okay=False, path_type=Path))
def render(report):
    """🖨️  Render a saved JSON report in the console"""
    try:
        with open(report, 'r', encoding='utf-8') as f:
            data = json.load(f)
        result = AnalysisResult.from_dict(data)
    except (OSError, ValueError, KeyError, TypeError) as e:
        raise click.ClickException(f"Invalid report {report}: {e}")

    create_report_generator(console).generate_report(result, 'console')


if __name__ == '__main__':
    main()
