"""Rich console reporter with inline code snippets"""

from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich import box

from .report_generator import BaseReporter, ReportGenerator
from ..analyzers.analyzer import AnalysisResult, CodeIssue
from ..utils.snippet_extractor import CodeSnippet


SEVERITY_COLORS = {
    'critical': 'red',
    'high': 'orange3',
    'medium': 'yellow',
    'low': 'green',
    'info': 'blue'
}

SEVERITY_ICONS = {
    'critical': '🚨',
    'high': '⚠️ ',
    'medium': '⚡',
    'low': '💡',
    'info': 'ℹ️ '
}


def render_snippet(snippet: CodeSnippet, highlight_style: str = "bold red") -> Table:
    """
    Build a table showing snippet lines with a line-number gutter.

    The target line is marked with '>' and highlighted. Source text is
    added as plain Text so brackets in code are never read as markup.
    """
    table = Table(show_header=False, box=box.SIMPLE, padding=(0, 1), pad_edge=False)
    table.add_column("marker", width=1, no_wrap=True)
    table.add_column("line", justify="right", style="dim", no_wrap=True)
    table.add_column("code", no_wrap=True, overflow="ellipsis")

    for line_num, text in snippet.lines.items():
        if line_num == snippet.target_line:
            table.add_row(
                Text(">", style=highlight_style),
                Text(str(line_num), style=highlight_style),
                Text(text, style=highlight_style)
            )
        else:
            table.add_row("", str(line_num), Text(text))

    return table


class ConsoleReporter(BaseReporter):
    """Prints the report to the terminal"""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def get_format_name(self) -> str:
        return "console"

    def generate(self, analysis_result: AnalysisResult, output_path: Optional[Path] = None) -> None:
        """Display analysis results in console, snippets included"""
        console = self.console
        summary = analysis_result.summary or ReportGenerator.create_summary(analysis_result.issues)

        console.print()
        console.print(Panel(
            f"[bold cyan]📊 snippetscope Report[/bold cyan]\n\n"
            f"📁 Project: [bold]{analysis_result.project_path}[/bold]\n"
            f"🔍 Issues: [bold]{summary.get('total_issues', len(analysis_result.issues))}[/bold]\n"
            f"📄 Files affected: [bold]{summary.get('files_affected', 0)}[/bold]",
            title="[bold]Report[/bold]",
            border_style="cyan",
            padding=(1, 2)
        ))
        console.print()

        summary_table = Table(title="📊 Issue Summary", title_style="bold magenta")
        summary_table.add_column("Severity", style="cyan", width=20)
        summary_table.add_column("Count", justify="right", style="bold")
        summary_table.add_column("Icon", justify="center", width=5)

        for severity, count in summary.get('by_severity', {}).items():
            color = SEVERITY_COLORS.get(severity, 'white')
            icon = SEVERITY_ICONS.get(severity, '📌')
            summary_table.add_row(
                f"[{color}]{severity.upper()}[/{color}]",
                str(count),
                icon
            )

        console.print(summary_table)

        for issue in ReportGenerator.prioritize_issues(analysis_result.issues):
            self.print_issue(issue)

    def print_issue(self, issue: CodeIssue) -> None:
        severity = issue.severity.value
        color = SEVERITY_COLORS.get(severity, 'white')
        icon = SEVERITY_ICONS.get(severity, '📌')

        location = str(issue.file_path)
        if issue.line_number:
            location += f":{issue.line_number}"

        self.console.print()
        self.console.print(f"[{color}]{icon} {severity.upper()}[/{color}] [bold]{issue.title}[/bold]")
        self.console.print(Text(location, style="italic"))
        if issue.description:
            self.console.print(Text(issue.description))
        if issue.code_snippet and not issue.code_snippet.is_empty:
            self.console.print(render_snippet(issue.code_snippet))
        if issue.suggestion:
            self.console.print(Text(f"💡 {issue.suggestion}", style="dim"))
