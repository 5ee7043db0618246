"""Report registry for snippetscope: issue summaries, ordering and output formats"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Any, List, Optional

from ..analyzers.analyzer import AnalysisResult, CodeIssue, IssueSeverity, IssueCategory


class BaseReporter(ABC):
    """Writes an AnalysisResult, snippets included, in one output format"""

    @abstractmethod
    def generate(self, analysis_result: AnalysisResult, output_path: Optional[Path] = None) -> None:
        """Write the report to output_path, or to the terminal when it is None"""
        pass

    @abstractmethod
    def get_format_name(self) -> str:
        """Format name used by `--format` to pick this reporter"""
        pass


class ReportGenerator:
    """Maps format names to reporters and holds the summary and ordering rules they share"""

    def __init__(self):
        self.reporters = {}

    def register_reporter(self, reporter: BaseReporter) -> None:
        """Register a reporter under its format name, replacing any earlier one"""
        self.reporters[reporter.get_format_name()] = reporter

    def generate_report(self, analysis_result: AnalysisResult,
                       output_format: str, output_path: Optional[Path] = None) -> None:
        """Dispatch to the reporter registered for output_format"""
        if output_format not in self.reporters:
            raise ValueError(f"Unknown report format: {output_format}")

        reporter = self.reporters[output_format]
        reporter.generate(analysis_result, output_path)

    @staticmethod
    def create_summary(issues: List[CodeIssue]) -> Dict[str, Any]:
        """Count issues by severity and category, plus affected files and attached snippets"""
        summary = {
            'total_issues': len(issues),
            'by_severity': {},
            'by_category': {},
            'files_affected': len(set(issue.file_path for issue in issues)),
            'with_snippets': sum(1 for issue in issues if issue.code_snippet is not None)
        }

        # Count by severity
        for severity in IssueSeverity:
            count = sum(1 for issue in issues if issue.severity == severity)
            if count > 0:
                summary['by_severity'][severity.value] = count

        # Count by category
        for category in IssueCategory:
            count = sum(1 for issue in issues if issue.category == category)
            if count > 0:
                summary['by_category'][category.value] = count

        return summary

    @staticmethod
    def prioritize_issues(issues: List[CodeIssue]) -> List[CodeIssue]:
        """Sort issues by severity, then file and line"""
        severity_order = {
            IssueSeverity.CRITICAL: 0,
            IssueSeverity.HIGH: 1,
            IssueSeverity.MEDIUM: 2,
            IssueSeverity.LOW: 3,
            IssueSeverity.INFO: 4
        }

        return sorted(issues, key=lambda x: (
            severity_order.get(x.severity, 999),
            str(x.file_path),
            x.line_number or 0
        ))


def create_report_generator(console=None) -> ReportGenerator:
    """Build a ReportGenerator with the console and JSON reporters registered"""
    from .console_reporter import ConsoleReporter
    from .json_reporter import JsonReporter

    generator = ReportGenerator()
    generator.register_reporter(ConsoleReporter(console))
    generator.register_reporter(JsonReporter())
    return generator
