"""Analysis engine that runs analyzers over a project and collects issues"""

from pathlib import Path
from typing import List, Dict, Any, Optional
from datetime import datetime
import logging
import time

from ..analyzers.analyzer import AnalysisResult, BaseAnalyzer, CodeIssue
from ..analyzers import DebugCallAnalyzer
from ..reports.report_generator import ReportGenerator
from ..utils.file_filter import FileFilter


logger = logging.getLogger(__name__)


class AnalysisEngine:
    """Runs every registered analyzer over the files of a project"""

    def __init__(self, config: Optional[Dict[str, Any]] = None,
                 analyzers: Optional[List[BaseAnalyzer]] = None):
        self.config = config or {}
        self.analyzers = analyzers if analyzers is not None else self._initialize_analyzers()

    def _initialize_analyzers(self) -> List[BaseAnalyzer]:
        """Initialize all available analyzers"""
        shared = {}
        if 'show_code_snippets' in self.config:
            shared['show_code_snippets'] = self.config['show_code_snippets']

        return [
            DebugCallAnalyzer({**shared, **self.config.get('debug_calls', {})}),
        ]

    def analyze_path(self, path: Path) -> AnalysisResult:
        """
        Analyze a file or directory

        Args:
            path: File or project root to analyze
        """
        logger.info(f"Starting analysis of {path}")
        started = time.perf_counter()

        file_filter = FileFilter.from_path(path)
        files = file_filter.iter_files()

        issues: List[CodeIssue] = []
        for file_path in files:
            for analyzer in self.analyzers:
                if not analyzer.supports_language(file_path.suffix):
                    continue
                try:
                    issues.extend(analyzer.analyze(file_path))
                except Exception as e:
                    logger.error(f"{analyzer.name} failed on {file_path}: {e}")

        for analyzer in self.analyzers:
            analyzer.snippet_extractor.clear_cache()

        summary = ReportGenerator.create_summary(issues)
        summary['files_analyzed'] = len(files)

        return AnalysisResult(
            project_path=path,
            issues=ReportGenerator.prioritize_issues(issues),
            summary=summary,
            timestamp=datetime.now().isoformat(),
            analysis_time=round(time.perf_counter() - started, 3)
        )
