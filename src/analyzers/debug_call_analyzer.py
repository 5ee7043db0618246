"""Analyzer for leftover debugging calls in PHP and JavaScript sources"""

from pathlib import Path
from typing import List, Dict, Any, Optional, Tuple
import re
import logging

from .analyzer import BaseAnalyzer, CodeIssue, IssueCategory, IssueSeverity


logger = logging.getLogger(__name__)


PHP_DEBUG_CALLS: List[Tuple[str, re.Pattern]] = [
    ('var_dump', re.compile(r'\bvar_dump\s*\(')),
    ('print_r', re.compile(r'\bprint_r\s*\(')),
    ('var_export', re.compile(r'\bvar_export\s*\(')),
    ('dd', re.compile(r'(?<![\w$>:])dd\s*\(')),
    ('dump', re.compile(r'(?<![\w$>:])dump\s*\(')),
    ('ray', re.compile(r'(?<![\w$>:])ray\s*\(')),
]

JS_DEBUG_CALLS: List[Tuple[str, re.Pattern]] = [
    ('console', re.compile(r'\bconsole\.(log|debug|info|trace)\s*\(')),
    ('debugger', re.compile(r'\bdebugger\s*;')),
]

_LANGUAGE_PATTERNS = {
    '.php': PHP_DEBUG_CALLS,
    '.js': JS_DEBUG_CALLS,
    '.jsx': JS_DEBUG_CALLS,
    '.ts': JS_DEBUG_CALLS,
    '.tsx': JS_DEBUG_CALLS,
}


class DebugCallAnalyzer(BaseAnalyzer):
    """Flags debugging calls that should not ship to production"""

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        super().__init__(config)
        self.ignored_calls = set(self.config.get('ignored_calls', []))

    def analyze(self, file_path: Path) -> List[CodeIssue]:
        """Analyze a PHP or JavaScript file for debugging calls"""
        issues = []

        if not self.supports_language(file_path.suffix):
            return issues

        patterns = [
            (call, pattern) for call, pattern in _LANGUAGE_PATTERNS[file_path.suffix.lower()]
            if call not in self.ignored_calls
        ]

        lines = self.snippet_extractor.read_lines(file_path)
        if lines is None:
            logger.error(f"Error analyzing {file_path}: file could not be read")
            return issues

        for i, line in enumerate(lines, 1):
            stripped = line.lstrip()
            if stripped.startswith(('//', '#', '*', '/*')):
                continue

            for call, pattern in patterns:
                match = pattern.search(line)
                if not match:
                    continue
                issues.append(self.create_issue_with_snippet(
                    category=IssueCategory.RELIABILITY,
                    severity=IssueSeverity.HIGH if file_path.suffix.lower() == '.php' else IssueSeverity.MEDIUM,
                    title="Debug Call Found",
                    description=f"'{call}' call left in source",
                    file_path=file_path,
                    line_number=i,
                    column_number=match.start() + 1,
                    suggestion="Remove the debugging call or replace it with proper logging",
                    metadata={'call': call}
                ))
                break

        return issues

    def supports_language(self, language: str) -> bool:
        """Check if analyzer supports the given file suffix"""
        return language.lower() in _LANGUAGE_PATTERNS

    @property
    def name(self) -> str:
        return "Debug Call Analyzer"
