"""Main analyzer interface for code quality analysis"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Dict, Any, Mapping, Optional
from enum import Enum
from dataclasses import dataclass, field
import logging

from ..core.config import settings
from ..utils.snippet_extractor import CodeSnippet, SnippetExtractor


logger = logging.getLogger(__name__)


class IssueSeverity(Enum):
    """Severity levels for code quality issues"""
    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    INFO = "info"


class IssueCategory(Enum):
    """Categories of code quality issues"""
    SECURITY = "security"
    PERFORMANCE = "performance"
    RELIABILITY = "reliability"
    COMPLEXITY = "complexity"
    STYLE = "style"
    MAINTAINABILITY = "maintainability"


@dataclass
class CodeIssue:
    """Represents a code quality issue"""
    category: IssueCategory
    severity: IssueSeverity
    title: str
    description: str
    file_path: Path
    line_number: Optional[int] = None
    column_number: Optional[int] = None
    suggestion: Optional[str] = None
    code_snippet: Optional[CodeSnippet] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a dictionary, leaving out unset fields"""
        data = {
            'category': self.category.value,
            'severity': self.severity.value,
            'title': self.title,
            'description': self.description,
            'file_path': str(self.file_path),
            'line_number': self.line_number,
            'column_number': self.column_number,
            'suggestion': self.suggestion,
            'code_snippet': self.code_snippet.to_dict() if self.code_snippet else None,
            'metadata': self.metadata,
        }
        return {key: value for key, value in data.items() if value is not None and value != {}}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'CodeIssue':
        """
        Rebuild an issue from to_dict() output.

        Raises:
            ValueError: If the data is not an object or holds unknown enum values
            KeyError: If a required field is missing
        """
        if not isinstance(data, Mapping):
            raise ValueError(f"Issue must be an object, got {type(data).__name__}")

        snippet_data = data.get('code_snippet')
        return cls(
            category=IssueCategory(data['category']),
            severity=IssueSeverity(data['severity']),
            title=data['title'],
            description=data.get('description', ''),
            file_path=Path(data['file_path']),
            line_number=data.get('line_number'),
            column_number=data.get('column_number'),
            suggestion=data.get('suggestion'),
            code_snippet=CodeSnippet.from_dict(snippet_data) if snippet_data is not None else None,
            metadata=data.get('metadata') or {},
        )


@dataclass
class AnalysisResult:
    """Result of a code analysis"""
    project_path: Path
    issues: List[CodeIssue]
    summary: Dict[str, Any]
    timestamp: str
    analysis_time: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'project_path': str(self.project_path),
            'timestamp': self.timestamp,
            'analysis_time': self.analysis_time,
            'summary': self.summary,
            'issues': [issue.to_dict() for issue in self.issues],
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'AnalysisResult':
        if not isinstance(data, Mapping):
            raise ValueError(f"Report must be an object, got {type(data).__name__}")

        issues = data.get('issues') or []
        if not isinstance(issues, list):
            raise ValueError(f"Report issues must be a list, got {type(issues).__name__}")

        return cls(
            project_path=Path(data.get('project_path', '.')),
            issues=[CodeIssue.from_dict(issue) for issue in issues],
            summary=data.get('summary') or {},
            timestamp=data.get('timestamp', ''),
            analysis_time=data.get('analysis_time'),
        )


class BaseAnalyzer(ABC):
    """Abstract base class for all code analyzers"""

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        self.config = config or {}
        self.snippet_extractor = SnippetExtractor(
            settings.snippet_context_lines,
            use_cache=settings.cache_snippet_files
        )

    @abstractmethod
    def analyze(self, file_path: Path) -> List[CodeIssue]:
        """Analyze a single file and return issues"""
        pass

    @abstractmethod
    def supports_language(self, language: str) -> bool:
        """Check if analyzer supports the given language"""
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of the analyzer"""
        pass

    def create_issue_with_snippet(
            self,
            category: IssueCategory,
            severity: IssueSeverity,
            title: str,
            description: str,
            file_path: Path,
            line_number: Optional[int],
            suggestion: Optional[str] = None,
            column_number: Optional[int] = None,
            context_lines: Optional[int] = None,
            metadata: Optional[Dict[str, Any]] = None
        ) -> CodeIssue:
        """
        Create an issue and attach a code snippet when snippets are enabled.

        A snippet that cannot be built leaves code_snippet as None; it never
        fails the analysis.
        """
        code_snippet = None
        show_snippets = self.config.get('show_code_snippets', settings.show_code_snippets)
        if show_snippets and line_number is not None:
            radius = context_lines if context_lines is not None else settings.snippet_context_lines
            try:
                code_snippet = self.snippet_extractor.extract(file_path, line_number, radius)
            except Exception as e:
                logger.warning(f"Snippet generation failed for {file_path}:{line_number}: {e}")
                code_snippet = None

        return CodeIssue(
            category=category,
            severity=severity,
            title=title,
            description=description,
            file_path=file_path,
            line_number=line_number,
            column_number=column_number,
            suggestion=suggestion,
            code_snippet=code_snippet,
            metadata=metadata or {},
        )
