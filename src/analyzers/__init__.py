"""Code analyzers that report issues with source snippets"""

from .analyzer import AnalysisResult, BaseAnalyzer, CodeIssue, IssueCategory, IssueSeverity
from .debug_call_analyzer import DebugCallAnalyzer

__all__ = [
    'AnalysisResult',
    'BaseAnalyzer',
    'CodeIssue',
    'IssueCategory',
    'IssueSeverity',
    'DebugCallAnalyzer'
]
