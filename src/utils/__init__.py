"""Utility functions and helpers"""

from .file_filter import FileFilter
from .signature_patterns import SignatureKind, match_signature, is_scope_boundary
from .snippet_extractor import CodeSnippet, SnippetExtractor, extract_snippet

__all__ = [
    'FileFilter',
    'SignatureKind',
    'match_signature',
    'is_scope_boundary',
    'CodeSnippet',
    'SnippetExtractor',
    'extract_snippet'
]
