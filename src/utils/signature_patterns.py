"""Line-level patterns for recognising declaration headers"""

import re
from enum import Enum
from typing import List, Optional, Tuple


class SignatureKind(Enum):
    """Kinds of declaration headers the snippet extractor recognises"""
    COMPOUND_TYPE = "compound_type"
    MEMBER_FUNCTION = "member_function"
    STANDALONE_FUNCTION = "standalone_function"


# Ordered (kind, pattern) table. The first match wins.
# Compound and member patterns run against the stripped line; the
# standalone pattern runs against the raw line so it only matches at column 0.
SIGNATURE_PATTERNS: List[Tuple[SignatureKind, re.Pattern]] = [
    (
        SignatureKind.COMPOUND_TYPE,
        re.compile(r'^(?:(?:abstract|final|readonly)\s+)*(?:class|interface|trait|enum)\s+\w+', re.IGNORECASE),
    ),
    (
        SignatureKind.MEMBER_FUNCTION,
        re.compile(r'^(?:public|protected|private|static)\s+(?:static\s+)?function\s+&?\w+', re.IGNORECASE),
    ),
    (
        SignatureKind.STANDALONE_FUNCTION,
        re.compile(r'^function\s+&?\w+', re.IGNORECASE),
    ),
]

_INDENT_SENSITIVE = {SignatureKind.STANDALONE_FUNCTION}

_BLOCK_COMMENT = re.compile(r'/\*.*?\*/')
_LINE_COMMENT = re.compile(r'(?://|#).*$')

SCOPE_BOUNDARIES = ('}', '};')


def strip_comments(line: str) -> str:
    """Remove inline block comments and trailing line comments"""
    line = _BLOCK_COMMENT.sub('', line)
    return _LINE_COMMENT.sub('', line).strip()


def is_scope_boundary(line: str) -> bool:
    """True for a line holding nothing but a closing brace"""
    return strip_comments(line) in SCOPE_BOUNDARIES


def match_signature(line: str) -> Optional[SignatureKind]:
    """
    Classify a single source line as a declaration header.

    Args:
        line: Raw line text, with or without its terminator

    Returns:
        The kind of header the line opens, or None
    """
    raw = line.rstrip('\r\n')
    stripped = raw.strip()
    if not stripped:
        return None

    for kind, pattern in SIGNATURE_PATTERNS:
        candidate = raw if kind in _INDENT_SENSITIVE else stripped
        if pattern.match(candidate):
            return kind
    return None
