"""Utility functions for extracting code snippets with context"""

import logging
import threading
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, NamedTuple, Optional, Sequence, Tuple, Union

from .signature_patterns import is_scope_boundary, match_signature


logger = logging.getLogger(__name__)

DEFAULT_CONTEXT_LINES = 8
MAX_LINE_LENGTH = 250
SIGNATURE_LOOKBACK = 15
MIN_LINES_BELOW = 3


@dataclass(frozen=True)
class CodeSnippet:
    """
    A window of source lines around the line an issue points at.

    lines is stored as a read-only mapping, so a snippet is hashable and
    cannot be changed after it is built.
    """
    file_path: str
    target_line: int
    lines: Mapping[int, str] = field(default_factory=dict)
    context_lines: int = DEFAULT_CONTEXT_LINES

    def __post_init__(self):
        object.__setattr__(self, 'lines', MappingProxyType(dict(self.lines)))

    def __hash__(self):
        return hash((self.file_path, self.target_line, tuple(self.lines.items()), self.context_lines))

    @property
    def start_line(self) -> Optional[int]:
        return min(self.lines) if self.lines else None

    @property
    def end_line(self) -> Optional[int]:
        return max(self.lines) if self.lines else None

    @property
    def is_empty(self) -> bool:
        return not self.lines

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-serializable dictionary"""
        return {
            'file': self.file_path,
            'target_line': self.target_line,
            'lines': dict(self.lines),
            'context_lines': self.context_lines,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'CodeSnippet':
        """
        Rebuild a snippet from to_dict() output, including after a JSON round trip.

        Raises:
            ValueError: If data or its lines entry is not a mapping
        """
        if not isinstance(data, Mapping):
            raise ValueError(f"Snippet data must be an object, got {type(data).__name__}")

        lines = data.get('lines') or {}
        if not isinstance(lines, Mapping):
            raise ValueError(f"Snippet lines must be an object, got {type(lines).__name__}")

        return cls(
            file_path=str(data.get('file', '')),
            target_line=int(data.get('target_line', 0)),
            lines={int(num): str(text) for num, text in sorted(lines.items(), key=lambda item: int(item[0]))},
            context_lines=int(data.get('context_lines', 5)),
        )


class Window(NamedTuple):
    """Inclusive 1-indexed line range"""
    start_line: int
    end_line: int


def compute_window(target_line: int, context_lines: int, total_lines: int) -> Window:
    """
    Center a window on the target line, moving radius lost at one file
    edge over to the other edge.

    Args:
        target_line: Line the issue points at (1-indexed)
        context_lines: Lines wanted above and below the target
        total_lines: Number of lines in the file

    Returns:
        The naive window, before any signature expansion
    """
    naive_start = target_line - context_lines
    naive_end = target_line + context_lines

    clipped_start = max(naive_start, 1)
    unused_above = clipped_start - naive_start

    clipped_end = min(naive_end, total_lines)
    unused_below = naive_end - clipped_end

    start_line = max(clipped_start - unused_below, 1)
    end_line = min(clipped_end + unused_above, total_lines)
    return Window(start_line, end_line)


def find_signature_line(lines: Sequence[str], target_line: int,
                        lookback: int = SIGNATURE_LOOKBACK) -> Optional[int]:
    """
    Find the nearest declaration header above the target line.

    Scans from target_line - 1 up to lookback lines back. A bare closing
    brace ends the scan, since it closes a sibling declaration.

    Args:
        lines: File contents, one entry per line (index 0 is line 1)
        target_line: Line the issue points at (1-indexed)
        lookback: Maximum number of lines to scan

    Returns:
        Line number of the header, or None if none is within reach
    """
    floor = max(target_line - lookback, 1)
    line_num = min(target_line - 1, len(lines))

    while line_num >= floor:
        line = lines[line_num - 1]
        if is_scope_boundary(line):
            return None
        if match_signature(line) is not None:
            return line_num
        line_num -= 1

    return None


def negotiate_expansion(window: Window, signature_line: Optional[int], target_line: int,
                        context_lines: int, total_lines: int) -> Window:
    """
    Pull the window start back to a signature line if the budget allows.

    The expanded window holds at most 2 * context_lines + 1 lines and keeps
    at least min(3, context_lines) lines after the target.
    """
    if signature_line is None or signature_line >= window.start_line:
        return window

    budget = 2 * context_lines
    lines_above = target_line - signature_line
    lines_below = budget - lines_above
    min_below = min(MIN_LINES_BELOW, context_lines)

    if lines_below < min_below:
        return window

    return Window(signature_line, min(target_line + lines_below, total_lines))


def resolve_window(lines: Sequence[str], target_line: int, context_lines: int) -> Window:
    """Run edge compensation, signature search and expansion in order"""
    total_lines = len(lines)
    window = compute_window(target_line, context_lines, total_lines)
    signature_line = find_signature_line(lines, target_line)
    return negotiate_expansion(window, signature_line, target_line, context_lines, total_lines)


def _materialize(lines: Sequence[str], window: Window) -> Dict[int, str]:
    snippet_lines = {}
    for line_num in range(window.start_line, window.end_line + 1):
        snippet_lines[line_num] = lines[line_num - 1][:MAX_LINE_LENGTH].rstrip()
    return snippet_lines


def _read_lines(path: Path) -> List[str]:
    with open(path, 'r', encoding='utf-8', errors='replace', newline='') as f:
        return [line.rstrip('\r\n') for line in f]


class SnippetExtractor:
    """
    Builds CodeSnippet objects for issue locations.

    With use_cache enabled, file contents are kept for the lifetime of the
    extractor and re-read only when a file's mtime or size changes. Create
    one extractor per report run.
    """

    def __init__(self, context_lines: int = DEFAULT_CONTEXT_LINES, use_cache: bool = False):
        self.context_lines = context_lines
        self.use_cache = use_cache
        self._cache: Dict[Path, Tuple[Tuple[int, int], List[str]]] = {}
        self._lock = threading.Lock()

    def extract(self, file_path: Union[str, Path], target_line: int,
                context_lines: Optional[int] = None) -> Optional[CodeSnippet]:
        """
        Extract a snippet around a line, expanded to the enclosing signature
        when it fits.

        Args:
            file_path: Path to the file
            target_line: Line number where the issue occurs (1-indexed)
            context_lines: Lines to include before and after the target;
                defaults to the extractor's setting

        Returns:
            CodeSnippet, or None if the file is missing, unreadable or empty
        """
        radius = self.context_lines if context_lines is None else context_lines
        radius = max(radius, 0)

        lines = self._load(Path(file_path))
        if not lines:
            return None

        window = resolve_window(lines, target_line, radius)
        logger.debug(f"Snippet window for {file_path}:{target_line} is {window.start_line}-{window.end_line}")

        return CodeSnippet(
            file_path=str(file_path),
            target_line=target_line,
            lines=_materialize(lines, window),
            context_lines=radius,
        )

    def read_lines(self, file_path: Union[str, Path]) -> Optional[List[str]]:
        """
        Return a file's lines exactly as snippets number them.

        Only \\n, \\r and \\r\\n end a line. Analyzers should count lines with
        this so their line numbers agree with the snippet's.
        """
        return self._load(Path(file_path))

    def clear_cache(self) -> None:
        with self._lock:
            self._cache.clear()

    def _load(self, path: Path) -> Optional[List[str]]:
        try:
            if not path.is_file():
                logger.debug(f"No snippet for {path}: not a regular file")
                return None

            if not self.use_cache:
                return _read_lines(path)

            stat = path.stat()
            key = path.resolve()
            stamp = (stat.st_mtime_ns, stat.st_size)
            with self._lock:
                cached = self._cache.get(key)
                if cached is not None and cached[0] == stamp:
                    return cached[1]

            lines = _read_lines(path)
            with self._lock:
                self._cache[key] = (stamp, lines)
            return lines

        except (OSError, UnicodeError, ValueError) as e:
            logger.debug(f"Could not read {path} for snippet: {e}")
            return None


def extract_snippet(file_path: Union[str, Path], target_line: int,
                    context_lines: int = DEFAULT_CONTEXT_LINES) -> Optional[CodeSnippet]:
    """
    Extract a code snippet with context around a specific line number.

    Args:
        file_path: Path to the file
        target_line: Line number where the issue occurs (1-indexed)
        context_lines: Number of lines to include before and after the target line

    Returns:
        CodeSnippet, or None if extraction fails
    """
    return SnippetExtractor(context_lines).extract(file_path, target_line)
