"""File selection for batch analysis runs"""

from pathlib import Path
from typing import Optional, List, Callable
import gitignore_parser
import logging

logger = logging.getLogger(__name__)


class FileFilter:
    """Chooses which source files a run should analyze"""

    DEFAULT_IGNORE_DIRS = [
        '.git', '.svn', '.idea', '.vscode', 'node_modules', 'vendor',
        'storage', 'bootstrap/cache', 'dist', 'build', 'coverage', '__pycache__'
    ]
    DEFAULT_IGNORE_SUFFIXES = ['.min.js', '.map', '.lock', '.log', '.blade.php.bak']

    def __init__(self,
                 root: Path,
                 ignore_dirs: Optional[List[str]] = None,
                 include_hidden: bool = False,
                 gitignore: Optional[Callable[[str], bool]] = None):
        """
        Args:
            root: Directory the run starts from; ignore rules apply relative to it
            ignore_dirs: Directory names or relative sub-paths to skip
            include_hidden: Whether to descend into dot-directories
            gitignore: Matcher returned by gitignore_parser.parse_gitignore
        """
        self.root = root
        self.ignore_dirs = ignore_dirs if ignore_dirs is not None else self.DEFAULT_IGNORE_DIRS
        self.include_hidden = include_hidden
        self._gitignore = gitignore

    @classmethod
    def from_path(cls, path: Path, **kwargs) -> 'FileFilter':
        """Create a filter rooted at path, honouring its .gitignore if present"""
        root = path.parent if path.is_file() else path
        gitignore_path = root / ".gitignore"
        gitignore = None
        if gitignore_path.exists():
            try:
                gitignore = gitignore_parser.parse_gitignore(gitignore_path)
            except (OSError, ValueError) as e:
                logger.warning(f"Failed to parse .gitignore: {e}")
        return cls(path, gitignore=gitignore, **kwargs)

    def should_ignore(self, path: Path) -> bool:
        try:
            relative = path.relative_to(self.root)
        except ValueError:
            relative = path

        parts = relative.parts
        if not self.include_hidden and any(part.startswith('.') for part in parts[:-1]):
            return True

        relative_str = relative.as_posix()
        for ignored in self.ignore_dirs:
            if '/' in ignored:
                if relative_str.startswith(ignored + '/'):
                    return True
            elif ignored in parts[:-1]:
                return True

        if any(path.name.endswith(suffix) for suffix in self.DEFAULT_IGNORE_SUFFIXES):
            return True

        if self._gitignore and self._gitignore(str(path)):
            return True

        return False

    def iter_files(self, extensions: Optional[List[str]] = None) -> List[Path]:
        """
        Collect files under the root that pass the filter

        Args:
            extensions: Optional suffixes to keep (e.g. ['.php', '.js'])

        Returns:
            Sorted list of file paths
        """
        if self.root.is_file():
            candidates = [self.root]
        else:
            candidates = (p for p in self.root.rglob("*") if p.is_file())

        files = [
            p for p in candidates
            if not self.should_ignore(p) and (not extensions or p.suffix.lower() in extensions)
        ]
        return sorted(files)
