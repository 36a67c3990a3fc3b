"""
Read-only virtual view over a local directory.

A FileSystemAdapter maps a directory on disk (fs_base_path) onto a virtual
root (vir_base_path). Deployer types only ever see virtual paths, so they get
exactly the deployable content and nothing else of the local tree.

Glob syntax (used for excludes and by_glob):
    *      any characters except "/"
    ?      one character except "/"
    **     any characters including "/"
    /**/   zero or more directories
    /dir/** also matches /dir itself
    {a,b}  either alternative (may nest)
    [abc]  one character of the set, [!abc] one character not in it
"""

import re
from pathlib import Path, PurePosixPath
from typing import Iterable, List, Optional, Sequence, Union

from ui5_deployer.core.protocols import FileSystemService
from ui5_deployer.resources.resource import Resource


def glob_to_regex(pattern: str) -> "re.Pattern":
    """Compile a virtual-path glob into an anchored regular expression."""
    return re.compile('^' + _translate(pattern) + '$')


def _translate(pattern: str) -> str:
    out = []
    i = 0
    n = len(pattern)
    while i < n:
        c = pattern[i]
        if pattern.startswith('/**/', i):
            out.append('(?:/.*)?/')
            i += 4
        elif pattern.startswith('/**', i) and i + 3 == n:
            out.append('(?:/.*)?')
            i += 3
        elif pattern.startswith('**', i):
            out.append('.*')
            i += 2
        elif c == '*':
            out.append('[^/]*')
            i += 1
        elif c == '?':
            out.append('[^/]')
            i += 1
        elif c == '{' and _closing(pattern, i, '{', '}') is not None:
            end = _closing(pattern, i, '{', '}')
            alternatives = _split_alternatives(pattern[i + 1:end])
            out.append('(?:' + '|'.join(_translate(a) for a in alternatives) + ')')
            i = end + 1
        elif c == '[' and pattern.find(']', i + 2) != -1:
            end = pattern.find(']', i + 2)
            body = pattern[i + 1:end]
            negate = body[0] in '!^'
            if negate:
                body = body[1:]
            for special in '\\^[]':
                body = body.replace(special, '\\' + special)
            out.append('[^/' + body + ']' if negate else '[' + body + ']')
            i = end + 1
        else:
            out.append(re.escape(c))
            i += 1
    return ''.join(out)


def _closing(pattern: str, start: int, open_char: str, close_char: str) -> Optional[int]:
    depth = 0
    for i in range(start, len(pattern)):
        if pattern[i] == open_char:
            depth += 1
        elif pattern[i] == close_char:
            depth -= 1
            if depth == 0:
                return i
    return None


def _split_alternatives(body: str) -> List[str]:
    # Split on top-level commas only, so {a,{b,c}} nests
    parts = []
    depth = 0
    current = ''
    for c in body:
        if c == ',' and depth == 0:
            parts.append(current)
            current = ''
            continue
        if c == '{':
            depth += 1
        elif c == '}':
            depth -= 1
        current += c
    parts.append(current)
    return parts


class FileSystemAdapter:
    """Read-only resource collection backed by a local directory."""

    def __init__(
        self,
        fs_base_path: Union[str, Path],
        vir_base_path: str,
        excludes: Sequence[str],
        filesystem: FileSystemService
    ):
        self.fs_base_path = Path(fs_base_path)
        self.vir_base_path = vir_base_path
        self.excludes = list(excludes)
        self.fs = filesystem
        self._exclude_patterns = [glob_to_regex(e) for e in self.excludes]

    def __repr__(self) -> str:
        return (f"FileSystemAdapter(fs_base_path={str(self.fs_base_path)!r}, "
                f"vir_base_path={self.vir_base_path!r}, excludes={self.excludes!r})")

    def is_excluded(self, virtual_path: str) -> bool:
        return any(p.match(virtual_path) for p in self._exclude_patterns)

    def _to_virtual(self, fs_path: Path) -> str:
        relative = fs_path.relative_to(self.fs_base_path).as_posix()
        return self.vir_base_path + relative

    def _to_fs(self, virtual_path: str) -> Optional[Path]:
        if not virtual_path.startswith(self.vir_base_path):
            return None
        relative = PurePosixPath(virtual_path[len(self.vir_base_path):])
        # Never resolve outside of the base directory
        if '..' in relative.parts:
            return None
        return self.fs_base_path.joinpath(*relative.parts)

    def by_path(self, virtual_path: str) -> Optional[Resource]:
        """Return the resource at virtual_path, or None if absent or excluded."""
        if self.is_excluded(virtual_path):
            return None
        fs_path = self._to_fs(virtual_path)
        if fs_path is None or not self.fs.is_file(fs_path):
            return None
        return Resource(path=virtual_path, fs_path=fs_path, filesystem=self.fs)

    def by_glob(self, patterns: Union[str, Iterable[str]] = '/**/*') -> List[Resource]:
        """
        Return all non-excluded resources matching any of the given patterns.

        Args:
            patterns: One glob or several globs over virtual paths

        Returns:
            Resources sorted by virtual path
        """
        if isinstance(patterns, str):
            patterns = [patterns]
        compiled = [glob_to_regex(p) for p in patterns]

        resources = []
        for fs_path in self.fs.list_files(self.fs_base_path):
            virtual_path = self._to_virtual(fs_path)
            if self.is_excluded(virtual_path):
                continue
            if any(p.match(virtual_path) for p in compiled):
                resources.append(Resource(path=virtual_path, fs_path=fs_path, filesystem=self.fs))
        return sorted(resources, key=lambda r: r.path)
