"""
Resource views handed to deployer types.

Public API:
    - create_adapter: Build a read-only view over a local directory
    - FileSystemAdapter: The view itself
    - Resource: A single file inside a view
"""

from pathlib import Path
from typing import Optional, Sequence, Union

from ui5_deployer.core.protocols import FileSystemService
from ui5_deployer.deploy.exceptions import ResourceViewError
from .adapters import FileSystemAdapter, glob_to_regex
from .resource import Resource


def create_adapter(
    *,
    fs_base_path: Union[str, Path],
    vir_base_path: str,
    excludes: Sequence[str] = (),
    filesystem: Optional[FileSystemService] = None
) -> FileSystemAdapter:
    """
    Create a read-only view exposing fs_base_path under vir_base_path.

    Args:
        fs_base_path: Local directory (e.g. "./webapp")
        vir_base_path: Virtual root, absolute and ending with "/" (e.g. "/")
        excludes: Globs over virtual paths that are hidden from the view
        filesystem: Filesystem service (defaults to the real filesystem)

    Raises:
        ResourceViewError: If the base path or excludes are unusable
    """
    if filesystem is None:
        from ui5_deployer.core.implementations import RealFileSystemService
        filesystem = RealFileSystemService()

    if not isinstance(vir_base_path, str) or not vir_base_path.startswith('/') \
            or not vir_base_path.endswith('/'):
        raise ResourceViewError(
            f"Virtual base path must be absolute and end with '/': {vir_base_path!r}"
        )

    if isinstance(excludes, str) or not all(isinstance(e, str) for e in excludes):
        raise ResourceViewError(f"Excludes must be a list of path strings: {excludes!r}")

    if not filesystem.is_dir(fs_base_path):
        raise ResourceViewError(
            f"Source directory not found: {fs_base_path}\n"
            f"Check deployer.sourcePath in your project configuration "
            f"(it is resolved relative to the current working directory)"
        )

    return FileSystemAdapter(
        fs_base_path=fs_base_path,
        vir_base_path=vir_base_path,
        excludes=excludes,
        filesystem=filesystem
    )


__all__ = [
    "create_adapter",
    "glob_to_regex",
    "FileSystemAdapter",
    "Resource",
]
