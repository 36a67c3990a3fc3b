"""Protocol definitions for dependency injection.

This module defines Protocol-based abstractions for the external dependencies
of the deployer: logging, filesystem access, time, environment and config
loading. Protocols use structural typing, so any class implementing these
methods satisfies the Protocol without explicit inheritance.

Benefits:
- Easy to mock in tests (Mock(spec=Logger), etc.)
- No inheritance required
- Clear interface contracts between the dispatcher and its collaborators
"""

from typing import Protocol, Dict, Any, Optional, List, Union
from pathlib import Path


class Logger(Protocol):
    """Abstraction for leveled, namespaced logging.

    Levels from most to least verbose: debug, verbose, info, warning, error.
    """

    def info(self, message: str) -> None:
        """Log informational message."""
        ...

    def verbose(self, message: str) -> None:
        """Log message shown only in verbose mode."""
        ...

    def warning(self, message: str) -> None:
        """Log warning message."""
        ...

    def error(self, message: str) -> None:
        """Log error message."""
        ...

    def debug(self, message: str) -> None:
        """Log debug message."""
        ...

    def get_child(self, name: str) -> "Logger":
        """Return a logger namespaced below this one."""
        ...


class FileSystemService(Protocol):
    """Abstraction for filesystem operations.

    Wraps Path and file I/O so the resource view and deployer types can be
    tested without touching a real directory tree.
    """

    def exists(self, path: Union[str, Path]) -> bool:
        """Check if path exists."""
        ...

    def is_file(self, path: Union[str, Path]) -> bool:
        """Check if path is a file."""
        ...

    def is_dir(self, path: Union[str, Path]) -> bool:
        """Check if path is a directory."""
        ...

    def read_file(self, path: Union[str, Path]) -> str:
        """Read entire file as string."""
        ...

    def read_bytes(self, path: Union[str, Path]) -> bytes:
        """Read entire file as bytes."""
        ...

    def write_bytes(self, path: Union[str, Path], content: bytes) -> None:
        """Write bytes to file."""
        ...

    def file_size(self, path: Union[str, Path]) -> int:
        """Return size of file in bytes."""
        ...

    def mkdir(self, path: Union[str, Path], parents: bool = True, exist_ok: bool = True) -> None:
        """Create directory (with parents if specified)."""
        ...

    def list_files(self, path: Union[str, Path]) -> List[Path]:
        """Recursively list all regular files below path."""
        ...


class TimeProvider(Protocol):
    """Abstraction for time operations.

    Enables deterministic testing of elapsed-time reporting.
    """

    def current_time(self) -> float:
        """Get current time in seconds (monotonic, for measuring durations)."""
        ...


class EnvironmentProvider(Protocol):
    """Abstraction for environment access.

    Wraps os.environ so credential fallbacks can be tested without
    changing the real environment.
    """

    def get_environ(self) -> Dict[str, str]:
        """Get copy of environment variables."""
        ...

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Get a single environment variable."""
        ...


class ConfigLoader(Protocol):
    """Abstraction for configuration file loading.

    Wraps YAML loading to enable testing with in-memory project descriptors.
    """

    def load_yaml_documents(self, path: str) -> List[Any]:
        """Load every document of a multi-document YAML file."""
        ...
