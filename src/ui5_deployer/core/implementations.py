"""Production implementations of dependency injection protocols.

This module provides real implementations that wrap actual external
dependencies (logging, filesystem, time, environment, YAML). These are used in
production code.

For testing, use mocks or test doubles instead of these implementations.
"""

import logging
import os
import sys
import time
import yaml
from pathlib import Path
from typing import Dict, Any, Optional, List, Union

ROOT_LOGGER_NAME = 'ui5_deployer'

# Between DEBUG (10) and INFO (20)
VERBOSE = 15
logging.addLevelName(VERBOSE, 'VERBOSE')


def configure_logging(verbose: bool = False, debug: bool = False) -> None:
    """Attach a stderr handler to the package logger.

    Args:
        verbose: Also show verbose-level messages
        debug: Show everything down to debug level
    """
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = VERBOSE
    else:
        level = logging.INFO

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(level)

    # Replace rather than setStream(): the previous stream may already be closed
    for handler in list(root.handlers):
        if getattr(handler, '_ui5_deployer', False):
            root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter('%(levelname)s %(name)s: %(message)s'))
    handler._ui5_deployer = True
    root.addHandler(handler)


class ConsoleLogger:
    """Production logger backed by the stdlib logging module.

    Every instance is namespaced below the ``ui5_deployer`` logger, e.g.
    ``ConsoleLogger('deployer:deployer')`` logs as
    ``ui5_deployer.deployer:deployer``.
    """

    def __init__(self, namespace: str = ''):
        self.namespace = namespace
        name = f"{ROOT_LOGGER_NAME}.{namespace}" if namespace else ROOT_LOGGER_NAME
        self._logger = logging.getLogger(name)

    def info(self, message: str) -> None:
        self._logger.info(message)

    def verbose(self, message: str) -> None:
        self._logger.log(VERBOSE, message)

    def warning(self, message: str) -> None:
        self._logger.warning(message)

    def error(self, message: str) -> None:
        self._logger.error(message)

    def debug(self, message: str) -> None:
        self._logger.debug(message)

    def get_child(self, name: str) -> 'ConsoleLogger':
        """Return a logger namespaced below this one."""
        if self.namespace:
            return ConsoleLogger(f"{self.namespace}.{name}")
        return ConsoleLogger(name)


class RealFileSystemService:
    """Production filesystem service using real pathlib operations."""

    def exists(self, path: Union[str, Path]) -> bool:
        return Path(path).exists()

    def is_file(self, path: Union[str, Path]) -> bool:
        return Path(path).is_file()

    def is_dir(self, path: Union[str, Path]) -> bool:
        return Path(path).is_dir()

    def read_file(self, path: Union[str, Path]) -> str:
        with open(path, 'r') as f:
            return f.read()

    def read_bytes(self, path: Union[str, Path]) -> bytes:
        return Path(path).read_bytes()

    def write_bytes(self, path: Union[str, Path], content: bytes) -> None:
        Path(path).write_bytes(content)

    def file_size(self, path: Union[str, Path]) -> int:
        return Path(path).stat().st_size

    def mkdir(self, path: Union[str, Path], parents: bool = True, exist_ok: bool = True) -> None:
        Path(path).mkdir(parents=parents, exist_ok=exist_ok)

    def list_files(self, path: Union[str, Path]) -> List[Path]:
        """Recursively list all regular files below path, sorted."""
        return sorted(p for p in Path(path).rglob('*') if p.is_file())


class SystemTimeProvider:
    """Production time provider using a monotonic clock."""

    def current_time(self) -> float:
        return time.perf_counter()


class SystemEnvironmentProvider:
    """Production environment provider using os.environ."""

    def get_environ(self) -> Dict[str, str]:
        return dict(os.environ)

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        return os.environ.get(name, default)


class YamlConfigLoader:
    """Production config loader using real YAML parser."""

    def __init__(self, filesystem: 'RealFileSystemService'):
        """Initialize with filesystem service for reading files."""
        self.fs = filesystem

    def load_yaml_documents(self, path: str) -> List[Any]:
        """Load all documents of a multi-document YAML file (ui5.yaml style)."""
        content = self.fs.read_file(path)
        return [doc for doc in yaml.safe_load_all(content) if doc is not None]
