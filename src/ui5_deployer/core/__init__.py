"""Core dependency injection infrastructure for the deployer.

This module provides Protocol-based abstractions that keep the deploy
dispatcher testable. External dependencies (logging, filesystem, time,
environment, YAML) are abstracted via Protocols with production
implementations.

Design:
- Protocol-based abstractions (typing.Protocol) for structural typing
- Production implementations for real-world use
- Easy mocking for unit tests
"""

from ui5_deployer.core.protocols import (
    Logger,
    FileSystemService,
    TimeProvider,
    EnvironmentProvider,
    ConfigLoader,
)

from ui5_deployer.core.implementations import (
    VERBOSE,
    configure_logging,
    ConsoleLogger,
    RealFileSystemService,
    SystemTimeProvider,
    SystemEnvironmentProvider,
    YamlConfigLoader,
)

__all__ = [
    # Protocols
    "Logger",
    "FileSystemService",
    "TimeProvider",
    "EnvironmentProvider",
    "ConfigLoader",
    # Implementations
    "VERBOSE",
    "configure_logging",
    "ConsoleLogger",
    "RealFileSystemService",
    "SystemTimeProvider",
    "SystemEnvironmentProvider",
    "YamlConfigLoader",
]
