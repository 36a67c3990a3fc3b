"""
Project deployment subsystem.

Resolves the deployer type of a project and hands it a read-only view of the
project's deployable resources:
    - ProjectDeployer: configure + dispatch one deploy (async)
    - FileSystemDeployer: copy resources to a local directory (built in)

Public API:
    - deploy: Deploy with default collaborators
    - ProjectDeployer, create_default_deployer: Dispatcher
    - DeployerType: Protocol interface for deployer types
    - TypeRepository, get_type, register_type, list_types: Registry
    - build_effective_project, normalize_excludes, DeployerConfig: Configuration
    - DeployError and subclasses: Exceptions
"""

from .base import DeployerType
from .configuration import (
    DeployerConfig,
    build_effective_project,
    deployer_type_name,
    normalize_excludes,
    parse_spec_version,
)
from .exceptions import (
    DeployError,
    MissingConfigurationError,
    UnknownDeployerTypeError,
    ResourceViewError,
    DelegateDeployError,
)
from .registry import TypeRepository, get_type, register_type, list_types
from .filesystem_deployer import FileSystemDeployer
from .deployer import ProjectDeployer, create_default_deployer, deploy

__all__ = [
    # Protocol
    "DeployerType",

    # Configuration
    "DeployerConfig",
    "build_effective_project",
    "deployer_type_name",
    "normalize_excludes",
    "parse_spec_version",

    # Registry
    "TypeRepository",
    "get_type",
    "register_type",
    "list_types",

    # Dispatcher
    "ProjectDeployer",
    "create_default_deployer",
    "deploy",

    # Exceptions
    "DeployError",
    "MissingConfigurationError",
    "UnknownDeployerTypeError",
    "ResourceViewError",
    "DelegateDeployError",

    # Implementations
    "FileSystemDeployer",
]
