"""
TypeRepository - Map deployer type names to their implementations.

Name-based routing:
    deployer.type: filesystem  → FileSystemDeployer (built in)
    deployer.type: abap        → registered by an external package
    deployer.type: <unknown>   → UnknownDeployerTypeError

The default repository is populated at import time with the built-in types.
Additional types are added with register_type() before deploying.
"""

from typing import Dict, List

from .base import DeployerType, DeployerTypeFactory
from .exceptions import UnknownDeployerTypeError


class TypeRepository:
    """Registry of deployer type factories keyed by type name."""

    def __init__(self):
        self._factories: Dict[str, DeployerTypeFactory] = {}

    def register_type(self, name: str, factory: DeployerTypeFactory, *, replace: bool = False) -> None:
        """
        Register a factory for deployer type `name`.

        Args:
            name: Value of deployer.type that selects this implementation
            factory: Zero-argument callable returning a DeployerType
            replace: Allow overriding an already registered name

        Raises:
            ValueError: If name is empty or already registered (without replace)
        """
        if not name:
            raise ValueError("Deployer type name must not be empty")
        if name in self and not replace:
            raise ValueError(f"Deployer type '{name}' is already registered")
        self._factories[name] = factory

    def get_type(self, name: str) -> DeployerType:
        """
        Resolve `name` to a fresh deployer type instance.

        Raises:
            UnknownDeployerTypeError: If no factory is registered for name
        """
        try:
            factory = self._factories[name]
        except (KeyError, TypeError):
            raise UnknownDeployerTypeError(name, self.list_types()) from None
        return factory()

    def list_types(self) -> List[str]:
        return sorted(self._factories)

    def __contains__(self, name: str) -> bool:
        return name in self._factories


def _create_default_repository() -> TypeRepository:
    # Lazy import to avoid circular dependencies
    from .filesystem_deployer import FileSystemDeployer

    repository = TypeRepository()
    repository.register_type('filesystem', FileSystemDeployer)
    return repository


default_repository = _create_default_repository()


def register_type(name: str, factory: DeployerTypeFactory, *, replace: bool = False) -> None:
    """Register a deployer type in the default repository."""
    default_repository.register_type(name, factory, replace=replace)


def get_type(name: str) -> DeployerType:
    """Resolve a deployer type from the default repository."""
    return default_repository.get_type(name)


def list_types() -> List[str]:
    """Names registered in the default repository."""
    return default_repository.list_types()
