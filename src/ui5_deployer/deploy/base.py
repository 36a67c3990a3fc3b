"""
DeployerType Protocol - Interface for system-specific deploy strategies.

A deployer type knows how to transfer the deployable resources of a project
to one kind of target system (ABAP repository, Cloud Foundry, local folder,
...). The dispatcher resolves it by name from the registry and awaits its
deploy() coroutine exactly once per deploy call.
"""

from typing import Any, Callable, Dict, Mapping, Protocol, runtime_checkable

from ui5_deployer.core.protocols import Logger


@runtime_checkable
class DeployerType(Protocol):
    """
    Interface for deployer types.

    @runtime_checkable decorator enables isinstance() checks:
        deployer_type = FileSystemDeployer()
        assert isinstance(deployer_type, DeployerType)

    Implementations:
        - FileSystemDeployer: copy resources into a local target directory
        - ABAP / Cloud Foundry uploaders live in external packages and are
          added with register_type()
    """

    async def deploy(
        self,
        *,
        resource_collections: Mapping[str, Any],
        project: Dict[str, Any],
        parent_logger: Logger
    ) -> None:
        """
        Transfer the project's resources to the target system.

        Args:
            resource_collections: {"workspace": FileSystemAdapter} view of the
                deployable files, rooted at "/"
            project: Effective project descriptor (overrides already merged)
            parent_logger: Logger to derive a child logger from

        Raises:
            DelegateDeployError: If the transfer fails
        """
        ...


DeployerTypeFactory = Callable[[], DeployerType]
