"""Deploy dispatcher.

Configures the deploy of one project and hands the actual transfer to the
deployer type named in its configuration:

    tree + overrides → effective project → deployer type
                                         → workspace view of sourcePath
                                         → await deployer_type.deploy(...)

Single attempt, no retries. Every failure is logged once together with the
elapsed time and re-raised unchanged; retry policy belongs to the caller.
"""

from typing import Any, Mapping, Optional

from ui5_deployer import resources
from ui5_deployer.core.protocols import Logger, FileSystemService, TimeProvider
from ui5_deployer.utils.timing import format_elapsed
from .configuration import (
    VIRTUAL_ROOT,
    DeployerConfig,
    build_effective_project,
    deployer_type_name,
)
from .registry import TypeRepository, default_repository

LOGGER_NAMESPACE = 'deployer:deployer'


class ProjectDeployer:
    """Orchestrates a single deploy with injected collaborators.

    Args:
        type_repository: Registry resolving deployer.type to an implementation
        filesystem: Filesystem service backing the workspace view
        time_provider: Clock used for elapsed-time reporting
        logger: Logger passed on to the deployer type as parent logger
    """

    def __init__(
        self,
        type_repository: TypeRepository,
        filesystem: FileSystemService,
        time_provider: TimeProvider,
        logger: Logger
    ):
        self.types = type_repository
        self.fs = filesystem
        self.time = time_provider
        self.log = logger

    def _elapsed(self, start_time: float) -> str:
        return format_elapsed(self.time.current_time() - start_time)

    async def deploy(
        self,
        tree: Mapping[str, Any],
        transport_request: Optional[str] = None,
        username: Optional[str] = None,
        password: Optional[str] = None
    ) -> None:
        """
        Configure the project deploy and run it.

        Args:
            tree: Project descriptor (not modified)
            transport_request: ABAP transport request
            username: Username to log into the target system
            password: Password to log into the target system

        Raises:
            MissingConfigurationError: No usable deployer configuration
            UnknownDeployerTypeError: deployer.type is not registered
            ResourceViewError: sourcePath or excludes unusable
            Exception: Whatever the deployer type raises, unchanged
        """
        name = _project_name(tree)
        self.log.info(f"Deploying project {name}")
        start_time = self.time.current_time()

        try:
            project = build_effective_project(
                tree,
                transport_request=transport_request,
                username=username,
                password=password
            )
            deployer_type = self.types.get_type(deployer_type_name(project))
            config = DeployerConfig.from_project(project)

            workspace = resources.create_adapter(
                fs_base_path=config.fs_base_path,
                vir_base_path=VIRTUAL_ROOT,
                excludes=config.normalized_excludes(),
                filesystem=self.fs
            )
            self.log.debug(f"Using deployer type '{config.type}' with {workspace!r}")

            await deployer_type.deploy(
                resource_collections={'workspace': workspace},
                project=project,
                parent_logger=self.log
            )
        except Exception as e:
            self.log.error(f"Deploy failed in {self._elapsed(start_time)}: {e}")
            raise

        self.log.verbose(f"Finished deploying project {name}")
        self.log.info(f"Deploy succeeded in {self._elapsed(start_time)}")


def _project_name(tree: Any) -> str:
    if isinstance(tree, Mapping):
        metadata = tree.get('metadata')
        if isinstance(metadata, Mapping) and metadata.get('name'):
            return str(metadata['name'])
    return '<unnamed>'


def create_default_deployer(logger: Optional[Logger] = None) -> ProjectDeployer:
    """ProjectDeployer wired with production implementations."""
    from ui5_deployer.core.implementations import (
        ConsoleLogger,
        RealFileSystemService,
        SystemTimeProvider,
    )
    return ProjectDeployer(
        type_repository=default_repository,
        filesystem=RealFileSystemService(),
        time_provider=SystemTimeProvider(),
        logger=logger or ConsoleLogger(LOGGER_NAMESPACE)
    )


async def deploy(
    *,
    tree: Mapping[str, Any],
    transport_request: Optional[str] = None,
    username: Optional[str] = None,
    password: Optional[str] = None
) -> None:
    """
    Deploy a project with the default registry, filesystem and logger.

    Example:
        asyncio.run(deploy(tree=descriptor, transport_request="K123456"))
    """
    await create_default_deployer().deploy(
        tree,
        transport_request=transport_request,
        username=username,
        password=password
    )
