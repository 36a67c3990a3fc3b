"""
FileSystemDeployer - Deploy by copying resources into a local directory.

Targets: staging folders, network shares mounted locally, test setups
Strategy: walk the workspace view → copy every resource to targetPath

Configuration (ui5.yaml):
    deployer:
      type: filesystem
      sourcePath: dist
      targetPath: /mnt/share/my-app
"""

import asyncio
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from ui5_deployer.core.protocols import FileSystemService, Logger
from .exceptions import DelegateDeployError


class FileSystemDeployer:
    """Copies the workspace view into deployer.targetPath."""

    def __init__(self, filesystem: Optional[FileSystemService] = None):
        if filesystem is None:
            from ui5_deployer.core.implementations import RealFileSystemService
            filesystem = RealFileSystemService()
        self.fs = filesystem

    async def deploy(
        self,
        *,
        resource_collections: Mapping[str, Any],
        project: Dict[str, Any],
        parent_logger: Logger
    ) -> None:
        """
        Copy all workspace resources to the configured target directory.

        Raises:
            DelegateDeployError: If targetPath is missing or a copy fails
        """
        log = parent_logger.get_child('type:filesystem')
        deployer = project.get('deployer') or {}

        target_path = deployer.get('targetPath')
        if not target_path:
            raise DelegateDeployError(
                "Missing 'targetPath' in deployer configuration\n"
                "The filesystem deployer type needs a directory to copy into:\n"
                "  deployer:\n"
                "    type: filesystem\n"
                "    targetPath: <directory>"
            )

        workspace = resource_collections['workspace']
        resources = workspace.by_glob('/**/*')
        log.verbose(f"Copying {len(resources)} resource(s) to {target_path}")

        copied = await asyncio.to_thread(self._copy_all, resources, Path(target_path), log)
        log.info(f"Deployed {len(copied)} file(s) to {target_path}")

    def _copy_all(self, resources: List[Any], target: Path, log: Logger) -> List[str]:
        copied = []
        for resource in resources:
            destination = target.joinpath(*resource.path.lstrip('/').split('/'))
            try:
                self.fs.mkdir(destination.parent)
                self.fs.write_bytes(destination, resource.get_bytes())
            except OSError as e:
                raise DelegateDeployError(
                    f"Failed to copy {resource.path} to {destination}\n"
                    f"Error: {e}\n\n"
                    f"Troubleshooting:\n"
                    f"  1. Verify the target directory is writable: ls -ld {target}\n"
                    f"  2. Check free disk space: df -h {target}"
                ) from e
            log.debug(f"Copied {resource.path}")
            copied.append(resource.path)
        return copied
