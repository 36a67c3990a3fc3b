"""Unit tests for the built-in filesystem deployer type."""

import pytest
from unittest.mock import Mock

from ui5_deployer.core.implementations import RealFileSystemService
from ui5_deployer.core.protocols import FileSystemService, Logger
from ui5_deployer.deploy.exceptions import DelegateDeployError
from ui5_deployer.deploy.filesystem_deployer import FileSystemDeployer
from ui5_deployer.resources import create_adapter


@pytest.fixture
def workspace(tmp_path):
    source = tmp_path / "dist"
    (source / "view").mkdir(parents=True)
    (source / "test").mkdir()
    (source / "index.html").write_text("<html/>")
    (source / "view" / "Main.view.xml").write_text("<mvc:View/>")
    (source / "test" / "AllTests.js").write_text("// tests")
    return create_adapter(fs_base_path=source, vir_base_path="/", excludes=["/test/**"])


def make_logger():
    logger = Mock(spec=Logger)
    logger.get_child.return_value = Mock(spec=Logger)
    return logger


class TestFileSystemDeployer:
    """Test copying the workspace view."""

    @pytest.mark.asyncio
    async def test_copies_non_excluded_resources(self, tmp_path, workspace):
        target = tmp_path / "target"
        logger = make_logger()

        await FileSystemDeployer().deploy(
            resource_collections={"workspace": workspace},
            project={"deployer": {"type": "filesystem", "targetPath": str(target)}},
            parent_logger=logger
        )

        assert (target / "index.html").read_text() == "<html/>"
        assert (target / "view" / "Main.view.xml").read_text() == "<mvc:View/>"
        assert not (target / "test").exists()
        logger.get_child.assert_called_once_with("type:filesystem")
        child = logger.get_child.return_value
        child.info.assert_called_once_with(f"Deployed 2 file(s) to {target}")

    @pytest.mark.asyncio
    async def test_missing_target_path(self, workspace):
        with pytest.raises(DelegateDeployError, match="targetPath"):
            await FileSystemDeployer().deploy(
                resource_collections={"workspace": workspace},
                project={"deployer": {"type": "filesystem"}},
                parent_logger=make_logger()
            )

    @pytest.mark.asyncio
    async def test_write_failure_wrapped(self, tmp_path, workspace):
        fs = Mock(spec=FileSystemService)
        fs.write_bytes.side_effect = PermissionError("read-only filesystem")

        with pytest.raises(DelegateDeployError, match="Failed to copy") as exc_info:
            await FileSystemDeployer(filesystem=fs).deploy(
                resource_collections={"workspace": workspace},
                project={"deployer": {"targetPath": str(tmp_path / "target")}},
                parent_logger=make_logger()
            )

        assert isinstance(exc_info.value.__cause__, PermissionError)

    def test_defaults_to_real_filesystem(self):
        assert isinstance(FileSystemDeployer().fs, RealFileSystemService)
