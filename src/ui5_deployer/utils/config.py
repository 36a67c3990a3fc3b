"""Project descriptor loading (ui5.yaml)"""
from typing import Any, Dict, Optional

from ui5_deployer.core.protocols import ConfigLoader
from ui5_deployer.deploy.exceptions import MissingConfigurationError

DEFAULT_CONFIG_PATH = 'ui5.yaml'


def load_project_descriptor(
    config_path: str = DEFAULT_CONFIG_PATH,
    config_loader: Optional[ConfigLoader] = None
) -> Dict[str, Any]:
    """Load the project descriptor from a (multi-document) YAML file.

    ui5.yaml files may hold several documents (project plus extensions);
    the first document carrying a "metadata" block is the project.

    Args:
        config_path: Path to the descriptor file
        config_loader: Loader to read YAML with (defaults to the real one)

    Returns:
        Project descriptor as a dict

    Raises:
        FileNotFoundError: If config_path does not exist
        MissingConfigurationError: If no document describes a project
    """
    if config_loader is None:
        from ui5_deployer.core.implementations import RealFileSystemService, YamlConfigLoader
        config_loader = YamlConfigLoader(RealFileSystemService())

    for document in config_loader.load_yaml_documents(config_path):
        if isinstance(document, dict) and isinstance(document.get('metadata'), dict):
            return document

    raise MissingConfigurationError(
        f"No project found in {config_path}\n"
        f"Expected a YAML document with 'specVersion', 'metadata' and a deployer configuration"
    )


def resolve_credential(
    value: Optional[str],
    env_var: str,
    env_provider
) -> Optional[str]:
    """Return value if given, else the environment variable (or None)."""
    if value:
        return value
    return env_provider.get(env_var) or None
