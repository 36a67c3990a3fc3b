"""
Effective deploy configuration.

Turns a project descriptor plus command-line overrides into the project the
deployer type receives. Nothing in here mutates the caller's descriptor: the
effective project is a deep copy, so one descriptor can be deployed
concurrently with different overrides.

Resolution order:
    1. Promote customConfiguration.deployer (specVersion > 2 or block present,
       even when empty)
    2. Inject the transport request into abapRepository (if both exist)
    3. Replace credentials with the username/password overrides (if any given)
"""

import copy
import re
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from .exceptions import MissingConfigurationError, ResourceViewError

VIRTUAL_ROOT = '/'

_LEADING_NUMBER = re.compile(r'^\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)')


def parse_spec_version(value: Any) -> Optional[float]:
    """
    Parse the numeric prefix of a specVersion ("2.6", "3.0", 3, "2.6.1").

    Returns:
        The leading number as float, or None if there is none
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if not isinstance(value, str):
        return None
    match = _LEADING_NUMBER.match(value)
    return float(match.group(1)) if match else None


def _custom_deployer(tree: Mapping[str, Any]) -> Any:
    custom = tree.get('customConfiguration')
    if isinstance(custom, Mapping):
        return custom.get('deployer')
    return None


def build_effective_project(
    tree: Mapping[str, Any],
    transport_request: Optional[str] = None,
    username: Optional[str] = None,
    password: Optional[str] = None
) -> Dict[str, Any]:
    """
    Build the effective project descriptor with all overrides applied.

    Args:
        tree: Project descriptor (left untouched)
        transport_request: ABAP transport request override
        username: Username override for the target system
        password: Password override for the target system

    Returns:
        Deep copy of tree whose "deployer" block is the effective configuration

    Raises:
        MissingConfigurationError: If no deployer block can be resolved
    """
    if not isinstance(tree, Mapping):
        raise MissingConfigurationError(f"Project descriptor must be a mapping, got {type(tree).__name__}")

    project = copy.deepcopy(dict(tree))

    spec_version = parse_spec_version(project.get('specVersion'))
    custom_deployer = _custom_deployer(project)
    if (spec_version is not None and spec_version > 2) or custom_deployer is not None:
        project['deployer'] = custom_deployer

    deployer = project.get('deployer')
    if not isinstance(deployer, dict):
        name = (project.get('metadata') or {}).get('name', '<unnamed>')
        raise MissingConfigurationError(
            f"No deployer configuration found for project {name}\n"
            f"Add a 'deployer' block under 'customConfiguration' "
            f"(specVersion > 2) or at the top level of the descriptor"
        )

    abap_repository = deployer.get('abapRepository')
    if transport_request and isinstance(abap_repository, dict):
        abap_repository['transportRequest'] = transport_request

    if username or password:
        deployer['credentials'] = {'username': username, 'password': password}

    return project


def normalize_excludes(excludes: Sequence[str], source_path: str) -> List[str]:
    """
    Rewrite exclude paths from project-relative to view-relative.

    The sourcePath prefix of each entry is replaced by the virtual root:
        sourcePath "webapp", "webapp/test/**"  → "/test/**"
        sourcePath "src",    "/src/foo.js"     → "/foo.js"

    Only a leading sourcePath is replaced; entries that do not start with it
    are returned unchanged.
    """
    prefix = _strip_path(source_path)
    normalized = []
    for entry in excludes:
        if not prefix:
            normalized.append(entry)
            continue
        stripped = entry
        if stripped.startswith('./'):
            stripped = stripped[2:]
        stripped = stripped.lstrip('/')
        if stripped == prefix or stripped.startswith(prefix + '/'):
            remainder = stripped[len(prefix):].lstrip('/')
            normalized.append(VIRTUAL_ROOT + remainder)
        else:
            normalized.append(entry)
    return normalized


def _strip_path(path: str) -> str:
    if path.startswith('./'):
        path = path[2:]
    path = path.strip('/')
    return '' if path == '.' else path


def deployer_type_name(project: Mapping[str, Any]) -> str:
    """
    Return deployer.type of an effective project.

    Only the type is checked here; sourcePath and excludes are validated by
    DeployerConfig.from_project after the type has been resolved.

    Raises:
        MissingConfigurationError: If deployer or deployer.type is missing
    """
    deployer = project.get('deployer')
    if not isinstance(deployer, Mapping):
        raise MissingConfigurationError("Project has no deployer configuration")

    type_name = deployer.get('type')
    if not type_name:
        raise MissingConfigurationError("Missing 'type' in deployer configuration")
    return type_name


@dataclass(frozen=True)
class DeployerConfig:
    """
    Validated view of the effective "deployer" block.

    Attributes:
        type: Deployer type name (registry key)
        source_path: Directory of deployable files, relative to the cwd
        excludes: Exclude globs as written in the descriptor
    """
    type: str
    source_path: str
    excludes: Tuple[str, ...] = ()

    @classmethod
    def from_project(cls, project: Mapping[str, Any]) -> 'DeployerConfig':
        """
        Extract the deployer configuration from an effective project.

        Raises:
            MissingConfigurationError: If deployer, type or sourcePath is missing
            ResourceViewError: If resources.excludes is not a list of strings
        """
        type_name = deployer_type_name(project)
        deployer = project['deployer']

        source_path = deployer.get('sourcePath')
        if not source_path or not isinstance(source_path, str):
            raise MissingConfigurationError("Missing 'sourcePath' in deployer configuration")

        excludes = ()
        resources = deployer.get('resources')
        if isinstance(resources, Mapping) and resources.get('excludes'):
            raw = resources['excludes']
            if isinstance(raw, str) or not isinstance(raw, Sequence) \
                    or not all(isinstance(e, str) for e in raw):
                raise ResourceViewError(f"deployer.resources.excludes must be a list of paths: {raw!r}")
            excludes = tuple(raw)

        return cls(
            type=type_name,
            source_path=source_path,
            excludes=excludes,
        )

    @property
    def fs_base_path(self) -> str:
        return './' + self.source_path

    def normalized_excludes(self) -> List[str]:
        return normalize_excludes(self.excludes, self.source_path)
