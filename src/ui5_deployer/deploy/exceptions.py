"""
Deployment exceptions.

Custom exceptions for deploy failures with actionable error messages.
The dispatcher never recovers from any of these: it logs once and re-raises.
"""


class DeployError(Exception):
    """Base class for every failure raised by the deployer."""
    pass


class MissingConfigurationError(DeployError):
    """
    Raised when no usable deployer configuration could be resolved.

    Examples:
        - specVersion > 2 but no customConfiguration.deployer block
        - deployer block without a "type" or "sourcePath"
    """
    pass


class UnknownDeployerTypeError(DeployError):
    """Raised when deployer.type names no registered deployer type."""

    def __init__(self, type_name: str, known_types=()):
        self.type_name = type_name
        self.known_types = tuple(known_types)
        known = ", ".join(self.known_types) if self.known_types else "(none)"
        super().__init__(
            f"Unknown deployer type '{type_name}'\n"
            f"Registered types: {known}"
        )


class ResourceViewError(DeployError):
    """
    Raised when the resource view cannot be built.

    Examples:
        - sourcePath directory does not exist
        - excludes is not a list of strings
        - virtual base path is not absolute
    """
    pass


class DelegateDeployError(DeployError):
    """
    Raised by deployer types when the actual transfer fails.

    Deployer types should raise this (optionally chained from the
    underlying error) so callers can tell transfer failures apart from
    configuration mistakes.
    """
    pass
