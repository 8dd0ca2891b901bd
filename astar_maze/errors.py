class ConfigurationError(ValueError):
    """Raised when a maze cannot be built from the given dimensions or options."""


class BuilderContractError(ConfigurationError):
    """Raised when a grid builder returns a grid the maze cannot use."""
