"""Custom exceptions for code-regions."""


class CodeRegionsError(Exception):
    """Base exception for all code-regions errors."""

    pass


class InvalidColorFormat(CodeRegionsError, ValueError):
    """Raised when a color string is not a 6-digit hex color."""

    pass


class ConfigError(CodeRegionsError):
    """Raised when a configuration file cannot be loaded."""

    pass


class HostError(CodeRegionsError):
    """Base exception for failures reported by the editor host."""

    pass


class HostQueryError(HostError):
    """Raised when the host cannot answer a style or namespace query."""

    pass


class HostMutationError(HostError):
    """Raised when the host rejects a style definition or line mark."""

    pass
