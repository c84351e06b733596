"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations


class ConfigurationError(Exception):
    """Missing, invalid, or incomplete configuration.

    Raised when a configuration section cannot be parsed into the settings
    the host needs. Typically caught at CLI boundaries to provide
    user-friendly error messages.

    Example:
        >>> from myservice.domain.errors import ConfigurationError
        >>> err = ConfigurationError("Invalid [host] section")
        >>> str(err)
        'Invalid [host] section'
    """


class RegistrationError(ValueError):
    """A service registration is malformed.

    Raised by the service collection when a registration names more than one
    source (implementation, factory, instance) or an implementation that is
    not a class.

    Example:
        >>> from myservice.domain.errors import RegistrationError
        >>> isinstance(RegistrationError("bad"), ValueError)
        True
    """


class ResolutionError(LookupError):
    """A capability could not be resolved from a service provider.

    Raised when the capability was never registered, or when constructing
    its implementation failed (the original exception is chained).

    Attributes:
        capability: The capability that was requested.

    Example:
        >>> from myservice.domain.errors import ResolutionError
        >>> err = ResolutionError(int, "No service registered for int")
        >>> err.capability is int
        True
        >>> str(err)
        'No service registered for int'
    """

    def __init__(self, capability: object, message: str) -> None:
        super().__init__(message)
        self.capability = capability

    def __reduce__(self) -> tuple[type[ResolutionError], tuple[object, str]]:
        return type(self), (self.capability, str(self))


class ContainerDisposedError(RuntimeError):
    """A service provider was used after it had been disposed.

    Example:
        >>> from myservice.domain.errors import ContainerDisposedError
        >>> str(ContainerDisposedError("Service provider has been disposed"))
        'Service provider has been disposed'
    """


__all__ = [
    "ConfigurationError",
    "ContainerDisposedError",
    "RegistrationError",
    "ResolutionError",
]
