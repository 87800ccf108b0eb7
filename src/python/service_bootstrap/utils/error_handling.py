"""Error types raised while bootstrapping service configuration."""

from typing import Optional


class BootstrapError(Exception):
    """Base class for configuration and credential errors.

    These are raised synchronously to the startup code and are not
    retried.
    """

    pass


class ConfigurationError(BootstrapError):
    """Exception raised when required connection parameters are missing or
    invalid."""

    def __init__(self, message: str, parameter: Optional[str] = None):
        """Initialize with a message and the offending parameter.

        Args:
            message: Human readable description of the problem
            parameter: Name of the missing or invalid parameter, if known
        """
        super().__init__(message)
        self.parameter = parameter


class CredentialParseError(BootstrapError):
    """Exception raised when a credential variable is set but is not a JSON
    object."""

    def __init__(self, variable: str):
        """Initialize with the name of the variable that failed to parse.

        Args:
            variable: Environment variable holding the malformed value
        """
        super().__init__(f"Failed to parse {variable} as JSON")
        self.variable = variable


ParseError = CredentialParseError
