"""
Centralized exception hierarchy for sdklocator.

Discovery errors are raised internally and converted to absence (``None`` or
an empty sequence) at the public boundary. Only ``ConfigError`` is expected
to reach callers.
"""


# ============================================================================
# Base Exceptions
# ============================================================================


class SdkLocatorError(Exception):
    """Base exception for all sdklocator errors."""

    pass


# ============================================================================
# Discovery Exceptions
# ============================================================================


class DiscoveryError(SdkLocatorError):
    """Base exception for SDK discovery errors."""

    pass


class ToolUnavailableError(DiscoveryError):
    """Raised when the diagnostic tool cannot be started."""

    def __init__(self, command: str, reason: str = ""):
        self.command = command
        self.reason = reason
        msg = f"Tool unavailable: {command}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)


class MalformedOutputError(DiscoveryError):
    """Raised when the tool output lacks the expected markers."""

    pass


class InvalidInstallationError(DiscoveryError):
    """Raised when a candidate directory is not a valid SDK installation."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid SDK installation at {path!r}: {reason}")


class InvalidVersionError(DiscoveryError):
    """Invalid version format."""

    pass


# ============================================================================
# Configuration Exceptions
# ============================================================================


class ConfigError(SdkLocatorError):
    """Configuration parsing or validation error."""

    pass
