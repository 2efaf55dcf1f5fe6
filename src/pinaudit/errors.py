"""Exception types raised by pinaudit."""


class PinauditError(Exception):
    """Base class for pinaudit errors."""


class ConstraintParseError(PinauditError, ValueError):
    """A version constraint string could not be parsed."""

    def __init__(self, constraint: str, reason: str) -> None:
        super().__init__(f"Could not parse version constraint {constraint!r}: {reason}")
        self.constraint = constraint
        self.reason = reason


class SubtreeUnreadableError(PinauditError, OSError):
    """A directory could not be read during a strict file scan."""


class ManifestError(PinauditError):
    """The package manifest is missing or malformed."""


class ConfigError(PinauditError):
    """The pinaudit configuration is unreadable or has the wrong shape."""
