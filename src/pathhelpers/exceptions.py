# ============================================================================
# FILE: exceptions.py
# RELPATH: search_path_helpers/src/pathhelpers/exceptions.py
# PROJECT: Search Path Helpers
# VERSION: 1.0.0
# LIFECYCLE: Proposed
# DESCRIPTION: Exception hierarchy for Search Path Helpers
# ============================================================================

"""
Exception classes for Search Path Helpers.

A small hierarchy so callers can catch everything from this package with
one ``except PathHelpersError`` or single out a bad search pattern.
"""


class PathHelpersError(Exception):
    """Base exception for all Search Path Helpers errors."""
    pass


# ============================================================================
# Validation-Related Exceptions
# ============================================================================

class ValidationError(PathHelpersError):
    """Base exception for validation errors."""
    pass


class InvalidSearchPatternError(ValidationError, ValueError):
    """
    Raised when a search pattern cannot be handed to a directory listing.

    Covers patterns that climb out of the directory with a trailing ``..``
    segment, and empty or rooted patterns given to the search string builder.

    Attributes:
        pattern: The rejected search pattern
        reason: Human-readable explanation of the rejection
        param_name: Name of the argument that carried the pattern
    """
    def __init__(self, pattern: str, reason: str, param_name: str = "search_pattern"):
        self.pattern = pattern
        self.reason = reason
        self.param_name = param_name
        super().__init__(
            f"Invalid search pattern '{pattern}' (parameter '{param_name}'): {reason}"
        )


class UnknownFlavorError(ValidationError, ValueError):
    """
    Raised when no root classifier exists for a path flavor.

    Attributes:
        flavor: The requested flavor name
        available: Flavor names that are supported
    """
    def __init__(self, flavor: str, available: list = None):
        self.flavor = flavor
        self.available = available or []

        msg = f"Unknown path flavor '{flavor}'"
        if self.available:
            msg += f". Available flavors: {', '.join(self.available)}"
        super().__init__(msg)


# ============================================================================
# Configuration-Related Exceptions
# ============================================================================

class ConfigError(PathHelpersError):
    """Base exception for configuration-related errors."""
    pass


class ConfigLoadError(ConfigError):
    """
    Raised when configuration file cannot be loaded.

    Attributes:
        config_file: Path to the configuration file
        reason: Explanation of the failure
    """
    def __init__(self, config_file: str, reason: str):
        self.config_file = config_file
        self.reason = reason
        super().__init__(f"Failed to load config '{config_file}': {reason}")


class ConfigValidationError(ConfigError):
    """
    Raised when configuration data fails validation.

    Attributes:
        key: Configuration key that failed validation
        value: The invalid value
        reason: Explanation of why validation failed
    """
    def __init__(self, key: str, value: object, reason: str):
        self.key = key
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid config value for '{key}': {reason}")


# ============================================================================
# LIFECYCLE STATUS: Proposed
# DEPENDENCIES: None (base exception definitions)
# TESTS: tests/unit/test_exceptions.py
# ============================================================================
