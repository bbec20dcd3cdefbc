"""Domain-specific exceptions for typed error handling at boundaries.

The fragment builders themselves are total and never raise; these types
cover the settings that drive them.
"""

from __future__ import annotations


class ConfigurationError(Exception):
    """Missing, invalid, or inconsistent configuration.

    Raised when the ``[mdfrag]`` section holds values that cannot drive the
    builders (for example a non-boolean ``escape_input``). Caught at the CLI
    boundary and reported with the ``CONFIG_ERROR`` exit code.

    Example:
        >>> from mdfrag.domain.errors import ConfigurationError
        >>> err = ConfigurationError("code_language must be a string")
        >>> str(err)
        'code_language must be a string'
    """


__all__ = [
    "ConfigurationError",
]
