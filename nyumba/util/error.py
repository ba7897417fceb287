"""Errors raised by utility code outside the domain."""


class UtilError(Exception):
    """Base for configuration and tooling failures."""


class ConfigurationError(UtilError):
    """Settings are missing or unsafe for the current environment."""
