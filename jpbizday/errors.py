"""Custom exceptions."""


class JpBizdayError(Exception):
    """Base exception for jpbizday."""


class InvalidDateArithmeticError(JpBizdayError):
    """Raised when a holiday rule produces a date that cannot exist."""


class InvalidDateArgumentError(JpBizdayError):
    """Raised when a reference date argument cannot be parsed."""


class ConfigError(JpBizdayError):
    """Raised when a configuration value cannot be interpreted."""
