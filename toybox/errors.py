"""Exception types raised inside toybox."""


class ToyboxError(Exception):
    """Base class for toybox errors."""


class InputClosed(ToyboxError):
    """Standard input ended while a program was waiting for a value."""


class ConfigError(ToyboxError, ValueError):
    """A setting from the environment could not be parsed."""
