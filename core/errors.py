# core/errors.py


class InputError(Exception):
    """Base class for everything the input resolution layer raises."""


class ConfigurationError(InputError):
    pass


class UnknownKeyError(ConfigurationError, LookupError):
    def __init__(self, key):
        super().__init__(f"unknown key: {key!r}")
        self.key = key


class AmbiguousBindingError(ConfigurationError):
    def __init__(self, key, count: int):
        super().__init__(f"multi-tap action for {key!r} x{count} already registered")
        self.key = key
        self.count = count


class InvalidBindingError(ConfigurationError, ValueError):
    pass


class RegistryFrozenError(ConfigurationError):
    pass
