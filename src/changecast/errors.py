from typing import Any


class ChangecastError(Exception):
    pass


class RegistrationCapabilityError(ChangecastError, TypeError):
    def __init__(self, target: Any, selector: str) -> None:
        super().__init__(
            f"{type(target).__name__} object does not respond to '{selector}'"
        )
        self.target = target
        self.selector = selector


class ConfigError(ChangecastError, ValueError):
    pass
