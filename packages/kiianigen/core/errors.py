"""Exception types raised by the animation generator."""

from __future__ import annotations


class KiianigenError(Exception):
    """Base class for kiianigen errors."""

    pass


class UnknownGeneratorError(KiianigenError, KeyError):
    """Raised when a generator name is not registered."""

    def __init__(self, name: str, available: list[str]) -> None:
        self.name = name
        self.available = available
        super().__init__(f"Unknown generator '{name}'. Available: {', '.join(available)}")

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message
        return str(self.args[0])


class GeneratorParamsError(KiianigenError, ValueError):
    """Raised when positional parameters do not fit a generator."""

    def __init__(self, generator: str, message: str) -> None:
        self.generator = generator
        self.reason = message
        super().__init__(f"Invalid parameters for generator '{generator}': {message}")


__all__ = [
    "GeneratorParamsError",
    "KiianigenError",
    "UnknownGeneratorError",
]
