"""
Opaque identifiers used at the engine boundary.

Each wrapper is its own type: a ``PlayerId`` never compares equal to a
``GameId`` or ``SessionId`` holding the same string.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class PlayerId:
    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class GameId:
    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class SessionId:
    value: str

    def __str__(self) -> str:
        return self.value
