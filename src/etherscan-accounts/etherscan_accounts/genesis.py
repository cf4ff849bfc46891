"""
Tri-state value for fields that genesis-block records fill with placeholders.

Rows produced by the chain's bootstrap state carry "GENESIS..." instead of a
hash, sender or input. ``GenesisOption`` keeps that case apart from both a
missing value and a real one, so one record schema can hold normal and
genesis rows.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Generic, Optional, TypeVar

T = TypeVar("T")

GENESIS_SENTINEL = "GENESIS"


class GenesisState(Enum):
    ABSENT = "absent"
    GENESIS = "genesis"
    PRESENT = "present"


@dataclass(frozen=True)
class GenesisOption(Generic[T]):
    state: GenesisState
    _value: Optional[T] = None

    def __post_init__(self) -> None:
        if self.state is not GenesisState.PRESENT and self._value is not None:
            raise ValueError(f"A {self.state.value} GenesisOption cannot carry a value.")

    @classmethod
    def absent(cls) -> "GenesisOption[T]":
        return cls(GenesisState.ABSENT)

    @classmethod
    def genesis(cls) -> "GenesisOption[T]":
        return cls(GenesisState.GENESIS)

    @classmethod
    def present(cls, value: T) -> "GenesisOption[T]":
        return cls(GenesisState.PRESENT, value)

    def is_genesis(self) -> bool:
        return self.state is GenesisState.GENESIS

    def is_absent(self) -> bool:
        return self.state is GenesisState.ABSENT

    def value(self) -> Optional[T]:
        """The decoded value, or None when absent or a genesis placeholder."""
        if self.state is GenesisState.PRESENT:
            return self._value
        return None

    def to_optional(self) -> Optional[T]:
        # Collapses GENESIS and ABSENT; use the tri-state form to tell them apart.
        return self.value()

    def __repr__(self) -> str:
        if self.state is GenesisState.PRESENT:
            return f"GenesisOption.present({self._value!r})"
        return f"GenesisOption.{self.state.value}()"


def decode_genesis(
    raw: Any,
    field: str,
    decode: Callable[[str, str], Optional[T]],
) -> GenesisOption[T]:
    """Decode ``raw`` with ``decode`` unless it is empty or a genesis placeholder."""
    if raw == "":
        return GenesisOption.absent()
    if isinstance(raw, str) and raw.startswith(GENESIS_SENTINEL):
        return GenesisOption.genesis()
    value = decode(raw, field)
    if value is None:
        return GenesisOption.absent()
    return GenesisOption.present(value)


def encode_genesis(option: GenesisOption[T], encode: Callable[[T], str]) -> str:
    if option.is_genesis():
        return GENESIS_SENTINEL
    if option.is_absent():
        return ""
    return encode(option.value())
