"""Token kinds and the pull-cursor interface the API parser reads from."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum


class Token(Enum):
    """Structural markers and scalar kinds of a JSON-like token stream."""

    START_OBJECT = "start_object"
    END_OBJECT = "end_object"
    START_ARRAY = "start_array"
    END_ARRAY = "end_array"
    FIELD_NAME = "field_name"
    VALUE_STRING = "value_string"
    VALUE_NUMBER_INT = "value_number_int"
    VALUE_NUMBER_FLOAT = "value_number_float"
    VALUE_BOOLEAN = "value_boolean"
    VALUE_NULL = "value_null"


class TokenCursor(ABC):
    """Forward-only cursor over a token stream.

    The cursor holds exactly one token at a time. ``advance`` moves to the
    next one; the accessors read the value of the token it currently holds.
    """

    @abstractmethod
    def advance(self) -> Token | None:
        """Move to the next token and return it, ``None`` once exhausted."""

    @abstractmethod
    def current(self) -> Token | None:
        """Return the token last produced by ``advance``."""

    @abstractmethod
    def current_name(self) -> str:
        """Return the field name of the current FIELD_NAME token."""

    @abstractmethod
    def text(self) -> str:
        """Return the string of the current VALUE_STRING token."""

    @abstractmethod
    def boolean_value(self) -> bool:
        """Return the value of the current VALUE_BOOLEAN token."""

    @abstractmethod
    def skip_children(self) -> None:
        """Advance to the close matching the current START_OBJECT or START_ARRAY.

        Does nothing when the current token opens no container.
        """
