"""Token cursor over JSON or YAML text.

Built on PyYAML's low-level event parser (``yaml.parse``), so documents
are read incrementally and never materialized as Python objects. JSON is
read through the same path since it is a subset of YAML.
"""

from __future__ import annotations

from typing import IO

import yaml

from rest_api_spec.exceptions import TokenStreamError
from rest_api_spec.parser.tokens import Token, TokenCursor

_SCALAR_TOKENS = {
    "tag:yaml.org,2002:null": Token.VALUE_NULL,
    "tag:yaml.org,2002:bool": Token.VALUE_BOOLEAN,
    "tag:yaml.org,2002:int": Token.VALUE_NUMBER_INT,
    "tag:yaml.org,2002:float": Token.VALUE_NUMBER_FLOAT,
}

# States of an open container on the cursor's stack
_KEY = "key"
_VALUE = "value"
_ITEM = "item"


class YamlTokenCursor(TokenCursor):
    """TokenCursor reading PyYAML events from a string or text stream."""

    def __init__(self, stream: str | IO[str], source: str = "<stream>"):
        self.source = source
        self._events = yaml.parse(stream, Loader=yaml.SafeLoader)
        self._resolver = yaml.resolver.Resolver()
        self._token: Token | None = None
        self._value: str | None = None
        self._containers: list[str] = []

    def advance(self) -> Token | None:
        while True:
            event = self._next_event()
            if event is None:
                self._token = None
                self._value = None
                return None
            token = self._translate(event)
            if token is not None:
                self._token = token
                return token

    def current(self) -> Token | None:
        return self._token

    def current_name(self) -> str:
        self._expect(Token.FIELD_NAME)
        return self._value

    def text(self) -> str:
        self._expect(Token.VALUE_STRING)
        return self._value

    def boolean_value(self) -> bool:
        self._expect(Token.VALUE_BOOLEAN)
        value = yaml.constructor.SafeConstructor.bool_values.get(self._value.lower())
        if value is None:
            raise TokenStreamError(self.source, f"[{self._value}] is not a boolean")
        return value

    def skip_children(self) -> None:
        if self._token not in (Token.START_OBJECT, Token.START_ARRAY):
            return
        depth = 1
        while depth:
            token = self.advance()
            if token is None:
                raise TokenStreamError(self.source, "stream ended inside a skipped value")
            if token in (Token.START_OBJECT, Token.START_ARRAY):
                depth += 1
            elif token in (Token.END_OBJECT, Token.END_ARRAY):
                depth -= 1

    def _next_event(self) -> yaml.Event | None:
        try:
            return next(self._events, None)
        except (yaml.YAMLError, OSError, UnicodeDecodeError) as exc:
            raise TokenStreamError(self.source, exc) from exc

    def _translate(self, event: yaml.Event) -> Token | None:
        if isinstance(event, (yaml.MappingStartEvent, yaml.SequenceStartEvent)):
            self._start_value("container")
            self._value = None
            if isinstance(event, yaml.MappingStartEvent):
                self._containers.append(_KEY)
                return Token.START_OBJECT
            self._containers.append(_ITEM)
            return Token.START_ARRAY

        if isinstance(event, (yaml.MappingEndEvent, yaml.SequenceEndEvent)):
            self._containers.pop()
            self._value = None
            if isinstance(event, yaml.MappingEndEvent):
                return Token.END_OBJECT
            return Token.END_ARRAY

        if isinstance(event, yaml.ScalarEvent):
            self._value = event.value
            if self._containers and self._containers[-1] == _KEY:
                self._containers[-1] = _VALUE
                return Token.FIELD_NAME
            self._start_value("scalar")
            return self._scalar_token(event)

        if isinstance(event, yaml.AliasEvent):
            raise TokenStreamError(self.source, f"aliases are not supported [*{event.anchor}]")

        # stream and document boundaries carry no token
        return None

    def _start_value(self, kind: str) -> None:
        if not self._containers:
            return
        if self._containers[-1] == _KEY:
            raise TokenStreamError(self.source, f"{kind} mapping keys are not supported")
        if self._containers[-1] == _VALUE:
            self._containers[-1] = _KEY

    def _scalar_token(self, event: yaml.ScalarEvent) -> Token:
        tag = event.tag
        if tag is None or tag == "!":
            tag = self._resolver.resolve(yaml.ScalarNode, event.value, event.implicit)
        return _SCALAR_TOKENS.get(tag, Token.VALUE_STRING)

    def _expect(self, token: Token) -> None:
        if self._token is not token:
            current = self._token.name if self._token is not None else "end of stream"
            raise TokenStreamError(self.source, f"expected [{token.name}] but current token is [{current}]")
