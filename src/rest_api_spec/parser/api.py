"""REST API descriptor parser.

Reads one ``{"<name>": {...}}`` document from a TokenCursor in a single
forward pass and returns a RestApiSpec. Only the ``methods``, ``url``
(``paths``, ``parts``, ``params``) and ``body`` sections are extracted;
everything else is stepped over. Object depth is counted so that unknown
subtrees of any shape pass through without being interpreted.
"""

from __future__ import annotations

from typing import Callable

from rest_api_spec.exceptions import ShapeMismatchError
from rest_api_spec.parser.base import RestApiSpec
from rest_api_spec.parser.tokens import Token, TokenCursor


class ApiSpecParser:
    """Parses a single REST API definition into a RestApiSpec."""

    def parse(self, location: str, cursor: TokenCursor) -> RestApiSpec:
        """Parse the API document the cursor is positioned before.

        On return the cursor sits two tokens past the close of the API
        definition: past the wrapping object's END_OBJECT.

        Raises:
            DuplicateValueError: A method, path, part or param repeats.
            ShapeMismatchError: The document does not have the expected structure.
            TokenStreamError: The cursor failed to read the next token.
        """
        # move to the api name
        while cursor.advance() is not Token.FIELD_NAME:
            if cursor.current() is None:
                raise ShapeMismatchError(location, "root", "field name", None)

        name = cursor.current_name()
        if not name:
            raise ShapeMismatchError(location, "root", "api name", Token.FIELD_NAME)
        api = RestApiSpec(location=location, name=name)

        self._expect_next(cursor, location, name, Token.START_OBJECT, "object")

        level = -1
        while True:
            token = self._next(cursor, location, name)
            if token is Token.END_OBJECT and level < 0:
                break

            if token is Token.FIELD_NAME and level < 0:
                section = cursor.current_name()
                if section == "methods":
                    self._parse_strings(cursor, location, "methods", api.add_method)
                elif section == "url":
                    self._parse_url(cursor, location, api)
                elif section == "body":
                    self._parse_body(cursor, location, api)
            elif token is Token.START_OBJECT:
                level += 1
            elif token is Token.END_OBJECT:
                level -= 1

        token = cursor.advance()
        if token is not Token.END_OBJECT:
            raise ShapeMismatchError(location, name, "end of document", token)
        cursor.advance()

        return api

    def _parse_url(self, cursor: TokenCursor, location: str, api: RestApiSpec) -> None:
        self._expect_next(cursor, location, "url", Token.START_OBJECT, "object")

        inner_level = -1
        while True:
            token = self._next(cursor, location, "url")
            if token is Token.END_OBJECT and inner_level < 0:
                return

            if token is Token.FIELD_NAME and inner_level < 0:
                field = cursor.current_name()
                if field == "paths":
                    self._parse_strings(cursor, location, "paths", api.add_path)
                elif field == "parts":
                    self._parse_names(cursor, location, "parts", api.add_path_part)
                elif field == "params":
                    self._parse_names(cursor, location, "params", api.add_param)
            elif token is Token.START_OBJECT:
                inner_level += 1
            elif token is Token.END_OBJECT:
                inner_level -= 1

    def _parse_body(self, cursor: TokenCursor, location: str, api: RestApiSpec) -> None:
        token = self._next(cursor, location, "body")
        if token is Token.VALUE_NULL:
            return
        if token is not Token.START_OBJECT:
            raise ShapeMismatchError(location, "body", "object", token)

        required_found = False
        while True:
            token = self._next(cursor, location, "body")
            if token is Token.END_OBJECT:
                break
            if token is not Token.FIELD_NAME:
                raise ShapeMismatchError(location, "body", "field name", token)
            if cursor.current_name() == "required":
                required_found = True
                self._expect_next(cursor, location, "body/required", Token.VALUE_BOOLEAN, "boolean")
                if cursor.boolean_value():
                    api.set_body_required()
                else:
                    api.set_body_optional()
            else:
                self._next(cursor, location, "body")
                cursor.skip_children()

        if not required_found:
            api.set_body_optional()

    def _parse_strings(self, cursor: TokenCursor, location: str, section: str, add: Callable[[str], None]) -> None:
        """Feed every string of a ``[String*]`` array to ``add``."""
        self._expect_next(cursor, location, section, Token.START_ARRAY, "array")
        while True:
            token = self._next(cursor, location, section)
            if token is Token.END_ARRAY:
                return
            if token is not Token.VALUE_STRING:
                raise ShapeMismatchError(location, section, "string", token)
            add(cursor.text())

    def _parse_names(self, cursor: TokenCursor, location: str, section: str, add: Callable[[str], None]) -> None:
        """Feed every key of a ``{Name: Object}`` map to ``add``, skipping the values."""
        self._expect_next(cursor, location, section, Token.START_OBJECT, "object")
        while self._next(cursor, location, section) is Token.FIELD_NAME:
            name = cursor.current_name()
            add(name)
            self._expect_next(cursor, location, f"{section}/{name}", Token.START_OBJECT, "object")
            cursor.skip_children()

    def _next(self, cursor: TokenCursor, location: str, where: str) -> Token:
        token = cursor.advance()
        if token is None:
            raise ShapeMismatchError(location, where, "end of object", None)
        return token

    def _expect_next(
        self, cursor: TokenCursor, location: str, where: str, expected: Token, description: str
    ) -> None:
        token = self._next(cursor, location, where)
        if token is not expected:
            raise ShapeMismatchError(location, where, description, token)


def parse_api(location: str, cursor: TokenCursor) -> RestApiSpec:
    """Parse one REST API document from ``cursor``."""
    return ApiSpecParser().parse(location, cursor)
