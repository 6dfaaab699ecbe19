from rest_api_spec.parser.api import ApiSpecParser, parse_api
from rest_api_spec.parser.base import Body, RestApiSpec, RestSpec
from rest_api_spec.parser.tokens import Token, TokenCursor

__all__ = [
    "ApiSpecParser",
    "Body",
    "RestApiSpec",
    "RestSpec",
    "Token",
    "TokenCursor",
    "parse_api",
]
