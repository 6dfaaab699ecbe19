"""Data models for parsed REST API descriptors.

The API parser fills a RestApiSpec per document; the loader collects
them into a RestSpec keyed by API name.
"""

from enum import Enum

from pydantic import BaseModel

from rest_api_spec.exceptions import DuplicateValueError


class Body(str, Enum):
    """Whether an API accepts a request body."""

    ABSENT = "absent"
    OPTIONAL = "optional"
    REQUIRED = "required"


class RestApiSpec(BaseModel):
    """A single REST API: its methods, url paths, path parts, params and body."""

    location: str  # file the api was read from
    name: str
    methods: list[str] = []
    paths: list[str] = []  # /{index}/_doc/{id}
    path_parts: list[str] = []
    params: list[str] = []  # query string parameters
    body: Body = Body.ABSENT

    def add_method(self, method: str) -> None:
        self._add_unique("methods", self.methods, method)

    def add_path(self, path: str) -> None:
        self._add_unique("paths", self.paths, path)

    def add_path_part(self, part: str) -> None:
        self._add_unique("parts", self.path_parts, part)

    def add_param(self, param: str) -> None:
        self._add_unique("params", self.params, param)

    def set_body_required(self) -> None:
        """Mark the body as required. The last setter called wins."""
        self.body = Body.REQUIRED

    def set_body_optional(self) -> None:
        """Mark the body as optional, also downgrading a required body.

        A body block repeating ``required`` ends with its last value.
        """
        self.body = Body.OPTIONAL

    @property
    def is_body_supported(self) -> bool:
        return self.body is not Body.ABSENT

    @property
    def is_body_required(self) -> bool:
        return self.body is Body.REQUIRED

    def _add_unique(self, section: str, values: list[str], value: str) -> None:
        if value in values:
            raise DuplicateValueError(self.location, section, value)
        values.append(value)


class RestSpec(BaseModel):
    """All REST APIs loaded from one or more api directories."""

    apis: dict[str, RestApiSpec] = {}

    def add_api(self, api: RestApiSpec) -> None:
        """Register an API, rejecting a second API with the same name."""
        if api.name in self.apis:
            raise DuplicateValueError(api.location, "apis", api.name)
        self.apis[api.name] = api

    def get_api(self, name: str) -> RestApiSpec | None:
        return self.apis.get(name)
