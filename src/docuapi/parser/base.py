"""Typed models for a parsed OpenAPI/Swagger document.

The loader produces a plain mapping; :func:`docuapi.parser.swagger.parse_spec`
converts it into these models so the renderer never touches untyped data.
"""

from pydantic import BaseModel


class Contact(BaseModel):
    name: str = ""
    email: str = ""
    url: str = ""


class Info(BaseModel):
    title: str = ""
    version: str = ""
    description: str = ""
    contact: Contact | None = None


class Param(BaseModel):
    """A single operation parameter (query, path, header, or cookie)."""

    name: str
    location: str  # query / path / header / cookie
    required: bool = False
    param_type: str = "string"
    description: str = ""


class Response(BaseModel):
    """One documented response of an operation."""

    status_code: str
    description: str = ""
    json_schema: dict | None = None  # application/json schema, if any


class Operation(BaseModel):
    """A single HTTP method under a path."""

    path: str
    method: str  # as written in the document, e.g. "get"
    summary: str = ""
    description: str = ""
    parameters: list[Param] = []
    request_body: dict | None = None
    responses: list[Response] = []


class PathItem(BaseModel):
    path: str
    operations: list[Operation] = []


class ApiSpec(BaseModel):
    """The whole document, in the document's own key order."""

    spec_version: str = ""
    info: Info = Info()
    paths: list[PathItem] = []
    schemas: dict | None = None

    def iter_operations(self):
        """Yield every operation, path by path, method by method."""
        for item in self.paths:
            yield from item.operations


class ValidationResult(BaseModel):
    valid: bool
    errors: list[str] = []
