"""OpenAPI / Swagger document parser.

Converts a decoded OpenAPI 3.x or Swagger 2.0 mapping into an ApiSpec, and
performs the advisory top-level presence check.
"""

from typing import Any

from .base import ApiSpec, Contact, Info, Operation, Param, PathItem, Response, ValidationResult

# Path item keys that are not operations.
PATH_ITEM_FIELDS = frozenset({"parameters", "summary", "description", "servers", "$ref"})

JSON_MEDIA_TYPE = "application/json"


def validate_spec(doc: dict) -> ValidationResult:
    """Check for the presence of the required top-level fields.

    The result is advisory; rendering does not depend on it.
    """
    errors = []
    if not _present(doc.get("openapi")) and not _present(doc.get("swagger")):
        errors.append("Missing openapi or swagger version")
    if not _present(doc.get("info")):
        errors.append("Missing info object")
    if not _present(doc.get("paths")):
        errors.append("Missing paths object")
    return ValidationResult(valid=not errors, errors=errors)


def parse_spec(doc: dict) -> ApiSpec:
    """Parse a decoded document into an ApiSpec, keeping document order."""
    paths = []
    for path, path_item in _mapping(doc.get("paths")).items():
        if not isinstance(path_item, dict):
            continue
        operations = [
            _parse_operation(str(path), str(method), operation)
            for method, operation in path_item.items()
            if method not in PATH_ITEM_FIELDS and isinstance(operation, dict)
        ]
        paths.append(PathItem(path=str(path), operations=operations))

    return ApiSpec(
        spec_version=_text(doc.get("openapi") or doc.get("swagger")),
        info=_parse_info(_mapping(doc.get("info"))),
        paths=paths,
        schemas=_parse_schemas(doc),
    )


def _parse_info(info: dict) -> Info:
    contact = info.get("contact")
    return Info(
        title=_text(info.get("title")),
        version=_text(info.get("version")),
        description=_text(info.get("description")),
        contact=Contact(
            name=_text(contact.get("name")),
            email=_text(contact.get("email")),
            url=_text(contact.get("url")),
        ) if isinstance(contact, dict) else None,
    )


def _parse_schemas(doc: dict) -> dict | None:
    components = doc.get("components")
    if isinstance(components, dict) and isinstance(components.get("schemas"), dict):
        return components["schemas"]
    # Swagger 2.0
    if isinstance(doc.get("definitions"), dict):
        return doc["definitions"]
    return None


def _parse_operation(path: str, method: str, operation: dict) -> Operation:
    raw_params = [p for p in _sequence(operation.get("parameters")) if isinstance(p, dict)]
    return Operation(
        path=path,
        method=method,
        summary=_text(operation.get("summary")),
        description=_text(operation.get("description")),
        parameters=_parse_parameters(raw_params),
        request_body=_parse_request_body(operation.get("requestBody"), raw_params),
        responses=_parse_responses(_mapping(operation.get("responses"))),
    )


def _parse_parameters(params: list[dict]) -> list[Param]:
    result = []
    for p in params:
        if p.get("in") == "body":
            continue
        schema = _mapping(p.get("schema"))
        # Swagger 2.0 puts the type on the parameter itself
        param_type = schema.get("type") or p.get("type") or "string"
        if isinstance(param_type, list):
            param_type = " | ".join(str(t) for t in param_type)

        result.append(
            Param(
                name=_text(p.get("name")),
                location=_text(p.get("in")),
                required=bool(p.get("required", False)),
                param_type=str(param_type),
                description=_text(p.get("description")),
            )
        )
    return result


def _parse_request_body(body: Any, params: list[dict]) -> dict | None:
    if isinstance(body, dict):
        return _json_schema(body)
    for p in params:
        if p.get("in") == "body" and isinstance(p.get("schema"), dict):
            return p["schema"]
    return None


def _parse_responses(responses: dict) -> list[Response]:
    result = []
    for status_code, resp in responses.items():
        resp = _mapping(resp)
        schema = _json_schema(resp)
        if schema is None and isinstance(resp.get("schema"), dict):
            schema = resp["schema"]
        result.append(
            Response(
                status_code=str(status_code),
                description=_text(resp.get("description")),
                json_schema=schema,
            )
        )
    return result


def _json_schema(obj: dict) -> dict | None:
    media = _mapping(_mapping(obj.get("content")).get(JSON_MEDIA_TYPE))
    schema = media.get("schema")
    return schema if isinstance(schema, dict) else None


def _present(value: Any) -> bool:
    # An empty object still counts as present.
    return isinstance(value, (dict, list)) or bool(value)


def _mapping(value: Any) -> dict:
    return value if isinstance(value, dict) else {}


def _sequence(value: Any) -> list:
    return value if isinstance(value, list) else []


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)
