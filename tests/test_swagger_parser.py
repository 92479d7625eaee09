from pathlib import Path

from docuapi.parser.loader import load_document
from docuapi.parser.swagger import parse_spec, validate_spec

FIXTURES = Path(__file__).parent / "fixtures"


class TestValidateSpec:
    def test_valid_spec(self):
        result = validate_spec(load_document(FIXTURES / "users.json"))
        assert result.valid is True
        assert result.errors == []

    def test_missing_everything(self):
        result = validate_spec({})
        assert result.valid is False
        assert result.errors == [
            "Missing openapi or swagger version",
            "Missing info object",
            "Missing paths object",
        ]

    def test_only_paths_present(self):
        result = validate_spec({"paths": {}})
        assert result.valid is False
        assert len(result.errors) == 2
        assert "Missing paths object" not in result.errors

    def test_swagger_version_counts(self):
        result = validate_spec({"swagger": "2.0", "info": {"title": "x"}, "paths": {}})
        assert result.valid is True


class TestParseSpec:
    def test_parse_petstore_paths(self):
        spec = parse_spec(load_document(FIXTURES / "petstore.yaml"))
        assert spec.spec_version == "3.0.0"
        assert [item.path for item in spec.paths] == ["/pets", "/pets/{petId}"]
        assert [op.method for op in spec.paths[0].operations] == ["get", "post"]

    def test_path_level_parameters_are_not_operations(self):
        spec = parse_spec(load_document(FIXTURES / "petstore.yaml"))
        pet = spec.paths[1]
        assert [op.method for op in pet.operations] == ["get"]

    def test_parse_get_pets(self):
        spec = parse_spec(load_document(FIXTURES / "petstore.yaml"))
        get_pets = spec.paths[0].operations[0]
        assert get_pets.summary == "List all pets"
        assert len(get_pets.parameters) == 1
        assert get_pets.parameters[0].name == "limit"
        assert get_pets.parameters[0].location == "query"
        assert get_pets.parameters[0].param_type == "integer"
        assert get_pets.parameters[0].required is False

    def test_integer_status_codes_become_strings(self):
        spec = parse_spec(load_document(FIXTURES / "petstore.yaml"))
        responses = spec.paths[0].operations[0].responses
        assert [r.status_code for r in responses] == ["200", "default"]
        assert responses[0].json_schema["type"] == "array"
        assert responses[1].json_schema is None

    def test_parse_request_body(self):
        spec = parse_spec(load_document(FIXTURES / "petstore.yaml"))
        post_pets = spec.paths[0].operations[1]
        assert "name" in post_pets.request_body["properties"]

    def test_info_and_schemas(self):
        spec = parse_spec(load_document(FIXTURES / "petstore.yaml"))
        assert spec.info.title == "Swagger Petstore"
        assert spec.info.contact.email == "apiteam@example.com"
        assert list(spec.schemas) == ["Pet"]

    def test_missing_paths_gives_empty_list(self):
        spec = parse_spec({"openapi": "3.0.0"})
        assert spec.paths == []
        assert spec.schemas is None
        assert spec.info.title == ""

    def test_request_body_without_json_schema(self):
        doc = {
            "paths": {
                "/upload": {
                    "post": {
                        "requestBody": {"content": {"multipart/form-data": {"schema": {"type": "object"}}}},
                        "responses": {},
                    }
                }
            }
        }
        op = parse_spec(doc).paths[0].operations[0]
        assert op.request_body is None


class TestParseSwagger2:
    def test_body_parameter_becomes_request_body(self):
        spec = parse_spec(load_document(FIXTURES / "swagger2.json"))
        op = spec.paths[0].operations[0]
        assert op.request_body == {"$ref": "#/definitions/Order"}
        assert [p.name for p in op.parameters] == ["X-Request-Id"]
        assert op.parameters[0].location == "header"

    def test_response_schema_and_definitions(self):
        spec = parse_spec(load_document(FIXTURES / "swagger2.json"))
        op = spec.paths[0].operations[0]
        assert op.responses[0].json_schema == {"$ref": "#/definitions/Order"}
        assert list(spec.schemas) == ["Order"]
        assert spec.spec_version == "2.0"
