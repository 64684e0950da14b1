import pytest
from pydantic import ValidationError

from swagger_explorer.parser.base import Catalogue, Endpoint, Model, Payload


def _make_endpoint(**overrides) -> Endpoint:
    defaults = dict(
        id="-users-post",
        path="/users",
        method="post",
        label="/users#post",
        config={"summary": "Create user", "tags": ["users", "payload-User", "payload-Admin"]},
    )
    defaults.update(overrides)
    return Endpoint(**defaults)


class TestEndpoint:
    def test_tags_from_config(self):
        ep = _make_endpoint()
        assert ep.tags == ["users", "payload-User", "payload-Admin"]
        assert ep.summary == "Create user"

    def test_missing_tags(self):
        ep = _make_endpoint(config={})
        assert ep.tags == []
        assert ep.payload_names == []

    def test_payload_names_in_tag_order(self):
        assert _make_endpoint().payload_names == ["User", "Admin"]

    def test_endpoint_is_frozen(self):
        ep = _make_endpoint()
        with pytest.raises(ValidationError):
            ep.path = "/other"


class TestPayload:
    def test_example_uses_property_types(self):
        payload = Payload(
            name="Employee",
            properties={
                "name": {"type": "string"},
                "age": {"type": "integer"},
                "salary": {"type": "float"},
                "active": {"type": "boolean"},
                "skills": {"type": "array"},
                "boss": {"$ref": "#/definitions/Employee"},
                "grade": {"type": "grade"},
            },
        )
        assert payload.example() == {
            "name": "",
            "age": 0,
            "salary": 0.0,
            "active": False,
            "skills": [],
            "boss": {},
            "grade": None,
        }

    def test_example_without_properties(self):
        assert Payload(name="Empty").example() == {}

    def test_required_defaults_to_empty(self):
        assert Payload(name="Empty").required == []


class TestCatalogue:
    def test_find(self):
        catalogue = Catalogue(
            endpoints=[_make_endpoint()],
            models=[Model(id="User", label="User", properties={"name": {"type": "string"}})],
        )
        assert catalogue.find_endpoint("-users-post").path == "/users"
        assert catalogue.find_endpoint("-users-get") is None
        assert catalogue.find_model("User").properties == {"name": {"type": "string"}}
        assert catalogue.find_model("Admin") is None

    def test_title_defaults_to_empty(self):
        assert Catalogue().title == ""
        assert Catalogue(info={"title": "People API", "version": 1}).version == "1"
