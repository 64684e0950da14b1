import json

import pytest

from swagger_explorer.config import ExplorerConfig
from swagger_explorer.errors import UserInputParseError
from swagger_explorer.parser.base import Endpoint
from swagger_explorer.parser.swagger import normalize
from swagger_explorer.request.builder import RequestBuilder, normalize_payload, path_prefix
from swagger_explorer.request.endpoint import EndpointView, FetchParams

BASE = "http://api.test/people_api"


def _endpoint(path: str, method: str) -> Endpoint:
    catalogue = normalize({"paths": {path: {method: {"tags": []}}}, "definitions": {}})
    return catalogue.endpoints[0]


@pytest.fixture
def builder():
    return RequestBuilder(ExplorerConfig(base_path=BASE))


class TestPathPrefix:
    def test_plain_path(self):
        assert path_prefix("/users") == "/users"

    def test_truncated_at_first_placeholder(self):
        assert path_prefix("/users/{id}") == "/users"
        assert path_prefix("/users/{id}/roles/{role}") == "/users"

    def test_placeholder_inside_segment(self):
        assert path_prefix("/reports.{format}") == "/reports."


class TestReadRequests:
    def test_get_without_params(self, builder):
        descriptor = builder.build(_endpoint("/users", "get"), FetchParams())
        assert descriptor.method == "GET"
        assert descriptor.url == f"{BASE}/users"
        assert descriptor.body is None
        assert descriptor.headers == {}

    def test_query_string_skips_empty_values(self, builder):
        params = FetchParams(values={"name": "", "age": "30"})
        descriptor = builder.build(_endpoint("/users", "get"), params)
        assert descriptor.url == f"{BASE}/users?age=30"

    def test_query_string_is_encoded(self, builder):
        params = FetchParams(values={"q": "ada lovelace", "sort": "-name"})
        descriptor = builder.build(_endpoint("/users", "get"), params)
        assert descriptor.url == f"{BASE}/users?q=ada+lovelace&sort=-name"

    def test_id_param_is_appended(self, builder):
        descriptor = builder.build(_endpoint("/users/{id}", "get"), FetchParams(), "42")
        assert descriptor.url == f"{BASE}/users/42"

    def test_read_never_has_body(self, builder):
        params = FetchParams(values={"payload": '{"a": 1}'})
        descriptor = builder.build(_endpoint("/users", "get"), params)
        assert descriptor.body is None


class TestWriteRequests:
    def test_update_method_and_url(self, builder):
        endpoint = _endpoint("/users/{id}", "put")
        assert endpoint.id == "-users-{id}-put"
        descriptor = builder.build(endpoint, FetchParams(), "7")
        assert descriptor.method == "PUT"
        assert descriptor.url == f"{BASE}/users/7"

    def test_json_headers(self, builder):
        descriptor = builder.build(_endpoint("/users", "post"), FetchParams())
        assert descriptor.headers == {"Accept": "application/json", "Content-Type": "application/json"}

    def test_no_payload_no_body(self, builder):
        descriptor = builder.build(_endpoint("/users", "post"), FetchParams(values={"name": "ada"}))
        assert descriptor.method == "POST"
        assert descriptor.body is None

    def test_payload_is_normalized(self, builder):
        params = FetchParams(values={"payload": '{\n  "name": "ada",\n  "age": 36\n}'})
        descriptor = builder.build(_endpoint("/users", "post"), params)
        assert descriptor.body == '{"name":"ada","age":36}'

    def test_write_never_has_query_string(self, builder):
        params = FetchParams(values={"age": "30"})
        descriptor = builder.build(_endpoint("/users", "post"), params)
        assert "?" not in descriptor.url

    def test_delete(self, builder):
        descriptor = builder.build(_endpoint("/users/{id}", "delete"), FetchParams(), "7")
        assert descriptor.method == "DELETE"
        assert descriptor.url == f"{BASE}/users/7"

    def test_invalid_payload_raises(self, builder):
        params = FetchParams(values={"payload": '{"name": '})
        with pytest.raises(UserInputParseError):
            builder.build(_endpoint("/users", "post"), params)


class TestNormalizePayload:
    def test_round_trip_is_structurally_equal(self):
        text = '{"name": "ada", "tags": [1, 2, {"x": null}], "ok": true}'
        assert json.loads(normalize_payload(text)) == json.loads(text)

    def test_non_ascii_is_kept(self):
        assert normalize_payload('{"name": "Zoë"}') == '{"name":"Zoë"}'


class TestBuildFor:
    def test_uses_view_state(self, builder):
        endpoint = _endpoint("/users/{id}", "get")
        catalogue = normalize({"paths": {"/users/{id}": {"get": {}}}, "definitions": {}})
        view = EndpointView(endpoint, catalogue)
        view.update_param("fields", "name")
        view.update_id_param("3")
        descriptor = builder.build_for(view)
        assert descriptor.url == f"{BASE}/users/3?fields=name"

    def test_trailing_slash_in_base_path(self):
        builder = RequestBuilder(ExplorerConfig(base_path="http://api.test/"))
        descriptor = builder.build(_endpoint("/users", "get"), FetchParams())
        assert descriptor.url == "http://api.test/users"
