"""
Тесты загрузки документа
"""

import json

import httpx
import pytest

from http_client_generator.exceptions import DocumentFetchError, ParseError
from http_client_generator.internal.parser.openapi import (
    fetch_document,
    load_document,
    load_file,
    lookup,
)


class TestLoadDocument:
    """Разбор JSON текста"""

    def test_valid_document(self, pet_store_json):
        document = load_document(pet_store_json)

        assert document.title == "Pet Store"
        assert document.version == "v1"
        assert list(document.paths) == ["/pets", "/pets/{petId}", "/user-profile/{id}"]
        assert list(document.schemas) == ["Status", "Pet", "Empty", "Opaque"]

    def test_invalid_json(self):
        with pytest.raises(ParseError):
            load_document("{not json")

    def test_root_must_be_object(self):
        with pytest.raises(ParseError):
            load_document("[1, 2, 3]")

    @pytest.mark.parametrize("section", ["info", "paths"])
    def test_missing_required_section(self, section):
        spec = {"info": {"title": "T", "version": "1"}, "paths": {}}
        del spec[section]

        with pytest.raises(ParseError) as exc_info:
            load_document(json.dumps(spec))

        assert exc_info.value.section == section

    def test_missing_title(self):
        with pytest.raises(ParseError):
            load_document(json.dumps({"info": {"version": "1"}, "paths": {}}))

    def test_numeric_version_is_string(self):
        document = load_document(
            json.dumps({"info": {"title": "T", "version": 2}, "paths": {}})
        )
        assert document.version == "2"

    def test_components_are_optional(self):
        document = load_document(
            json.dumps({"info": {"title": "T", "version": "1"}, "paths": {}})
        )
        assert document.schemas is None

    def test_document_is_read_only(self, pet_store_json):
        document = load_document(pet_store_json)

        with pytest.raises(TypeError):
            document.paths["/new"] = {}

    def test_checked_lookup(self, pet_store_json):
        document = load_document(pet_store_json)

        assert document.get("components", "schemas", "Status", "enum") == (
            "Active",
            "Inactive",
        )
        assert document.get("components", "missing", "deeper") is None
        assert lookup(None, "any") is None

    def test_load_file(self, tmp_path, pet_store_json):
        path = tmp_path / "swagger.json"
        path.write_text(pet_store_json, encoding="utf-8")

        assert load_file(str(path)).title == "Pet Store"


class TestFetchDocument:
    """Загрузка документа по HTTP"""

    def test_fetch_success(self, monkeypatch):
        def fake_get(url, **kwargs):
            return httpx.Response(
                200, text='{"ok": true}', request=httpx.Request("GET", url)
            )

        monkeypatch.setattr(httpx, "get", fake_get)

        assert fetch_document("http://example.com/swagger.json") == '{"ok": true}'

    def test_fetch_http_error(self, monkeypatch):
        def fake_get(url, **kwargs):
            return httpx.Response(404, request=httpx.Request("GET", url))

        monkeypatch.setattr(httpx, "get", fake_get)

        with pytest.raises(DocumentFetchError) as exc_info:
            fetch_document("http://example.com/swagger.json")

        assert exc_info.value.status_code == 404

    def test_fetch_transport_error(self, monkeypatch):
        def fake_get(url, **kwargs):
            raise httpx.ConnectError("connection refused")

        monkeypatch.setattr(httpx, "get", fake_get)

        with pytest.raises(DocumentFetchError):
            fetch_document("http://example.com/swagger.json")
