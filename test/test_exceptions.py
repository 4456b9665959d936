"""
Exception and exception handler tests
"""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient


class TestExceptions:
    def test_base_defaults(self):
        from adminkit.exceptions import AdminKitError, ErrorCode

        exc = AdminKitError("boom")
        assert exc.status_code == 500
        assert exc.details == {}
        assert exc.error_code == ErrorCode.UNKNOWN_ERROR
        assert str(exc) == "boom"

    def test_validation_error(self):
        from adminkit.exceptions import ErrorCode, ValidationError

        exc = ValidationError("The Title field is required.", field="title")
        assert exc.status_code == 400
        assert exc.field == "title"
        assert exc.details == {"field": "title"}
        assert exc.error_code == ErrorCode.VALIDATION_FAILED

    def test_unknown_field_type(self):
        from adminkit.exceptions import ErrorCode, UnknownFieldTypeError

        exc = UnknownFieldTypeError("colorpicker", "accent")
        assert exc.message == "Unknown field type: colorpicker"
        assert exc.details == {"field_type": "colorpicker", "field": "accent"}
        assert exc.error_code == ErrorCode.FIELD_TYPE_UNKNOWN

    def test_page_not_found(self):
        from adminkit.exceptions import PageNotFoundError

        exc = PageNotFoundError("nope")
        assert exc.status_code == 404
        assert exc.details == {"slug": "nope"}

    def test_all_errors_share_base(self):
        from adminkit.exceptions import (
            AdminKitError,
            FieldDefinitionError,
            PageNotFoundError,
            SettingsStoreError,
            UnknownFieldTypeError,
            ValidationError,
        )

        for exc_class in (ValidationError, UnknownFieldTypeError, FieldDefinitionError, SettingsStoreError, PageNotFoundError):
            assert issubclass(exc_class, AdminKitError)


class TestExceptionHandlers:
    @pytest.fixture
    def client(self):
        from adminkit.exception_handlers import register_exception_handlers
        from adminkit.exceptions import SettingsStoreError

        app = FastAPI()
        register_exception_handlers(app)

        @app.get("/store")
        async def store_failure():
            raise SettingsStoreError(location="/tmp/settings.json")

        @app.get("/crash")
        async def crash():
            raise RuntimeError("secret internals")

        return TestClient(app, raise_server_exceptions=False)

    def test_adminkit_error_envelope(self, client):
        response = client.get("/store")
        assert response.status_code == 500
        assert response.json() == {
            "error": {
                "status_code": 500,
                "message": "Failed to save settings",
                "type": "Internal Server Error",
                "error_code": "SETTINGS_STORE_FAILED",
                "details": {"location": "/tmp/settings.json"},
                "path": "/store",
            }
        }

    def test_unhandled_error_hides_internals(self, client):
        response = client.get("/crash")
        assert response.status_code == 500
        error = response.json()["error"]
        assert error["error_code"] == "INTERNAL_ERROR"
        assert "secret" not in error["message"]

    def test_http_404(self, client):
        response = client.get("/nowhere")
        assert response.status_code == 404
        assert response.json()["error"]["error_code"] == "RESOURCE_NOT_FOUND"

    def test_error_type_names(self):
        from adminkit.exception_handlers import get_error_type

        assert get_error_type(400) == "Bad Request"
        assert get_error_type(418) == "Error"
