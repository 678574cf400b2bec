"""Tests for shared/exceptions.py."""

import pytest

from shared.exceptions import (
    CatalogError,
    NotFoundError,
    ValidationError,
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    CapacityError,
    MutationError,
    ExternalServiceError,
)


class TestCatalogError:
    def test_catalog_error_message(self):
        """CatalogError should store message."""
        error = CatalogError("Test error")
        assert error.message == "Test error"
        assert str(error) == "Test error"

    def test_catalog_error_default_code(self):
        """CatalogError should default code to class name."""
        error = CatalogError("Test error")
        assert error.code == "CatalogError"

    def test_catalog_error_custom_code(self):
        error = CatalogError("Test error", code="CUSTOM_ERROR")
        assert error.code == "CUSTOM_ERROR"

    def test_catalog_error_default_details(self):
        error = CatalogError("Test error")
        assert error.details == {}

    def test_catalog_error_to_dict(self):
        """CatalogError should convert to the API error body."""
        error = CatalogError("Test error", code="TEST_ERROR", details={"key": "value"})

        assert error.to_dict() == {
            "error": "TEST_ERROR",
            "message": "Test error",
            "details": {"key": "value"},
        }


@pytest.mark.parametrize(
    "error_class",
    [
        NotFoundError,
        ValidationError,
        AuthenticationError,
        AuthorizationError,
        ConflictError,
        CapacityError,
        MutationError,
    ],
)
def test_category_inherits_catalog_error(error_class):
    """Every error category should be a CatalogError defaulting to its class name."""
    error = error_class("failed")
    assert isinstance(error, CatalogError)
    assert error.code == error_class.__name__


class TestExternalServiceError:
    def test_external_service_error_stores_service(self):
        """ExternalServiceError should store service name."""
        error = ExternalServiceError("Connection failed", service="mongodb")
        assert isinstance(error, CatalogError)
        assert error.service == "mongodb"

    def test_external_service_error_preserves_other_details(self):
        """ExternalServiceError should merge the service into details."""
        error = ExternalServiceError(
            "Connection failed",
            service="mongodb",
            details={"operation": "insert"},
        )
        result = error.to_dict()

        assert result["details"]["service"] == "mongodb"
        assert result["details"]["operation"] == "insert"
