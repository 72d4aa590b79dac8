"""Tests for REST error response models."""

from comics_lite.entrypoints.http.error_responses import ErrorDetail, ErrorResponse


class TestErrorDetail:
    def test_code_is_optional(self) -> None:
        detail = ErrorDetail(field="limit", message="Input should be less than or equal to 100")

        assert detail.model_dump() == {
            "field": "limit",
            "message": "Input should be less than or equal to 100",
            "code": None,
        }

    def test_schema_has_example(self) -> None:
        schema = ErrorDetail.model_json_schema()

        assert schema["example"]["field"] == "limit"


class TestErrorResponse:
    def test_catalog_error_shape(self) -> None:
        response = ErrorResponse(detail="Catalog responded with HTTP 500", code="SERVER_ERROR")

        assert response.model_dump(exclude_none=True) == {
            "detail": "Catalog responded with HTTP 500",
            "code": "SERVER_ERROR",
        }

    def test_validation_error_with_fields(self) -> None:
        response = ErrorResponse.model_validate(
            {
                "detail": "Invalid request parameters",
                "code": "VALIDATION_ERROR",
                "errors": [
                    {"field": "offset", "message": "Input should be greater than or equal to 0"},
                    {"field": "title", "message": "String should have at least 1 character"},
                ],
            }
        )

        assert response.errors is not None
        assert [error.field for error in response.errors] == ["offset", "title"]
        assert all(isinstance(error, ErrorDetail) for error in response.errors)

    def test_only_detail_is_required(self) -> None:
        response = ErrorResponse(detail="An unexpected error occurred")

        assert response.code is None
        assert response.errors is None

    def test_schema_lists_examples(self) -> None:
        examples = ErrorResponse.model_json_schema()["examples"]

        assert {example["code"] for example in examples} == {
            "NOT_FOUND",
            "SERVER_ERROR",
            "VALIDATION_ERROR",
        }
