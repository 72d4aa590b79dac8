"""REST API error response models.

Structured error responses that provide consistent format for all HTTP errors.
"""

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """Individual error detail for field-level errors.

    Used in validation errors to indicate which field failed and why.
    """

    field: str
    message: str
    code: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "limit",
                "message": "Input should be less than or equal to 100",
                "code": "less_than_equal",
            }
        }
    )


class ErrorResponse(BaseModel):
    """Structured error response format.

    Examples:
        Catalog unreachable:
            {
                "detail": "Could not reach the catalog: ...",
                "code": "NETWORK_ERROR"
            }

        Validation error with fields:
            {
                "detail": "Invalid request parameters",
                "code": "VALIDATION_ERROR",
                "errors": [{"field": "limit", "message": "...", "code": "less_than_equal"}]
            }
    """

    detail: str
    code: str | None = None
    errors: list[ErrorDetail] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"detail": "Favorite with identifier '42' not found", "code": "NOT_FOUND"},
                {"detail": "Catalog responded with HTTP 500", "code": "SERVER_ERROR"},
                {
                    "detail": "Invalid request parameters",
                    "code": "VALIDATION_ERROR",
                    "errors": [
                        {
                            "field": "offset",
                            "message": "Input should be greater than or equal to 0",
                            "code": "greater_than_equal",
                        },
                    ],
                },
            ]
        }
    )
