"""REST API error response models.

Structured error responses that provide consistent format for all HTTP errors.
"""

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """Individual error detail.

    bank_id is set when the problem only concerns one bank.
    """

    field: str
    message: str
    code: str | None = None
    bank_id: int | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "term_months",
                "message": "HSBC allows at most 48 months",
                "code": "INVALID_TERM",
                "bank_id": 6,
            }
        }
    )


class ErrorResponse(BaseModel):
    """Structured error response format.

    Examples:
        Simple error:
            {
                "detail": "Bank with identifier '42' not found",
                "code": "NOT_FOUND"
            }

        Validation error with every issue found:
            {
                "detail": "Validation failed",
                "code": "VALIDATION_ERROR",
                "errors": [
                    {"field": "down_payment", "message": "...", "code": "INVALID_PRINCIPAL"},
                    {"field": "term_months", "message": "...", "code": "INVALID_TERM"}
                ]
            }
    """

    detail: str
    code: str | None = None
    errors: list[ErrorDetail] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"detail": "Bank with identifier '42' not found", "code": "NOT_FOUND"},
                {
                    "detail": "Validation failed",
                    "code": "VALIDATION_ERROR",
                    "errors": [
                        {
                            "field": "term_months",
                            "message": "BBVA allows at most 48 months",
                            "code": "INVALID_TERM",
                            "bank_id": 1,
                        },
                        {
                            "field": "banks",
                            "message": "No bank can finance this request",
                            "code": "NO_ELIGIBLE_BANKS",
                        },
                    ],
                },
            ]
        }
    )
