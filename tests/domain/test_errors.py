"""Tests for domain error classes."""

from cliquea_credit.domain.errors import (
    ComputationError,
    DomainError,
    InternalError,
    NotFoundError,
    ValidationError,
)
from cliquea_credit.domain.financing import (
    FinancingValidationError,
    InvalidPrincipal,
    InvalidRate,
    InvalidTerm,
    IssueCode,
    ValidationIssue,
)


class TestDomainError:
    """Tests for base DomainError class."""

    def test_creates_error_with_message(self) -> None:
        """DomainError stores message and has correct error code."""
        error = DomainError("Something went wrong")

        assert error.message == "Something went wrong"
        assert error.error_code == "DOMAIN_ERROR"
        assert error.context == {}

    def test_to_dict_returns_structured_format(self) -> None:
        """DomainError.to_dict() merges context into the structured format."""
        error = DomainError("Test error", field="term_months", value=72)

        assert error.to_dict() == {
            "message": "Test error",
            "code": "DOMAIN_ERROR",
            "field": "term_months",
            "value": 72,
        }

    def test_str_representation(self) -> None:
        """DomainError string representation is the message."""
        assert str(DomainError("Test message")) == "Test message"


class TestValidationError:
    """Tests for ValidationError class."""

    def test_creates_validation_error_with_default_message(self) -> None:
        """ValidationError uses default message if none provided."""
        error = ValidationError()

        assert error.message == "Validation error"
        assert error.error_code == "VALIDATION_ERROR"
        assert error.errors is None

    def test_creates_validation_error_with_field_errors(self) -> None:
        """ValidationError stores every field-level error."""
        errors = [
            {"field": "down_payment", "message": "Must be >= 0", "code": "INVALID_PRINCIPAL"},
            {"field": "term_months", "message": "Must be > 0", "code": "INVALID_TERM"},
        ]

        error = ValidationError(errors=errors)

        assert error.message == "Validation failed"
        assert error.errors == errors
        assert error.to_dict() == {
            "message": "Validation failed",
            "code": "VALIDATION_ERROR",
            "errors": errors,
        }

    def test_to_dict_without_field_errors(self) -> None:
        """ValidationError.to_dict() works without field errors."""
        error = ValidationError("Simple error")

        assert error.to_dict() == {"message": "Simple error", "code": "VALIDATION_ERROR"}


class TestNotFoundError:
    """Tests for NotFoundError class."""

    def test_creates_not_found_error_with_identifier(self) -> None:
        """NotFoundError creates message with resource and identifier."""
        error = NotFoundError("Bank", "42")

        assert error.message == "Bank with identifier '42' not found"
        assert error.error_code == "NOT_FOUND"
        assert error.to_dict() == {
            "message": "Bank with identifier '42' not found",
            "code": "NOT_FOUND",
            "resource": "Bank",
            "identifier": "42",
        }

    def test_creates_not_found_error_without_identifier(self) -> None:
        """NotFoundError creates message with just resource."""
        error = NotFoundError("Bank")

        assert error.message == "Bank not found"
        assert error.context["identifier"] is None


class TestInternalErrors:
    """Tests for InternalError and ComputationError."""

    def test_creates_internal_error(self) -> None:
        """InternalError has correct error code."""
        error = InternalError("Unexpected condition")

        assert error.error_code == "INTERNAL_ERROR"

    def test_computation_error_is_internal(self) -> None:
        """ComputationError is an InternalError with its own code."""
        error = ComputationError("Cannot rank nothing")

        assert isinstance(error, InternalError)
        assert error.error_code == "COMPUTATION_ERROR"


class TestFinancingErrors:
    """Tests for financing validation errors."""

    def test_issue_to_dict_omits_missing_bank_id(self) -> None:
        """Request-level issues do not carry a bank_id."""
        issue = ValidationIssue(
            code=IssueCode.INVALID_TERM, field="term_months", message="term_months must be > 0"
        )

        assert issue.to_dict() == {
            "field": "term_months",
            "message": "term_months must be > 0",
            "code": "INVALID_TERM",
        }

    def test_issue_to_dict_includes_bank_id(self) -> None:
        """Bank-level issues name the bank they concern."""
        issue = ValidationIssue(
            code=IssueCode.EXCEEDS_MAX_AMOUNT, field="principal", message="too much", bank_id=3
        )

        assert issue.to_dict()["bank_id"] == 3

    def test_financing_validation_error_keeps_every_issue(self) -> None:
        """FinancingValidationError exposes issues and their dict form."""
        issues = [
            ValidationIssue(code=IssueCode.INVALID_PRINCIPAL, field="down_payment", message="a"),
            ValidationIssue(code=IssueCode.INVALID_TERM, field="term_months", message="b"),
        ]

        error = FinancingValidationError(issues)

        assert isinstance(error, ValidationError)
        assert error.issues == tuple(issues)
        assert [e["code"] for e in error.errors] == ["INVALID_PRINCIPAL", "INVALID_TERM"]

    def test_input_errors_carry_their_issue(self) -> None:
        """Each single-input error maps to its issue code and field."""
        cases = [
            (InvalidPrincipal("p"), IssueCode.INVALID_PRINCIPAL, "principal"),
            (InvalidTerm("t"), IssueCode.INVALID_TERM, "term_months"),
            (InvalidRate("r"), IssueCode.INVALID_RATE, "annual_rate"),
        ]

        for error, code, field in cases:
            assert isinstance(error, ValidationError)
            assert error.issue.code is code
            assert error.issue.field == field
            assert error.errors == [error.issue.to_dict()]
