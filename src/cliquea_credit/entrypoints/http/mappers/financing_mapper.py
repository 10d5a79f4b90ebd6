from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any

from cliquea_credit.domain.assessment import CreditAssessment
from cliquea_credit.domain.errors import ValidationError
from cliquea_credit.domain.financing import FinancingRequest
from cliquea_credit.domain.quote import Quote
from cliquea_credit.entrypoints.http.dtos.financing import (
    AmortizationRequestDTO,
    AmortizationResponseDTO,
    AmortizationRowDTO,
    AssessmentDTO,
    ComparisonRequestDTO,
    ComparisonResponseDTO,
    FinancingRequestDTO,
    QuoteDTO,
    RankedQuoteDTO,
)
from cliquea_credit.entrypoints.http.error_responses import ErrorDetail
from cliquea_credit.use_cases.compare_bank_financing import (
    CompareBankFinancingRequest,
    CompareBankFinancingResponse,
)
from cliquea_credit.use_cases.generate_amortization_schedule import (
    GenerateAmortizationScheduleRequest,
    GenerateAmortizationScheduleResponse,
)


class FinancingMapper:
    """Maps between REST DTOs and domain models for financing."""

    @staticmethod
    def to_domain_request(dto: FinancingRequestDTO) -> FinancingRequest:
        """
        Converts the shared request fields to a domain FinancingRequest.

        Handles string → Decimal conversion at the boundary.

        Raises:
            ValidationError: If any string value cannot be converted to a valid Decimal
        """
        errors: list[dict[str, Any]] = []

        vehicle_values = tuple(
            _parse_decimal(value, f"vehicle_values.{index}", errors)
            for index, value in enumerate(dto.vehicle_values)
        )
        down_payment = _parse_decimal(dto.down_payment, "down_payment", errors)
        rate_override = _parse_optional_decimal(dto.annual_rate_override, "annual_rate_override", errors)
        cat_override = _parse_optional_decimal(dto.cat_override, "cat_override", errors)

        if errors:
            raise ValidationError(errors=errors)

        return FinancingRequest(
            vehicle_values=vehicle_values,
            down_payment=down_payment,
            term_months=dto.term_months,
            annual_rate_override=rate_override,
            cat_override=cat_override,
        )

    @staticmethod
    def to_comparison_request(dto: ComparisonRequestDTO) -> CompareBankFinancingRequest:
        return CompareBankFinancingRequest(
            financing=FinancingMapper.to_domain_request(dto),
            bank_ids=tuple(dto.bank_ids) if dto.bank_ids is not None else None,
            criterion=dto.criterion,
        )

    @staticmethod
    def to_schedule_request(dto: AmortizationRequestDTO) -> GenerateAmortizationScheduleRequest:
        return GenerateAmortizationScheduleRequest(
            financing=FinancingMapper.to_domain_request(dto),
            bank_id=dto.bank_id,
        )

    @staticmethod
    def to_quote_dto(quote: Quote) -> QuoteDTO:
        """Converts a domain Quote to its DTO (Decimal → string)."""
        return QuoteDTO(
            bank_id=quote.bank_id,
            bank_name=quote.bank_name,
            principal=str(quote.principal),
            term_months=quote.term_months,
            annual_rate=str(quote.annual_rate),
            periodic_rate=str(quote.periodic_rate),
            monthly_payment=str(quote.monthly_payment),
            total_interest=str(quote.total_interest),
            commission_amount=str(quote.commission_amount),
            total_paid=str(quote.total_paid),
            total_cost=str(quote.total_cost),
            effective_rate=str(quote.effective_rate),
            effective_rate_source=quote.effective_rate_source.value,
            reported_effective_rate=(
                str(quote.reported_effective_rate)
                if quote.reported_effective_rate is not None
                else None
            ),
            estimated_effective_rate=str(quote.estimated_effective_rate),
        )

    @staticmethod
    def to_assessment_dto(assessment: CreditAssessment) -> AssessmentDTO:
        return AssessmentDTO(
            cost_rating=assessment.cost_rating.value,
            rate_rating=assessment.rate_rating.value,
            term_rating=assessment.term_rating.value,
            overall_rating=assessment.overall_rating.value,
            cost_score=str(assessment.cost_score),
            rate_score=str(assessment.rate_score),
            term_score=str(assessment.term_score),
            overall_score=str(assessment.overall_score),
            cost_percentage=str(assessment.cost_percentage),
            rate_spread=str(assessment.rate_spread),
        )

    @staticmethod
    def to_comparison_response(response: CompareBankFinancingResponse) -> ComparisonResponseDTO:
        result = response.result
        quotes = []
        for entry in result.entries:
            assessment = response.assessments.get(entry.quote.bank_id)
            quotes.append(
                RankedQuoteDTO(
                    rank=entry.rank,
                    is_best=entry.is_best,
                    monthly_savings=str(entry.monthly_savings),
                    savings_percentage=str(entry.savings_percentage),
                    quote=FinancingMapper.to_quote_dto(entry.quote),
                    assessment=(
                        FinancingMapper.to_assessment_dto(assessment)
                        if assessment is not None
                        else None
                    ),
                )
            )

        return ComparisonResponseDTO(
            criterion=result.criterion.value,
            best_bank_ids=list(result.best_bank_ids),
            quotes=quotes,
            excluded=[ErrorDetail(**issue.to_dict()) for issue in result.excluded],
        )

    @staticmethod
    def to_schedule_response(response: GenerateAmortizationScheduleResponse) -> AmortizationResponseDTO:
        schedule = response.schedule
        return AmortizationResponseDTO(
            quote=FinancingMapper.to_quote_dto(response.quote),
            rows=[
                AmortizationRowDTO(
                    number=row.number,
                    payment=str(row.payment),
                    principal_portion=str(row.principal_portion),
                    interest_portion=str(row.interest_portion),
                    balance=str(row.balance),
                )
                for row in schedule.rows
            ],
            final_payment=str(schedule.rows[-1].payment),
            schedule_total_paid=str(schedule.total_paid),
            schedule_total_interest=str(schedule.total_interest),
        )


def _parse_decimal(value: str, field: str, errors: list[dict[str, Any]]) -> Decimal:
    try:
        return Decimal(value)
    except (InvalidOperation, ValueError):
        errors.append(
            {
                "field": field,
                "message": f"Must be a valid decimal: {value}",
                "code": "INVALID_DECIMAL",
            }
        )
        return Decimal("0")  # Placeholder to continue validation


def _parse_optional_decimal(
    value: str | None, field: str, errors: list[dict[str, Any]]
) -> Decimal | None:
    if value is None:
        return None
    return _parse_decimal(value, field, errors)
