from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from cliquea_credit.domain.comparison import RankCriterion
from cliquea_credit.entrypoints.http.error_responses import ErrorDetail

DECIMAL_PATTERN = r"^\d+(\.\d{1,2})?$"

MoneyStr = Annotated[
    str,
    Field(description="Amount as decimal string", examples=["250000.00"], pattern=DECIMAL_PATTERN),
]
PercentStr = Annotated[
    str,
    Field(description="Percentage as decimal string (12.50 = 12.5%)", examples=["12.50"], pattern=DECIMAL_PATTERN),
]


# ==============================================================================
# Requests
# ==============================================================================


class FinancingRequestDTO(BaseModel):
    """Fields shared by every financing calculation."""

    vehicle_values: list[MoneyStr] = Field(
        description="Price of each selected vehicle; they are added together",
    )
    down_payment: MoneyStr = Field(
        description="Down payment amount as decimal string",
        examples=["50000.00"],
    )
    term_months: int = Field(
        description="Loan term in months",
        examples=[36],
    )
    annual_rate_override: PercentStr | None = Field(
        default=None,
        description="Custom nominal annual rate applied to every bank",
    )
    cat_override: PercentStr | None = Field(
        default=None,
        description="Custom CAT applied to every bank",
    )


class ComparisonRequestDTO(FinancingRequestDTO):
    """Request payload for comparing bank offers."""

    bank_ids: list[int] | None = Field(
        default=None,
        description="Banks to compare; omit to compare every active bank",
        examples=[[1, 3]],
    )
    criterion: RankCriterion = Field(
        default=RankCriterion.MONTHLY_PAYMENT,
        description="Ranking criterion, always ascending",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "vehicle_values": ["250000.00", "80000.00"],
                "down_payment": "50000.00",
                "term_months": 36,
                "bank_ids": [1, 3],
                "criterion": "monthly_payment",
            }
        }
    )


class AmortizationRequestDTO(FinancingRequestDTO):
    """Request payload for one bank's amortization table."""

    bank_id: int = Field(description="Bank to build the table for", examples=[1])

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "vehicle_values": ["250000.00"],
                "down_payment": "50000.00",
                "term_months": 24,
                "bank_id": 1,
            }
        }
    )


# ==============================================================================
# Responses
# ==============================================================================


class QuoteDTO(BaseModel):
    """A bank's offer. Every amount and rate is a decimal string."""

    bank_id: int
    bank_name: str
    principal: str = Field(examples=["280000.00"])
    term_months: int = Field(examples=[36])
    annual_rate: str = Field(description="Nominal annual rate (%)", examples=["12.50"])
    periodic_rate: str = Field(description="Monthly rate as a fraction", examples=["0.0104166666"])
    monthly_payment: str = Field(examples=["9367.07"])
    total_interest: str = Field(examples=["57214.52"])
    commission_amount: str = Field(examples=["5600.00"])
    total_paid: str = Field(examples=["337214.52"])
    total_cost: str = Field(
        description="principal + total_interest + commission_amount",
        examples=["342814.52"],
    )
    effective_rate: str = Field(description="Reported CAT, or the estimate when none")
    effective_rate_source: str = Field(examples=["reported", "estimated"])
    reported_effective_rate: str | None = Field(description="Bank's CAT, if known")
    estimated_effective_rate: str = Field(description="CAT estimated from the payment stream")


class AssessmentDTO(BaseModel):
    cost_rating: str = Field(examples=["fair"])
    rate_rating: str
    term_rating: str
    overall_rating: str
    cost_score: str
    rate_score: str
    term_score: str
    overall_score: str
    cost_percentage: str
    rate_spread: str


class RankedQuoteDTO(BaseModel):
    rank: int = Field(description="1-based position")
    is_best: bool
    monthly_savings: str = Field(description="Monthly saving vs the most expensive option")
    savings_percentage: str
    quote: QuoteDTO
    assessment: AssessmentDTO | None = None


class ComparisonResponseDTO(BaseModel):
    """Ranked offers plus the banks that could not be quoted."""

    criterion: str
    best_bank_ids: list[int]
    quotes: list[RankedQuoteDTO]
    excluded: list[ErrorDetail] = Field(
        default_factory=list,
        description="Why each excluded bank could not quote",
    )


class AmortizationRowDTO(BaseModel):
    number: int
    payment: str
    principal_portion: str
    interest_portion: str
    balance: str


class AmortizationResponseDTO(BaseModel):
    """
    One bank's quote plus its payment table.

    The quote totals use the regular payment for every month. The schedule
    totals add up the rows, whose last payment settles the rounding residue.
    """

    quote: QuoteDTO
    rows: list[AmortizationRowDTO]
    final_payment: str = Field(description="Last payment, adjusted to leave a zero balance")
    schedule_total_paid: str = Field(description="Sum of the row payments")
    schedule_total_interest: str = Field(description="Sum of the row interest portions")
