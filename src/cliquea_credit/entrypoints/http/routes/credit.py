from fastapi import APIRouter, Depends

from cliquea_credit.entrypoints.http.dependencies import (
    get_compare_bank_financing_use_case,
    get_generate_amortization_schedule_use_case,
)
from cliquea_credit.entrypoints.http.dtos.financing import (
    AmortizationRequestDTO,
    AmortizationResponseDTO,
    ComparisonRequestDTO,
    ComparisonResponseDTO,
)
from cliquea_credit.entrypoints.http.error_responses import ErrorResponse
from cliquea_credit.entrypoints.http.mappers.financing_mapper import FinancingMapper
from cliquea_credit.use_cases.compare_bank_financing import CompareBankFinancing
from cliquea_credit.use_cases.generate_amortization_schedule import (
    GenerateAmortizationSchedule,
)


router = APIRouter(prefix="/credit", tags=["Credit"])


@router.post(
    "/comparison",
    response_model=ComparisonResponseDTO,
    summary="Compare bank financing offers",
    description="""
    Quote every selected bank (or every active bank) and rank the offers.

    ## Monetary Values
    - All amounts and rates are strings (e.g., "250000.00", "12.50")
    - Up to 2 decimal places

    ## Calculation
    - Principal = sum(vehicle_values) - down_payment
    - Monthly payment uses the standard fixed-payment amortization formula
    - Total cost = principal + total interest + opening commission
    - Effective rate = the bank's CAT, or an estimate from the payment stream

    ## Ranking
    - Ascending by `monthly_payment` (default), `total_cost` or `effective_rate`
    - Ties go to the bank name, alphabetically; every tie for first is `is_best`

    ## Excluded Banks
    Banks that cannot finance the request (term or amount above their limit,
    inactive) are listed in `excluded`. If none is left, the response is 422
    with every issue found.
    """,
    responses={
        404: {"model": ErrorResponse, "description": "Unknown bank ID"},
        422: {"model": ErrorResponse, "description": "Validation error"},
    },
)
def compare_financing(
    payload: ComparisonRequestDTO,
    use_case: CompareBankFinancing = Depends(get_compare_bank_financing_use_case),
) -> ComparisonResponseDTO:
    """
    Follows the parse → execute → map → return pattern.
    """
    request = FinancingMapper.to_comparison_request(payload)
    response = use_case.execute(request)
    return FinancingMapper.to_comparison_response(response)


@router.post(
    "/amortization",
    response_model=AmortizationResponseDTO,
    summary="Amortization table for one bank",
    description="""
    Payment-by-payment table for the selected bank's offer.

    Each row shows the payment, the part that goes to principal, the
    interest charged on the outstanding balance and the balance left.
    The last payment settles the remaining balance to zero.
    """,
    responses={
        404: {"model": ErrorResponse, "description": "Unknown or inactive bank"},
        422: {"model": ErrorResponse, "description": "Validation error"},
    },
)
def amortization_schedule(
    payload: AmortizationRequestDTO,
    use_case: GenerateAmortizationSchedule = Depends(get_generate_amortization_schedule_use_case),
) -> AmortizationResponseDTO:
    request = FinancingMapper.to_schedule_request(payload)
    response = use_case.execute(request)
    return FinancingMapper.to_schedule_response(response)
