from fastapi import APIRouter, Depends

from cliquea_credit.entrypoints.http.dependencies import get_list_banks_use_case
from cliquea_credit.entrypoints.http.dtos.banks import BankListResponseDTO
from cliquea_credit.entrypoints.http.mappers.bank_mapper import BankMapper
from cliquea_credit.use_cases.list_banks import ListBanks


router = APIRouter(tags=["Banks"])


@router.get(
    "/banks",
    response_model=BankListResponseDTO,
    summary="List active banks",
    description="""
    Banks currently offering vehicle credit, sorted by name.

    Rates, CAT and commission are percentages as decimal strings
    (e.g. "12.50" = 12.5%).
    """,
)
def list_banks(
    use_case: ListBanks = Depends(get_list_banks_use_case),
) -> BankListResponseDTO:
    return BankMapper.to_list_response(use_case.execute())
