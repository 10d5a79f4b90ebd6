from __future__ import annotations

from cliquea_credit.domain.bank import BankProfile
from cliquea_credit.entrypoints.http.dtos.banks import BankDTO, BankListResponseDTO
from cliquea_credit.use_cases.list_banks import ListBanksResponse


class BankMapper:
    """Maps domain bank profiles to REST DTOs (Decimal → string)."""

    @staticmethod
    def to_dto(bank: BankProfile) -> BankDTO:
        return BankDTO(
            id=bank.id,
            name=bank.name,
            annual_rate=str(bank.annual_rate) if bank.annual_rate is not None else None,
            cat=str(bank.cat) if bank.cat is not None else None,
            commission=str(bank.commission),
            max_term_months=bank.max_term_months,
            max_amount=str(bank.max_amount),
            logo=bank.logo,
        )

    @staticmethod
    def to_list_response(response: ListBanksResponse) -> BankListResponseDTO:
        return BankListResponseDTO(banks=[BankMapper.to_dto(bank) for bank in response.banks])
