from cliquea_credit.infra.db.models.bank import BankRow

__all__ = ["BankRow"]
