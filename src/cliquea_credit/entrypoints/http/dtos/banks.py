from pydantic import BaseModel, ConfigDict, Field


class BankDTO(BaseModel):
    """Bank rate profile. Percentages and amounts are decimal strings."""

    id: int
    name: str
    annual_rate: str | None = Field(description="Nominal annual rate (%)", examples=["12.50"])
    cat: str | None = Field(description="Costo Anual Total (%)", examples=["16.20"])
    commission: str = Field(description="Opening commission (% of principal)", examples=["2.00"])
    max_term_months: int = Field(examples=[60])
    max_amount: str = Field(examples=["5000000.00"])
    logo: str | None = None


class BankListResponseDTO(BaseModel):
    banks: list[BankDTO]

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "banks": [
                    {
                        "id": 1,
                        "name": "BBVA",
                        "annual_rate": "12.50",
                        "cat": "16.20",
                        "commission": "2.00",
                        "max_term_months": 60,
                        "max_amount": "5000000.00",
                        "logo": "bbva.png",
                    }
                ]
            }
        }
    )
