from pydantic import BaseModel, ConfigDict, Field

# Up to 12 integer digits, the range of the vehicles.price column
MONEY_PATTERN = r"^\d{1,12}(\.\d{1,2})?$"
RATE_PATTERN = r"^\d{1,3}(\.\d{1,4})?$"


class LoanQuoteRequestDTO(BaseModel):
    """Request payload for a loan quote."""

    principal: str = Field(
        description="Vehicle price as decimal string",
        examples=["850000.00"],
        pattern=MONEY_PATTERN,
    )
    down_payment: str = Field(
        description="Down payment amount as decimal string",
        examples=["170000.00"],
        pattern=MONEY_PATTERN,
    )
    term_years: int = Field(
        description="Loan term in whole years (1 to 7)",
        examples=[5],
        ge=1,
    )
    annual_rate_percent: str = Field(
        description="Annual interest rate as a percentage string ('8.5' = 8.5%)",
        examples=["8.5"],
        pattern=RATE_PATTERN,
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "principal": "850000.00",
                "down_payment": "170000.00",
                "term_years": 5,
                "annual_rate_percent": "8.5",
            }
        }
    )


class LoanQuoteResponseDTO(BaseModel):
    """Calculated loan quote. Monetary values are rounded to cents."""

    principal: str = Field(examples=["850000.00"])
    down_payment: str = Field(examples=["170000.00"])
    down_payment_percent: str = Field(
        description="Down payment as a percentage of principal, one decimal place",
        examples=["20.0"],
    )
    term_years: int = Field(examples=[5])
    number_of_payments: int = Field(examples=[60])
    annual_rate_percent: str = Field(examples=["8.5"])
    monthly_rate: str = Field(
        description="Monthly rate as a fraction, 10 decimal places",
        examples=["0.0070833333"],
    )
    loan_amount: str = Field(
        description="principal - down_payment",
        examples=["680000.00"],
    )
    monthly_payment: str = Field(examples=["13951.24"])
    total_amount: str = Field(
        description="Total paid over the loan term",
        examples=["837074.48"],
    )
    total_interest: str = Field(examples=["157074.48"])


class VehicleQuoteRequestDTO(BaseModel):
    """Optional overrides for a vehicle-prefilled quote."""

    down_payment: str | None = Field(
        default=None,
        description="Defaults to 20% of the vehicle price",
        examples=["170000.00"],
        pattern=MONEY_PATTERN,
    )
    term_years: int | None = Field(default=None, examples=[5], ge=1)
    annual_rate_percent: str | None = Field(
        default=None,
        examples=["8.5"],
        pattern=RATE_PATTERN,
    )


class FinancingOptionQuoteRequestDTO(BaseModel):
    """Loan parameters for a quote under a financing option (rate comes from the option)."""

    principal: str = Field(examples=["850000.00"], pattern=MONEY_PATTERN)
    down_payment: str = Field(examples=["170000.00"], pattern=MONEY_PATTERN)
    term_years: int = Field(examples=[5], ge=1)


class FinancingOptionResponseDTO(BaseModel):
    id: str
    name: str
    annual_rate_percent: str
    max_term_years: int
    min_down_payment_percent: str
    description: str
    features: list[str]
    requirements: list[str]


class FinancingOptionsResponseDTO(BaseModel):
    options: list[FinancingOptionResponseDTO]


class FinancingOptionQuoteResponseDTO(BaseModel):
    option: FinancingOptionResponseDTO
    quote: LoanQuoteResponseDTO
