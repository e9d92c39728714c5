from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from wacc_engine import WaccInputs


class WaccRequest(BaseModel):
    """Request body for the WACC endpoint. Rates as decimals, values in base currency units."""

    equity_value: float = Field(0.0, alias="equityValue", description="Market value of equity (E)")
    debt_value: float = Field(0.0, alias="debtValue", description="Market value of debt (D)")
    re: Optional[float] = Field(None, description="Cost of equity; takes precedence over CAPM inputs")
    rf: Optional[float] = Field(None, description="Risk-free rate (CAPM)")
    beta: Optional[float] = Field(None, description="Levered beta (CAPM)")
    market_risk_premium: Optional[float] = Field(
        None, alias="marketRiskPremium", description="Market risk premium (CAPM)"
    )
    rd: Optional[float] = Field(None, description="Pre-tax cost of debt")
    tax_rate: Optional[float] = Field(None, alias="taxRate", description="Corporate tax rate")

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "equityValue": 2000000000,
                "debtValue": 500000000,
                "re": 0.12,
                "rd": 0.05,
                "taxRate": 0.25,
            }
        },
    )

    def to_inputs(self) -> WaccInputs:
        return WaccInputs(
            equity_value=self.equity_value,
            debt_value=self.debt_value,
            cost_of_equity=self.re,
            risk_free_rate=self.rf,
            beta=self.beta,
            market_risk_premium=self.market_risk_premium,
            cost_of_debt=self.rd,
            tax_rate=self.tax_rate,
        )


FormValue = Optional[Union[str, float]]


class WaccFormRequest(BaseModel):
    """Raw calculator form: rates in percent, equity/debt in display units (crore)."""

    equityValue: FormValue = Field(None, description="Equity market value, display units")
    debtValue: FormValue = Field(None, description="Debt market value, display units")
    re: FormValue = Field(None, description="Cost of equity (%)")
    rf: FormValue = Field(None, description="Risk-free rate (%)")
    beta: FormValue = Field(None, description="Beta")
    marketRiskPremium: FormValue = Field(None, description="Market risk premium (%)")
    rd: FormValue = Field(None, description="Cost of debt (%)")
    taxRate: FormValue = Field(None, description="Corporate tax rate (%)")
    unitScale: Optional[float] = Field(None, description="Base units per display unit (default: crore)")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "equityValue": "200",
                "debtValue": "50",
                "re": "",
                "rf": "4",
                "beta": "1.2",
                "marketRiskPremium": "6",
                "rd": "5",
                "taxRate": "25",
            }
        }
    )


class WaccResponse(BaseModel):
    wacc: float
    re: float
    rd: float
    taxRate: float
    weightE: float
    weightD: float
    equityValue: float
    debtValue: float
    totalCapital: float
    afterTaxCostOfDebt: float
    costOfEquitySource: str


class ErrorResponse(BaseModel):
    error: str
    kind: str


class MarketDataResponse(BaseModel):
    ticker: str
    beta: Optional[float] = None
    risk_free_rate: Optional[float] = None
    market_risk_premium: Optional[float] = None
    market_cap: Optional[float] = None
    total_debt: Optional[float] = None
    tax_rate: Optional[float] = None
