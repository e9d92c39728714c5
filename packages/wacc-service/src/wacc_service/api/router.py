"""
API Router — all endpoint definitions for the WACC service.
"""

import logging

from fastapi import APIRouter, HTTPException, Query
from fastapi.responses import JSONResponse

from wacc_engine import InputError
from wacc_service.api.schemas import (
    ErrorResponse,
    MarketDataResponse,
    WaccFormRequest,
    WaccRequest,
    WaccResponse,
)
from wacc_service.config import get_service_config
from wacc_service.connectors import ConnectorFactory
from wacc_service.services.wacc import WaccService
from wacc_service.utils.json import sanitize_for_json

logger = logging.getLogger(__name__)
router = APIRouter()


def _input_error_response(e: InputError) -> JSONResponse:
    return JSONResponse(status_code=400, content=e.to_dict())


@router.post(
    "/api/wacc",
    summary="Calculate WACC",
    description="Computes WACC from decimal rates and base-unit values. Re may be given directly or via CAPM.",
    response_description="WACC with weights and every resolved rate.",
    response_model=WaccResponse,
    responses={400: {"model": ErrorResponse}},
)
def calculate_wacc(request: WaccRequest):
    try:
        service = WaccService()
        return sanitize_for_json(service.calculate(request.to_inputs()))
    except InputError as e:
        logger.warning(f"Bad Request ({e.kind}): {e}")
        return _input_error_response(e)
    except Exception as e:
        logger.error(f"Internal Error computing WACC: {e}")
        raise HTTPException(status_code=500, detail="Internal Server Error")


@router.post(
    "/api/wacc/form",
    summary="Calculate WACC from calculator form",
    description="Accepts raw form values (percent rates, equity/debt in display units) and returns the result with display strings and formula text.",
    responses={400: {"model": ErrorResponse}},
)
def calculate_wacc_form(request: WaccFormRequest):
    try:
        form = request.model_dump(exclude={"unitScale"})
        if request.unitScale is not None:
            unit_scale = request.unitScale
        else:
            unit_scale = get_service_config().unit_scale
        service = WaccService()
        return sanitize_for_json(service.calculate_from_form(form, unit_scale=unit_scale))
    except InputError as e:
        logger.warning(f"Bad Request ({e.kind}): {e}")
        return _input_error_response(e)
    except Exception as e:
        logger.error(f"Internal Error computing WACC from form: {e}")
        raise HTTPException(status_code=500, detail="Internal Server Error")


@router.get(
    "/data/market/{ticker}",
    summary="Get Market Data",
    description="Suggested CAPM and capital structure inputs (beta, risk-free rate, market cap, debt, tax rate).",
    response_model=MarketDataResponse,
)
def get_market_data(ticker: str, source: str = Query("yahoo", description="Data source connector")):
    try:
        connector = ConnectorFactory.get_connector(source)
        service = WaccService(connector)
        data = service.prefill(ticker)
        return sanitize_for_json(
            {
                "ticker": data["ticker"],
                "beta": data.get("beta"),
                "risk_free_rate": data.get("risk_free_rate"),
                "market_risk_premium": data.get("market_risk_premium"),
                "market_cap": data.get("equity_value"),
                "total_debt": data.get("debt_value"),
                "tax_rate": data.get("tax_rate"),
            }
        )
    except ValueError as e:
        logger.warning(f"Bad Request for {ticker}: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Internal Error fetching market data for {ticker}: {e}")
        raise HTTPException(status_code=500, detail="Internal Server Error")
