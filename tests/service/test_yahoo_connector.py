"""
Tests for Yahoo Finance connector: market data extraction, fallbacks, WACC input mapping.
"""

from unittest.mock import patch

import pandas as pd
import pytest

from wacc_service.connectors import YahooFinanceConnector
from wacc_service.connectors.yahoo import DEFAULT_MARKET_RISK_PREMIUM, DEFAULT_RISK_FREE_RATE


@pytest.fixture
def connector():
    return YahooFinanceConnector()


@pytest.fixture
def mock_yfinance_ticker():
    with patch("wacc_service.connectors.yahoo.yf.Ticker") as mock_ticker:
        yield mock_ticker


@pytest.fixture
def mock_tnx():
    with patch("wacc_service.connectors.yahoo.yf.download") as mock_download:
        mock_download.return_value = pd.DataFrame({"Close": [4.5]})
        yield mock_download


def test_yahoo_market_data(connector, mock_yfinance_ticker, mock_tnx):
    instance = mock_yfinance_ticker.return_value
    instance.info = {
        "beta": 1.2,
        "marketCap": 2000000000,
        "totalDebt": 500000000,
        "country": "India",
        "currency": "INR",
    }

    data = connector.get_market_data("RELIANCE.NS")

    assert data["beta"] == 1.2
    assert data["market_cap"] == 2000000000.0
    assert data["total_debt"] == 500000000.0
    assert data["tax_rate"] == 0.25
    assert data["currency"] == "INR"
    assert data["risk_free_rate"] == pytest.approx(0.045)


def test_total_debt_falls_back_to_balance_sheet(connector, mock_yfinance_ticker, mock_tnx):
    instance = mock_yfinance_ticker.return_value
    instance.info = {"beta": 0.9, "marketCap": 1000.0, "country": "US"}
    instance.quarterly_balance_sheet = pd.DataFrame(
        {"2023-09-30": [200.0], "2023-06-30": [180.0]},
        index=["Total Debt"],
    )

    data = connector.get_market_data("TEST")

    assert data["total_debt"] == 200.0
    assert data["tax_rate"] == 0.21


def test_missing_values_become_none(connector, mock_yfinance_ticker, mock_tnx):
    instance = mock_yfinance_ticker.return_value
    instance.info = {"beta": float("nan"), "country": "Atlantis"}
    instance.quarterly_balance_sheet = pd.DataFrame()

    data = connector.get_market_data("TEST")

    assert data["beta"] is None
    assert data["market_cap"] is None
    assert data["total_debt"] == 0.0
    assert data["tax_rate"] == 0.25


def test_risk_free_rate_fallback(connector):
    with patch("wacc_service.connectors.yahoo.yf.download") as mock_download:
        mock_download.side_effect = Exception("network down")
        assert connector._get_risk_free_rate() == DEFAULT_RISK_FREE_RATE

    with patch("wacc_service.connectors.yahoo.yf.download") as mock_download:
        mock_download.return_value = pd.DataFrame()
        assert connector._get_risk_free_rate() == DEFAULT_RISK_FREE_RATE


def test_get_wacc_inputs(connector, mock_yfinance_ticker, mock_tnx):
    instance = mock_yfinance_ticker.return_value
    instance.info = {"beta": 1.1, "marketCap": 800.0, "totalDebt": 200.0, "country": "US"}

    inputs = connector.get_wacc_inputs("TEST")

    assert inputs == {
        "equity_value": 800.0,
        "debt_value": 200.0,
        "risk_free_rate": pytest.approx(0.045),
        "beta": 1.1,
        "market_risk_premium": DEFAULT_MARKET_RISK_PREMIUM,
        "tax_rate": 0.21,
    }
