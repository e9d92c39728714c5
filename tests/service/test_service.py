"""
Tests for the WaccService orchestration layer.
"""

from unittest.mock import MagicMock

import pytest

from wacc_engine import MissingInputsError, WaccInputs, compute_wacc
from wacc_service.connectors import BaseConnector
from wacc_service.services.wacc import WaccService


def test_wacc_service_initialization():
    mock_connector = MagicMock(spec=BaseConnector)
    service = WaccService(mock_connector)
    assert service.connector == mock_connector
    assert WaccService().connector is None


def test_calculate():
    inputs = WaccInputs(equity_value=200.0, debt_value=50.0, cost_of_equity=0.12, cost_of_debt=0.05, tax_rate=0.25)
    result = WaccService().calculate(inputs)

    assert result == compute_wacc(inputs).to_dict()
    assert result["wacc"] == pytest.approx(0.1035)


def test_calculate_propagates_input_errors():
    with pytest.raises(MissingInputsError):
        WaccService().calculate(WaccInputs(equity_value=1.0, cost_of_equity=0.1))


def test_calculate_from_form():
    form = {"equityValue": "200", "debtValue": "50", "rf": "4", "beta": "1.2", "marketRiskPremium": "6", "rd": "5", "taxRate": "25"}
    output = WaccService().calculate_from_form(form)

    assert output["result"]["re"] == pytest.approx(0.112)
    assert output["result"]["costOfEquitySource"] == "capm"
    assert output["formatted"]["re"] == "11.20%"
    assert output["split"] == {"equity": "80.00%", "debt": "20.00%"}
    assert "Re = 11.20%" in output["formula"]


def test_prefill_flow():
    mock_connector = MagicMock(spec=BaseConnector)
    mock_connector.get_wacc_inputs.return_value = {"beta": 1.1, "equity_value": 10.0}

    service = WaccService(mock_connector)
    data = service.prefill("infy.ns")

    assert data == {"ticker": "INFY.NS", "beta": 1.1, "equity_value": 10.0}
    mock_connector.get_wacc_inputs.assert_called_once_with("infy.ns")


def test_prefill_without_connector():
    with pytest.raises(ValueError):
        WaccService().prefill("AAPL")
