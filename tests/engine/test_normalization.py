"""
Tests for the normalization module.

Covers: percent conversion, currency scaling, absent vs zero, rejection of
non-numeric input, alias handling.
"""

import pytest

from wacc_engine import (
    CRORE,
    InputError,
    WaccInputs,
    build_wacc_inputs,
    parse_number,
    percent_to_decimal,
    scale_currency,
)

# ---------------------------------------------------------------------------
# parse_number
# ---------------------------------------------------------------------------

@pytest.mark.parametrize(
    "raw, expected",
    [
        ("12", 12.0),
        (" 4.5 ", 4.5),
        ("1,200", 1200.0),
        ("25%", 25.0),
        (7, 7.0),
        (0.5, 0.5),
        ("-0.3", -0.3),
    ],
)
def test_parse_number(raw, expected):
    assert parse_number(raw) == expected


@pytest.mark.parametrize("raw", [None, "", "   ", "%"])
def test_parse_number_absent(raw):
    assert parse_number(raw) is None


@pytest.mark.parametrize("raw", ["abc", "12..5", "nan", "inf", True, [1], float("nan")])
def test_parse_number_rejects_non_numeric(raw):
    with pytest.raises(InputError) as exc:
        parse_number(raw, "rd")
    assert exc.value.kind == "validation"
    assert "rd" in str(exc.value)


# ---------------------------------------------------------------------------
# Conversions
# ---------------------------------------------------------------------------

def test_percent_to_decimal():
    assert percent_to_decimal(12.0) == pytest.approx(0.12)
    assert percent_to_decimal(0.0) == 0.0
    assert percent_to_decimal(None) is None


def test_scale_currency():
    assert scale_currency(200.0) == 2_000_000_000
    assert scale_currency(None) == 0.0
    assert scale_currency(3.0, unit_scale=1000) == 3000.0


# ---------------------------------------------------------------------------
# build_wacc_inputs
# ---------------------------------------------------------------------------

def test_build_from_form():
    form = {
        "equityValue": "200",
        "debtValue": "50",
        "re": "",
        "rf": "4",
        "beta": "1.2",
        "marketRiskPremium": "6",
        "rd": "5",
        "taxRate": "25",
    }
    inputs = build_wacc_inputs(form)

    assert isinstance(inputs, WaccInputs)
    assert inputs.equity_value == 200 * CRORE
    assert inputs.debt_value == 50 * CRORE
    assert inputs.cost_of_equity is None
    assert inputs.risk_free_rate == pytest.approx(0.04)
    assert inputs.beta == 1.2
    assert inputs.market_risk_premium == pytest.approx(0.06)
    assert inputs.cost_of_debt == pytest.approx(0.05)
    assert inputs.tax_rate == pytest.approx(0.25)


def test_empty_form_defaults():
    inputs = build_wacc_inputs({})
    assert inputs.equity_value == 0.0
    assert inputs.debt_value == 0.0
    assert inputs.cost_of_equity is None
    assert inputs.cost_of_debt is None
    assert inputs.tax_rate is None


def test_zero_is_provided_not_absent():
    inputs = build_wacc_inputs({"taxRate": "0", "re": "0"})
    assert inputs.tax_rate == 0.0
    assert inputs.cost_of_equity == 0.0


def test_snake_case_aliases():
    inputs = build_wacc_inputs({"equity_value": 1, "cost_of_debt": "8", "tax_rate": 30}, unit_scale=1)
    assert inputs.equity_value == 1.0
    assert inputs.cost_of_debt == pytest.approx(0.08)
    assert inputs.tax_rate == pytest.approx(0.30)


def test_non_numeric_field_rejected():
    with pytest.raises(InputError) as exc:
        build_wacc_inputs({"equityValue": "lots"})
    assert "equityValue" in str(exc.value)


def test_invalid_unit_scale():
    with pytest.raises(InputError):
        build_wacc_inputs({}, unit_scale=0)


def test_scaled_value_overflow_names_field():
    with pytest.raises(InputError) as exc:
        build_wacc_inputs({"equityValue": "1", "debtValue": "1e302", "re": "12"})
    assert exc.value.kind == "validation"
    assert "debtValue" in str(exc.value)


def test_scale_currency_overflow():
    with pytest.raises(InputError):
        scale_currency(1e308, unit_scale=10, field="equityValue")
