from unittest.mock import patch

import run_wacc_script
from wacc_service.client import WaccClientError


def test_local_computation(capsys):
    code = run_wacc_script.main(["-e", "200", "-d", "50", "--re", "12", "--rd", "5", "--tax", "25"])
    out = capsys.readouterr().out

    assert code == 0
    assert "E/V = 80.00%" in out
    assert out.strip().endswith("WACC = 10.35%")


def test_capm_inputs(capsys):
    code = run_wacc_script.main(
        ["-e", "100", "--rf", "4", "--beta", "1.2", "--mrp", "6", "--rd", "5", "--tax", "25"]
    )
    assert code == 0
    assert "Re = 11.20%" in capsys.readouterr().out


def test_missing_inputs(capsys):
    code = run_wacc_script.main(["-e", "100", "--rf", "4", "--mrp", "6", "--rd", "5", "--tax", "25"])
    assert code == 2
    assert "missing_inputs" in capsys.readouterr().err


def test_remote_failure(capsys):
    with patch("run_wacc_script.WaccClient") as MockClient:
        MockClient.return_value.compute.side_effect = WaccClientError("WACC request timed out after 7.0s")
        code = run_wacc_script.main(["-e", "1", "--re", "10", "--rd", "5", "--tax", "25", "--remote"])

    assert code == 1
    assert "timed out" in capsys.readouterr().err
    MockClient.assert_called_once_with(base_url=None, timeout=None)
