import argparse
import sys

from wacc_engine import CRORE, InputError, build_wacc_inputs, compute_wacc, render_formula
from wacc_service.client import WaccClient, WaccClientError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Compute WACC from calculator-style inputs.")
    parser.add_argument("--equity", "-e", default="", help="Equity market value (E) in crore, e.g. 200")
    parser.add_argument("--debt", "-d", default="", help="Debt market value (D) in crore, e.g. 50")
    parser.add_argument("--re", default="", help="Cost of equity in %% (overrides CAPM inputs)")
    parser.add_argument("--rf", default="", help="Risk-free rate in %%")
    parser.add_argument("--beta", default="", help="Beta")
    parser.add_argument("--mrp", default="", help="Market risk premium in %%")
    parser.add_argument("--rd", default="", help="Cost of debt in %%")
    parser.add_argument("--tax", default="", help="Corporate tax rate in %%")
    parser.add_argument("--unit-scale", type=float, default=CRORE, help="Base units per display unit")
    parser.add_argument("--remote", action="store_true", help="Compute via the remote WACC backend")
    parser.add_argument("--url", default=None, help="Remote backend base URL")
    parser.add_argument("--timeout", type=float, default=None, help="Remote request timeout in seconds")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    form = {
        "equityValue": args.equity,
        "debtValue": args.debt,
        "re": args.re,
        "rf": args.rf,
        "beta": args.beta,
        "marketRiskPremium": args.mrp,
        "rd": args.rd,
        "taxRate": args.tax,
    }

    try:
        inputs = build_wacc_inputs(form, unit_scale=args.unit_scale)
        if args.remote:
            result = WaccClient(base_url=args.url, timeout=args.timeout).compute(inputs)
        else:
            result = compute_wacc(inputs)
    except InputError as e:
        print(f"Invalid input ({e.kind}): {e}", file=sys.stderr)
        return 2
    except WaccClientError as e:
        print(f"Request failed: {e}", file=sys.stderr)
        return 1

    print(render_formula(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
