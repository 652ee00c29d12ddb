"""Command-line front end for the expression, loan and deposit calculators."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from .credit import PaymentType, calculate_credit
from .deposit import (
    CalendarDate,
    Replenishment,
    add_drop_frequency,
    calculate_deposit,
    payout_frequency,
)
from .evaluator import evaluate_rpn
from .graph import build_plot
from .lexer import ExpressionError
from .notation import to_rpn

__all__ = ["main"]


def _format_number(value: float) -> str:
    return f"{value:.15g}"


def _money(value: float) -> str:
    return f"{value:.2f}"


def _parse_date(text: str) -> CalendarDate:
    try:
        year, month, day = (int(part) for part in text.split("-"))
        return CalendarDate(year, month, day)
    except ValueError as error:
        raise argparse.ArgumentTypeError(
            f"invalid date {text!r}, expected YYYY-MM-DD"
        ) from error


def _replenishment(values: Sequence[str] | None, option: str) -> Replenishment | None:
    if values is None:
        return None
    date_text, amount_text, index_text = values
    try:
        date = _parse_date(date_text)
        amount = float(amount_text)
        frequency = add_drop_frequency(int(index_text))
    except (argparse.ArgumentTypeError, ValueError) as error:
        raise argparse.ArgumentTypeError(f"{option}: {error}") from error
    return Replenishment(date=date, amount=amount, frequency=frequency)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="smartcalc",
        description="Expression, loan and deposit calculator.",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    calc = commands.add_parser("calc", help="evaluate an expression")
    calc.add_argument("expression")
    calc.add_argument("--x", type=float, default=0.0, help="value of x")
    calc.add_argument(
        "--show-rpn", action="store_true", help="print the reverse Polish form first"
    )

    rpn = commands.add_parser("rpn", help="print the reverse Polish form")
    rpn.add_argument("expression")

    graph = commands.add_parser("graph", help="sample an expression for plotting")
    graph.add_argument("expression")
    graph.add_argument("--start", type=float, default=0.0)
    graph.add_argument("--x-min", type=float, default=-10.0)
    graph.add_argument("--x-max", type=float, default=10.0)
    graph.add_argument("--y-min", type=float, default=-10.0)
    graph.add_argument("--y-max", type=float, default=10.0)

    credit = commands.add_parser("credit", help="compute loan payments")
    credit.add_argument("loan_body", type=float)
    credit.add_argument("term", type=float)
    credit.add_argument("interest_rate", type=float)
    credit.add_argument(
        "--differential", action="store_true", help="differentiated payments"
    )
    credit.add_argument("--years", action="store_true", help="term is in years")

    deposit = commands.add_parser("deposit", help="compute deposit yield")
    deposit.add_argument("amount", type=float)
    deposit.add_argument("term", type=float, help="term in days")
    deposit.add_argument("interest_rate", type=float)
    deposit.add_argument("--start", type=_parse_date, required=True)
    deposit.add_argument("--tax-rate", type=float, default=0.0)
    deposit.add_argument(
        "--payout", type=int, default=2, help="payout frequency menu index (0-6)"
    )
    deposit.add_argument("--capitalization", action="store_true")
    deposit.add_argument(
        "--add", nargs=3, metavar=("DATE", "AMOUNT", "FREQ"), default=None
    )
    deposit.add_argument(
        "--drop", nargs=3, metavar=("DATE", "AMOUNT", "FREQ"), default=None
    )
    return parser


def _run_calc(args: argparse.Namespace) -> None:
    tokens = to_rpn(args.expression)
    if args.show_rpn:
        print(" ".join(tokens))
    print(_format_number(evaluate_rpn(tokens, args.x)))


def _run_graph(args: argparse.Namespace) -> None:
    plot = build_plot(
        to_rpn(args.expression),
        args.start,
        args.x_min,
        args.x_max,
        args.y_min,
        args.y_max,
    )
    print(
        "# "
        + " ".join(
            _format_number(bound)
            for bound in (plot.x_min, plot.x_max, plot.y_min, plot.y_max)
        )
    )
    for x, y in plot.points:
        print(f"{_format_number(x)} {_format_number(y)}")


def _run_credit(args: argparse.Namespace) -> None:
    payment_type = PaymentType.DIFFERENTIAL if args.differential else PaymentType.ANNUITY
    result = calculate_credit(
        args.loan_body, args.term, args.interest_rate, payment_type, args.years
    )
    monthly = _money(result.monthly_payment_max)
    if payment_type is PaymentType.DIFFERENTIAL:
        monthly += " ... " + _money(result.monthly_payment_min)
    print(f"monthly payment: {monthly}")
    print(f"overpayment: {_money(result.overpayment)}")
    print(f"total payment: {_money(result.total_payment)}")


def _run_deposit(args: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
    try:
        frequency = payout_frequency(args.payout)
        addition = _replenishment(args.add, "--add")
        withdrawal = _replenishment(args.drop, "--drop")
    except (argparse.ArgumentTypeError, ValueError) as error:
        parser.error(str(error))
    result = calculate_deposit(
        start=args.start,
        amount=args.amount,
        term=args.term,
        interest_rate=args.interest_rate,
        tax_rate=args.tax_rate,
        payout_frequency=frequency,
        capitalization=args.capitalization,
        addition=addition,
        withdrawal=withdrawal,
    )
    print(f"accrued interest: {_money(result.accrued_interest)}")
    print(f"tax amount: {_money(result.tax_amount)}")
    print(f"end term amount: {_money(result.end_term_amount)}")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the calculator; return the process exit status."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    try:
        if args.command == "calc":
            _run_calc(args)
        elif args.command == "rpn":
            print(" ".join(to_rpn(args.expression)))
        elif args.command == "graph":
            _run_graph(args)
        elif args.command == "credit":
            _run_credit(args)
        else:
            _run_deposit(args, parser)
    except ExpressionError as error:
        print(error.kind.value, file=sys.stderr)
        return 1
    except ValueError as error:
        print(str(error), file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())