# smartcalc

A small calculator toolkit with no runtime dependencies:

- read infix expressions with `+ - * / ^ mod`, brackets, unary signs, the
  functions `cos sin tan acos asin atan sqrt ln log` and the variable `x`;
- convert them to reverse Polish notation and evaluate them for a given `x`;
- sample a function of `x` over an interval to get points for a plot;
- compute annuity and differentiated loan payments;
- compute deposit results with payouts, capitalization, additions,
  withdrawals and tax.

## Expressions

```python
from smartcalc.evaluator import evaluate, evaluate_rpn
from smartcalc.notation import to_rpn, to_rpn_string

to_rpn_string("2+2*2")     # "2 2 2 * +"
evaluate("2+2*2")          # 6.0
evaluate("sqrt(x)^2", 9)   # x bound to 9
evaluate_rpn("x 1 +", 2)   # 3.0
```

Function names are case-insensitive, a number written as `.5` is read as
`0.5`, and spaces and tabs between tokens are ignored. `^` is
right-associative. In reverse Polish form functions and `mod` appear as
one-letter symbols (`c s t a i n q l g`, `m`) and unary minus as `~`.
`evaluate_rpn` accepts either a space-separated string or a sequence of
tokens. Domain errors such as `ln(0)`, `sqrt(-1)` or division by zero give
infinities or NaN rather than raising.

Invalid input — an empty string, an unknown word or character, a number
with two decimal points, a token out of place, or unbalanced brackets —
raises `smartcalc.lexer.ExpressionError` (a `ValueError`). Its `kind`
attribute is an `ErrorKind` member and its `position` attribute gives the
offset where the lexer found the problem, when known.

`smartcalc.lexer.tokenize` returns the checked `Token` list on its own, and
`smartcalc.lexer.normalize` returns the tokens in compact form separated by
spaces.

## Plotting data

`smartcalc.graph.build_plot(rpn, start, x_min, x_max, y_min, y_max)` walks
from `start` right to `x_max` and left to `x_min` with a step chosen by
`step_for(start)` (from 0.0001 for small values up to 1.0), evaluating the
expression at each point. It returns a `Plot` with `xs`, `ys`, `points`,
the step and the y bounds widened to include the values met. A start
beyond about one million in magnitude gives an empty plot.

## Loans

`smartcalc.credit.calculate_credit(loan_body, term, interest_rate,
payment_type=PaymentType.ANNUITY, term_in_years=False)` returns a
`CreditResult` with `monthly_payment_max`, `monthly_payment_min` (the first
and last payment of a differentiated loan; zero for an annuity),
`overpayment` and `total_payment`. The rate is yearly, in percent. Amounts
are rounded to cents with `round_payment`. A non-positive term raises
`ValueError`.

## Deposits

`smartcalc.deposit.calculate_deposit(start, amount, term, interest_rate,
tax_rate=0.0, payout_frequency=Frequency.MONTH, capitalization=False,
addition=None, withdrawal=None)` takes a `CalendarDate` start, the term in
days, the yearly rate in percent, the key rate used for the tax-free
allowance, a `Frequency` for payouts, and optional `Replenishment`
schedules. It returns a `DepositResult` with `accrued_interest`,
`tax_amount`, `end_term_amount` and `net_additions`. Without
capitalization the end amount is the initial amount. The tax is 13% of the
interest above one million times the key rate (in percent) for each
calendar year the deposit spans.

The helpers `is_leap_year`, `day_number`, `advance`, `payout_frequency`
and `add_drop_frequency` are available from the same module; the last two
map menu positions to `Frequency` values.

## Command line

Installing the package provides the `smartcalc` command:

```
smartcalc calc "2+2*2"
smartcalc calc "sin(x)" --x 1.5 --show-rpn
smartcalc rpn "(1+2)*3"
smartcalc graph "x^2" --x-min -5 --x-max 5
smartcalc credit 100000 12 10
smartcalc credit 100000 1 10 --years --differential
smartcalc deposit 100000 365 8 --start 2024-01-15 --capitalization
```

- `calc EXPRESSION [--x X] [--show-rpn]` prints the value.
- `rpn EXPRESSION` prints the reverse Polish form.
- `graph EXPRESSION [--start] [--x-min] [--x-max] [--y-min] [--y-max]`
  prints a `# x_min x_max y_min y_max` header and then one `x y` pair per
  line.
- `credit LOAN_BODY TERM RATE [--differential] [--years]` prints the
  monthly payment, overpayment and total.
- `deposit AMOUNT DAYS RATE --start YYYY-MM-DD [--tax-rate R]
  [--payout 0-6] [--capitalization] [--add DATE AMOUNT FREQ]
  [--drop DATE AMOUNT FREQ]` prints accrued interest, tax and the end
  amount. Payout positions are day, week, month (default), quarter, half
  year, year, end of term; `FREQ` for additions and withdrawals is once,
  month, two months, quarter, half year, year (0-5).

Put `--` before an expression that starts with `-`. Invalid expressions
print the error name to standard error and exit with status 1.

## What it does not do

There is no graphical window: `graph` and `build_plot` produce the points
only, and drawing them is left to another tool.