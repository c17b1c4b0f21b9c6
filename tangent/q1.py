"""Compare a quadratic with its tangent-line extrapolation.

Invocation:  q1 a b c x

where a, b and c are the coefficients of f(x) = a*x^2 + b*x + c and x is
the base point. Prints f(x + h) next to its tangent approximation for
h = 0, 0.001, ..., 0.999.
"""

import re
import sys

from extrapolation import tabulate
from report import ExtrapolationReport


USAGE = ("Invocation: q1 a b c x\n"
         "   where a, b, and c are decimal values and a is not 0.")

_FLOAT_PREFIX = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)


class ArgumentCountError(Exception):
    """Wrong number of command-line arguments."""


class ZeroLeadingCoefficientError(Exception):
    """The x^2 coefficient is zero, so f is not a quadratic."""


def parse_real(text):
    """Lenient text-to-float conversion, same rules as C atof().

    Leading whitespace is skipped and the longest decimal prefix is used;
    text with no numeric prefix becomes 0.0. Anything discarded is reported
    on stderr so the table on stdout is unchanged. Unlike atof(), hex-float
    literals are not recognised: '0x10' reads as 0.
    """
    stripped = text.lstrip()
    m = _FLOAT_PREFIX.match(stripped)
    if m is None:
        print(f"warning: '{text}' is not a number, using 0.0", file=sys.stderr)
        return 0.0

    value = float(m.group(0))
    if stripped[m.end():].strip():
        print(f"warning: '{text}': ignoring trailing text, using {value}", file=sys.stderr)
    return value


def parse_args(argv):
    """Convert the four raw arguments to (a, b, c, x).

    Arguments are not run through an option parser: '--', '-5' and '-1e5'
    are all ordinary values here.
    """
    if len(argv) != 4:
        raise ArgumentCountError(f"expected 4 arguments, got {len(argv)}")
    return tuple(parse_real(s) for s in argv)


def run(a, b, c, x, report=None):
    """Validate the coefficients and write the full table."""
    if a == 0.0:
        raise ZeroLeadingCoefficientError("a must not be zero!")

    if report is None:
        report = ExtrapolationReport()
    table = tabulate(a, b, c, x)
    for position, approx, direct, _ in table.tolist():
        report.write(position, approx, direct)
    return table


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]
    try:
        a, b, c, x = parse_args(argv)
        run(a, b, c, x)
    except ArgumentCountError:
        print(USAGE)
        return 1
    except ZeroLeadingCoefficientError as e:
        print(e)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
