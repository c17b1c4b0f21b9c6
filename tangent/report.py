import math
import sys


HEADER = "  x + h      approximation    f(x + h)     error"
RULE = "-" * 48
ROW_FORMAT = "%7.3f%19.3f%12.3f%10.3f"
FIELD_WIDTHS = (7, 19, 12, 10)


def _nan_field(value, width):
    # glibc prints the sign bit of a NaN, Python's float formatting drops it
    text = "-nan" if math.copysign(1.0, value) < 0 else "nan"
    return text.rjust(width)


def format_row(position, approximation, true_value):
    """One table line; widths line up with HEADER."""
    error = true_value - approximation
    values = (position, approximation, true_value, error)
    if not any(math.isnan(v) for v in values):
        return ROW_FORMAT % values
    return "".join(_nan_field(v, w) if math.isnan(v) else "%*.3f" % (w, v)
                   for v, w in zip(values, FIELD_WIDTHS))


class ExtrapolationReport:
    """Writes table rows, emitting the header before the first one."""

    def __init__(self, file=None):
        # None resolves to whatever sys.stdout is at write time
        self.file = file
        self.first_call = True

    def write(self, position, approximation, true_value):
        out = self.file if self.file is not None else sys.stdout
        if self.first_call:
            print(HEADER, file=out)
            print(RULE, file=out)
            self.first_call = False

        line = format_row(position, approximation, true_value)
        print(line, file=out)
        return line
