class GradualIsqrtError(ArithmeticError):
    """Base class for values that leave the representable range."""

    def __init__(self, message: str, value=None, minimum: int = 0, maximum=None):
        super().__init__(message)
        self.value = value
        self.minimum = minimum
        self.maximum = maximum


class OutOfRangeError(GradualIsqrtError, ValueError):
    """An absolute value is negative, too large for the width, or not an integer."""


class IsqrtOverflowError(GradualIsqrtError, OverflowError):
    """A delta would push the value above the width's maximum."""


class IsqrtUnderflowError(GradualIsqrtError):
    """A delta would push the value below zero."""


def out_of_range(value, maximum=None, what: str = "value") -> OutOfRangeError:
    upper = "inf)" if maximum is None else f"{maximum}]"
    return OutOfRangeError(
        f"{what} {value!r} is outside the representable range [0, {upper}",
        value=value,
        maximum=maximum,
    )
