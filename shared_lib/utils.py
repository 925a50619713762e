import operator

DIGITS = frozenset("0123456789")


class MultiplicationError(ValueError):
    """Base class for rejected kernel inputs."""


class MalformedInputError(MultiplicationError):
    pass


class InvalidDimensionsError(MultiplicationError):
    pass


def validate_digit_string(s, name="s"):
    if not isinstance(s, str):
        raise MalformedInputError(f"{name} must be a string, got {type(s).__name__}")
    if not s:
        raise MalformedInputError(f"{name} cannot be empty.")
    if not DIGITS.issuperset(s):
        raise MalformedInputError(f"{name} must contain only ASCII digits 0-9.")


def validate_dimensions(m, n, k, a, b, allow_empty=True):
    """Check the flattened buffers against the declared (m x n) @ (n x k) shape.

    Returns the dimensions as plain ints.
    """
    try:
        m, n, k = operator.index(m), operator.index(n), operator.index(k)
    except TypeError:
        raise InvalidDimensionsError(
            f"Matrix dimensions must be integers: m={m!r}, n={n!r}, k={k!r}") from None
    floor = 0 if allow_empty else 1
    if m < floor or n < floor or k < floor:
        raise InvalidDimensionsError(f"Invalid matrix dimensions: m={m}, n={n}, k={k}")
    if len(a) != m * n:
        raise InvalidDimensionsError(
            f"Matrix A has {len(a)} entries, expected m*n = {m}*{n} = {m * n}.")
    if len(b) != n * k:
        raise InvalidDimensionsError(
            f"Matrix B has {len(b)} entries, expected n*k = {n}*{k} = {n * k}.")
    return m, n, k
