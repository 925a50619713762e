from shared_lib.matrix_multiplication import multiply_matrices_naive
from shared_lib.num_multiplication import multiply_decimal_strings
from shared_lib.strassen import multiply_matrices_strassen
from shared_lib.utils import InvalidDimensionsError, MalformedInputError, MultiplicationError

__all__ = [
    "multiply_decimal_strings",
    "multiply_matrices_naive",
    "multiply_matrices_strassen",
    "MultiplicationError",
    "MalformedInputError",
    "InvalidDimensionsError",
]
