# multiplication-azure/generate_dataset.py
import json
import sys

import numpy as np

# benchmark sizes and entry distributions
DIGIT_LENGTHS = [1000, 100000]
DIGIT_MIN, DIGIT_MAX = 0, 9
MATRIX_SIZES = [1, 5, 25, 128, 256]
ENTRY_MIN, ENTRY_MAX = 0, 10


def _rng(rng):
    return rng if rng is not None else np.random.default_rng()


def random_digit_string(length, digit_min=DIGIT_MIN, digit_max=DIGIT_MAX, rng=None):
    digits = _rng(rng).integers(digit_min, digit_max + 1, size=length)
    return "".join(map(str, digits.tolist()))


def random_matrix(rows, cols, entry_min=ENTRY_MIN, entry_max=ENTRY_MAX, rng=None):
    """Flattened row-major (rows x cols) list of ints in [entry_min, entry_max]."""
    return _rng(rng).integers(entry_min, entry_max + 1, size=rows * cols).tolist()


def identity_matrix(size):
    return np.eye(size, dtype=np.int64).ravel().tolist()


def generate_matrix_pairs(sizes=MATRIX_SIZES, rng=None):
    rng = _rng(rng)
    return [{"m": n, "n": n, "k": n,
             "a": random_matrix(n, n, rng=rng),
             "b": random_matrix(n, n, rng=rng)} for n in sizes]


def generate_digit_pairs(lengths=DIGIT_LENGTHS, rng=None):
    rng = _rng(rng)
    return [{"s1": random_digit_string(n, rng=rng),
             "s2": random_digit_string(n, rng=rng)} for n in lengths]


def save_dataset(file_path, seed=None):
    rng = np.random.default_rng(seed)
    dataset = {
        "matrix_pairs": generate_matrix_pairs(rng=rng),
        "digit_pairs": generate_digit_pairs(rng=rng),
    }
    with open(file_path, mode="w") as file:
        json.dump(dataset, file)


if __name__ == "__main__":
    out = sys.argv[1] if len(sys.argv) > 1 else "multiplication_dataset.json"
    save_dataset(out)
