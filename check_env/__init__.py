import json, sys
import azure.functions as func

from shared_lib import settings
from shared_lib.matrix_multiplication import multiply_matrices_naive
from shared_lib.num_multiplication import multiply_decimal_strings
from shared_lib.strassen import multiply_matrices_strassen


def kernel_self_check() -> dict:
    """Run each kernel on a known product."""
    a, b, expected = [1, 2, 3, 4], [5, 6, 7, 8], [19, 22, 43, 50]
    return {
        "naive": multiply_matrices_naive(2, 2, 2, a, b) == expected,
        "strassen": multiply_matrices_strassen(2, 2, 2, a, b) == expected,
        "num_multiplication": multiply_decimal_strings("99", "99") == "9801",
    }


def main(req: func.HttpRequest) -> func.HttpResponse:
    try:
        import numpy as np
        kernels = kernel_self_check()
        payload = {
            "ok": all(kernels.values()),
            "python": sys.version,
            "numpy_version": np.__version__,
            "kernels": kernels,
            "settings": settings.as_dict(),
        }
        return func.HttpResponse(json.dumps(payload), status_code=200 if payload["ok"] else 500,
                                 mimetype="application/json")
    except Exception as e:
        return func.HttpResponse(
            json.dumps({"ok": False, "error": repr(e)}),
            status_code=500,
            mimetype="application/json",
        )
