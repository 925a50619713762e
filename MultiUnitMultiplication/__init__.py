import azure.functions as func
import json
import time

from shared_lib import settings
from shared_lib.matrix_multiplication import INT64_MAX, INT64_MIN, multiply_matrices_naive
from shared_lib.run_log import get_logger, jlog, new_run_id
from shared_lib.strassen import multiply_matrices_strassen
from shared_lib.utils import InvalidDimensionsError, MultiplicationError

KERNELS = {
    "naive": multiply_matrices_naive,
    "strassen": multiply_matrices_strassen,
}


def choose_algorithm(requested, m, n, k):
    algorithm = (requested or settings.DEFAULT_ALGORITHM).lower()
    if algorithm not in settings.ALGORITHMS:
        raise MultiplicationError(
            f"Unknown algorithm {requested!r}; expected one of {', '.join(settings.ALGORITHMS)}")
    if algorithm == "auto":
        return "strassen" if min(m, n, k) >= settings.STRASSEN_THRESHOLD else "naive"
    return algorithm


def _error(message, status_code):
    return func.HttpResponse(json.dumps({"error": message}), status_code=status_code,
                             mimetype="application/json")


def main(req: func.HttpRequest) -> func.HttpResponse:
    logger = get_logger("matmul")
    run_id = new_run_id()
    try:
        try:
            req_body = req.get_json()
        except ValueError:
            return _error("Request body must be JSON.", 400)
        if not isinstance(req_body, dict):
            return _error("Request body must be a JSON object.", 400)

        m, n, k = req_body.get("m"), req_body.get("n"), req_body.get("k")
        matrix_a = req_body.get("a")
        matrix_b = req_body.get("b")
        if not isinstance(matrix_a, list) or not isinstance(matrix_b, list):
            raise InvalidDimensionsError("'a' and 'b' must be flattened row-major lists.")
        if not all(isinstance(x, int) and not isinstance(x, bool) for x in matrix_a + matrix_b):
            raise MultiplicationError("Matrix entries must be integers.")
        if not all(INT64_MIN <= x <= INT64_MAX for x in matrix_a + matrix_b):
            raise MultiplicationError("Matrix entries must fit in a signed 64-bit integer.")
        if not all(isinstance(d, int) and not isinstance(d, bool) for d in (m, n, k)):
            raise InvalidDimensionsError("'m', 'n' and 'k' must be integers.")
        if max(m, n, k) > settings.MAX_DIM:
            raise InvalidDimensionsError(f"Dimensions exceed MAX_DIM={settings.MAX_DIM}.")

        algorithm = choose_algorithm(req_body.get("algorithm"), m, n, k)
        t0 = time.time()
        result = KERNELS[algorithm](m, n, k, matrix_a, matrix_b)
        t1 = time.time()

        jlog(logger, {
            "run_id": run_id, "op": "matmul", "algorithm": algorithm,
            "m": m, "n": n, "k": k, "duration_ms": int((t1 - t0) * 1000),
        })
        return func.HttpResponse(
            json.dumps({"result": result, "algorithm": algorithm, "shape": [m, k]}),
            status_code=200, mimetype="application/json")
    except MultiplicationError as e:
        jlog(logger, {"run_id": run_id, "op": "matmul", "success": False, "error": str(e)})
        return _error(str(e), 400)
    except Exception as e:
        logger.exception("matmul: unhandled exception run=%s", run_id)
        return _error(f"Error: {str(e)}", 500)
