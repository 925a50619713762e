import azure.functions as func
import json
import time

from shared_lib import settings
from shared_lib.num_multiplication import multiply_decimal_strings
from shared_lib.run_log import get_logger, jlog, new_run_id
from shared_lib.utils import MalformedInputError, MultiplicationError


def _error(message, status_code):
    return func.HttpResponse(json.dumps({"error": message}), status_code=status_code,
                             mimetype="application/json")


def main(req: func.HttpRequest) -> func.HttpResponse:
    logger = get_logger("num_multiplication")
    run_id = new_run_id()
    try:
        try:
            req_body = req.get_json()
        except ValueError:
            return _error("Request body must be JSON.", 400)
        if not isinstance(req_body, dict):
            return _error("Request body must be a JSON object.", 400)

        s1, s2 = req_body.get("s1"), req_body.get("s2")
        for name, s in (("s1", s1), ("s2", s2)):
            if isinstance(s, str) and len(s) > settings.MAX_DIGITS:
                raise MalformedInputError(f"{name} exceeds MAX_DIGITS={settings.MAX_DIGITS}.")

        t0 = time.time()
        result = multiply_decimal_strings(s1, s2)
        t1 = time.time()

        jlog(logger, {
            "run_id": run_id, "op": "num_multiplication",
            "len_s1": len(s1), "len_s2": len(s2), "digits": len(result),
            "duration_ms": int((t1 - t0) * 1000),
        })
        return func.HttpResponse(json.dumps({"result": result, "digits": len(result)}),
                                 status_code=200, mimetype="application/json")
    except MultiplicationError as e:
        jlog(logger, {"run_id": run_id, "op": "num_multiplication", "success": False, "error": str(e)})
        return _error(str(e), 400)
    except Exception as e:
        logger.exception("num_multiplication: unhandled exception run=%s", run_id)
        return _error(f"Error: {str(e)}", 500)
