import os

# App settings (can override in Azure)
STRASSEN_THRESHOLD = int(os.getenv("STRASSEN_THRESHOLD", "1024"))  # auto -> strassen at or above; > MAX_DIM keeps auto on naive
MAX_DIM            = int(os.getenv("MAX_DIM", "512"))              # largest m/n/k over HTTP
MAX_DIGITS         = int(os.getenv("MAX_DIGITS", "5000"))          # largest operand over HTTP
DEFAULT_ALGORITHM  = os.getenv("DEFAULT_ALGORITHM", "auto").lower()
RUN_LOG_CONTAINER  = os.getenv("RUN_LOG_CONTAINER")                # unset -> no blob run log
RUN_LOG_PREFIX     = os.getenv("RUN_LOG_PREFIX", "runs/")

ALGORITHMS = ("naive", "strassen", "auto")


def as_dict() -> dict:
    return {
        "STRASSEN_THRESHOLD": STRASSEN_THRESHOLD,
        "MAX_DIM": MAX_DIM,
        "MAX_DIGITS": MAX_DIGITS,
        "DEFAULT_ALGORITHM": DEFAULT_ALGORITHM,
        "RUN_LOG_CONTAINER": RUN_LOG_CONTAINER,
        "RUN_LOG_PREFIX": RUN_LOG_PREFIX,
    }
