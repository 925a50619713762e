import json
import logging
import os
import time
import uuid

from azure.core.exceptions import ResourceExistsError
from azure.storage.blob import BlobServiceClient

from shared_lib import settings

FORMAT = "%(asctime)s | %(levelname)s | %(message)s"


def get_logger(name: str) -> logging.Logger:
    lg = logging.getLogger(name)
    if not lg.handlers:
        h = logging.StreamHandler()
        h.setFormatter(logging.Formatter(FORMAT))
        lg.addHandler(h)
        lg.setLevel(logging.INFO)
    return lg


def new_run_id() -> str:
    return f"run_{uuid.uuid4().hex[:8]}"


def _bsc():
    return BlobServiceClient.from_connection_string(os.environ["AzureWebJobsStorage"])


def _append_blob_line(cc, blobname: str, text: str):
    """Append one line to an AppendBlob, creating it if needed."""
    bc = cc.get_blob_client(blobname)
    try:
        bc.create_append_blob()
    except ResourceExistsError:
        pass
    bc.append_block((text + "\n").encode("utf-8"))


def jlog(logger: logging.Logger, rec: dict) -> str:
    """Emit one structured JSON record; mirror it to the blob run log if enabled."""
    base = {
        "ts": time.time(),
        "run_id": rec.get("run_id") or new_run_id(),
    }
    base.update(rec)
    base.setdefault("success", True)

    line = json.dumps(base, ensure_ascii=False)
    logger.info(line)  # App Insights

    if settings.RUN_LOG_CONTAINER and os.environ.get("AzureWebJobsStorage"):
        try:
            cc = _bsc().get_container_client(settings.RUN_LOG_CONTAINER)
            name = f"{settings.RUN_LOG_PREFIX.rstrip('/')}/run_{base['run_id']}.jsonl"
            _append_blob_line(cc, name, line)
        except Exception as e:
            logger.warning(f"blob-append-log failed: {e}")
    return line
