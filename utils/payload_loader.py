# utils/payload_loader.py - logger setup and JSON encoding of call parameters
import json
import logging

def get_logger(name: str = "dropbox-sdk"):
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
    return logger

def dump_payload(params) -> str:
    """Encode call parameters as compact, ASCII-only JSON.

    ASCII output keeps the result safe to send in an HTTP header
    (Dropbox-API-Arg). Raises TypeError for values json can't encode.
    """
    return json.dumps(params, separators=(",", ":"), ensure_ascii=True)

def load_payload(raw):
    """Decode a JSON payload (str or bytes). Empty input decodes to {}."""
    if isinstance(raw, (bytes, bytearray)):
        raw = raw.decode("utf-8")
    if not raw or not raw.strip():
        return {}
    return json.loads(raw)
