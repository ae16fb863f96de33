import json
import logging
from typing import Any

from interview_coach.core import config

REDACTED_KEYS = {"text", "transcript", "transcript_text", "answer"}

logger = logging.getLogger("interview_coach")
logger.setLevel(getattr(logging, config.LOG_LEVEL, logging.INFO))


def _redact(value: Any) -> dict:
    text = str(value or "")
    return {"redacted": True, "length": len(text)}


def _sanitize_value(key: str, value: Any) -> Any:
    if str(key or "").lower() in REDACTED_KEYS:
        return _redact(value)
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    if isinstance(value, dict):
        return {str(k): _sanitize_value(str(k), v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set)):
        return [_sanitize_value(key, item) for item in value]
    return str(value)


def log_event(component: str, event: str, session_id: str, **fields) -> None:
    """One JSON line per engine event; transcript-like fields are never written out."""
    if not config.EVENT_LOGGING_ENABLED:
        return
    payload = {
        "component": str(component or "interview_coach"),
        "event": str(event or "unknown"),
        "session_id": str(session_id or ""),
    }
    payload.update({str(k): _sanitize_value(str(k), v) for k, v in fields.items()})
    logger.info(json.dumps(payload, ensure_ascii=False, default=str))
