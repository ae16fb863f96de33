import os
from pathlib import Path
from dotenv import load_dotenv

_PROJECT_ROOT = Path(__file__).resolve().parents[2]
_PROJECT_ENV_PATH = _PROJECT_ROOT / ".env"
load_dotenv(dotenv_path=_PROJECT_ENV_PATH, override=False)


def _env_flag(name: str, default: str) -> bool:
    return str(os.getenv(name, default)).strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    try:
        return int(str(os.getenv(name, default)).strip())
    except ValueError:
        return default


LOG_LEVEL = str(os.getenv("LOG_LEVEL") or "INFO").strip().upper()
EVENT_LOGGING_ENABLED = _env_flag("EVENT_LOGGING_ENABLED", "true")

# Simulated voice signals (volume, pauses) become reproducible in QA runs.
QA_MODE = _env_flag("QA_MODE", "false")
VOICE_RANDOM_SEED = _env_int("VOICE_RANDOM_SEED", 7)

AUDIO_BYTES_PER_MINUTE = max(1, _env_int("AUDIO_BYTES_PER_MINUTE", 1024 * 60))
DEFAULT_SPEECH_RATE = max(1, _env_int("DEFAULT_SPEECH_RATE", 130))
