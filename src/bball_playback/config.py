import os
from pathlib import Path

from pydantic import BaseModel
import yaml

SETTINGS_ENV = "BBALL_PLAYBACK_SETTINGS"
DEFAULT_SETTINGS_PATH = Path(__file__).resolve().parents[2] / "config" / "settings.example.yaml"


class Settings(BaseModel):
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"
    unknown_play_text: str = "Unknown play"


def settings_path() -> str:
    return os.environ.get(SETTINGS_ENV) or str(DEFAULT_SETTINGS_PATH)


def load_settings(path: str | None = None) -> Settings:
    with open(path or settings_path(), "r") as f:
        y = yaml.safe_load(f) or {}
    s = y.get("service", {})
    t = y.get("translation", {})
    defaults = Settings()
    return Settings(
        host=s.get("host", defaults.host),
        port=s.get("port", defaults.port),
        log_level=s.get("log_level", defaults.log_level),
        unknown_play_text=t.get("unknown_play_text", defaults.unknown_play_text),
    )
