from fastapi import FastAPI
from pydantic import ValidationError
import yaml

from ..schemas import (
    TranslateRequest,
    TranslateResponse,
    ParseResponse,
    BatchTranslateRequest,
    BatchTranslateResponse,
)
from ..config import Settings, load_settings, settings_path
from ..events.translate import parse_event, render
from ..logging_utils import get_logger

# Settings are optional; keep defaults if the file is missing or invalid
try:
    _settings = load_settings()
except (OSError, yaml.YAMLError, ValidationError) as exc:
    _settings = Settings()
    get_logger(__name__).warning("Using default settings, could not load %s: %s", settings_path(), exc)

logger = get_logger(__name__, _settings.log_level)

app = FastAPI()


def _describe(code: str):
    event = parse_event(code)
    if not event.primary_event_type and code.strip():
        logger.info("Unrecognized event code %r", code)
    return event, render(event, unknown_text=_settings.unknown_play_text)


@app.get("/health")
def health():
    return {"status": "ok"}


@app.post("/v1/events/translate", response_model=TranslateResponse)
def translate(req: TranslateRequest):
    _, description = _describe(req.event)
    return TranslateResponse(event=req.event, description=description)


@app.post("/v1/events/parse", response_model=ParseResponse)
def parse(req: TranslateRequest):
    event, description = _describe(req.event)
    return ParseResponse(event=event, description=description)


@app.post("/v1/events/translate-batch", response_model=BatchTranslateResponse)
def translate_batch(req: BatchTranslateRequest):
    results = []
    for code in req.events:
        _, description = _describe(code)
        results.append(TranslateResponse(event=code, description=description))
    return BatchTranslateResponse(results=results)
