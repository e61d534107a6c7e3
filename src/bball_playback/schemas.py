from pydantic import BaseModel, Field, ConfigDict
from pydantic.alias_generators import to_camel
from typing import List, Optional, Literal, Tuple

FielderRole = Literal["primary", "assist", "putout", "error"]
Base = Literal["1", "2", "3"]
TargetBase = Literal["1", "2", "3", "H"]


class _EventPart(BaseModel):
    # Immutable values; JSON IO uses camelCase aliases ("primaryEventType")
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class FielderInfo(_EventPart):
    position: int
    role: FielderRole


class LocationInfo(_EventPart):
    zone: str = ""        # infield / outfield
    direction: str = ""   # left, center, right, left-center, "left side", ...
    depth: str = ""       # deep / medium / shallow
    trajectory: str = ""  # ground ball, fly ball, line drive, popup


class BaseRunningInfo(_EventPart):
    runner: str = ""  # filled in by callers that track the lineup
    from_base: Base
    to_base: TargetBase
    is_out: bool = False
    fielders: Optional[Tuple[int, ...]] = None


class StructuredEvent(_EventPart):
    primary_event_type: str = ""
    fielders: Tuple[FielderInfo, ...] = ()
    location: LocationInfo = Field(default_factory=LocationInfo)
    base_running: Tuple[BaseRunningInfo, ...] = ()
    rbi: Optional[int] = Field(None, ge=0)
    is_out: bool = False
    out_count: int = Field(0, ge=0, le=3)
    is_double_play: bool = False
    is_triple_play: bool = False
    is_fielders_choice: bool = False
    is_error: bool = False
    raw_event: str = ""


# HTTP IO
class TranslateRequest(BaseModel):
    event: str


class TranslateResponse(BaseModel):
    event: str
    description: str


class ParseResponse(BaseModel):
    event: StructuredEvent
    description: str


class BatchTranslateRequest(BaseModel):
    events: List[str]


class BatchTranslateResponse(BaseModel):
    results: List[TranslateResponse]
