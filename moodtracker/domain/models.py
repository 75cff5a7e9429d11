# moodtracker/domain/models.py
from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from moodtracker.domain.function_level import MAX_LEVEL, MIN_LEVEL

UNKNOWN_LABEL = "Unknown"


class Feeling(str, Enum):
    AFRAID = "Afraid"
    SAD = "Sad"
    BLAND = "Bland"
    ANGRY = "Angry"
    HAPPY = "Happy"
    OTHER = "Other"


class Location(str, Enum):
    HOME = "Home"
    WORK = "Work"
    SCHOOL = "School"
    CHURCH = "Church"
    RESTAURANT = "Restaurant"
    OTHER = "Other"


def to_utc(ts: datetime) -> datetime:
    """Naive timestamps are taken as UTC."""
    if ts.tzinfo is None:
        return ts.replace(tzinfo=timezone.utc)
    return ts.astimezone(timezone.utc)


def _label(value: Optional[Enum], custom: Optional[str]) -> str:
    if value is None:
        return UNKNOWN_LABEL
    if value.value == "Other" and custom and custom.strip():
        return custom.strip()
    return value.value


class JournalEntry(BaseModel):
    """One mood record, as produced by the entry store / JSON export (camelCase keys)."""

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")

    id: str
    function_level: int = Field(..., alias="functionLevel", ge=MIN_LEVEL, le=MAX_LEVEL)
    feeling: Optional[Feeling] = None
    custom_feeling: Optional[str] = Field(None, alias="customFeeling")
    reason: str = ""
    timestamp: datetime
    location: Optional[Location] = None        # legacy entries have none
    custom_location: Optional[str] = Field(None, alias="customLocation")

    @field_validator("id", mode="before")
    @classmethod
    def _id_as_str(cls, v: Any) -> Any:
        return str(v) if isinstance(v, int) else v

    @field_validator("reason", mode="before")
    @classmethod
    def _reason_not_none(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator("feeling", "location", "custom_feeling", "custom_location", mode="before")
    @classmethod
    def _blank_as_none(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @property
    def feeling_label(self) -> str:
        return _label(self.feeling, self.custom_feeling)

    @property
    def location_label(self) -> str:
        return _label(self.location, self.custom_location)

    @property
    def utc_timestamp(self) -> datetime:
        return to_utc(self.timestamp)

    @property
    def date_key(self) -> str:
        """UTC calendar day, YYYY-MM-DD."""
        return self.utc_timestamp.date().isoformat()


class DateCount(BaseModel):
    date: str
    count: float


class LevelCount(BaseModel):
    level: int
    count: float


def _empty_level_words() -> Dict[str, Dict[str, int]]:
    return {"positive": {}, "negative": {}}


class AnalysisResult(BaseModel):
    """Derived thematic statistics. Recomputed per call, never persisted."""

    model_config = ConfigDict(populate_by_name=True)

    theme_frequency: Dict[str, float] = Field(default_factory=dict, alias="themeFrequency")
    themes_over_time: Dict[str, List[DateCount]] = Field(default_factory=dict, alias="themesOverTime")
    themes_by_function_level: Dict[str, List[LevelCount]] = Field(
        default_factory=dict, alias="themesByFunctionLevel"
    )
    themes_by_feeling: Dict[str, Dict[str, float]] = Field(default_factory=dict, alias="themesByFeeling")
    word_frequency: Dict[str, int] = Field(default_factory=dict, alias="wordFrequency")
    words_by_function_level: Dict[str, Dict[str, int]] = Field(
        default_factory=_empty_level_words, alias="wordsByFunctionLevel"
    )
    strategy: str = "catalog"
    entry_count: int = Field(0, alias="entryCount")


class LocationStats(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    label: str
    count: int = 0
    function_levels: List[int] = Field(default_factory=list, alias="functionLevels")
    average: float = 0.0
    descriptor: str = ""        # function_level_descriptor(average)
    min_level: Optional[int] = Field(None, alias="minLevel")
    max_level: Optional[int] = Field(None, alias="maxLevel")
    over_time: Dict[str, int] = Field(default_factory=dict, alias="overTime")      # date -> sum of levels
    time_of_day: Dict[int, int] = Field(default_factory=dict, alias="timeOfDay")   # UTC hour -> entries


class LocationSummary(BaseModel):
    locations: Dict[str, LocationStats] = Field(default_factory=dict)
