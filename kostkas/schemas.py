"""Pydantic schemas for JSON configuration validation."""

from pydantic import BaseModel, Field, field_validator

from .constants import (
    AFFINITY_TOP_N,
    DEFAULT_SHEET_NAME,
    PLAYER_START_COLUMN,
    QUALIFICATION_RATIO,
    REQUEST_TIMEOUT,
    STREAK_WINDOW,
    TEAM_SCORE_WIN_WEIGHT,
    TOP_N,
)


class LeagueConfig(BaseModel):
    """League configuration settings."""

    qualification_ratio: float = Field(default=QUALIFICATION_RATIO, ge=0, le=1)
    streak_window: int = Field(default=STREAK_WINDOW, ge=1, le=50)
    team_score_win_weight: float = Field(default=TEAM_SCORE_WIN_WEIGHT, ge=0)
    top_n: int = Field(default=TOP_N, ge=1, le=100)
    affinity_top_n: int = Field(default=AFFINITY_TOP_N, ge=1, le=100)
    player_start_column: int = Field(default=PLAYER_START_COLUMN, ge=1)
    sheet_name: str = Field(default=DEFAULT_SHEET_NAME, min_length=1)
    source_url: str | None = None
    local_file: str | None = None
    request_timeout: float = Field(default=REQUEST_TIMEOUT, gt=0, le=600)

    @field_validator('source_url')
    @classmethod
    def validate_source_url(cls, v):
        """Only http(s) exports can be fetched."""
        if v is not None and not v.startswith(('http://', 'https://')):
            raise ValueError(f'source_url must be an http(s) URL, got {v}')
        return v

    class Config:
        extra = 'forbid'
