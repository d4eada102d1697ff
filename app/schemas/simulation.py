# schemas/simulation.py
from pydantic import BaseModel, Field, ConfigDict, field_validator
from typing import List, Literal, Optional
from datetime import datetime
from uuid import UUID

from app.engine.domains import Domain


class InsightRequest(BaseModel):
    domain: Domain


class Projection(BaseModel):
    """What the completion endpoint must return, plus fields we stamp on."""
    trend: Literal["improving", "stable", "declining"]
    prediction: str
    future_outcome: str = Field(..., validation_alias="futureOutcome")
    suggestions: List[str] = Field(default_factory=list)
    data_points: int = Field(default=0, validation_alias="dataPoints")
    last_updated: Optional[datetime] = None
    generated_by: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True)

    @field_validator('trend', mode='before')
    @classmethod
    def normalize_trend(cls, v):
        if isinstance(v, str):
            return v.strip().lower()
        return v


class SimulationRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    domain: Domain
    timeline: str
    projection: Projection
    generated_at: datetime
