from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RollEvent(BaseModel):
    type: Literal["ROLL"] = "ROLL"
    pins: int = Field(..., strict=True)

    model_config = ConfigDict(extra="forbid")


class RollFlags(BaseModel):
    """Notable things that happened on a single roll."""

    strike: bool = False
    spare: bool = False
    miss: bool = False


class RollOutcome(BaseModel):
    pins: int
    frame: int
    accepted: bool = True
    current_frame: int = Field(alias="currentFrame")
    current_roll: int = Field(alias="currentRoll")
    pins_standing: int = Field(alias="pinsStanding")
    game_complete: bool = Field(alias="gameComplete")
    flags: RollFlags = Field(default_factory=RollFlags)

    model_config = ConfigDict(populate_by_name=True)


class FrameOut(BaseModel):
    number: int
    rolls: List[int] = Field(default_factory=list)
    is_strike: bool = Field(default=False, alias="isStrike")
    is_spare: bool = Field(default=False, alias="isSpare")
    is_complete: bool = Field(default=False, alias="isComplete")
    score: int = 0
    marks: List[str] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True)


class ScoreSummary(BaseModel):
    per_frame_score: List[int] = Field(alias="perFrameScore")
    total: int

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("per_frame_score")
    @classmethod
    def _ten_frames(cls, value: List[int]) -> List[int]:
        if len(value) != 10:
            raise ValueError("perFrameScore must hold exactly 10 frames")
        return value


class ErrorDetail(BaseModel):
    """Error payload handed to the presentation layer."""

    title: str
    detail: Optional[str] = None
    code: str
    frame: Optional[int] = None
