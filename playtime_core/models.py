from __future__ import annotations
from typing import Dict, List, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator


class Player(BaseModel):
    name: str
    strong: bool = False            # strength tier: True = "strong", False = "developing"

    @field_validator("name")
    @classmethod
    def _strip_name(cls, v: str) -> str:
        return v.strip()


class GameSettings(BaseModel):
    periods: int = Field(4, ge=1)
    period_length: int = Field(600, ge=1)           # seconds
    players_on_field: int = Field(5, ge=1)
    rotation_duration: Optional[float] = Field(None, gt=0)  # seconds; None -> advised
    balance_strength: bool = True

    @property
    def total_game_time(self) -> int:
        return self.periods * self.period_length


class DurationAdvice(BaseModel):
    model_config = ConfigDict(frozen=True)

    recommended_duration: int
    rotations_per_period: int
    rotation_length_minutes: float


class Substitution(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["in", "out"]
    time: float
    period: int
    rotation: int
    game_minute: int


class Rotation(BaseModel):
    model_config = ConfigDict(frozen=True)

    period: int                     # 1-based
    rotation_number: int            # 1-based within the period
    players: List[str]
    start_time: float               # seconds from kick-off
    end_time: float
    strong_count: Optional[int] = None       # None when balancing is off
    developing_count: Optional[int] = None

    @property
    def duration(self) -> float:
        return self.end_time - self.start_time

    @property
    def duration_minutes(self) -> float:
        return self.duration / 60

    @property
    def game_minute(self) -> int:
        return int(self.start_time // 60)


class PlayerStats(BaseModel):
    model_config = ConfigDict(frozen=True)

    total_seconds: float
    rotation_count: int
    periods_played: List[int]
    substitution_times: List[Substitution]
    percentage_of_game: float
    difference_from_target: float   # minutes, signed

    @property
    def total_minutes(self) -> float:
        return self.total_seconds / 60


class ScheduleStats(BaseModel):
    model_config = ConfigDict(frozen=True)

    player_stats: Dict[str, PlayerStats]      # roster order
    average_minutes: float
    target_minutes_per_player: float
    total_rotations: int
    rotation_duration: float                  # seconds
    total_game_time: int                      # seconds
    max_time_difference: float                # minutes
    max_spread_seconds: float
    rotations_per_period: int
    optimal: DurationAdvice
    is_using_optimal_duration: bool
    balanced: bool = False

    @property
    def minutes_per_rotation(self) -> float:
        return self.rotation_duration / 60


class Schedule(BaseModel):
    model_config = ConfigDict(frozen=True)

    rotations: List[List[Rotation]]           # period -> rotations
    stats: ScheduleStats

    def all_rotations(self) -> List[Rotation]:
        return [r for period in self.rotations for r in period]


class GameState(BaseModel):
    is_playing: bool = False
    game_time: int = 0              # elapsed seconds
    current_period: int = 0         # 0-based index into Schedule.rotations
    current_rotation: int = 0       # 0-based index within the period
