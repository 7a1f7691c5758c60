from .config import DEFAULT_SETTINGS, configure_logging
from .models import (
    Player, GameSettings, DurationAdvice, Substitution, Rotation,
    PlayerStats, ScheduleStats, Schedule, GameState,
)
from .engine import ConfigurationError, calculate_optimal_duration, generate_schedule
from .ui_helpers import format_time
