"""Public package API for the parallel lottery simulator."""

from .config import LOTTO_649, ConfigError, GameConfig, clear_config, configure_run, detect_workers, get_config
from .picks import InvalidPickSet, quick_pick, validate_picks
from .runtime import JobStateError, WorkerFailure
from .simulation import AggregationError, SimulationResult, partition_trials, simulate

__all__ = [
    "LOTTO_649",
    "GameConfig",
    "ConfigError",
    "configure_run",
    "get_config",
    "clear_config",
    "detect_workers",
    "InvalidPickSet",
    "validate_picks",
    "quick_pick",
    "JobStateError",
    "WorkerFailure",
    "AggregationError",
    "SimulationResult",
    "partition_trials",
    "simulate",
]
