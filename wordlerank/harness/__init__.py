from .core import EngineConfig, RankResult, rank_guesses
from .pool import WorkerPool
from .rank import format_ranking, rank
from .io import write_csv, write_manifest

__all__ = [
    "EngineConfig",
    "RankResult",
    "rank_guesses",
    "WorkerPool",
    "format_ranking",
    "rank",
    "write_csv",
    "write_manifest",
]
