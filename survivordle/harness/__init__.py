from .session import GameSession, MAX_GUESSES
from .core import run_case, run_batch, summarize
from .io import share_text, pattern, write_csv, write_manifest

__all__ = [
    "GameSession", "MAX_GUESSES", "run_case", "run_batch", "summarize",
    "share_text", "pattern", "write_csv", "write_manifest",
]
