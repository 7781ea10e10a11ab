"""Runtime configuration for the dfasim command line."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class SimulatorConfig:
    """Where to read the automaton from and how to talk to the user."""

    description_path: Path = Path("DFA.txt")
    quit_word: str = "quit"
    log_level: str = "WARNING"
    show_trace: bool = True

    def __post_init__(self):
        """Validate SimulatorConfig constraints."""
        object.__setattr__(self, "description_path", Path(self.description_path))
        if not self.quit_word.strip():
            raise ValueError("quit_word must not be empty")
        if self.log_level.upper() not in LOG_LEVELS:
            raise ValueError(f"log_level must be in {LOG_LEVELS}")

    def is_quit(self, line: str) -> bool:
        return line.lower() == self.quit_word.lower()
