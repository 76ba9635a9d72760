import os
from dataclasses import dataclass


# Terminal scores returned by the search (dominate any heuristic sum)
WIN_SCORE = 1_000
# Heuristic weights per line
LINE_FULL_SCORE = 100
LINE_PATTERN_BASE = 3
# Search depth on boards larger than 3x3 (fixed, level independent)
LARGE_BOARD_DEPTH = 2
# Mistake probability: max(MISTAKE_FLOOR, MISTAKE_BASE - level * MISTAKE_STEP)
MISTAKE_BASE = 0.35
MISTAKE_STEP = 0.05
MISTAKE_FLOOR = 0.05

MIN_LEVEL = 1
MAX_LEVEL = 5
BOARD_SIZES = (3, 4, 5)

# Pattern memory record
MEMORY_KEY = "ttt-ai-memory"
MEMORY_ENV = "TICTACTOE_MEMORY"
DEFAULT_MEMORY_PATH = os.path.join(os.path.expanduser("~"), ".tictactoe", f"{MEMORY_KEY}.json")


def default_memory_path() -> str:
    return os.environ.get(MEMORY_ENV) or DEFAULT_MEMORY_PATH


@dataclass(frozen=True)
class AILevelConfig:
    max_depth: int
    mistake_chance: float


def max_depth_for(size: int, level: int) -> int:
    if size == 3:
        return 2 + level // 2
    return LARGE_BOARD_DEPTH


def mistake_chance_for(level: int) -> float:
    return max(MISTAKE_FLOOR, MISTAKE_BASE - level * MISTAKE_STEP)


def level_config(size: int, level: int) -> AILevelConfig:
    if not MIN_LEVEL <= level <= MAX_LEVEL:
        raise ValueError(f"level must be in {MIN_LEVEL}..{MAX_LEVEL}, got {level}")
    return AILevelConfig(
        max_depth=max_depth_for(size, level),
        mistake_chance=mistake_chance_for(level),
    )


AI_LEVELS = {
    lvl: level_config(3, lvl) for lvl in range(MIN_LEVEL, MAX_LEVEL + 1)
}
