import math
import os
import time
from dataclasses import dataclass
from typing import Callable, Mapping, Optional, Union

from .rng import MASK32, hash_seed

SEED_ENV_VAR = "PATHGARDEN_SEED"

MAX_GENERATION_ATTEMPTS = 28
SESSION_LEVEL_COUNT = 14  # 3 intro levels + 11 more

SeedOverride = Union[int, float, str]


@dataclass(frozen=True)
class GenerationConfig:
    # QA override: numbers are floored, strings are stripped and hashed.
    seed_override: Optional[SeedOverride] = None
    level_count: int = SESSION_LEVEL_COUNT
    max_attempts: int = MAX_GENERATION_ATTEMPTS

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            raise ValueError(f"max_attempts must be >= 1, got {self.max_attempts}")
        if self.level_count < 1:
            raise ValueError(f"level_count must be >= 1, got {self.level_count}")
        ov = self.seed_override
        if isinstance(ov, str) and not ov.strip():
            raise ValueError("seed_override string must not be empty")
        if isinstance(ov, float) and not math.isfinite(ov):
            raise ValueError(f"seed_override must be finite, got {ov}")


def _wall_clock_ms() -> int:
    return int(time.time() * 1000)


def resolve_session_seed(
    config: GenerationConfig,
    clock: Callable[[], int] = _wall_clock_ms,
) -> int:
    ov = config.seed_override
    if isinstance(ov, str):
        return hash_seed(ov.strip())
    if ov is not None:
        return math.floor(ov) & MASK32
    return hash_seed(str(clock()))


def parse_seed_override(raw: str) -> SeedOverride:
    """Text from the command line or environment: int, then finite float, else the text."""
    raw = raw.strip()
    try:
        return int(raw)
    except ValueError:
        pass
    try:
        value = float(raw)
    except ValueError:
        return raw
    return value if math.isfinite(value) else raw


def config_from_env(env: Optional[Mapping[str, str]] = None, **kwargs) -> GenerationConfig:
    """Build a config whose seed override comes from PATHGARDEN_SEED, if set."""
    env = os.environ if env is None else env
    raw = env.get(SEED_ENV_VAR, "").strip()
    if not raw:
        return GenerationConfig(**kwargs)
    return GenerationConfig(seed_override=parse_seed_override(raw), **kwargs)
