from dataclasses import dataclass
from typing import Sequence, Tuple, TypeVar

T = TypeVar("T")

MASK32 = 0xFFFFFFFF
GOLDEN_STEP = 0x6D2B79F5  # mulberry32 increment

FNV_OFFSET = 2166136261
FNV_PRIME = 16777619

LEVEL_SEED_PRIME = 104729   # per-level spread inside one session
ATTEMPT_SEED_STEP = 8191    # per-attempt perturbation in the orchestrator

MIN_WEIGHT = 0.1


def _imul(a: int, b: int) -> int:
    # 32-bit wrapping multiply
    return (a * b) & MASK32


def mulberry32_step(state: int) -> Tuple[int, float]:
    """Advance a mulberry32 state once; return (new_state, sample in [0,1))."""
    s = (state + GOLDEN_STEP) & MASK32
    t = _imul(s ^ (s >> 15), 1 | s)
    t ^= (t + _imul(t ^ (t >> 7), 61 | t)) & MASK32
    out = (t ^ (t >> 14)) & MASK32
    return s, out / 4294967296


@dataclass
class SeededRandom:
    state: int

    def __post_init__(self) -> None:
        self.state &= MASK32

    def next(self) -> float:
        self.state, value = mulberry32_step(self.state)
        return value

    def random_int(self, lo: int, hi: int) -> int:
        # inclusive on both ends
        return int(self.next() * (hi - lo + 1)) + lo

    def choice(self, values: Sequence[T]) -> T:
        assert len(values) > 0
        return values[self.random_int(0, len(values) - 1)]

    def weighted_choice(self, candidates: Sequence[Tuple[T, float]]) -> T:
        """
        Pick an item from (item, score) pairs proportionally to score.
        Scores below MIN_WEIGHT count as MIN_WEIGHT so every candidate stays
        reachable, including heavily penalised ones.
        """
        assert len(candidates) > 0
        total = sum(max(MIN_WEIGHT, score) for _, score in candidates)
        threshold = self.next() * total
        for item, score in candidates:
            threshold -= max(MIN_WEIGHT, score)
            if threshold <= 0:
                return item
        return candidates[-1][0]


def hash_seed(text: str) -> int:
    """32-bit FNV-1a over the UTF-16 code units of text."""
    h = FNV_OFFSET
    raw = text.encode("utf-16-le", "surrogatepass")  # lone surrogates hash as their code unit
    for i in range(0, len(raw), 2):
        h ^= raw[i] | (raw[i + 1] << 8)
        h = _imul(h, FNV_PRIME)
    return h


def level_seed(session_seed: int, level_id: int) -> int:
    return (session_seed + level_id * LEVEL_SEED_PRIME) & MASK32


def attempt_seed(session_seed: int, attempt: int) -> int:
    return (session_seed + attempt * ATTEMPT_SEED_STEP) & MASK32
