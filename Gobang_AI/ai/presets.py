"""Search options and named difficulty presets (easy/medium/hard and computer-player flavours)."""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields, replace
from pathlib import Path
from typing import Optional

import yaml


@dataclass(frozen=True)
class SearchOptions:
    depth: int = 1
    candidate_limit: int = 8
    randomness: float = 0.0   # probability of picking among the top few instead of the best
    random_top: int = 3
    radius: int = 2           # Chebyshev distance from existing stones
    noise: float = 0.0        # uniform noise added to candidate scores
    defense_weight: float = 0.0
    seed: Optional[int] = None

    def validate(self) -> "SearchOptions":
        if self.depth < 1:
            raise ValueError(f"depth must be >= 1, got {self.depth}")
        if self.candidate_limit < 1:
            raise ValueError(f"candidate_limit must be >= 1, got {self.candidate_limit}")
        if not 0.0 <= self.randomness <= 1.0:
            raise ValueError(f"randomness must be within [0, 1], got {self.randomness}")
        if self.random_top < 1:
            raise ValueError(f"random_top must be >= 1, got {self.random_top}")
        if self.radius < 1:
            raise ValueError(f"radius must be >= 1, got {self.radius}")
        if self.noise < 0 or self.defense_weight < 0:
            raise ValueError("noise and defense_weight must be non-negative")
        return self

    def with_seed(self, seed: Optional[int]) -> "SearchOptions":
        return replace(self, seed=seed)


DEFAULT_PRESETS = {
    "easy": SearchOptions(depth=1, candidate_limit=10, randomness=0.4, random_top=4),
    "medium": SearchOptions(depth=1, candidate_limit=8, randomness=0.1, random_top=2),
    "hard": SearchOptions(depth=3, candidate_limit=6, radius=2),
    # Whole-neighbourhood greedy pick by cell score.
    "greedy": SearchOptions(depth=1, candidate_limit=361, radius=2),
    # Greedy with uniform score noise in [0, 100).
    "noisy": SearchOptions(depth=1, candidate_limit=361, radius=2, noise=100.0),
    # Fixed-weight "neural network" player: a hand-tuned heuristic with extra defence.
    "neural": SearchOptions(depth=1, candidate_limit=12, radius=3, defense_weight=0.5),
}


def options_from_dict(values, base: Optional[SearchOptions] = None) -> SearchOptions:
    if not isinstance(values, dict):
        raise ValueError(f"search options must be a mapping, got {type(values).__name__}")
    known = {f.name for f in fields(SearchOptions)}
    unknown = set(values) - known
    if unknown:
        raise ValueError(f"unknown search option(s): {', '.join(sorted(unknown))}")
    merged = {**asdict(base or SearchOptions()), **values}
    return SearchOptions(**merged).validate()


def load_presets(path="config/settings.yaml"):
    """Load `presets:` from YAML on top of the built-in presets."""
    path = Path(path)
    if not path.is_absolute() and not path.exists():
        candidate = Path(__file__).resolve().parents[1] / path
        if candidate.exists():
            path = candidate

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        return dict(DEFAULT_PRESETS)
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping at the top level")

    section = data.get("presets") or {}
    if not isinstance(section, dict):
        raise ValueError(f"{path}: `presets` must be a mapping")
    presets = dict(DEFAULT_PRESETS)
    for name, values in section.items():
        presets[name] = options_from_dict(values or {}, base=presets.get(name))
    return presets


def get_preset(name, presets=None) -> SearchOptions:
    presets = DEFAULT_PRESETS if presets is None else presets
    try:
        return presets[name]
    except KeyError:
        raise KeyError(f"unknown preset {name!r}; known presets: {', '.join(sorted(presets))}") from None
