"""Run configuration for the genetic search."""

from __future__ import annotations

from typing import Any, Dict

# Defaults of the standalone solver
QUEENS: int = 20
BOARD_SIZE: int = 20
POPULATION_SIZE: int = 2000
MAX_GENERATIONS: int = 3000

_ALIASES = {
    "queens": "queens",
    "boardSize": "board_size",
    "board_size": "board_size",
    "populationSize": "population_size",
    "population_size": "population_size",
    "maxGenerations": "max_generations",
    "max_generations": "max_generations",
}


def _as_int(name: str, value: Any) -> int:
    """Return ``value`` as an int, rejecting booleans and fractional numbers."""
    if isinstance(value, bool):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    raise ValueError(f"{name} must be an integer, got {value!r}")


class GAConfig:
    """Fixed parameters of one search run.

    Parameters
    ----------
    queens : int
        Number of queens Q, which is also the genome length.
    board_size : int
        Board width N.
    population_size : int
        Number of individuals P.
    max_generations : int
        Generation budget.
    """

    def __init__(
        self,
        queens: int = QUEENS,
        board_size: int = BOARD_SIZE,
        population_size: int = POPULATION_SIZE,
        max_generations: int = MAX_GENERATIONS,
    ) -> None:
        self.queens = _as_int("queens", queens)
        self.board_size = _as_int("board_size", board_size)
        self.population_size = _as_int("population_size", population_size)
        self.max_generations = _as_int("max_generations", max_generations)

    @property
    def cells(self) -> int:
        return self.board_size * self.board_size

    def validate(self) -> "GAConfig":
        """Raise ``ValueError`` on a configuration the search cannot run."""
        for name in ("queens", "board_size", "population_size", "max_generations"):
            value = getattr(self, name)
            if value < 1:
                raise ValueError(f"{name} must be a positive integer, got {value}")
        return self

    def to_dict(self) -> Dict[str, int]:
        return {
            "queens": self.queens,
            "board_size": self.board_size,
            "population_size": self.population_size,
            "max_generations": self.max_generations,
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "GAConfig":
        """Build a config from snake_case or camelCase keys.

        Unknown keys, and two spellings of the same setting, raise
        ``ValueError``.
        """
        values: Dict[str, Any] = {}
        for key, value in d.items():
            if key not in _ALIASES:
                raise ValueError(f"Unknown GA setting: {key}")
            field = _ALIASES[key]
            if field in values:
                raise ValueError(f"GA setting {field} given more than once (duplicate key {key})")
            values[field] = value
        return cls(**values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GAConfig):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        fields = ", ".join(f"{k}={v}" for k, v in self.to_dict().items())
        return f"GAConfig({fields})"
