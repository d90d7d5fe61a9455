"""Simulated annealing over user-defined states.

A problem is described by a :class:`State` subclass. A
:class:`TemperatureSchedule` controls how willingly worse states are
accepted as the search goes on.
"""

from __future__ import annotations

import math
import random
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar, Generic, TypeVar

__all__ = [
    "State",
    "TemperatureSchedule",
    "LinearSchedule",
    "ExponentialSchedule",
    "AnnealingConfig",
    "AnnealingResult",
    "SimulatedAnnealing",
]


class State(ABC):
    """A candidate solution.

    Subclasses set ``IS_MAXIMIZING`` to ``True`` for maximisation problems
    and ``False`` for minimisation problems. ``neighbor`` must return a new
    state and leave ``self`` unchanged.
    """

    IS_MAXIMIZING: ClassVar[bool]

    @abstractmethod
    def score(self) -> float:
        """Return the score of this state."""

    @abstractmethod
    def neighbor(self, rng: random.Random) -> State:
        """Return a state near this one, drawn with ``rng``."""


S = TypeVar("S", bound=State)


class TemperatureSchedule(ABC):
    """Maps progress through the search to a temperature."""

    @abstractmethod
    def temperature(self, t: float, max_t: float) -> float:
        """Return the temperature at step ``t`` of ``max_t``."""


@dataclass(frozen=True)
class LinearSchedule(TemperatureSchedule):
    """Temperature falling linearly from ``start_temp`` to ``end_temp``."""

    start_temp: float
    end_temp: float

    def temperature(self, t: float, max_t: float) -> float:
        ratio = t / max_t
        return self.start_temp * (1.0 - ratio) + self.end_temp * ratio


@dataclass(frozen=True)
class ExponentialSchedule(TemperatureSchedule):
    """Temperature decaying as ``start_temp * exp(-decay_rate * t / max_t)``."""

    start_temp: float
    decay_rate: float

    def temperature(self, t: float, max_t: float) -> float:
        ratio = t / max_t
        return self.start_temp * math.exp(-self.decay_rate * ratio)


@dataclass(frozen=True)
class AnnealingConfig:
    """Iteration budget and optional wall-clock limit in milliseconds."""

    max_iterations: int
    time_limit_ms: int | None = None


@dataclass(frozen=True)
class AnnealingResult(Generic[S]):
    """The best state found and how the search went."""

    best_state: S
    best_score: float
    iterations: int
    elapsed_ms: int


def _acceptance_probability(delta: float, temperature: float) -> float:
    """Return ``exp(-delta / temperature)`` for a worsening of ``delta > 0``."""
    if temperature == 0:
        return 0.0
    exponent = -delta / temperature
    if exponent >= 0:
        return 1.0
    return math.exp(exponent)


class SimulatedAnnealing(Generic[S]):
    """Runs simulated annealing with a fixed configuration and schedule."""

    def __init__(self, config: AnnealingConfig, schedule: TemperatureSchedule) -> None:
        self.config = config
        self.schedule = schedule

    def run(self, initial_state: S, rng: random.Random) -> AnnealingResult[S]:
        """Search from ``initial_state`` and return the best state seen."""
        start = time.monotonic()
        maximizing = type(initial_state).IS_MAXIMIZING
        max_iterations = self.config.max_iterations
        time_limit = self.config.time_limit_ms

        current_state = initial_state
        current_score = current_state.score()
        best_state = current_state
        best_score = current_score

        iteration = 0
        while iteration < max_iterations:
            if time_limit is not None and _elapsed_ms(start) > time_limit:
                break

            temperature = self.schedule.temperature(float(iteration), float(max_iterations))
            neighbor_state = current_state.neighbor(rng)
            neighbor_score = neighbor_state.score()

            if maximizing:
                if neighbor_score >= current_score:
                    accept = True
                else:
                    delta = float(current_score) - float(neighbor_score)
                    accept = rng.random() < _acceptance_probability(delta, temperature)
            else:
                if neighbor_score <= current_score:
                    accept = True
                else:
                    delta = float(neighbor_score) - float(current_score)
                    accept = rng.random() < _acceptance_probability(delta, temperature)

            if accept:
                current_state = neighbor_state
                current_score = neighbor_score

            improved = current_score > best_score if maximizing else current_score < best_score
            if improved:
                best_state = current_state
                best_score = current_score

            iteration += 1

        return AnnealingResult(
            best_state=best_state,
            best_score=best_score,
            iterations=iteration,
            elapsed_ms=_elapsed_ms(start),
        )

    @classmethod
    def with_linear_schedule(
        cls, max_iterations: int, start_temp: float, end_temp: float
    ) -> SimulatedAnnealing[S]:
        """Build an annealer with a linear schedule and no time limit."""
        return cls(AnnealingConfig(max_iterations), LinearSchedule(start_temp, end_temp))

    @classmethod
    def with_linear_schedule_and_time_limit(
        cls, max_iterations: int, time_limit_ms: int, start_temp: float, end_temp: float
    ) -> SimulatedAnnealing[S]:
        """Build an annealer with a linear schedule and a time limit."""
        return cls(
            AnnealingConfig(max_iterations, time_limit_ms),
            LinearSchedule(start_temp, end_temp),
        )

    @classmethod
    def with_exponential_schedule(
        cls, max_iterations: int, start_temp: float, decay_rate: float
    ) -> SimulatedAnnealing[S]:
        """Build an annealer with an exponential schedule and no time limit."""
        return cls(AnnealingConfig(max_iterations), ExponentialSchedule(start_temp, decay_rate))

    @classmethod
    def with_exponential_schedule_and_time_limit(
        cls, max_iterations: int, time_limit_ms: int, start_temp: float, decay_rate: float
    ) -> SimulatedAnnealing[S]:
        """Build an annealer with an exponential schedule and a time limit."""
        return cls(
            AnnealingConfig(max_iterations, time_limit_ms),
            ExponentialSchedule(start_temp, decay_rate),
        )


def _elapsed_ms(start: float) -> int:
    return int((time.monotonic() - start) * 1000)