"""Simulation parameters for the two-policy bandit experiment.

All knobs live here as start-of-run constants; nothing is read from the
command line or the environment. `SimulationConfig` validates itself on
construction so a bad arm set fails before any run starts.
"""
from __future__ import annotations

import math
import numbers
from dataclasses import dataclass, field
from typing import Optional, Tuple

EPSILON = 0.15
TRIAL_BUDGET = 30
NUM_RUNS = 1000


class ConfigError(ValueError):
    """Raised when simulation parameters cannot produce a valid run."""


def check_arm_params(success_probability: float, reward_magnitude: float) -> None:
    if not 0.0 <= success_probability <= 1.0:
        raise ConfigError(f"success_probability must be in [0, 1], got {success_probability}")
    if not math.isfinite(reward_magnitude) or reward_magnitude <= 0:
        raise ConfigError(f"reward_magnitude must be finite and > 0, got {reward_magnitude}")


@dataclass(frozen=True)
class ArmSpec:
    """Ground truth for one arm: hit rate and reward upper bound."""
    success_probability: float
    reward_magnitude: float

    def __post_init__(self) -> None:
        check_arm_params(self.success_probability, self.reward_magnitude)


# arm 0 pays rarely but big, arm 1 pays often but small
DEFAULT_ARMS: Tuple[ArmSpec, ...] = (
    ArmSpec(success_probability=0.2, reward_magnitude=20.0),
    ArmSpec(success_probability=0.8, reward_magnitude=2.0),
)


@dataclass(frozen=True)
class SimulationConfig:
    epsilon: float = EPSILON
    trial_budget: int = TRIAL_BUDGET
    num_runs: int = NUM_RUNS
    arms: Tuple[ArmSpec, ...] = field(default=DEFAULT_ARMS)
    # None -> fresh OS entropy per experiment
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        # accept lists of specs or (p, magnitude) pairs
        arms = tuple(a if isinstance(a, ArmSpec) else ArmSpec(*a) for a in self.arms)
        object.__setattr__(self, "arms", arms)

        if len(arms) < 2:
            raise ConfigError(f"need at least 2 arms, got {len(arms)}")
        for name in ("trial_budget", "num_runs"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                raise ConfigError(f"{name} must be an int, got {value!r}")
        if not 0.0 <= self.epsilon <= 1.0:
            raise ConfigError(f"epsilon must be in [0, 1], got {self.epsilon}")
        if self.trial_budget < 0:
            raise ConfigError(f"trial_budget must be >= 0, got {self.trial_budget}")
        if self.num_runs < 1:
            raise ConfigError(f"num_runs must be >= 1, got {self.num_runs}")

    @property
    def max_reward_magnitude(self) -> float:
        return max(a.reward_magnitude for a in self.arms)
