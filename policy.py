# ======================== policy.py ========================
"""Arm-selection policies: epsilon-greedy and UCB1.
Both expose the same API:
    select(arms, rng) -> (arm_index, exploring: bool)

Policies hold no per-run state. The runner owns the arm list and hands it
in on every call; a policy never keeps a reference to it.

Usage in driver:
    if name == 'epsilon_greedy':
        policy = EpsilonGreedyPolicy(epsilon=0.15)
    elif name == 'ucb1':
        policy = UCB1Policy()
"""
from __future__ import annotations

import math
from typing import Optional, Sequence, Tuple

import numpy as np

from bandit import Arm
from config import EPSILON, ConfigError, SimulationConfig

Selection = Tuple[int, bool]


class EpsilonGreedyPolicy:
    """Greedy on the empirical average, with inverted exploration.

    With probability `epsilon` the step explores, and exploring here means
    playing the arm that currently looks *worst*, not a uniformly random arm.
    This differs from textbook epsilon-greedy and changes how fast the
    estimates converge; keep it that way when comparing against the
    literature.

    Exploitation ties on average reward go to the arm with fewer trials, then
    to the lowest index. Exploration ties (several arms sharing the lowest
    average) are broken uniformly at random.
    """
    name = "epsilon_greedy"

    def __init__(self, epsilon: float = EPSILON):
        if not 0.0 <= epsilon <= 1.0:
            raise ConfigError(f"epsilon must be in [0, 1], got {epsilon}")
        self.epsilon = float(epsilon)

    def select(self, arms: Sequence[Arm], rng: np.random.Generator) -> Selection:
        avgs = [a.average_reward() for a in arms]

        if rng.random() < self.epsilon:
            lowest = min(avgs)
            worst = [i for i, v in enumerate(avgs) if v == lowest]
            if len(worst) == 1:
                return worst[0], True
            return worst[int(rng.integers(0, len(worst)))], True

        # max average, then fewest trials, then lowest index
        best = min(range(len(arms)), key=lambda i: (-avgs[i], arms[i].trials, i))
        return best, False


class UCB1Policy:
    """Upper Confidence Bound (UCB1).

    Every arm is played once, in index order, before scoring starts; those
    warm-start plays count toward the run's trial budget. After that each arm
    scores

        average_reward(i) + sqrt(2 * ln(t) / trials(i))

    where t is the number of plays made so far in the run. The strictly
    greatest score wins; exact ties go to the lowest index.
    """
    name = "ucb1"

    def select(self, arms: Sequence[Arm], rng: Optional[np.random.Generator] = None) -> Selection:
        # warm start
        for i, arm in enumerate(arms):
            if arm.trials == 0:
                return i, False

        t = sum(a.trials for a in arms)
        scores = self.scores(arms, t)
        best = 0
        for i in range(1, len(scores)):
            if scores[i] > scores[best]:
                best = i
        return best, False

    @staticmethod
    def scores(arms: Sequence[Arm], t: int) -> list[float]:
        """UCB value of every arm at play counter `t` (all arms played, t >= 1)."""
        log_t = math.log(t)
        return [a.average_reward() + math.sqrt(2.0 * log_t / a.trials) for a in arms]


def build_policy(name: str, config: SimulationConfig) -> object:
    if name == "epsilon_greedy":
        return EpsilonGreedyPolicy(epsilon=config.epsilon)
    if name == "ucb1":
        return UCB1Policy()
    raise ValueError(f"Unknown policy: {name}")
