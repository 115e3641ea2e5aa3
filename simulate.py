# ===================== simulate.py =====================
"""Run both bandit policies over many independent runs and report rewards.

Run:
  python simulate.py

Every run starts from a fresh arm set and its own random stream, plays
exactly `trial_budget` times, and returns the total reward collected. The
experiment averages that total over `num_runs` runs per policy and prints:

  Average reward epsilon greedy: <float>
  Average reward UCB: <float>

Parameters are the constants in config.py; there are no flags.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional

import numpy as np

from bandit import Arm, build_arms
from config import SimulationConfig
from logging_utils import get_logger
from policy import build_policy

log = get_logger(__name__)


@dataclass(frozen=True)
class TrialEvent:
    """One select-and-play step, handed to the optional `on_trial` hook."""
    trial: int
    arm_index: int
    exploring: bool
    reward: float


@dataclass
class RunResult:
    total_reward: float
    exploration_count: int
    arms: List[Arm]

    @property
    def total_trials(self) -> int:
        return sum(a.trials for a in self.arms)


@dataclass(frozen=True)
class ExperimentSummary:
    policy: str
    num_runs: int
    mean_reward: float
    std_reward: float
    mean_explorations: float


def run_simulation(
    policy,
    config: SimulationConfig,
    rng: np.random.Generator,
    on_trial: Optional[Callable[[TrialEvent], None]] = None,
) -> RunResult:
    """Play one run of `config.trial_budget` steps on a fresh arm set."""
    arms = build_arms(config.arms)
    explorations = 0

    for t in range(config.trial_budget):
        choice, exploring = policy.select(arms, rng)
        if exploring:
            explorations += 1
        reward = arms[choice].play(rng)
        if on_trial is not None:
            on_trial(TrialEvent(t, choice, exploring, reward))

    if log.isEnabledFor(logging.DEBUG):
        for i, arm in enumerate(arms):
            log.debug(
                "Arm %d: %d successes / %d trials, total reward = %.2f, avg reward = %.2f",
                i, arm.successes, arm.trials, arm.total_reward, arm.average_reward(),
            )
        log.debug("Exploration count: %d", explorations)

    total = sum(a.total_reward for a in arms)
    return RunResult(total_reward=total, exploration_count=explorations, arms=arms)


def run_experiment(
    policy,
    config: SimulationConfig,
    seed_seq: Optional[np.random.SeedSequence] = None,
) -> ExperimentSummary:
    """Average the total reward of `config.num_runs` independent runs.

    Each run draws from its own child of `seed_seq` (by default built from
    `config.seed`), so a fixed seed reproduces the experiment while the runs
    stay statistically independent of each other.
    """
    if seed_seq is None:
        seed_seq = np.random.SeedSequence(config.seed)

    totals = np.zeros(config.num_runs, dtype=np.float64)
    explorations = np.zeros(config.num_runs, dtype=np.float64)
    for i, child in enumerate(seed_seq.spawn(config.num_runs)):
        res = run_simulation(policy, config, np.random.default_rng(child))
        totals[i] = res.total_reward
        explorations[i] = res.exploration_count

    summary = ExperimentSummary(
        policy=getattr(policy, "name", type(policy).__name__),
        num_runs=config.num_runs,
        mean_reward=float(totals.sum() / config.num_runs),
        std_reward=float(totals.std()),
        mean_explorations=float(explorations.mean()),
    )
    log.info(
        "%s: %d runs x %d trials, mean reward %.3f (std %.3f), mean explorations %.2f",
        summary.policy, summary.num_runs, config.trial_budget,
        summary.mean_reward, summary.std_reward, summary.mean_explorations,
    )
    return summary


def run(config: SimulationConfig) -> tuple[ExperimentSummary, ExperimentSummary]:
    # one root sequence per process; each policy gets an independent branch
    eg_seq, ucb_seq = np.random.SeedSequence(config.seed).spawn(2)
    eg = run_experiment(build_policy("epsilon_greedy", config), config, eg_seq)
    ucb = run_experiment(build_policy("ucb1", config), config, ucb_seq)
    return eg, ucb


def main() -> int:
    eg, ucb = run(SimulationConfig())
    print(f"Average reward epsilon greedy: {eg.mean_reward:f}")
    print(f"Average reward UCB: {ucb.mean_reward:f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
