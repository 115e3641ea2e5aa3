"""Bandit arm with a hidden payout rate and a bounded stochastic reward."""
import math
from typing import List

import numpy as np

from config import check_arm_params


class Arm:
    def __init__(self, success_probability: float, reward_magnitude: float):
        check_arm_params(success_probability, reward_magnitude)
        # ground truth; policies must only look at the play statistics
        self.success_probability = float(success_probability)
        self.reward_magnitude = float(reward_magnitude)
        self.trials = 0
        self.successes = 0
        self.total_reward = 0.0

    def average_reward(self) -> float:
        if self.trials == 0:
            return 0.0
        return self.total_reward / self.trials

    def play(self, rng: np.random.Generator) -> float:
        """Pull the arm once and return the reward it paid.

        On a hit the reward is an integer drawn uniformly from
        [0, reward_magnitude); a miss pays nothing. `trials` always grows by one.
        """
        self.trials += 1
        if rng.random() >= self.success_probability:
            return 0.0
        self.successes += 1
        # integers strictly below the magnitude: 0 .. ceil(m) - 1
        reward = float(rng.integers(0, math.ceil(self.reward_magnitude)))
        self.total_reward += reward
        return reward


def build_arms(specs) -> List[Arm]:
    """Fresh arm set for one run, in the order given."""
    return [Arm(s.success_probability, s.reward_magnitude) for s in specs]
