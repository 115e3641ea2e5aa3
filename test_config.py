"""Tests for SimulationConfig validation."""
import unittest

import numpy as np

from config import ArmSpec, ConfigError, SimulationConfig


class TestSimulationConfig(unittest.TestCase):
    def test_defaults(self):
        cfg = SimulationConfig()
        self.assertEqual(cfg.epsilon, 0.15)
        self.assertEqual(cfg.trial_budget, 30)
        self.assertEqual(cfg.num_runs, 1000)
        self.assertEqual(cfg.arms, (ArmSpec(0.2, 20.0), ArmSpec(0.8, 2.0)))
        self.assertIsNone(cfg.seed)
        self.assertEqual(cfg.max_reward_magnitude, 20.0)

    def test_pairs_are_converted(self):
        cfg = SimulationConfig(arms=[(0.1, 5), (0.9, 1), (0.5, 3)])
        self.assertEqual(len(cfg.arms), 3)
        self.assertTrue(all(isinstance(a, ArmSpec) for a in cfg.arms))

    def test_rejects_bad_values(self):
        bad = [
            dict(arms=[(0.5, 2)]),
            dict(arms=[(0.5, 2), (1.2, 2)]),
            dict(arms=[(0.5, 2), (0.5, 0)]),
            dict(arms=[(0.5, 2), (0.5, -3)]),
            dict(arms=[(1.0, float("inf")), (0.5, 2)]),
            dict(arms=[(1.0, float("nan")), (0.5, 2)]),
            dict(arms=[(float("nan"), 2), (0.5, 2)]),
            dict(trial_budget=2.5),
            dict(trial_budget=True),
            dict(num_runs=10.0),
            dict(epsilon=-0.1),
            dict(trial_budget=-1),
            dict(num_runs=0),
        ]
        for kwargs in bad:
            with self.subTest(**{k: str(v) for k, v in kwargs.items()}):
                with self.assertRaises(ConfigError):
                    SimulationConfig(**kwargs)

    def test_numpy_ints_accepted(self):
        cfg = SimulationConfig(trial_budget=np.int64(5), num_runs=np.int32(2))
        self.assertEqual(cfg.trial_budget, 5)

    def test_config_error_is_value_error(self):
        with self.assertRaises(ValueError):
            ArmSpec(2.0, 1.0)


if __name__ == "__main__":
    unittest.main()
