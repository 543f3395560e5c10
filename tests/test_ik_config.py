"""Tests for diffik.config.ik_config"""

import pytest

from diffik.config.ik_config import IKConfig


class TestIKConfig:
    def test_defaults(self) -> None:
        config = IKConfig()
        assert config.max_iterations == 200
        assert config.tolerance == 1e-4
        assert config.damping == 1e-6
        assert config.max_step == 1.0

    def test_unbounded_step_allowed(self) -> None:
        assert IKConfig(max_step=float("inf")).max_step == float("inf")

    def test_zero_damping_allowed(self) -> None:
        assert IKConfig(damping=0.0).damping == 0.0

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"max_iterations": 0},
            {"tolerance": 0.0},
            {"tolerance": -1e-3},
            {"tolerance": float("nan")},
            {"damping": -1.0},
            {"damping": float("inf")},
            {"max_step": 0.0},
            {"max_step": float("nan")},
        ],
    )
    def test_invalid_values(self, kwargs: dict) -> None:
        with pytest.raises(ValueError):
            IKConfig(**kwargs)
