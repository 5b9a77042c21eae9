"""
core.joints 模块单元测试
"""

import numpy as np
import pytest

from robot_targets.core.joints import normalize_angle, resolve_continuous_joints


def wrapped_difference(a, b):
    """a - b 映射到 [-π, π)，用于比较模 2π 同余。"""
    return np.mod(np.asarray(a) - np.asarray(b) + np.pi, 2 * np.pi) - np.pi


class TestNormalizeAngle:
    """关节角归一化测试"""

    @pytest.mark.parametrize(
        "joint, expected",
        [
            (0.0, 0.0),
            (np.pi / 2, np.pi / 2),
            (3 * np.pi / 2, -np.pi / 2),
            (-3 * np.pi / 2, np.pi / 2),
            (2 * np.pi, 0.0),
            (np.pi, np.pi),
            (-np.pi, np.pi),
            (7.0, 7.0 - 2 * np.pi),
            (-7.0, -7.0 + 2 * np.pi),
        ],
    )
    def test_known_values(self, joint, expected):
        """测试典型角度"""
        assert np.isclose(normalize_angle(joint), expected, atol=1e-12)

    def test_returns_float_for_scalar(self):
        """测试标量输入返回 float"""
        assert isinstance(normalize_angle(1.0), float)

    def test_range(self):
        """测试结果落在 (-π, π]"""
        joints = np.linspace(-20.0, 20.0, 4001)
        result = normalize_angle(joints)
        assert np.all(result > -np.pi)
        assert np.all(result <= np.pi)

    def test_idempotent(self):
        """测试归一化幂等"""
        joints = np.linspace(-20.0, 20.0, 4001)
        once = normalize_angle(joints)
        np.testing.assert_allclose(normalize_angle(once), once, atol=1e-12)

    def test_congruent(self):
        """测试结果与输入模 2π 同余"""
        joints = np.linspace(-20.0, 20.0, 4001)
        np.testing.assert_allclose(wrapped_difference(normalize_angle(joints), joints), 0.0, atol=1e-9)


class TestResolveContinuousJoints:
    """关节角连续展开测试"""

    def test_continues_past_full_turn(self):
        """测试 350° 到 0° 继续走到 360° 而不是回跳"""
        prev = np.radians([350.0, 350.0])
        new = np.array([0.0, 0.0])
        result = resolve_continuous_joints(new, prev)
        np.testing.assert_allclose(result, [2 * np.pi, 2 * np.pi], atol=1e-12)

    def test_crossing_minus_pi(self):
        """测试跨越 -180° 时的展开"""
        prev = np.radians([-170.0])
        new = np.radians([175.0])
        result = resolve_continuous_joints(new, prev)
        np.testing.assert_allclose(np.degrees(result), [-185.0], atol=1e-9)

    def test_preserves_multi_turn_drift(self):
        """测试保留多圈累积量"""
        prev = np.array([4 * np.pi + 0.1])
        new = np.array([0.2])
        result = resolve_continuous_joints(new, prev)
        np.testing.assert_allclose(result, [4 * np.pi + 0.2], atol=1e-12)

    def test_exact_pi_not_folded(self):
        """测试差值恰为 π 时不折叠"""
        result = resolve_continuous_joints(np.array([np.pi]), np.array([0.0]))
        np.testing.assert_allclose(result, [np.pi])

    def test_exact_minus_pi_step_goes_positive(self):
        """测试差值恰为 -π 时按 (-π, π] 取 +π 方向"""
        result = resolve_continuous_joints(np.array([-np.pi]), np.array([0.0]))
        np.testing.assert_allclose(result, [np.pi], atol=1e-12)

    def test_small_steps_unchanged(self):
        """测试小步长保持原值"""
        prev = np.array([0.1, -0.5, 1.0, 2.0, -2.0, 0.0])
        new = prev + 0.05
        np.testing.assert_allclose(resolve_continuous_joints(new, prev), new, atol=1e-12)

    def test_random_properties(self):
        """测试随机样本满足步长与同余性质"""
        rng = np.random.default_rng(42)
        prev = rng.uniform(-15.0, 15.0, size=500)
        new = rng.uniform(-15.0, 15.0, size=500)

        result = resolve_continuous_joints(new, prev)

        assert np.all(np.abs(result - prev) <= np.pi + 1e-9)
        np.testing.assert_allclose(wrapped_difference(result, new), 0.0, atol=1e-9)

    def test_sequence_has_no_jumps(self):
        """测试连续采样序列展开后无整圈跳变"""
        true_angles = np.linspace(0.0, 5 * np.pi, 200)
        solved = normalize_angle(true_angles)

        unwrapped = [solved[0]]
        for value in solved[1:]:
            unwrapped.append(resolve_continuous_joints(np.array([value]), np.array([unwrapped[-1]]))[0])

        np.testing.assert_allclose(unwrapped, true_angles, atol=1e-9)

    def test_shape_mismatch(self):
        """测试形状不一致报错"""
        with pytest.raises(ValueError):
            resolve_continuous_joints(np.zeros(6), np.zeros(7))


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
