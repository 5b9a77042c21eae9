"""
core.calibration 模块单元测试
"""

import logging

import numpy as np
import pytest

from robot_targets.core.attributes import DEFAULT_TOOL, Tool
from robot_targets.core.calibration import circumsphere, four_point_tcp
from robot_targets.datasets import tcp_calibration_poses
from robot_targets.utils.geometry import Plane


class TestCircumsphere:
    """外接球测试"""

    @pytest.mark.parametrize(
        "center, radius",
        [
            ([0.0, 0.0, 0.0], 1.0),
            ([10.0, -20.0, 5.0], 50.0),
            ([500.0, 100.0, 200.0], 150.0),
        ],
    )
    def test_known_sphere(self, center, radius):
        """测试已知球面上四点恢复球心和半径"""
        center = np.array(center)
        directions = np.array([
            [1.0, 0.0, 0.0],
            [0.0, 1.0, 0.0],
            [0.0, 0.0, 1.0],
            [-1.0, -1.0, -1.0] / np.sqrt(3),
        ])
        points = center + radius * directions

        sphere = circumsphere(*points)

        np.testing.assert_allclose(sphere.center, center, atol=1e-8)
        assert np.isclose(sphere.radius, radius, rtol=1e-9)
        assert not sphere.is_degenerate

    def test_coplanar_points(self):
        """测试共面四点返回零球且不产生除零"""
        with np.errstate(divide="raise", invalid="raise"):
            sphere = circumsphere([0, 0, 0], [1, 0, 0], [0, 1, 0], [1, 1, 0])

        np.testing.assert_array_equal(sphere.center, [0, 0, 0])
        assert sphere.radius == 0.0
        assert sphere.is_degenerate

    def test_nearly_coplanar_points(self):
        """测试数值上近似共面的点"""
        sphere = circumsphere([0, 0, 0], [100, 0, 0], [0, 100, 0], [100, 100, 1e-9])
        assert sphere.is_degenerate

    def test_coincident_points(self):
        """测试四点重合"""
        sphere = circumsphere(*([[3.0, 3.0, 3.0]] * 4))
        assert sphere.is_degenerate

    def test_degenerate_logs_warning(self, caplog):
        """测试退化时记录警告"""
        with caplog.at_level(logging.WARNING, logger="robot_targets.core.calibration"):
            circumsphere([0, 0, 0], [1, 0, 0], [2, 0, 0], [3, 0, 0])
        assert "Degenerate" in caplog.text


class TestFourPointCalibration:
    """四点 TCP 标定测试"""

    def test_recovers_tcp_offset(self):
        """测试标定恢复真实 TCP 偏置"""
        planes, _, setup = tcp_calibration_poses()
        tcp_origin = four_point_tcp(*planes)
        np.testing.assert_allclose(tcp_origin, setup.tcp_offset_mm, atol=1e-6)

    def test_tool_calibration_mutates_tcp_origin(self):
        """测试工具标定原地修改 TCP 原点并保留三轴"""
        planes, _, setup = tcp_calibration_poses()
        tcp = Plane([0, 0, 100], [0, 1, 0], [-1, 0, 0])
        tool = Tool(tcp, "Probe")

        tool.four_point_calibration(*planes)

        np.testing.assert_allclose(tool.tcp.origin, setup.tcp_offset_mm, atol=1e-6)
        np.testing.assert_allclose(tool.tcp.x_axis, tcp.x_axis)
        np.testing.assert_allclose(tool.tcp.y_axis, tcp.y_axis)

    def test_default_tool_refused(self):
        """测试默认工具不允许标定"""
        planes, _, _ = tcp_calibration_poses()
        with pytest.raises(ValueError):
            DEFAULT_TOOL.four_point_calibration(*planes)
        assert DEFAULT_TOOL.tcp.is_close(Plane.world_xy())

    def test_renamed_default_tool_can_be_calibrated(self):
        """测试重命名得到的副本可以标定"""
        planes, _, setup = tcp_calibration_poses()
        tool = DEFAULT_TOOL.with_name("Calibrated")
        tool.four_point_calibration(*planes)

        np.testing.assert_allclose(tool.tcp.origin, setup.tcp_offset_mm, atol=1e-6)
        np.testing.assert_allclose(DEFAULT_TOOL.tcp.origin, [0, 0, 0])


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
