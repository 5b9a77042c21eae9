"""
tcp_calibration - 四点 TCP 标定示例数据

数据说明:
工具以四种不同姿态触碰同一个标定尖点，记录下四个法兰平面（世界坐标）。
法兰基准姿态为 Z 轴竖直向下，在此基础上分别绕 X、Y 轴倾斜。
由于 TCP 偏置和尖点位置已知，可以用来检验标定结果。
"""

from dataclasses import dataclass

import numpy as np
from scipy.spatial.transform import Rotation

from ..utils.geometry import Plane


@dataclass
class TcpCalibrationSetup:
    """标定场景参数"""

    tcp_offset_mm: tuple = (12.0, -8.0, 150.0)  # 法兰坐标系下的真实 TCP 偏置
    pivot_mm: tuple = (500.0, 100.0, 200.0)  # 标定尖点（世界坐标）


# 四次触碰相对基准姿态的倾斜角，格式: [绕X, 绕Y, 绕Z] (deg)
_TILTS_DEG = np.array(
    [
        [0.0, 0.0, 0.0],
        [30.0, 0.0, 0.0],
        [-30.0, 0.0, 15.0],
        [0.0, 35.0, -20.0],
    ],
    dtype=np.float64,
)


def tcp_calibration_poses() -> tuple[list[Plane], np.ndarray, TcpCalibrationSetup]:
    """
    获取四点标定的法兰平面。

    Returns:
        planes: 4 个法兰平面（世界坐标）
        pivot: (3,) 标定尖点
        setup: 标定场景参数
    """
    setup = TcpCalibrationSetup()
    offset = np.array(setup.tcp_offset_mm)
    pivot = np.array(setup.pivot_mm)

    # 基准姿态: 法兰 Z 轴朝下
    base = Rotation.from_euler("x", 180.0, degrees=True)

    planes = []
    for tilt in _TILTS_DEG:
        rotation = Rotation.from_euler("xyz", tilt, degrees=True) * base
        R = rotation.as_matrix()
        # 法兰原点 + R · offset = 尖点
        origin = pivot - R @ offset
        planes.append(Plane(origin, R[:, 0], R[:, 1]))

    return planes, pivot, setup


if __name__ == "__main__":
    planes, pivot, setup = tcp_calibration_poses()
    print("=== 四点 TCP 标定数据 ===")
    for i, plane in enumerate(planes):
        print(f"触碰 {i}: 法兰原点 {np.round(plane.origin, 3)}")
    print(f"尖点: {pivot}, TCP 偏置: {setup.tcp_offset_mm}")
