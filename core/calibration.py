"""
calibration - 工具中心点四点标定

工具以四种不同姿态触碰空间中同一点，四个法兰原点位于以该点为球心、
以工具长度为半径的球面上。求出球心后映射回各法兰平面的局部坐标，
取平均即为 TCP 在工具坐标系中的位置。

球心由闭式解求得（外接球），使用五个 4x4 行列式:

    M11 = det[x, y, z, 1]
    M12 = det[s, y, z, 1]
    M13 = det[s, x, z, 1]
    M14 = det[s, x, y, 1]
    M15 = det[s, x, y, z]        s = x² + y² + z²

    center = (0.5·M12/M11, -0.5·M13/M11, 0.5·M14/M11)
    radius = sqrt(|center|² - M15/M11)
"""

import logging
from dataclasses import dataclass

import numpy as np

from .. import config
from ..utils.geometry import Plane, as_vector3

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class Sphere:
    """四点拟合得到的球。退化时球心为原点、半径为 0。"""

    center: np.ndarray
    radius: float

    @property
    def is_degenerate(self) -> bool:
        return self.radius == 0.0


def _sphere_minors(points: np.ndarray) -> tuple[float, float, float, float, float]:
    """计算外接球闭式解所需的五个 4x4 行列式。"""
    x, y, z = points[:, 0], points[:, 1], points[:, 2]
    s = x * x + y * y + z * z
    ones = np.ones(4)

    m11 = np.linalg.det(np.column_stack([x, y, z, ones]))
    m12 = np.linalg.det(np.column_stack([s, y, z, ones]))
    m13 = np.linalg.det(np.column_stack([s, x, z, ones]))
    m14 = np.linalg.det(np.column_stack([s, x, y, ones]))
    m15 = np.linalg.det(np.column_stack([s, x, y, z]))

    return m11, m12, m13, m14, m15


def circumsphere(
    a: np.ndarray,
    b: np.ndarray,
    c: np.ndarray,
    d: np.ndarray,
    tol: float | None = None,
) -> Sphere:
    """
    求经过四个点的球。

    M11 等于四面体有向体积的 6 倍，与点集尺度的三次方成正比，
    因此以 |M11| ≤ tol · span³ 判断四点共面（span 为点集最大跨度）。
    退化时不做除法，直接返回球心为原点、半径为 0 的结果。

    Args:
        a, b, c, d: (3,) 空间点
        tol: 相对奇异性容差，默认 config.SINGULARITY_TOL

    Returns:
        Sphere(center, radius)
    """
    tol = config.SINGULARITY_TOL if tol is None else tol
    points = np.array([as_vector3(p, "point") for p in (a, b, c, d)])

    m11, m12, m13, m14, m15 = _sphere_minors(points)

    span = np.max(np.linalg.norm(points[:, None, :] - points[None, :, :], axis=-1))
    if span == 0 or abs(m11) <= tol * span**3:
        logger.warning("Degenerate four-point calibration (det=%.3e, span=%.3e)", m11, span)
        return Sphere(np.zeros(3), 0.0)

    center = np.array([0.5 * m12 / m11, -0.5 * m13 / m11, 0.5 * m14 / m11])
    radius_sq = center @ center - m15 / m11
    radius = float(np.sqrt(max(radius_sq, 0.0)))

    return Sphere(center, radius)


def four_point_tcp(a: Plane, b: Plane, c: Plane, d: Plane) -> np.ndarray:
    """
    由四个法兰平面求 TCP 在工具局部坐标中的位置。

    球心依次映射到四个平面的局部坐标后取平均。

    Args:
        a, b, c, d: 四次触碰时的法兰平面（世界坐标）

    Returns:
        (3,) TCP 原点（工具局部坐标）
    """
    planes = (a, b, c, d)
    sphere = circumsphere(*(p.origin for p in planes))

    remapped = [p.remap_to_plane_space(sphere.center) for p in planes]
    tcp_origin = np.mean(remapped, axis=0)

    logger.debug("Four-point calibration: radius=%.4f, tcp=%s", sphere.radius, tcp_origin)
    return tcp_origin


if __name__ == "__main__":
    print("=== 外接球测试 ===")

    center = np.array([10.0, -20.0, 5.0])
    radius = 50.0
    directions = np.array([
        [1.0, 0.0, 0.0],
        [0.0, 1.0, 0.0],
        [0.0, 0.0, 1.0],
        [-1.0, -1.0, -1.0] / np.sqrt(3),
    ])
    points = center + radius * directions

    sphere = circumsphere(*points)
    print(f"球心: {sphere.center}, 期望 {center}")
    print(f"半径: {sphere.radius:.6f}, 期望 {radius}")

    flat = circumsphere([0, 0, 0], [1, 0, 0], [0, 1, 0], [1, 1, 0])
    print(f"共面退化: center={flat.center}, radius={flat.radius}")
