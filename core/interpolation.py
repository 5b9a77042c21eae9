"""
interpolation - 目标插补

两类插补规则:
1. lerp_plane: 笛卡尔空间，原点线性插值 + 轴角形式的姿态插值
2. lerp_joints: 关节空间，逐轴线性插值

插补参数 t 先从 [start, end] 重新缩放到 [0, 1]；区间长度为零或比值非有限时取 0。
"""

import logging

import numpy as np

from ..utils.geometry import Plane, quaternion_angle_axis, rotation_between

logger = logging.getLogger(__name__)


def rescale_progress(t: float, start: float = 0.0, end: float = 1.0) -> float:
    """
    把插补参数从 [start, end] 缩放到 [0, 1]。

    区间退化 (start == end) 或结果为 NaN/Inf 时返回 0，即停留在起点。
    不做截断，区间外的 t 会得到外插比例。
    """
    span = end - start
    if span == 0:
        logger.debug("Degenerate interpolation range [%s, %s], using start", start, end)
        return 0.0

    ratio = (t - start) / span
    if not np.isfinite(ratio):
        logger.debug("Non-finite interpolation ratio for t=%s in [%s, %s]", t, start, end)
        return 0.0
    return float(ratio)


def lerp_plane(a: Plane, b: Plane, t: float, start: float = 0.0, end: float = 1.0) -> Plane:
    """
    平面插补。

    原点: origin = a.origin·(1-t) + b.origin·t
    姿态: 计算 a 到 b 的相对旋转四元数，提取轴角 (angle, axis)，
          angle > π 时取 angle - 2π 走最短路径，
          再以 a.origin 为旋转中心把 a 绕 axis 旋转 t·angle，
          最后用插值原点覆盖旋转后平面的原点。

    这是单步的轴角线性插值，不是四元数球面插值。

    Args:
        a: 起始平面
        b: 终止平面
        t: 插补参数
        start: 参数区间起点
        end: 参数区间终点

    Returns:
        插补得到的平面
    """
    t = rescale_progress(t, start, end)
    origin = a.origin * (1 - t) + b.origin * t

    angle, axis = quaternion_angle_axis(rotation_between(a, b))
    if angle > np.pi:
        angle -= 2 * np.pi

    rotated = a.rotate(t * angle, axis, a.origin)
    return rotated.with_origin(origin)


def lerp_joints(a: np.ndarray, b: np.ndarray, t: float, start: float = 0.0, end: float = 1.0) -> np.ndarray:
    """
    关节角逐轴线性插值，不处理角度环绕。

    Args:
        a: (N,) 起始关节角
        b: (N,) 终止关节角
        t: 插补参数
        start: 参数区间起点
        end: 参数区间终点

    Returns:
        (N,) 插补得到的关节角
    """
    a = np.asarray(a, dtype=float)
    b = np.asarray(b, dtype=float)
    if a.shape != b.shape:
        raise ValueError(f"joint arrays differ in shape: {a.shape} vs {b.shape}")

    t = rescale_progress(t, start, end)
    return a * (1 - t) + b * t


if __name__ == "__main__":
    print("=== 插补测试 ===")

    a = Plane.world_xy()
    b = a.rotate(np.pi / 2, [0, 0, 1]).with_origin([100.0, 50.0, 0.0])

    for t in (0.0, 0.25, 0.5, 1.0):
        p = lerp_plane(a, b, t)
        yaw = np.degrees(np.arctan2(p.x_axis[1], p.x_axis[0]))
        print(f"t={t:.2f}: origin={p.origin}, yaw={yaw:.1f}°")

    print(f"关节插值: {lerp_joints([0, 0, 0], [1, 2, 3], 0.5)}")
