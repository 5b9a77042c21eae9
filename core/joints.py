"""
joints - 关节角连续性处理

逆运动学给出的关节角只在模 2π 意义下确定，逐点求解时相邻采样可能相差整圈。
本模块把关节角展开为连续值:

1. normalize_angle: 把关节角归一化到主值区间 (-π, π]
2. resolve_continuous_joints: 以上一状态为基准，选取最短角度步长的延续值，
   保留多圈累积量而不是每一步都重置到主值区间

所有角度单位为弧度。
"""

import numpy as np

TWO_PI = 2.0 * np.pi


def normalize_angle(joint: float | np.ndarray) -> float | np.ndarray:
    """
    把关节角归一化到主值区间 (-π, π]。

    先对 |j| 取模 2π，超过 π 的部分减去 2π，再乘回 sign(j)。
    对 -π 这种落在区间开端的结果再加 2π，保证结果不等于 -π。

    Args:
        joint: 标量或 (N,) 关节角数组

    Returns:
        与输入形状相同的归一化关节角
    """
    joint = np.asarray(joint, dtype=float)

    magnitude = np.mod(np.abs(joint), TWO_PI)
    magnitude = np.where(magnitude > np.pi, magnitude - TWO_PI, magnitude)

    result = magnitude * np.sign(joint)
    result = np.where(result <= -np.pi, result + TWO_PI, result)

    if result.ndim == 0:
        return float(result)
    return result


def resolve_continuous_joints(joints: np.ndarray, prev_joints: np.ndarray) -> np.ndarray:
    """
    逐轴选取与上一状态最近的关节角延续值。

    对每个轴:
        difference = normalize(joint) - normalize(prev)
        |difference| > π 时改走另一方向: (|difference| - 2π) · sign(difference)
        result = prev + difference

    恰好等于 π 的差值不折叠。结果与 joints 模 2π 同余，
    且 |result - prev| ≤ π。

    Args:
        joints: (N,) 新解算的关节角
        prev_joints: (N,) 上一状态的关节角（可以是展开后的多圈值）

    Returns:
        (N,) 展开后的关节角
    """
    joints = np.asarray(joints, dtype=float)
    prev_joints = np.asarray(prev_joints, dtype=float)
    if joints.shape != prev_joints.shape:
        raise ValueError(
            f"joint arrays differ in shape: {joints.shape} vs {prev_joints.shape}"
        )

    difference = np.atleast_1d(normalize_angle(joints) - normalize_angle(prev_joints))
    abs_difference = np.abs(difference)

    # 折叠到较短的旋转方向
    folded = (abs_difference - TWO_PI) * np.sign(difference)
    difference = np.where(abs_difference > np.pi, folded, difference)

    return prev_joints + difference.reshape(prev_joints.shape)


if __name__ == "__main__":
    print("=== 关节角展开测试 ===")

    prev = np.radians([350.0, -170.0, 10.0])
    new = np.radians([0.0, 175.0, 20.0])
    resolved = resolve_continuous_joints(new, prev)
    print(f"上一状态: {np.degrees(prev)}")
    print(f"新解算值: {np.degrees(new)}")
    print(f"展开结果: {np.degrees(resolved)}")
