"""
geometry - 几何计算工具函数

提供向量归一化、平面（刚体坐标系）及其变换等基础几何操作。

平面 Plane 由原点和一组右手正交单位轴组成，与 4x4 齐次变换矩阵一一对应:
    M = [[x_axis, y_axis, z_axis, origin],
         [0,      0,      0,      1     ]]
四元数相关运算基于 scipy.spatial.transform.Rotation。
"""

from dataclasses import dataclass

import numpy as np
from scipy.spatial.transform import Rotation

from .. import config

EPSILON = 1e-16

# 判断两轴是否共线的阈值
_COLLINEAR_TOL = 1e-12


def normalize(vectors: np.ndarray) -> np.ndarray:
    """
    将向量归一化为单位向量。

    Args:
        vectors: 单个向量 (n,) 或向量数组 (m, n)

    Returns:
        归一化后的单位向量，与输入形状相同
    """
    vectors = np.asarray(vectors, dtype=float)
    if vectors.ndim == 1:
        norm = np.linalg.norm(vectors)
        return vectors / (norm + EPSILON)
    norm = np.linalg.norm(vectors, axis=-1, keepdims=True)
    return vectors / (norm + EPSILON)


def frozen_array(values) -> np.ndarray:
    """复制为只读 float 数组，避免与调用方共享可变数据。"""
    array = np.array(values, dtype=float)
    array.setflags(write=False)
    return array


def as_vector3(values, name: str = "vector") -> np.ndarray:
    """转换为 (3,) float 数组，形状不符时抛出 ValueError。"""
    vector = np.asarray(values, dtype=float)
    if vector.shape != (3,):
        raise ValueError(f"{name} must have shape (3,), got {vector.shape}")
    return vector


def invert_rigid(matrix: np.ndarray) -> np.ndarray:
    """
    刚体变换求逆，利用分块结构 R⁻¹ = Rᵀ, t⁻¹ = -Rᵀt。

    Args:
        matrix: (4, 4) 齐次变换矩阵

    Returns:
        (4, 4) 逆变换矩阵
    """
    R = matrix[:3, :3]
    t = matrix[:3, 3]
    inverse = np.eye(4)
    inverse[:3, :3] = R.T
    inverse[:3, 3] = -R.T @ t
    return inverse


@dataclass(frozen=True, eq=False)
class Plane:
    """
    平面（刚体坐标系）：原点加右手正交单位轴。

    构造时对轴做正交化: z = x × y, y = z × x, 三轴均归一化。
    实例不可变，所有变换方法都返回新的 Plane。

    Attributes:
        origin: (3,) 原点
        x_axis: (3,) X 轴单位向量
        y_axis: (3,) Y 轴单位向量
    """

    origin: np.ndarray
    x_axis: np.ndarray
    y_axis: np.ndarray

    def __post_init__(self):
        origin = as_vector3(self.origin, "origin")
        x = as_vector3(self.x_axis, "x_axis")
        y = as_vector3(self.y_axis, "y_axis")

        x = normalize(x)
        z = np.cross(x, normalize(y))
        if np.linalg.norm(z) < config.UNIT_TOL:
            raise ValueError("x_axis and y_axis are parallel, cannot build a plane")

        z = normalize(z)
        y = np.cross(z, x)

        object.__setattr__(self, "origin", frozen_array(origin))
        object.__setattr__(self, "x_axis", frozen_array(x))
        object.__setattr__(self, "y_axis", frozen_array(y))

    @classmethod
    def world_xy(cls) -> "Plane":
        """世界坐标系 XY 平面。"""
        return cls(np.zeros(3), np.array([1.0, 0.0, 0.0]), np.array([0.0, 1.0, 0.0]))

    @classmethod
    def from_matrix(cls, matrix: np.ndarray) -> "Plane":
        """从 (4, 4) 齐次变换矩阵构造平面。"""
        matrix = np.asarray(matrix, dtype=float)
        if matrix.shape != (4, 4):
            raise ValueError(f"matrix must have shape (4, 4), got {matrix.shape}")
        return cls(matrix[:3, 3], matrix[:3, 0], matrix[:3, 1])

    @property
    def z_axis(self) -> np.ndarray:
        return np.cross(self.x_axis, self.y_axis)

    @property
    def rotation_matrix(self) -> np.ndarray:
        """(3, 3) 旋转矩阵，列向量为三轴。"""
        return np.column_stack([self.x_axis, self.y_axis, self.z_axis])

    @property
    def matrix(self) -> np.ndarray:
        """(4, 4) 齐次变换矩阵，把平面局部坐标映射到世界坐标。"""
        m = np.eye(4)
        m[:3, :3] = self.rotation_matrix
        m[:3, 3] = self.origin
        return m

    def transform(self, matrix: np.ndarray) -> "Plane":
        """
        对平面施加刚体变换（左乘）。

        Args:
            matrix: (4, 4) 齐次变换矩阵

        Returns:
            变换后的新平面
        """
        matrix = np.asarray(matrix, dtype=float)
        R = matrix[:3, :3]
        origin = R @ self.origin + matrix[:3, 3]
        return Plane(origin, R @ self.x_axis, R @ self.y_axis)

    def rotate(self, angle: float, axis: np.ndarray, center: np.ndarray | None = None) -> "Plane":
        """
        绕经过 center 的轴旋转平面。

        Args:
            angle: 旋转角 (rad)，右手定则
            axis: (3,) 旋转轴方向，无需归一化
            center: (3,) 旋转中心，默认为平面原点

        Returns:
            旋转后的新平面；轴长度为零时原样返回
        """
        axis = as_vector3(axis, "axis")
        norm = np.linalg.norm(axis)
        if norm < _COLLINEAR_TOL:
            return self

        center = self.origin if center is None else as_vector3(center, "center")
        rotation = Rotation.from_rotvec(axis / norm * angle)

        # np.stack 生成可写副本，scipy 的 apply 不接受只读数组
        offset, x, y = rotation.apply(np.stack([self.origin - center, self.x_axis, self.y_axis]))
        return Plane(center + offset, x, y)

    def with_origin(self, origin: np.ndarray) -> "Plane":
        """保持三轴不变，替换原点。"""
        return Plane(origin, self.x_axis, self.y_axis)

    def remap_to_plane_space(self, point: np.ndarray) -> np.ndarray:
        """
        将世界坐标点映射到平面局部坐标。

        Args:
            point: (3,) 世界坐标点

        Returns:
            (3,) 局部坐标 [u, v, w]
        """
        offset = as_vector3(point, "point") - self.origin
        return self.rotation_matrix.T @ offset

    def is_close(self, other: "Plane", atol: float = 1e-9) -> bool:
        """原点与三轴均在容差内一致。"""
        return bool(np.allclose(self.matrix, other.matrix, atol=atol))

    def __repr__(self) -> str:
        o = np.round(self.origin, 4).tolist()
        x = np.round(self.x_axis, 4).tolist()
        y = np.round(self.y_axis, 4).tolist()
        return f"Plane(origin={o}, x_axis={x}, y_axis={y})"


def plane_to_plane(source: Plane, target: Plane) -> np.ndarray:
    """
    计算把 source 平面映射到 target 平面的刚体变换。

        M = T · S⁻¹

    Args:
        source: 起始平面
        target: 目标平面

    Returns:
        (4, 4) 齐次变换矩阵，满足 source.transform(M) == target
    """
    return target.matrix @ invert_rigid(source.matrix)


def rotation_between(a: Plane, b: Plane) -> Rotation:
    """
    计算把平面 a 的三轴旋转到平面 b 的三轴的旋转（世界坐标系下）。

        R = R_b · R_aᵀ
    """
    return Rotation.from_matrix(b.rotation_matrix @ a.rotation_matrix.T)


def quaternion_angle_axis(rotation: Rotation) -> tuple[float, np.ndarray]:
    """
    从四元数提取旋转角和旋转轴。

    角度直接由标量部求得 angle = 2·arccos(w)，范围 [0, 2π]，
    不对四元数做正标量规范化，因此调用方需要自行把大于 π 的角映射到最短路径。

    Args:
        rotation: scipy Rotation 对象

    Returns:
        angle: 旋转角 (rad)
        axis: (3,) 单位旋转轴；旋转角为零时返回 z 轴
    """
    x, y, z, w = rotation.as_quat()
    w = float(np.clip(w, -1.0, 1.0))
    angle = 2.0 * np.arccos(w)

    s = np.sqrt(max(1.0 - w * w, 0.0))
    if s < _COLLINEAR_TOL:
        return 0.0, np.array([0.0, 0.0, 1.0])

    return float(angle), np.array([x, y, z]) / s


if __name__ == "__main__":
    print("=== 平面变换测试 ===")

    base = Plane.world_xy()
    tilted = base.rotate(np.pi / 2, [0, 0, 1]).with_origin([100.0, 0.0, 50.0])
    print(f"旋转后平面: {tilted}")

    M = plane_to_plane(base, tilted)
    print(f"base -> tilted 映射一致: {base.transform(M).is_close(tilted)}")

    angle, axis = quaternion_angle_axis(rotation_between(base, tilted))
    print(f"相对旋转: angle={np.degrees(angle):.1f}°, axis={axis}")

    local = tilted.remap_to_plane_space([100.0, 10.0, 50.0])
    print(f"局部坐标: {local}")
