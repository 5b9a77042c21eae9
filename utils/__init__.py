"""
utils - 工具函数模块

包含:
- geometry: 向量、平面及刚体变换
"""

from .geometry import (
    Plane,
    normalize,
    plane_to_plane,
    quaternion_angle_axis,
    rotation_between,
)

__all__ = [
    "Plane",
    "normalize",
    "plane_to_plane",
    "quaternion_angle_axis",
    "rotation_between",
]
