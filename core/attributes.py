"""
attributes - 目标属性值类型

目标附带四类属性: Tool（工具）、Speed（速度）、Zone（过渡区）、Frame（参考坐标系）。
属性对象在多个目标之间按引用共享，创建后视为只读；
重命名通过 with_name() 返回新实例，不修改共享对象。

每种类型都有一个在导入时创建的默认常量，进程内不再修改。
唯一有意为之的原地修改是 Tool.four_point_calibration()，它会改写工具 TCP 的原点。
"""

import copy
import dataclasses
from dataclasses import dataclass, field
from typing import Any

import numpy as np

from .. import config
from ..utils.geometry import Plane, as_vector3, frozen_array
from .calibration import four_point_tcp


class TargetAttribute:
    """属性类型的公共接口。"""

    name: str | None

    def with_name(self, name: str | None):
        """返回只修改了名称的新实例。"""
        return dataclasses.replace(self, name=name)


@dataclass(eq=False)
class Tool(TargetAttribute):
    """
    末端执行器描述。

    Attributes:
        tcp: 工具中心点平面（法兰坐标系下）
        name: 名称
        weight: 质量 (kg)
        centroid: (3,) 质心，默认取 TCP 原点
        mesh: 可选的显示网格，对本库不透明
    """

    tcp: Plane
    name: str | None = None
    weight: float = 0.0
    centroid: np.ndarray | None = None
    mesh: Any = None

    def __post_init__(self):
        if self.centroid is None:
            self.centroid = self.tcp.origin
        else:
            self.centroid = frozen_array(as_vector3(self.centroid, "centroid"))

    def with_name(self, name: str | None) -> "Tool":
        # 网格可能是可变对象，复制一份避免新旧工具共享
        return dataclasses.replace(self, name=name, mesh=copy.deepcopy(self.mesh))

    def four_point_calibration(self, a: Plane, b: Plane, c: Plane, d: Plane) -> None:
        """
        四点标定，原地改写 TCP 原点，TCP 三轴保持不变。

        这是属性层中唯一的原地修改。共享的 DEFAULT_TOOL 不允许标定，
        标定前应先用 with_name() 得到独立的工具实例。

        Args:
            a, b, c, d: 工具以不同姿态触碰同一点时的法兰平面（世界坐标）
        """
        if self is DEFAULT_TOOL:
            raise ValueError("DEFAULT_TOOL is shared and read-only, calibrate a copy from with_name()")

        origin = four_point_tcp(a, b, c, d)
        self.tcp = self.tcp.with_origin(origin)

    def __str__(self) -> str:
        return f"Tool ({self.name})"


@dataclass(frozen=True)
class Speed(TargetAttribute):
    """
    运动速度参数。

    Attributes:
        translation_speed: 平移速度 (mm/s)
        rotation_speed: 旋转速度 (rad/s)
        name: 名称
        axis_speed: 关节运动速度倍率，截断到 [0, 1]
        translation_accel: 平移加速度 (mm/s²)
        axis_accel: 关节加速度 (rad/s²)
        time: 到达目标的固定时间 (s)，0 表示不指定
    """

    translation_speed: float = 100.0
    rotation_speed: float = np.pi / 2
    name: str | None = None
    axis_speed: float = 1.0
    translation_accel: float = 1000.0
    axis_accel: float = np.pi
    time: float = 0.0

    def __post_init__(self):
        object.__setattr__(self, "axis_speed", float(np.clip(self.axis_speed, 0.0, 1.0)))

    def __str__(self) -> str:
        if self.name is not None:
            return f"Speed ({self.name})"
        return f"Speed ({self.translation_speed:.1f} mm/s)"


@dataclass(frozen=True)
class Zone(TargetAttribute):
    """
    路径过渡区。

    Attributes:
        distance: TCP 过渡半径 (mm)
        name: 名称
        rotation: 姿态过渡容差 (rad)，构造时由 distance/10 换算为弧度
    """

    distance: float
    name: str | None = None
    rotation: float = field(init=False)

    def __post_init__(self):
        object.__setattr__(self, "rotation", float(np.radians(self.distance / 10)))

    @property
    def is_flyby(self) -> bool:
        """过渡半径超过距离容差时为飞越点，否则为停止点。"""
        return self.distance > config.DISTANCE_TOL

    def __str__(self) -> str:
        if self.name is not None:
            return f"Zone ({self.name})"
        if self.is_flyby:
            return f"Zone ({self.distance:.2f} mm)"
        return "Zone (Stop point)"


@dataclass(frozen=True, eq=False)
class Frame(TargetAttribute):
    """
    参考坐标系。

    Attributes:
        plane: 坐标系平面（世界坐标）
        coupled_mechanism: 耦合机构索引，-1 表示无
        coupled_mechanical_group: 耦合机械组索引，-1 表示无
        name: 名称
    """

    plane: Plane
    coupled_mechanism: int = -1
    coupled_mechanical_group: int = -1
    name: str | None = None

    @property
    def is_coupled(self) -> bool:
        return self.coupled_mechanism != -1 or self.coupled_mechanical_group != -1

    def __str__(self) -> str:
        if self.name is not None:
            return f"Frame ({self.name})"
        x, y, z = self.plane.origin
        coupled = " Coupled" if self.is_coupled else ""
        return f"Frame ({x:.2f},{y:.2f},{z:.2f}{coupled})"


DEFAULT_TOOL = Tool(Plane.world_xy(), "DefaultTool")
DEFAULT_SPEED = Speed(100.0, np.pi, "DefaultSpeed")
DEFAULT_ZONE = Zone(1.0, "DefaultZone")
DEFAULT_FRAME = Frame(Plane.world_xy(), -1, -1, "DefaultFrame")
