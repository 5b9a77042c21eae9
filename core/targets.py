"""
targets - 用户编写的运动目标

两种目标构成封闭的联合类型 Target = CartesianTarget | JointTarget:
- CartesianTarget: 位置/姿态目标，附带可选的臂形配置和运动方式
- JointTarget: 关节空间目标

目标构造后不可变，数组字段复制为只读数组。
需要修改某个字段时使用 from_target() 或 dataclasses.replace() 构造新实例。
"""

import enum
from dataclasses import dataclass
from typing import Any, Union

import numpy as np

from ..utils.geometry import Plane, frozen_array
from .attributes import DEFAULT_FRAME, DEFAULT_SPEED, DEFAULT_TOOL, DEFAULT_ZONE, Frame, Speed, Tool, Zone


class RobotConfiguration(enum.IntFlag):
    """机械臂臂形配置位标志（肩、肘、腕分支）。"""

    NONE = 0
    SHOULDER = 1
    ELBOW = 2
    WRIST = 4


def describe_configuration(configuration: RobotConfiguration) -> str:
    """臂形配置的可读名称，例如 "Shoulder, Elbow"；空配置为 "None"。"""
    names = [flag.name.capitalize() for flag in RobotConfiguration if flag.value and flag in configuration]
    return ", ".join(names) or "None"


class Motion(enum.Enum):
    """运动方式。"""

    JOINT = "joint"
    LINEAR = "linear"
    CIRCULAR = "circular"
    SPLINE = "spline"


@dataclass(frozen=True, eq=False, kw_only=True)
class TargetAttributes:
    """两种目标共有的附加字段。"""

    tool: Tool = DEFAULT_TOOL
    speed: Speed = DEFAULT_SPEED
    zone: Zone = DEFAULT_ZONE
    command: Any = None
    frame: Frame = DEFAULT_FRAME
    external: np.ndarray | None = None

    def __post_init__(self):
        if self.external is not None:
            object.__setattr__(self, "external", frozen_array(np.atleast_1d(self.external)))

    def _describe_attributes(self) -> str:
        parts = [f", {self.tool}", f", {self.speed}", f", {self.zone}"]
        if self.command is not None:
            parts.append(", Contains commands")
        if self.external is not None:
            parts.append(", External axis")
        return "".join(parts)


def _shared_attributes(target) -> dict:
    """提取另一目标（含解算目标）的共享属性，用于派生新目标。"""
    return {
        "tool": target.tool,
        "speed": target.speed,
        "zone": target.zone,
        "command": target.command,
        "frame": target.frame,
    }


@dataclass(frozen=True, eq=False)
class CartesianTarget(TargetAttributes):
    """
    笛卡尔目标。

    Attributes:
        plane: 目标平面（参考坐标系下的 TCP 位姿）
        configuration: 臂形配置，None 表示不约束，给定值表示强制
        motion: 运动方式，默认关节插补运动
    """

    plane: Plane
    configuration: RobotConfiguration | None = None
    motion: Motion = Motion.JOINT

    @classmethod
    def from_target(
        cls,
        plane: Plane,
        target,
        configuration: RobotConfiguration | None = None,
        motion: Motion = Motion.JOINT,
        external: np.ndarray | None = None,
    ) -> "CartesianTarget":
        """沿用 target 的工具、速度、过渡区、指令和坐标系构造新目标。"""
        external = target.external if external is None else external
        return cls(
            plane,
            configuration=configuration,
            motion=motion,
            external=external,
            **_shared_attributes(target),
        )

    def __str__(self) -> str:
        x, y, z = self.plane.origin
        text = f"Cartesian ({x:.2f},{y:.2f},{z:.2f}), {self.motion.name.capitalize()}"
        if self.configuration is not None:
            text += f', "{describe_configuration(self.configuration)}"'
        fx, fy, fz = self.frame.plane.origin
        text += f", Frame ({fx:.2f},{fy:.2f},{fz:.2f})"
        return f"Target ({text}{self._describe_attributes()})"


@dataclass(frozen=True, eq=False)
class JointTarget(TargetAttributes):
    """
    关节目标。

    Attributes:
        joints: (N,) 关节角 (rad)，N 为机器人轴数，可在末尾追加外部轴
    """

    joints: np.ndarray

    def __post_init__(self):
        super().__post_init__()
        object.__setattr__(self, "joints", frozen_array(np.atleast_1d(self.joints)))

    @classmethod
    def from_target(cls, joints: np.ndarray, target, external: np.ndarray | None = None) -> "JointTarget":
        """沿用 target 的工具、速度、过渡区、指令和坐标系构造新目标。"""
        external = target.external if external is None else external
        return cls(joints, external=external, **_shared_attributes(target))

    def __str__(self) -> str:
        joints = ",".join(f"{j:.2f}" for j in self.joints)
        return f"Target (Joint ({joints}){self._describe_attributes()})"


Target = Union[CartesianTarget, JointTarget]

DEFAULT_TARGET = JointTarget(np.array([0.0, np.pi / 2, 0.0, 0.0, 0.0, 0.0]))
