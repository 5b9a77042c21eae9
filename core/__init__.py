"""
core - 核心算法模块

包含:
- attributes: 工具、速度、过渡区、参考坐标系属性
- calibration: 四点外接球 TCP 标定
- targets: 笛卡尔目标与关节目标
- joints: 关节角归一化与连续展开
- interpolation: 平面与关节插补
- kinematics: 运动学解算结果
- commands: 指令组
"""

from .attributes import DEFAULT_FRAME, DEFAULT_SPEED, DEFAULT_TOOL, DEFAULT_ZONE, Frame, Speed, Tool, Zone
from .calibration import Sphere, circumsphere, four_point_tcp
from .commands import CommandGroup
from .interpolation import lerp_joints, lerp_plane, rescale_progress
from .joints import normalize_angle, resolve_continuous_joints
from .kinematics import KinematicSolution
from .targets import DEFAULT_TARGET, CartesianTarget, JointTarget, Motion, RobotConfiguration, Target

__all__ = [
    "DEFAULT_FRAME",
    "DEFAULT_SPEED",
    "DEFAULT_TARGET",
    "DEFAULT_TOOL",
    "DEFAULT_ZONE",
    "CartesianTarget",
    "CommandGroup",
    "Frame",
    "JointTarget",
    "KinematicSolution",
    "Motion",
    "RobotConfiguration",
    "Speed",
    "Sphere",
    "Target",
    "Tool",
    "Zone",
    "circumsphere",
    "four_point_tcp",
    "lerp_joints",
    "lerp_plane",
    "normalize_angle",
    "rescale_progress",
    "resolve_continuous_joints",
]
