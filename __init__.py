"""
robot_targets - 离线机器人编程的目标表示与运动插补核心

给定一系列用户编写的运动目标（位姿目标、关节目标及其工具/坐标系/速度/过渡区属性），
生成运动学一致、关节角连续的中间状态，供轨迹采样、仿真回放和控制器代码生成使用。

包含:
- 笛卡尔位姿与关节空间插补
- 关节角多圈连续展开
- 工具/坐标系切换时的位姿换算
- 四点外接球 TCP 标定
"""

from .core import (
    DEFAULT_FRAME,
    DEFAULT_SPEED,
    DEFAULT_TARGET,
    DEFAULT_TOOL,
    DEFAULT_ZONE,
    CartesianTarget,
    CommandGroup,
    Frame,
    JointTarget,
    KinematicSolution,
    Motion,
    RobotConfiguration,
    Speed,
    Target,
    Tool,
    Zone,
)
from .errors import InvalidTargetConversion, TargetError, UnsupportedMotionKind
from .program import ResolvedProgramTarget, Schedule
from .utils.geometry import Plane

__version__ = "0.1.0"
__all__ = [
    "DEFAULT_FRAME",
    "DEFAULT_SPEED",
    "DEFAULT_TARGET",
    "DEFAULT_TOOL",
    "DEFAULT_ZONE",
    "CartesianTarget",
    "CommandGroup",
    "Frame",
    "InvalidTargetConversion",
    "JointTarget",
    "KinematicSolution",
    "Motion",
    "Plane",
    "ResolvedProgramTarget",
    "RobotConfiguration",
    "Schedule",
    "Speed",
    "Target",
    "TargetError",
    "Tool",
    "UnsupportedMotionKind",
    "Zone",
]
