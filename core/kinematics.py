"""
kinematics - 运动学解算结果

正/逆运动学解算器本身不在本库中实现，这里只定义其输出，
供 ResolvedProgramTarget.resolve() 绑定到目标上。
"""

from dataclasses import dataclass

import numpy as np

from ..utils.geometry import Plane, frozen_array
from .targets import RobotConfiguration


@dataclass(frozen=True, eq=False)
class KinematicSolution:
    """
    运动学解算结果。

    Attributes:
        planes: 各连杆平面（世界坐标），最后一个为法兰/TCP 平面
        joints: (N,) 解算关节角 (rad)
        configuration: 解算得到的臂形配置
        errors: 解算器报告的错误信息，例如超出关节限位或奇异
    """

    planes: tuple[Plane, ...]
    joints: np.ndarray
    configuration: RobotConfiguration = RobotConfiguration.NONE
    errors: tuple[str, ...] = ()

    def __post_init__(self):
        planes = tuple(self.planes)
        if not planes:
            raise ValueError("KinematicSolution needs at least one link plane")
        object.__setattr__(self, "planes", planes)
        object.__setattr__(self, "joints", frozen_array(np.atleast_1d(self.joints)))
        object.__setattr__(self, "errors", tuple(self.errors))

    @property
    def tcp_plane(self) -> Plane:
        return self.planes[-1]
