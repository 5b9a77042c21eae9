"""
program - 解算后的程序目标

ResolvedProgramTarget 把用户编写的目标与运动学解算结果合并，
同时保存参考坐标系下的平面和世界坐标系下的平面，并携带调度流程写入的元数据。

生命周期分两步:
1. 用户构造不可变的 CartesianTarget / JointTarget
2. 调度流程调用外部解算器后，通过 ResolvedProgramTarget.resolve() 一步生成解算目标

解算目标的位姿、关节和配置此后不再修改；调度元数据存放在可写的 Schedule 中。
相邻两个解算目标之间的中间状态由 lerp() 生成。
"""

import logging
from dataclasses import dataclass, field

import numpy as np

from . import config
from .core.attributes import Frame, Speed, Tool, Zone
from .core.commands import CommandGroup
from .core.interpolation import lerp_joints, lerp_plane
from .core.joints import resolve_continuous_joints
from .core.kinematics import KinematicSolution
from .core.targets import CartesianTarget, JointTarget, Motion, RobotConfiguration, Target
from .errors import InvalidTargetConversion, UnsupportedMotionKind
from .utils.geometry import Plane, frozen_array, invert_rigid, plane_to_plane

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Schedule:
    """
    调度元数据，由外部调度流程填写。

    Attributes:
        index: 目标在程序中的序号
        group: 机械组编号
        time: 本段运动时间 (s)
        min_time: 本段最短可行时间 (s)
        total_time: 到本目标为止的累计时间 (s)
        leading_joint: 决定本段时间的主导关节
        changes_configuration: 本段是否发生臂形切换
        warnings: 警告信息
    """

    index: int = 0
    group: int = 0
    time: float = 0.0
    min_time: float = 0.0
    total_time: float = 0.0
    leading_joint: int = 0
    changes_configuration: bool = False
    warnings: list[str] = field(default_factory=list)


@dataclass(frozen=True, eq=False)
class ResolvedProgramTarget:
    """
    已绑定运动学结果的程序目标。

    Attributes:
        plane: 参考坐标系下的 TCP 平面
        world_plane: 世界坐标系下的 TCP 平面，world_plane = frame.plane · plane
        joints: (N,) 解算关节角
        is_joint_target: 是否由 JointTarget 生成
        motion: 运动方式，关节目标固定为 JOINT
        configuration: 解算得到的臂形配置
        forced_configuration: 用户是否强制指定了臂形配置
        tool, speed, zone, frame: 与原目标共享的属性对象
        command: 扁平化后的指令组
        external: 外部轴数值
        schedule: 调度元数据
    """

    plane: Plane
    world_plane: Plane
    joints: np.ndarray
    is_joint_target: bool
    motion: Motion
    configuration: RobotConfiguration
    forced_configuration: bool
    tool: Tool
    speed: Speed
    zone: Zone
    frame: Frame
    command: CommandGroup | None = None
    external: np.ndarray | None = None
    schedule: Schedule = field(default_factory=Schedule)

    def __post_init__(self):
        object.__setattr__(self, "joints", frozen_array(np.atleast_1d(self.joints)))
        if self.external is not None:
            object.__setattr__(self, "external", frozen_array(np.atleast_1d(self.external)))

    @classmethod
    def resolve(
        cls,
        target: Target,
        kinematics: KinematicSolution,
        previous: "ResolvedProgramTarget | None" = None,
        schedule: Schedule | None = None,
    ) -> "ResolvedProgramTarget":
        """
        把目标与运动学解算结果绑定为解算目标。

        关节目标: 世界平面取解算结果的最后一个连杆平面，再变换到参考坐标系。
        笛卡尔目标: 参考坐标系下的平面取自目标，再变换到世界坐标系；
        给定 previous 时，解算关节角相对 previous.joints 展开为连续值。

        Args:
            target: 用户编写的目标
            kinematics: 外部解算器对该目标的解算结果
            previous: 上一个解算目标，用于关节角展开
            schedule: 调度元数据，默认新建

        Returns:
            新的 ResolvedProgramTarget

        Raises:
            InvalidTargetConversion: target 已经是解算目标
        """
        schedule = Schedule() if schedule is None else schedule
        joints = kinematics.joints

        match target:
            case ResolvedProgramTarget():
                raise InvalidTargetConversion()
            case JointTarget():
                world_plane = kinematics.tcp_plane
                plane = world_plane.transform(plane_to_plane(target.frame.plane, Plane.world_xy()))
                is_joint_target = True
                motion = Motion.JOINT
                forced = False
            case CartesianTarget():
                plane = target.plane
                world_plane = plane.transform(plane_to_plane(Plane.world_xy(), target.frame.plane))
                if previous is not None:
                    joints = resolve_continuous_joints(joints, previous.joints)
                is_joint_target = False
                motion = target.motion
                forced = target.configuration is not None
            case _:
                raise TypeError(f"unsupported target type: {type(target).__name__}")

        if kinematics.errors:
            logger.warning("Target %d resolved with errors: %s", schedule.index, "; ".join(kinematics.errors))
            schedule.warnings.extend(kinematics.errors)

        return cls(
            plane=plane,
            world_plane=world_plane,
            joints=joints,
            is_joint_target=is_joint_target,
            motion=motion,
            configuration=kinematics.configuration,
            forced_configuration=forced,
            tool=target.tool,
            speed=target.speed,
            zone=target.zone,
            frame=target.frame,
            command=CommandGroup.wrap(target.command),
            external=target.external,
            schedule=schedule,
        )

    @property
    def is_joint_motion(self) -> bool:
        return self.is_joint_target or self.motion is Motion.JOINT

    def prev_plane(self, prev: "ResolvedProgramTarget") -> Plane:
        """
        把上一目标的平面换算到本目标的工具和坐标系下。

        1. 工具对象不同: P' = P · TCP_prev⁻¹ · TCP_cur，即法兰位姿不变、TCP 切换为当前工具
        2. 坐标系对象不同: P'' = F_cur⁻¹ · F_prev · P'，即世界位姿不变、改用当前坐标系表达

        属性对象相同时跳过对应变换，不引入额外的浮点误差。
        这里按右乘工具、左乘坐标系组合，与按 plane-to-plane 左乘换算的做法不同。
        """
        plane = prev.plane

        if prev.tool is not self.tool:
            swap = invert_rigid(prev.tool.tcp.matrix) @ self.tool.tcp.matrix
            plane = Plane.from_matrix(plane.matrix @ swap)

        if prev.frame is not self.frame:
            plane = plane.transform(invert_rigid(self.frame.plane.matrix) @ prev.frame.plane.matrix)

        return plane

    def lerp(
        self,
        prev: "ResolvedProgramTarget | None",
        t: float,
        start: float,
        end: float,
    ) -> Target:
        """
        生成从上一目标到本目标之间进度 t 处的中间目标。

        - 关节角: 有上一目标时在两组解算关节角之间线性插值，否则取本目标关节角
        - 外部轴: 有上一目标且本目标带外部轴时，取插值关节数组中第 6 轴以后的部分
          （关节数组不含外部轴时结果为空数组，并记录警告）
        - 关节运动: 返回 JointTarget
        - 直线运动: 在换算后的上一平面与本平面之间插补，返回 CartesianTarget；
          t 恰好落在上一目标的累计时间上时沿用上一目标的臂形配置

        Args:
            prev: 上一个解算目标，None 表示程序的第一个目标
            t: 插补时间
            start: 本段起始时间
            end: 本段结束时间

        Returns:
            中间目标

        Raises:
            UnsupportedMotionKind: 圆弧或样条运动
        """
        joints = lerp_joints(prev.joints, self.joints, t, start, end) if prev is not None else self.joints

        external = self.external
        if external is not None and prev is not None:
            external = joints[config.ROBOT_AXIS_COUNT:]
            if external.size == 0:
                logger.warning(
                    "Target %d has external axes %s but no joints beyond axis %d, interpolated external is empty",
                    self.schedule.index,
                    self.external.tolist(),
                    config.ROBOT_AXIS_COUNT,
                )

        if self.is_joint_motion:
            return JointTarget.from_target(joints, self, external=external)

        if self.motion is Motion.LINEAR:
            if prev is None:
                plane = self.plane
                configuration = self.configuration
            else:
                plane = lerp_plane(self.prev_plane(prev), self.plane, t, start, end)
                at_boundary = abs(prev.schedule.total_time - t) < config.TIME_TOL
                configuration = prev.configuration if at_boundary else self.configuration
            return CartesianTarget.from_target(
                plane, self, configuration=configuration, motion=Motion.LINEAR, external=external
            )

        raise UnsupportedMotionKind(self.motion)

    def to_target(self) -> Target:
        """还原为用户目标（使用解算后的关节角或参考坐标系平面）。"""
        if self.is_joint_target:
            return JointTarget.from_target(self.joints, self, external=self.external)
        return CartesianTarget.from_target(
            self.plane, self, configuration=self.configuration, motion=self.motion, external=self.external
        )

    def all_joints(self) -> np.ndarray:
        """本体关节角加外部轴，外部轴从第 6 轴开始追加。"""
        if self.external is None:
            return self.joints

        axis_count = config.ROBOT_AXIS_COUNT
        joints = np.zeros(axis_count + len(self.external))
        robot_joints = self.joints[:axis_count]
        joints[: len(robot_joints)] = robot_joints
        joints[axis_count:] = self.external
        return joints

    def absolute_external(self) -> np.ndarray | None:
        """关节数组长度超过本体轴数时取其尾部作为外部轴，否则返回 external。"""
        axis_count = config.ROBOT_AXIS_COUNT
        if len(self.joints) > axis_count:
            return self.joints[axis_count:].copy()
        return self.external

    def __str__(self) -> str:
        return f"Resolved{self.to_target()}"
