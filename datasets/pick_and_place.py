"""
pick_and_place - 取放程序示例数据

数据说明:
一个五目标的取放程序，工件坐标系位于工作台上并绕 Z 轴旋转 90°:
    0. 关节目标: 回零位
    1. 笛卡尔目标 (JOINT): 抓取点上方接近
    2. 笛卡尔目标 (LINEAR): 下降抓取
    3. 笛卡尔目标 (LINEAR): 提升
    4. 笛卡尔目标 (LINEAR): 平移到放置点并绕工具 Z 轴旋转 90°

每个目标附带一份录制的运动学解算结果（模拟外部解算器输出），
第 6 轴在 ±180° 附近来回，用于检验关节角展开。
"""

from dataclasses import dataclass

import numpy as np

from ..core.attributes import Frame, Speed, Tool, Zone
from ..core.kinematics import KinematicSolution
from ..core.targets import CartesianTarget, JointTarget, Motion, RobotConfiguration, Target
from ..utils.geometry import Plane, plane_to_plane


@dataclass
class PickAndPlaceSetup:
    """取放场景的属性对象"""

    tool: Tool
    frame: Frame
    speed: Speed
    zone: Zone


def _down(origin) -> Plane:
    """Z 轴竖直向下的平面。"""
    return Plane(np.array(origin, dtype=float), np.array([1.0, 0.0, 0.0]), np.array([0.0, -1.0, 0.0]))


# 录制的关节角 (deg)，与目标一一对应
_RECORDED_JOINTS_DEG = np.array(
    [
        [0.0, 90.0, 0.0, 0.0, 0.0, 0.0],
        [12.0, 65.0, 20.0, 0.0, 95.0, 170.0],
        [12.0, 72.0, 28.0, 0.0, 80.0, 178.0],
        [12.0, 65.0, 20.0, 0.0, 95.0, -178.0],
        [-8.0, 60.0, 25.0, 0.0, 95.0, -92.0],
    ],
    dtype=np.float64,
)

# 零位时的法兰世界坐标
_HOME_ORIGIN_MM = (300.0, 0.0, 600.0)


def pick_and_place_program() -> tuple[list[Target], list[KinematicSolution], PickAndPlaceSetup]:
    """
    获取取放程序。

    Returns:
        targets: 5 个用户目标
        solutions: 与目标一一对应的运动学解算结果
        setup: 场景属性对象
    """
    tool = Tool(Plane([0.0, 0.0, 120.0], [1.0, 0.0, 0.0], [0.0, 1.0, 0.0]), "Gripper", weight=1.5)
    frame_plane = Plane([400.0, -200.0, 0.0], [0.0, 1.0, 0.0], [-1.0, 0.0, 0.0])
    frame = Frame(frame_plane, name="Workbench")
    speed = Speed(250.0, np.pi / 2, "Transfer")
    zone = Zone(5.0, "Blend5")
    setup = PickAndPlaceSetup(tool, frame, speed, zone)

    attributes = dict(tool=tool, frame=frame, speed=speed, zone=zone)
    place = _down([200.0, 0.0, 50.0]).rotate(np.pi / 2, [0.0, 0.0, 1.0])
    configuration = RobotConfiguration.NONE

    targets: list[Target] = [
        JointTarget(np.radians(_RECORDED_JOINTS_DEG[0]), **attributes),
        CartesianTarget(_down([0.0, 0.0, 100.0]), configuration, Motion.JOINT, **attributes),
        CartesianTarget(_down([0.0, 0.0, 0.0]), None, Motion.LINEAR, **attributes),
        CartesianTarget(_down([0.0, 0.0, 100.0]), None, Motion.LINEAR, **attributes),
        CartesianTarget(place, None, Motion.LINEAR, **attributes),
    ]

    to_world = plane_to_plane(Plane.world_xy(), frame_plane)
    solutions = []
    for target, joints_deg in zip(targets, _RECORDED_JOINTS_DEG):
        if isinstance(target, CartesianTarget):
            tcp_plane = target.plane.transform(to_world)
        else:
            tcp_plane = _down(_HOME_ORIGIN_MM)
        solutions.append(KinematicSolution((tcp_plane,), np.radians(joints_deg), configuration))

    return targets, solutions, setup


if __name__ == "__main__":
    targets, solutions, setup = pick_and_place_program()
    print("=== 取放程序 ===")
    for target, solution in zip(targets, solutions):
        print(f"{target}")
        print(f"  TCP 世界坐标: {np.round(solution.tcp_plane.origin, 3)}")
