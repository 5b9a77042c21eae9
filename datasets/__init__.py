"""
datasets - 示例数据集

包含:
- tcp_calibration: 四点 TCP 标定的法兰平面
- pick_and_place: 带录制解算结果的取放程序
"""

from .pick_and_place import PickAndPlaceSetup, pick_and_place_program
from .tcp_calibration import TcpCalibrationSetup, tcp_calibration_poses

__all__ = [
    "tcp_calibration_poses",
    "TcpCalibrationSetup",
    "pick_and_place_program",
    "PickAndPlaceSetup",
]
