"""
config - 全局容差与常量

所有数值容差集中在此处定义，导入时读取一次环境变量覆盖值。
其余模块通过 ``config.XXX`` 在调用时访问，便于测试中临时修改。
"""

import logging
import os

logger = logging.getLogger(__name__)


def _env_float(name: str, default: float) -> float:
    """读取浮点型环境变量，格式错误时回退到默认值。"""
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning("Ignoring invalid %s=%r, using %s", name, raw, default)
        return default


# 距离容差 (mm)，区分停止点与飞越点
DISTANCE_TOL: float = _env_float("ROBOT_TARGETS_DISTANCE_TOL", 0.004)

# 时间容差 (s)，用于判断插补参数是否落在段边界
TIME_TOL: float = _env_float("ROBOT_TARGETS_TIME_TOL", 0.00001)

# 单位向量容差，构造平面时判断两轴是否共线
UNIT_TOL: float = _env_float("ROBOT_TARGETS_UNIT_TOL", 0.000001)

# 奇异性容差，四点球面拟合中判断主行列式是否为零
SINGULARITY_TOL: float = _env_float("ROBOT_TARGETS_SINGULARITY_TOL", 0.0001)

# 机器人本体轴数，关节数组中超出部分视为外部轴
ROBOT_AXIS_COUNT: int = 6
