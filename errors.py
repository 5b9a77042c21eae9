"""
errors - 异常类型

结构性误用（重复包装已解算目标、插补不支持的运动类型）以异常形式抛给调用方；
数值退化（四点共面、插补区间长度为零）在本地回退处理，不在此定义异常。
"""


class TargetError(Exception):
    """目标相关错误的基类。"""


class InvalidTargetConversion(TargetError, TypeError):
    """试图把已解算的 ResolvedProgramTarget 再次包装为新的解算目标。"""

    def __init__(self, message: str | None = None):
        super().__init__(
            message
            or "cannot wrap an already-resolved target, duplicate it with dataclasses.replace instead"
        )


class UnsupportedMotionKind(TargetError, ValueError):
    """插补路径只支持关节运动和直线运动。"""

    def __init__(self, motion):
        self.motion = motion
        name = getattr(motion, "name", str(motion))
        super().__init__(f"motion kind {name} cannot be interpolated, only JOINT and LINEAR are supported")
