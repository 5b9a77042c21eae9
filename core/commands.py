"""
commands - 目标附带的指令负载

指令本身对本库是不透明对象，由代码生成流程解释。
目标被解算时，其指令统一包装为扁平的 CommandGroup。
"""

from dataclasses import dataclass
from typing import Any, Iterator


@dataclass(frozen=True)
class CommandGroup:
    """有序指令组，可以嵌套；flatten() 展开所有嵌套组。"""

    commands: tuple[Any, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "commands", tuple(self.commands))

    def flatten(self) -> tuple[Any, ...]:
        flat = []
        for command in self.commands:
            if isinstance(command, CommandGroup):
                flat.extend(command.flatten())
            else:
                flat.append(command)
        return tuple(flat)

    @classmethod
    def wrap(cls, command: Any) -> "CommandGroup | None":
        """把单条指令或嵌套组包装为扁平组；None 保持为 None。"""
        if command is None:
            return None
        if isinstance(command, CommandGroup):
            return cls(command.flatten())
        return cls((command,))

    def __iter__(self) -> Iterator[Any]:
        return iter(self.commands)

    def __len__(self) -> int:
        return len(self.commands)
