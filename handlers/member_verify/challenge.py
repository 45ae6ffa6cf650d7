import random
from dataclasses import dataclass
from typing import Optional

from .config import operand_range


@dataclass(frozen=True)
class Challenge:
    a: int
    b: int

    @property
    def answer(self) -> int:
        return self.a + self.b

    @property
    def question(self) -> str:
        return f"{self.a} + {self.b}"


def generate_challenge(low: Optional[int] = None, high: Optional[int] = None) -> Challenge:
    """
    生成一道加法题，两个数字在 [low, high] 内独立均匀取值
    """
    if low is None or high is None:
        default_low, default_high = operand_range()
        low = default_low if low is None else low
        high = default_high if high is None else high

    return Challenge(random.randint(low, high), random.randint(low, high))
