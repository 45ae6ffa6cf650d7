import asyncio
from dataclasses import dataclass
from typing import Dict, Optional


@dataclass(frozen=True)
class PendingVerification:
    member_id: int
    answer: int  # expected answer of the posted question
    chat_id: int  # chat the question was posted in


class VerificationRegistry:
    """
    待验证成员表，所有读写都在同一把锁内完成

    take() 是唯一可以结束一次验证的方式：
    超时任务和答题处理同时调用时，只有一方能拿到记录
    """

    def __init__(self):
        self._lock = asyncio.Lock()
        self._pending: Dict[int, PendingVerification] = {}

    async def put(self, member_id: int, pending: PendingVerification):
        async with self._lock:
            self._pending[member_id] = pending

    async def get(self, member_id: int) -> Optional[PendingVerification]:
        async with self._lock:
            return self._pending.get(member_id)

    async def take(
        self, member_id: int, expected: Optional[PendingVerification] = None
    ) -> Optional[PendingVerification]:
        """
        read and remove in one step

        expected: only remove this exact entry, a newer one put since is kept
        """
        async with self._lock:
            if expected is not None and self._pending.get(member_id) is not expected:
                return None
            return self._pending.pop(member_id, None)

    def __contains__(self, member_id: int):
        return member_id in self._pending

    def __len__(self):
        return len(self._pending)
