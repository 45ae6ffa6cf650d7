"""
成员验证模块
Member verification module

新成员加入后需在期限内回答一道加法题：
- 答对即通过
- 答错可以重试
- 超时会被移出群组
"""

from .answer import check_answer
from .workflow import expire_member, new_members, verify_member

__all__ = [
    "check_answer",
    "expire_member",
    "new_members",
    "verify_member",
]
