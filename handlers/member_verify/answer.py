from typing import Optional

from aiogram import Bot

from manager import manager
from manager.verification import VerificationRegistry

from .config import ACCEPTED_TEXT, WRONG_ANSWER_TEXT

logger = manager.logger


async def check_answer(
    bot: Bot,
    verifications: VerificationRegistry,
    chat_id: int,
    member_id: int,
    text: Optional[str],
) -> Optional[bool]:
    """
    检查待验证成员发来的答案

    返回 True 表示通过，False 表示答错，None 表示与验证无关
    """
    try:
        number = int(text.strip())  # type: ignore
    except (AttributeError, ValueError):
        return None

    # 先只读不取，答错时保留记录
    pending = await verifications.get(member_id)
    if pending is None:
        return None

    prefix = f"chat {chat_id} member {member_id}"

    if number != pending.answer:
        logger.info(f"{prefix} answer {number} is wrong")
        await manager.send(bot, chat_id, WRONG_ANSWER_TEXT)
        return False

    # the deadline may have fired since get()
    if await verifications.take(member_id) is None:
        logger.debug(f"{prefix} is already resolved")
        return None

    logger.info(f"{prefix} is accepted")
    await manager.send(bot, chat_id, ACCEPTED_TEXT)

    return True
