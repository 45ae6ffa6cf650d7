"""
新成员验证流程
Member verification workflow

每个新成员：发送题目 -> 登记待验证 -> 启动超时任务
超时任务和答题处理谁先从登记表 take 到记录，谁就决定结果
"""

import asyncio
from typing import Optional, Set

from aiogram import Bot, F, types

from manager import manager
from manager.verification import PendingVerification, VerificationRegistry

from .challenge import generate_challenge
from .config import QUESTION_TEXT, SUPPORT_GROUP_TYPES, TIMEOUT_TEXT, verify_timeout

logger = manager.logger

# running deadline tasks, referenced until they finish
_deadlines: Set[asyncio.Task] = set()


@manager.register("message", F.new_chat_members)
async def new_members(msg: types.Message, bot: Bot, verifications: VerificationRegistry):
    chat = msg.chat
    prefix = f"chat {chat.id}({chat.title}) msg {msg.message_id}"

    if chat.type not in SUPPORT_GROUP_TYPES:
        return

    members = [i for i in msg.new_chat_members or [] if not i.is_bot]
    if not members:
        logger.debug(f"{prefix} no member to verify")
        return

    logger.info(f"{prefix} new members:{[i.id for i in members]}")

    results = await asyncio.gather(
        *[verify_member(bot, verifications, chat.id, i.id, manager.username(i)) for i in members],
        return_exceptions=True,
    )
    for member, result in zip(members, results):
        if isinstance(result, Exception):
            logger.opt(exception=result).error(f"{prefix} member {member.id} verification error: {result}")


async def verify_member(
    bot: Bot,
    verifications: VerificationRegistry,
    chat_id: int,
    member_id: int,
    member_name: str,
    timeout: Optional[float] = None,
) -> bool:
    """
    向成员发出题目并登记，题目发送失败则放弃本次验证
    """
    if timeout is None:
        timeout = verify_timeout()

    prefix = f"chat {chat_id} member {member_id}({member_name})"

    challenge = generate_challenge()
    content = QUESTION_TEXT % {"name": member_name, "question": challenge.question, "seconds": timeout}

    if not await manager.send(bot, chat_id, content):
        logger.error(f"{prefix} question is not sent, verification is aborted")
        return False

    pending = PendingVerification(member_id, challenge.answer, chat_id)
    await verifications.put(member_id, pending)
    logger.info(f"{prefix} is pending, question {challenge.question} expires after {timeout}s")

    task = asyncio.create_task(expire_member(bot, verifications, pending, member_name, timeout))
    _deadlines.add(task)
    task.add_done_callback(_deadline_done)

    return True


async def expire_member(
    bot: Bot,
    verifications: VerificationRegistry,
    pending: PendingVerification,
    member_name: str,
    delay: float,
) -> bool:
    """
    到期后仍未作答的成员会被移出群组

    只处理本次加入登记的记录，重新加入后的新记录由新的任务负责

    返回 True 表示本次超时处理了该成员
    """
    await asyncio.sleep(delay)

    member_id = pending.member_id
    prefix = f"chat {pending.chat_id} member {member_id}({member_name})"

    if await verifications.take(member_id, pending) is None:
        logger.debug(f"{prefix} is already resolved")
        return False

    # the entry is consumed, a failed ban is not retried
    if not await manager.ban(bot, pending.chat_id, member_id):
        logger.error(f"{prefix} is timeout but ban failed")
        return False

    logger.info(f"{prefix} is kicked by timeout")
    await manager.send(bot, pending.chat_id, TIMEOUT_TEXT % {"name": member_name})

    return True


def _deadline_done(task: asyncio.Task):
    _deadlines.discard(task)

    if task.cancelled():
        return

    if exc := task.exception():
        logger.opt(exception=exc).error(f"deadline task error: {exc}")
