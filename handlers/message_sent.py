from aiogram import Bot, F, types

from manager import manager
from manager.verification import VerificationRegistry

from .content_filter import filter_message
from .member_verify import check_answer

logger = manager.logger


@manager.register("message", F.text, F.from_user)
async def message_sent(msg: types.Message, bot: Bot, verifications: VerificationRegistry):
    """答题检查和违规词检测都会看到每条文字消息"""
    chat = msg.chat
    member = msg.from_user

    logger.debug(f"[message_sent]chat {chat.id}({chat.title}) msg {msg.message_id} user {member.id}")

    await check_answer(bot, verifications, chat.id, member.id, msg.text)
    await filter_message(bot, chat.id, msg.message_id, msg.text)
