from aiogram import Bot, types
from aiogram.filters import Command

from manager import manager

USAGE_TEXT = "请回复一条消息以踢出该用户。\nReply to a message to kick its author."

logger = manager.logger


@manager.register("message", Command("kick", "k", ignore_case=True, ignore_mention=True))
async def kick(msg: types.Message, bot: Bot):
    """踢人功能"""
    chat = msg.chat
    user = msg.from_user
    prefix = f"chat {chat.id}({chat.title}) msg {msg.message_id}"

    if not user:
        logger.warning(f"{prefix} message without user, ignored")
        return

    # check permission
    if not await manager.is_admin(bot, chat, user):
        logger.warning(f"{prefix} user {user.id}({user.first_name}) is not admin")
        return

    msg_reply = msg.reply_to_message
    if not msg_reply or not msg_reply.from_user:
        logger.info(f"{prefix} no reply message")
        await manager.send(bot, chat.id, USAGE_TEXT)
        return

    # 如果回复的是一个新加入信息，则直接踢掉用户
    if msg_reply.new_chat_members:
        for member in msg_reply.new_chat_members:
            await kick_member(bot, chat, msg, user, member)

        return

    await kick_member(bot, chat, msg, user, msg_reply.from_user)


async def kick_member(bot: Bot, chat: types.Chat, msg: types.Message, administrator: types.User, member: types.User):
    """
    从 chat 踢掉对应的成员
    """
    prefix = f"chat {chat.id}({chat.title}) msg {msg.message_id}"

    if not await manager.ban(bot, chat.id, member.id):
        logger.warning(f"{prefix} user {member.id}({member.first_name}) kick failed, maybe he is administrator")
        return False

    logger.info(f"{prefix} user {member.id}({member.first_name}) is kicked")
    return await manager.send(
        bot,
        chat.id,
        f"{manager.username(member)} 被剔除/is Kicked by {manager.username(administrator)}",
        disable_web_page_preview=True,
        disable_notification=True,
    )
