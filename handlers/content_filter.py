"""
违规词检测模块
Banned words detection module
"""

from typing import List, Optional, Tuple

from aiogram import Bot

from manager import manager

DEFAULT_WORDS = "广告,垃圾,恶意链接"
NOTICE_TEXT = "检测到违规内容，已删除。\nThe message contains banned content and was deleted."

logger = manager.logger


def load_banned_words() -> List[str]:
    """
    从配置中加载违规词列表
    Load banned words from configuration
    """
    config = manager.config

    if not config.getboolean("filter", "enabled", fallback=True):
        return []

    words = config.get("filter", "words", fallback=DEFAULT_WORDS)
    return [word.strip() for word in words.split(",") if word.strip()]


def check_banned(text: Optional[str]) -> Tuple[bool, Optional[str]]:
    """
    检查文本是否包含违规词，不区分大小写

    Returns:
        Tuple[bool, Optional[str]]: 是否命中, 命中的词
    """
    if not text:
        return False, None

    text_lower = text.lower()
    for word in load_banned_words():
        if word.lower() in text_lower:
            return True, word

    return False, None


async def filter_message(bot: Bot, chat_id: int, message_id: int, text: Optional[str]) -> bool:
    """
    删除包含违规词的消息并提示，返回是否已删除
    """
    matched, word = check_banned(text)
    if not matched:
        return False

    prefix = f"chat {chat_id} msg {message_id}"
    logger.info(f"{prefix} banned word detected: {word}")

    if not await manager.delete_message(bot, chat_id, message_id):
        return False

    await manager.send(bot, chat_id, NOTICE_TEXT)
    return True
