import os.path
import sys
from configparser import ConfigParser
from functools import wraps
from typing import Union

import loguru
from aiogram import Bot, Dispatcher, types
from aiogram.exceptions import TelegramAPIError, TelegramBadRequest

from .settings import SETTINGS_TEMPLATE
from .verification import VerificationRegistry

logger = loguru.logger


class Manager:
    """管理模块"""

    # aiogram instance
    bot: Bot
    dp: Dispatcher = Dispatcher()  # static dispatcher

    # global config
    config = ConfigParser()

    # routes
    handlers = []

    # members waiting for the answer, shared by all handlers
    verifications = VerificationRegistry()

    logger = logger

    def setup(self):
        self.load_config()

        self.setup_logger()

        token = self.config["telegram"]["token"]
        if not token:
            logger.error("telegram token is missing")
            sys.exit(1)

        self.bot = Bot(token)
        logger.info("bot is setup")

        self.setup_handlers()

    def load_config(self):
        """加载 main.ini，默认会配置相关代码"""
        config = self.config

        # 设置默认模板
        for key, section in SETTINGS_TEMPLATE.items():
            config.setdefault(key, section)

        # 从文件读取
        if os.path.isfile("main.ini"):
            try:
                with open("main.ini", "r", encoding="utf-8") as f:
                    config.read_file(f)

                logger.info("settings is loaded from main.ini")
            except IOError:
                logger.warning("settings file main.ini is not readable, defaults are used")

    def setup_logger(self):
        """设置logger"""
        logger = self.logger

        if self.config["default"].getboolean("debug", False):
            logger.remove()
            logger.add(sys.stderr, level=10)
            logger.debug("logger is setup with debug level")
            return

        logger.remove()
        logger.add(sys.stderr, level=20)
        logger.info("logger is setup")

    def setup_handlers(self):
        """
        设置事件处理
        """
        for func, type_name, args, kwargs in self.handlers:
            observer = self.dp.observers.get(type_name, None)
            if not observer or not hasattr(observer, "register"):
                logger.warning(f"dispatcher:unknown type {type_name}")
                continue

            method = observer.register
            method(func, *args, **kwargs)
            logger.info(f"dispatcher {func.__name__}:{observer.event_name}.{method.__name__}({args}, {kwargs})")

        # handlers receive it as the `verifications` argument
        self.dp["verifications"] = self.verifications

        self.dp.errors.register(self._error_handler)
        logger.info("dispatcher errors handler is setup")

    def register(self, type_name, *args, **kwargs):
        """
        延迟注册到 Dispatcher
        """

        def wrapper(func):
            self.handlers.append((func, type_name, args, kwargs))

            @wraps(func)
            async def _wrapper(*args, **kwargs):
                return await func(*args, **kwargs)

            return _wrapper

        return wrapper

    async def start(self):
        if "admin" in self.config["telegram"]:
            admin = self.config["telegram"]["admin"]
            await self.send(self.bot, admin, "bot is started")

        await self.dp.start_polling(self.bot)

    def username(self, _user: Union[types.ChatMember, types.User]):
        """获取用户名"""

        if isinstance(_user, types.ChatMember):
            return _user.user.full_name  # type: ignore

        return _user.full_name

    async def is_admin(self, bot: Bot, chat: types.Chat, member: types.User):
        try:
            admins = await bot.get_chat_administrators(chat.id)
            return len([i for i in admins if i.user.id == member.id]) > 0
        except TelegramAPIError as e:
            logger.error(f"chat {chat.id} member {member.id} check failed:{e}")

        return False

    async def send(self, bot: Bot, chat: Union[int, str], msg: str, **kwargs):
        """
        发送消息
        chat: chat with msg
        msg: msg will be sent
        """
        try:
            await bot.send_message(chat, msg, **kwargs)
            logger.info(f"chat {chat} message {msg!r} sent")
        except TelegramAPIError as e:
            logger.error(f"chat {chat} message {msg!r} send error: {e}")
            return False

        return True

    async def delete_message(self, bot: Bot, chat: int, msg: int):
        """
        删除消息
        chat: chat with msg
        msg: msg will be deleted
        """
        try:
            await bot.delete_message(chat, msg)
            logger.info(f"chat {chat} message {msg} deleted")
        except TelegramBadRequest:
            logger.warning(f"chat {chat} message {msg} not found")
            return False
        except TelegramAPIError as e:
            logger.warning(f"chat {chat} message {msg} delete failed: {e}")
            return False

        return True

    async def ban(self, bot: Bot, chat: int, member: int):
        """
        从 chat 踢掉对应的成员，剔除以后就在黑名单中
        """
        try:
            await bot.ban_chat_member(chat, member)
            logger.info(f"chat {chat} member {member} is banned")
        except TelegramAPIError as e:
            logger.error(f"chat {chat} member {member} ban failed: {e}")
            return False

        return True

    async def _error_handler(self, event: types.ErrorEvent):
        """
        处理器内未捕获的异常只记录，不影响后续更新
        """
        logger.opt(exception=event.exception).error(f"update {event.update.update_id} handler error: {event.exception}")
        return True


manager = Manager()
