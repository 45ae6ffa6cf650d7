"""
Shared fixtures: a mocked bot, a fresh registry and an isolated config.
"""

import asyncio
from configparser import ConfigParser
from unittest.mock import AsyncMock, MagicMock

import pytest
from aiogram.exceptions import TelegramBadRequest

from handlers.member_verify import workflow
from manager import manager
from manager.verification import VerificationRegistry


def api_error(message="Bad Request: chat not found"):
    return TelegramBadRequest(method=MagicMock(), message=message)


def sent_texts(bot):
    return [c.args[1] for c in bot.send_message.call_args_list]


@pytest.fixture
def bot():
    return AsyncMock()


@pytest.fixture
def verifications():
    return VerificationRegistry()


@pytest.fixture(autouse=True)
def config(monkeypatch):
    """every test starts from the built-in defaults"""
    config = ConfigParser()
    monkeypatch.setattr(manager, "config", config)
    return config


@pytest.fixture
async def deadlines():
    yield workflow._deadlines

    tasks = list(workflow._deadlines)
    for task in tasks:
        task.cancel()
    await asyncio.gather(*tasks, return_exceptions=True)
