from types import SimpleNamespace

import pytest

from conftest import api_error, sent_texts

from .k import USAGE_TEXT, kick

pytestmark = pytest.mark.asyncio

CHAT = -1001
ADMIN = 1
SPAMMER = 99


def user(id, name):
    return SimpleNamespace(id=id, first_name=name, full_name=name)


def command(reply_to=None, from_user=user(ADMIN, "admin")):
    return SimpleNamespace(
        chat=SimpleNamespace(id=CHAT, title="group", type="supergroup"),
        from_user=from_user,
        message_id=20,
        reply_to_message=reply_to,
    )


def replied(author, new_chat_members=None):
    return SimpleNamespace(from_user=author, new_chat_members=new_chat_members)


@pytest.fixture
def admin_bot(bot):
    bot.get_chat_administrators.return_value = [SimpleNamespace(user=user(ADMIN, "admin"))]
    return bot


async def test_kick_replied_author(admin_bot):
    await kick(command(replied(user(SPAMMER, "spammer"))), admin_bot)

    admin_bot.ban_chat_member.assert_awaited_once_with(CHAT, SPAMMER)
    assert "spammer" in sent_texts(admin_bot)[0]


async def test_kick_without_reply(admin_bot):
    await kick(command(), admin_bot)

    admin_bot.ban_chat_member.assert_not_called()
    assert sent_texts(admin_bot) == [USAGE_TEXT]


async def test_kick_joined_members(admin_bot):
    await kick(command(replied(user(ADMIN, "admin"), [user(7, "a"), user(8, "b")])), admin_bot)

    assert [c.args for c in admin_bot.ban_chat_member.call_args_list] == [(CHAT, 7), (CHAT, 8)]


async def test_kick_by_non_admin(bot):
    bot.get_chat_administrators.return_value = []

    await kick(command(replied(user(SPAMMER, "spammer")), from_user=user(5, "someone")), bot)

    bot.ban_chat_member.assert_not_called()
    bot.send_message.assert_not_called()


async def test_kick_failure(admin_bot):
    admin_bot.ban_chat_member.side_effect = api_error("Bad Request: user is an administrator of the chat")

    await kick(command(replied(user(SPAMMER, "spammer"))), admin_bot)

    admin_bot.send_message.assert_not_called()

