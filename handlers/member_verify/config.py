"""
成员验证模块配置和常量
Member verification module configuration and constants
"""

from typing import List

from manager import manager

# 支持的群组类型
SUPPORT_GROUP_TYPES: List[str] = ["supergroup", "group"]

# 回答期限 (秒)
VERIFY_TIMEOUT = 300

# 题目数字范围，包含两端
OPERAND_MIN = 1
OPERAND_MAX = 10

QUESTION_TEXT = (
    "欢迎 %(name)s！请回答验证问题：%(question)s = ?\n（%(seconds)d秒内回答正确即可留在群组）\n\n"
    "Welcome %(name)s! Please answer: %(question)s = ?\n"
    "Send the correct number within %(seconds)d seconds to stay in the group."
)
ACCEPTED_TEXT = "验证通过，欢迎加入群组！\nVerification passed, welcome to the group!"
WRONG_ANSWER_TEXT = "答案错误，请重新尝试。\nWrong answer, please try again."
TIMEOUT_TEXT = "用户 %(name)s 验证超时，已被移出群组\n%(name)s did not answer in time and was removed."


def verify_timeout() -> int:
    return manager.config.getint("verify", "timeout", fallback=VERIFY_TIMEOUT)


def operand_range():
    config = manager.config
    return (
        config.getint("verify", "operand_min", fallback=OPERAND_MIN),
        config.getint("verify", "operand_max", fallback=OPERAND_MAX),
    )
