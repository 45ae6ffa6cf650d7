# commands first, the text handler would take them otherwise
from .commands import kick
from .member_verify import new_members
from .message_sent import message_sent

__all__ = ["kick", "new_members", "message_sent"]
