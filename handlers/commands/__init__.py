from .k import kick
