from .manager import Manager, manager

__all__ = ["Manager", "manager"]
