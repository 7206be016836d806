# resources/__init__.py

from . import (
    application,
    lld,
    proxy,
    user,
    usergroup,
)

__all__ = [
    "application",
    "lld",
    "proxy",
    "user",
    "usergroup",
]
