"""Configuration package."""

from monadpay.config.settings import Settings, settings


__all__ = [
    "Settings",
    "settings",
]
