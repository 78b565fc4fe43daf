from .app_settings import DEFAULT_SETTINGS, AppSettings
from .business_input import BusinessInputData
from .enums import Channel, Currency, Language, PillarName, ScoreStatus, ThemeMode

__all__ = [
    "AppSettings",
    "BusinessInputData",
    "Channel",
    "Currency",
    "DEFAULT_SETTINGS",
    "Language",
    "PillarName",
    "ScoreStatus",
    "ThemeMode",
]
