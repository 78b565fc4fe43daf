from enum import Enum


class Channel(str, Enum):
    PHONE = "phone"
    EMAIL = "email"
    LIVE_CHAT = "live_chat"
    SOCIAL_MEDIA = "social_media"
    SMS = "sms"


class PillarName(str, Enum):
    """The five scored pillars, in result order."""

    DATABASE = "database"
    REPUTATION = "reputation"
    LEAD_CAPTURE = "lead_capture"
    OMNICHANNEL = "omnichannel"
    WEBSITE = "website"


class ScoreStatus(str, Enum):
    CRITICAL = "critical"
    NEEDS_IMPROVEMENT = "needs_improvement"
    GOOD = "good"
    EXCELLENT = "excellent"


class Currency(str, Enum):
    USD = "USD"
    EUR = "EUR"
    GBP = "GBP"
    CHF = "CHF"


class Language(str, Enum):
    DE = "de"
    EN = "en"


class ThemeMode(str, Enum):
    LIGHT = "light"
    DARK = "dark"
    AUTO = "auto"
