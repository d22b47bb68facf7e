"""Static hashtag tables and advisory text.

These tables are read-only; generators slice them and never modify them.
"""

from types import MappingProxyType
from typing import Final, Mapping

# Predefined hashtags per niche (first 3 are used)
NICHE_HASHTAGS: Final[Mapping[str, tuple[str, ...]]] = MappingProxyType({
    "tech": ("#tech", "#technology", "#gadgets", "#innovation", "#techtips"),
    "gaming": ("#gaming", "#gamer", "#gameplay", "#videogames", "#letsplay"),
    "education": ("#education", "#learning", "#tutorial", "#howto", "#study"),
    "lifestyle": ("#lifestyle", "#life", "#daily", "#vlog", "#motivation"),
    "business": ("#business", "#entrepreneur", "#success", "#money", "#marketing"),
    "fitness": ("#fitness", "#workout", "#gym", "#health", "#exercise"),
    "cooking": ("#cooking", "#recipe", "#food", "#foodie", "#chef"),
    "music": ("#music", "#musician", "#song", "#newmusic", "#musicvideo"),
    "beauty": ("#beauty", "#makeup", "#skincare", "#beautytips", "#tutorial"),
    "travel": ("#travel", "#adventure", "#wanderlust", "#explore", "#vacation"),
})

# Predefined hashtags per content style (first 2 are used)
STYLE_HASHTAGS: Final[Mapping[str, tuple[str, ...]]] = MappingProxyType({
    "tutorial": ("#tutorial", "#howto", "#learn", "#stepbystep"),
    "review": ("#review", "#honest", "#productreview", "#unboxing"),
    "vlog": ("#vlog", "#dailyvlog", "#vlogger", "#dayinmylife"),
    "entertainment": ("#entertainment", "#fun", "#comedy", "#funny"),
    "educational": ("#education", "#educational", "#learning", "#facts"),
    "shorts": ("#shorts", "#youtubeshorts", "#short", "#viral"),
})

VIRAL_HASHTAG: Final[str] = "#viral"

# Suffixes appended to the first audience word
AUDIENCE_MODIFIERS: Final[tuple[str, ...]] = ("for", "tips")

ABOVE_TITLE_NOTE: Final[str] = "These 3 hashtags will appear above your video title"
IN_DESCRIPTION_NOTE: Final[str] = "Add these to your description for additional discovery"

USAGE_TIPS: Final[tuple[str, ...]] = (
    "First 3 hashtags appear above your video title - make them count!",
    "Use a mix of popular and niche-specific hashtags",
    "Avoid overused hashtags like #fyp unless relevant",
    "Hashtags in the title can look spammy - keep them in description",
    "Update hashtags based on trending topics for better discovery",
    "YouTube allows up to 15 hashtags, but 3-5 is optimal",
)
