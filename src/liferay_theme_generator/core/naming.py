"""Name derivations for theme identifiers.

Words are letter runs in any script plus digit runs; letter runs are
split further on case changes (``myTheme``, ``XMLTheme``).
"""

from __future__ import annotations

import re
import unicodedata

_WORD_RE = re.compile(r"[^\W\d_]+|\d+")

# letters NFKD leaves alone
_LIGATURES = str.maketrans({
    "ß": "ss",
    "ẞ": "Ss",
    "æ": "ae",
    "Æ": "Ae",
    "œ": "oe",
    "Œ": "Oe",
    "ø": "o",
    "Ø": "O",
    "đ": "d",
    "Đ": "D",
    "ð": "d",
    "Ð": "D",
    "ł": "l",
    "Ł": "L",
    "þ": "th",
    "Þ": "Th",
})


def deburr(text: str) -> str:
    """Fold Latin letters to ASCII: ``"Thème"`` → ``"Theme"``, ``"Straße"`` → ``"Strasse"``."""
    decomposed = unicodedata.normalize("NFKD", text.translate(_LIGATURES))
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def _split_case(word: str) -> list[str]:
    parts: list[str] = []
    start = 0
    for i in range(1, len(word)):
        prev, cur = word[i - 1], word[i]
        nxt = word[i + 1] if i + 1 < len(word) else ""
        lower_to_upper = not prev.isupper() and cur.isupper()
        acronym_end = prev.isupper() and cur.isupper() and nxt.islower()
        if lower_to_upper or acronym_end:
            parts.append(word[start:i])
            start = i
    parts.append(word[start:])
    return parts


def kebab_case(text: str) -> str:
    """``"My Liferay Theme"`` → ``"my-liferay-theme"``; camelCase is split too."""
    words: list[str] = []
    for run in _WORD_RE.findall(deburr(text)):
        words.extend(_split_case(run))
    return "-".join(word.lower() for word in words)


def default_theme_id(theme_name: str | None) -> str:
    return kebab_case(theme_name or "")
