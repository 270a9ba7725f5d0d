"""Emoji short code → Unicode conversion.

The table is the ``short_name`` / ``unified`` pairs from the emoji-data
set Slack uses. It is loaded once at import and never mutated.
"""

import json
from pathlib import Path
from typing import Dict, Iterable, Optional, Tuple

from slackfeed.domain.models import EmojiEntry

DEFAULT_EMOJI_PATH = Path(__file__).resolve().parent.parent / "data" / "emoji.json"


def unified_to_str(unified: str) -> str:
    """``"1F1EF-1F1F5"`` → the two regional indicator characters."""
    return "".join(chr(int(part, 16)) for part in unified.split("-"))


class EmojiTable:
    """Read-only short code lookup. First entry wins on duplicate names."""

    def __init__(self, entries: Iterable[EmojiEntry]):
        self._entries: Tuple[EmojiEntry, ...] = tuple(entries)
        index: Dict[str, EmojiEntry] = {}
        for entry in self._entries:
            index.setdefault(entry.short_name, entry)
        self._index = index

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "EmojiTable":
        raw = json.loads(Path(path or DEFAULT_EMOJI_PATH).read_text(encoding="utf-8"))
        return cls(
            EmojiEntry(short_name=e["short_name"], unified=e["unified"])
            for e in raw
        )

    def __len__(self) -> int:
        return len(self._entries)

    def find(self, short_name: str) -> Optional[EmojiEntry]:
        return self._index.get(short_name)

    def resolve(self, short_name: str) -> str:
        """Return the emoji characters for a short code, or ``""`` if unknown."""
        entry = self.find(short_name)
        if entry is None:
            return ""
        return unified_to_str(entry.unified)


EMOJI_TABLE = EmojiTable.load()


def convert_emoji(short_name: str) -> str:
    return EMOJI_TABLE.resolve(short_name)
