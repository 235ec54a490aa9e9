"""Tag codec: reads and writes classification state stored in transaction notes.

The categorizer keeps no database of its own. Each transaction it touches gets one marker token
appended to its notes (``guessed``, ``not guessed`` or, added by a human, ``override``). Older
releases wrote free-text phrases such as ``" | actual-ai guessed this category"`` instead; those
are recognized here so they can be migrated, but never written.
"""

import re

from pydantic import BaseModel, ConfigDict

LEGACY_NOTES_NOT_GUESSED = "actual-ai could not guess this category"
LEGACY_NOTES_GUESSED = "actual-ai guessed this category"


class TagSet(BaseModel):
    """The three configured marker strings."""

    model_config = ConfigDict(frozen=True)

    guessed: str
    not_guessed: str
    override: str

    def all(self) -> tuple[str, str, str]:
        """Return every marker, in a stable order."""
        return (self.guessed, self.not_guessed, self.override)


class TagCodec:
    """Strip, append and detect marker tokens inside a notes string."""

    def __init__(self, tags: TagSet) -> None:
        """Compile the marker patterns for the given tag set."""
        self.tags = tags
        # Longest first so a tag that prefixes another never wins the alternation.
        alternatives = "|".join(re.escape(tag) for tag in sorted(tags.all(), key=len, reverse=True))
        self._tags_pattern = re.compile(rf"(?:^|\s+)(?:{alternatives})(?=\s|$)")
        # The " | " separator is optional: some notes hold nothing but the phrase.
        self._legacy_pattern = re.compile(
            rf"(?:\s*\|)?\s*(?:{re.escape(LEGACY_NOTES_NOT_GUESSED)}|{re.escape(LEGACY_NOTES_GUESSED)})"
        )

    def strip(self, notes: str | None) -> str:
        """Remove every marker token and legacy phrase from ``notes``."""
        cleared = (notes or "").strip()
        while True:
            stripped = self._legacy_pattern.sub("", self._tags_pattern.sub("", cleared)).strip()
            if stripped == cleared:
                return stripped
            cleared = stripped

    def append(self, notes: str | None, tag: str) -> str:
        """Replace whatever marker ``notes`` carries with ``tag``."""
        return f"{self.strip(notes)} {tag}".strip()

    def has_tag(self, notes: str | None, tag: str) -> bool:
        """Check whether ``tag`` appears in ``notes`` as a whole token."""
        if not notes:
            return False
        return re.search(rf"(?:^|\s){re.escape(tag)}(?=\s|$)", notes) is not None

    def legacy_tag_for(self, notes: str | None) -> str | None:
        """Return the marker that replaces a legacy phrase in ``notes``, if it has one."""
        if not notes:
            return None
        if LEGACY_NOTES_GUESSED in notes:
            return self.tags.guessed
        if LEGACY_NOTES_NOT_GUESSED in notes:
            return self.tags.not_guessed
        return None
