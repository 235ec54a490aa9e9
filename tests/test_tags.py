"""Tests for the notes tag codec."""

import pytest

from ledger_ai.core.tags import LEGACY_NOTES_GUESSED, LEGACY_NOTES_NOT_GUESSED, TagCodec, TagSet

from .conftest import GUESSED, NOT_GUESSED, OVERRIDE

NOTES_SAMPLES = [
    None,
    "",
    "lunch",
    f"lunch {GUESSED}",
    f"{NOT_GUESSED}",
    f"lunch {GUESSED} {OVERRIDE}",
    f"lunch | {LEGACY_NOTES_GUESSED}",
    f"lunch | {LEGACY_NOTES_NOT_GUESSED} {GUESSED}",
    f"  {GUESSED}   {GUESSED} ",
    f"{GUESSED}-ish notes",
    f"lunch {NOT_GUESSED}{GUESSED}",
]


@pytest.mark.parametrize("notes", NOTES_SAMPLES)
def test_strip_is_idempotent(codec: TagCodec, notes: str | None) -> None:
    """Stripping twice gives the same result as stripping once."""
    once = codec.strip(notes)
    if codec.strip(once) != once:
        msg = f"strip is not idempotent for {notes!r}: {once!r} -> {codec.strip(once)!r}"
        raise AssertionError(msg)


def test_strip_removes_tags_and_legacy_phrases(codec: TagCodec) -> None:
    """Tags and legacy phrases disappear, the user's own text stays."""
    cases = {
        f"lunch {GUESSED}": "lunch",
        f"lunch {NOT_GUESSED}": "lunch",
        f"lunch {GUESSED} {OVERRIDE}": "lunch",
        f"lunch | {LEGACY_NOTES_GUESSED}": "lunch",
        f"lunch | {LEGACY_NOTES_NOT_GUESSED}": "lunch",
        f"lunch {LEGACY_NOTES_GUESSED}": "lunch",
        LEGACY_NOTES_NOT_GUESSED: "",
        GUESSED: "",
        None: "",
    }
    for notes, expected in cases.items():
        if codec.strip(notes) != expected:
            msg = f"strip({notes!r}) returned {codec.strip(notes)!r}, expected {expected!r}"
            raise AssertionError(msg)


def test_strip_matches_whole_tokens_only(codec: TagCodec) -> None:
    """A tag that is a prefix of another word is left alone."""
    notes = f"{GUESSED}-ish notes"
    if codec.strip(notes) != notes:
        msg = f"Expected notes untouched, got {codec.strip(notes)!r}"
        raise AssertionError(msg)


@pytest.mark.parametrize("notes", NOTES_SAMPLES)
def test_append_keeps_a_single_tag(codec: TagCodec, notes: str | None) -> None:
    """After append only the appended marker is present."""
    all_tags = (GUESSED, NOT_GUESSED, OVERRIDE)
    for tag in all_tags:
        result = codec.append(notes, tag)
        if not result.endswith(tag):
            msg = f"append({notes!r}, {tag!r}) = {result!r} does not end with the tag"
            raise AssertionError(msg)
        for other in all_tags:
            if other != tag and codec.has_tag(result, other):
                msg = f"append({notes!r}, {tag!r}) = {result!r} still carries {other!r}"
                raise AssertionError(msg)


def test_append_to_empty_notes(codec: TagCodec) -> None:
    """Appending to missing notes yields just the tag."""
    if codec.append(None, GUESSED) != GUESSED:
        msg = f"Expected {GUESSED!r}, got {codec.append(None, GUESSED)!r}"
        raise AssertionError(msg)


def test_has_tag_distinguishes_prefix_tags(codec: TagCodec) -> None:
    """The guessed tag is not found inside the not-guessed tag."""
    if codec.has_tag(f"coffee {NOT_GUESSED}", GUESSED):
        msg = "GUESSED tag should not match inside NOT_GUESSED"
        raise AssertionError(msg)
    if not codec.has_tag(f"coffee {NOT_GUESSED}", NOT_GUESSED):
        msg = "NOT_GUESSED tag should be found"
        raise AssertionError(msg)


def test_legacy_tag_for(codec: TagCodec) -> None:
    """Legacy phrases map to the matching tag, guessed wins when both are present."""
    cases = {
        f"x | {LEGACY_NOTES_GUESSED}": GUESSED,
        f"x | {LEGACY_NOTES_NOT_GUESSED}": NOT_GUESSED,
        f"x | {LEGACY_NOTES_NOT_GUESSED} | {LEGACY_NOTES_GUESSED}": GUESSED,
        "plain notes": None,
        None: None,
    }
    for notes, expected in cases.items():
        if codec.legacy_tag_for(notes) != expected:
            msg = f"legacy_tag_for({notes!r}) returned {codec.legacy_tag_for(notes)!r}, expected {expected!r}"
            raise AssertionError(msg)


def test_special_characters_in_tags_are_escaped() -> None:
    """Regex metacharacters in tags are matched literally."""
    codec = TagCodec(TagSet(guessed="[ai]", not_guessed="(ai?)", override="ai+"))
    if codec.strip("rent [ai]") != "rent":
        msg = f"Expected 'rent', got {codec.strip('rent [ai]')!r}"
        raise AssertionError(msg)
    if codec.strip("rent a") != "rent a":
        msg = f"Expected 'rent a' untouched, got {codec.strip('rent a')!r}"
        raise AssertionError(msg)
