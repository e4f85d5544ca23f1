"""Vocabulary-based skill extraction for résumé text.

Text is normalised (lower-cased, punctuation replaced with spaces) and every
vocabulary entry is searched with whole-word matching. Short, ambiguous labels
carry a context rule and only count when the surrounding text backs them up:
"AI" needs an AI phrase somewhere, "Move" and "Aptos" need blockchain wording
on the same line.
"""

import logging
import re
from functools import lru_cache
from typing import Iterable

from services.skill_vocabulary import (
    ANY_CONTEXT,
    DEFAULT_VOCABULARY,
    NEARBY_CONTEXT,
    ContextRule,
    SkillEntry,
)

logger = logging.getLogger(__name__)

# Punctuation that separates words in résumés: ". , / # ! $ % ^ & * ; : { } = - _ ` ~ ( )"
_PUNCTUATION_RE = re.compile(r"[.,/#!$%^&*;:{}=\-_`~()]")
_HORIZONTAL_SPACE_RE = re.compile(r"[ \t]+")

# A hit must not touch a letter or digit on either side
_WORD_START = r"(?<![a-z0-9])"
_WORD_END = r"(?![a-z0-9])"


def normalize_text(text: str) -> str:
    """Lower-case text and replace separator punctuation with single spaces.

    Line breaks are kept so that same-line context rules still see lines.
    """
    lowered = _PUNCTUATION_RE.sub(" ", text.lower())
    return _HORIZONTAL_SPACE_RE.sub(" ", lowered)


@lru_cache(maxsize=512)
def _word_pattern(term: str) -> re.Pattern:
    """Whole-word pattern for a vocabulary term (normalised like the text)."""
    escaped = re.escape(normalize_text(term).strip())
    return re.compile(rf"{_WORD_START}{escaped}{_WORD_END}")


@lru_cache(maxsize=128)
def _phrase_pattern(phrase: str, whole_word: bool) -> re.Pattern:
    """Context phrase pattern; loose phrases may run on ("smart contracts")."""
    escaped = re.escape(normalize_text(phrase).strip())
    suffix = _WORD_END if whole_word else ""
    return re.compile(rf"{_WORD_START}{escaped}{suffix}")


def _has_term(entry: SkillEntry, text: str) -> bool:
    return any(_word_pattern(term).search(text) for term in entry.search_terms)


def _matches_context(entry: SkillEntry, rule: ContextRule, text: str) -> bool:
    if rule.mode == ANY_CONTEXT:
        if _has_term(entry, text):
            return True
        return any(_phrase_pattern(p, True).search(text) for p in rule.phrases)

    if rule.mode == NEARBY_CONTEXT:
        for line in text.split("\n"):
            if not _has_term(entry, line):
                continue
            if any(_phrase_pattern(p, False).search(line) for p in rule.phrases):
                return True
        return False

    raise ValueError(f"Unknown context mode: {rule.mode}")


def _entry_matches(entry: SkillEntry, normalized: str) -> bool:
    if entry.context is not None:
        return _matches_context(entry, entry.context, normalized)
    return _has_term(entry, normalized)


def extract_skill_list(
    text: str, vocabulary: Iterable[SkillEntry] = DEFAULT_VOCABULARY
) -> list[str]:
    """Extract canonical skill labels from text, in vocabulary order."""
    if not text:
        return []

    normalized = normalize_text(text)
    found: list[str] = []
    for entry in vocabulary:
        if entry.label not in found and _entry_matches(entry, normalized):
            found.append(entry.label)

    logger.debug("Extracted %d skills from %d chars", len(found), len(text))
    return found


def extract_skills(
    text: str, vocabulary: Iterable[SkillEntry] = DEFAULT_VOCABULARY
) -> set[str]:
    """Return the set of vocabulary labels found in text.

    Never raises; text without any known skill yields an empty set.
    """
    return set(extract_skill_list(text, vocabulary))


def order_skills(
    skills: Iterable[str], vocabulary: Iterable[SkillEntry] = DEFAULT_VOCABULARY
) -> list[str]:
    """Order a skill collection by vocabulary position.

    Labels outside the vocabulary keep their relative order at the end.
    """
    position = {entry.label.lower(): i for i, entry in enumerate(vocabulary)}
    unique: list[str] = []
    seen: set[str] = set()
    for skill in skills:
        key = skill.lower()
        if key not in seen:
            seen.add(key)
            unique.append(skill)
    return sorted(unique, key=lambda s: position.get(s.lower(), len(position)))
