# modules/area_matcher.py - locality pre-split + exact/fuzzy match against the gazetteer
from __future__ import annotations

import logging
from typing import Iterable, Optional, Set

from property_formatter.modules.vocabulary import Vocabulary, default_vocabulary

logger = logging.getLogger(__name__)

FUZZY_THRESHOLD = 0.8


def _char_set(s: str) -> Set[str]:
    return set((s or "").lower())


def jaccard(a: Iterable[str], b: Iterable[str]) -> float:
    A, B = set(a), set(b)
    union = A | B
    if not union:
        return 0.0
    return len(A & B) / len(union)


def char_similarity(a: str, b: str) -> float:
    """Jaccard over the case-folded character sets; order and length are ignored."""
    return jaccard(_char_set(a), _char_set(b))


def split_area_lines(text: str, vocab: Optional[Vocabulary] = None) -> str:
    """
    "Baner Pan card club road" -> "Baner\\nPan card club road".
    Areas are tried in gazetteer order, so "Baner Mahalunge Rd" becomes "Baner\\nMahalunge Rd".
    """
    vocab = vocab or default_vocabulary()
    if not text:
        return text or ""
    return vocab.area_split_pattern.sub(r"\1\n\2", text)


def fuzzy_area(line: str, vocab: Optional[Vocabulary] = None) -> Optional[str]:
    vocab = vocab or default_vocabulary()
    best, best_score = None, 0.0
    for area in vocab.areas:
        score = char_similarity(line, area)
        # ties keep the earlier entry
        if score > FUZZY_THRESHOLD and score > best_score:
            best, best_score = area, score
    if best:
        logger.debug("fuzzy area %r -> %s (%.3f)", line, best, best_score)
    return best


def match_area(line: str, vocab: Optional[Vocabulary] = None) -> Optional[str]:
    """Canonical gazetteer spelling for `line`, exact first, then fuzzy; None when neither hits."""
    vocab = vocab or default_vocabulary()
    candidate = (line or "").strip()
    if not candidate:
        return None
    if vocab.area_exact_pattern.match(candidate):
        return vocab.canonical_area(candidate)
    return fuzzy_area(candidate, vocab)
