"""Lexical heuristics for agreement and topic detection.

Deliberately coarse: substring matching against a fixed vocabulary and
stop-word filtering. No negation handling, stemming, or semantic analysis.
"""

from __future__ import annotations

import re

AGREEMENT_MARKERS = (
    "agree",
    "yes",
    "absolutely",
    "exactly",
    "correct",
    "right",
    "support",
    "concur",
    "same",
    "also",
    "too",
    "likewise",
    "indeed",
    "precisely",
    "definitely",
)

STOP_WORDS = frozenset(
    {
        "this", "that", "these", "those", "with", "from", "about",
        "have", "which", "would", "could", "should", "what", "when",
        "where", "their", "there", "here", "they", "them", "then",
        "than", "your", "will", "been", "were", "because", "some",
        "very", "just", "make", "like", "even", "also", "into",
        "only", "much", "such", "more", "most", "other", "well",
    }
)  # fmt: skip

FALLBACK_TOPIC = "Shared perspective"

MIN_TERM_LENGTH = 4
MAX_KEY_TERMS = 5

_NON_WORD = re.compile(r"\W+", re.ASCII)


def detect_agreement(first_content: str, second_content: str) -> bool:
    """Check whether the second message agrees with the first.

    Only the reply is inspected: any agreement marker appearing anywhere in
    it (case-insensitive) counts, so "I don't agree" is still an agreement.

    Args:
        first_content: Content of the earlier message (unused)
        second_content: Content of the reply

    Returns:
        True if the reply contains an agreement marker
    """
    lowered = second_content.lower()
    return any(marker in lowered for marker in AGREEMENT_MARKERS)


def extract_key_terms(content: str) -> list[str]:
    """Extract up to five salient terms from a message, in order of appearance.

    Args:
        content: Message text

    Returns:
        Lower-cased tokens of 4+ characters that are not stop words
    """
    terms = [
        word
        for word in _NON_WORD.split(content.lower())
        if len(word) >= MIN_TERM_LENGTH and word not in STOP_WORDS
    ]
    return terms[:MAX_KEY_TERMS]


def extract_potential_topic(first_content: str, second_content: str) -> str:
    """Pick a topic label for an agreeing pair of messages.

    Prefers the first key term both messages share, then the first key
    term of either message, then a generic fallback.
    """
    first_terms = extract_key_terms(first_content)
    second_terms = extract_key_terms(second_content)

    for term in first_terms:
        if term in second_terms:
            return term

    if first_terms:
        return first_terms[0]
    if second_terms:
        return second_terms[0]

    return FALLBACK_TOPIC
