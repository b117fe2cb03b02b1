"""Coalition modelling for multi-party dialogue.

This package implements the coalition mechanics used by bidders:
- Coalition: Participants backing a shared topic, with a strength
- should_form_coalition: Detects agreement patterns that warrant a coalition
- lexical: Agreement and key-term heuristics shared by both
"""

from __future__ import annotations

from parley.social.coalition import Coalition
from parley.social.formation import FormationDecision, find_additional_allies, should_form_coalition
from parley.social.lexical import detect_agreement, extract_key_terms, extract_potential_topic

__all__ = [
    "Coalition",
    "FormationDecision",
    "detect_agreement",
    "extract_key_terms",
    "extract_potential_topic",
    "find_additional_allies",
    "should_form_coalition",
]
