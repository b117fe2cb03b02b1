"""Tests for agreement detection and key-term extraction."""

from __future__ import annotations

import pytest

from parley.social.lexical import (
    FALLBACK_TOPIC,
    STOP_WORDS,
    detect_agreement,
    extract_key_terms,
    extract_potential_topic,
)


class TestDetectAgreement:
    """Test the agreement marker heuristic."""

    @pytest.mark.parametrize(
        "reply",
        ["I AGREE with that", "Yes.", "Exactly my point", "That is correct", "Indeed"],
    )
    def test_markers_detected(self, reply):
        """Any marker in the reply counts, regardless of case."""
        assert detect_agreement("anything", reply) is True

    def test_no_marker(self):
        """A reply without markers is not an agreement."""
        assert detect_agreement("We should wait", "No way, that is wrong.") is False

    def test_negation_not_handled(self):
        """Negated markers still count; the signal is deliberately coarse."""
        assert detect_agreement("Raise taxes", "I don't agree at all") is True

    def test_substring_match(self):
        """Markers match inside longer words."""
        assert detect_agreement("idea", "A bright idea") is True

    def test_only_reply_inspected(self):
        """Markers in the first message are ignored."""
        assert detect_agreement("Yes, I agree", "Let us move on") is False


class TestExtractKeyTerms:
    """Test key-term extraction."""

    def test_first_five_long_terms(self):
        """Short words are dropped and at most five terms are kept, in order."""
        terms = extract_key_terms("The quick brown foxes jumped over lazy dogs near rivers")
        assert terms == ["quick", "brown", "foxes", "jumped", "over"]

    def test_stop_words_removed(self):
        """Common function words never become terms."""
        assert extract_key_terms("This would make their plans work") == ["plans", "work"]

    def test_splits_on_punctuation(self):
        """Non-word characters separate tokens."""
        assert extract_key_terms("Budget/cuts, now!") == ["budget", "cuts"]

    def test_empty_text(self):
        """Empty text yields no terms."""
        assert extract_key_terms("") == []

    def test_stop_word_set_size(self):
        """The stop-word list covers the common function words."""
        assert len(STOP_WORDS) == 42


class TestExtractPotentialTopic:
    """Test topic selection for an agreeing pair."""

    def test_shared_term_preferred(self):
        """The first shared term wins over earlier unshared ones."""
        topic = extract_potential_topic(
            "Climate policy needs funding", "I agree, funding for climate matters"
        )
        assert topic == "climate"

    def test_falls_back_to_first_message(self):
        """Without shared terms, the first message's first term is used."""
        assert extract_potential_topic("Taxes rise", "yes") == "taxes"

    def test_falls_back_to_second_message(self):
        """If the first message has no terms, the second's first term is used."""
        assert extract_potential_topic("ok", "Exactly right") == "exactly"

    def test_generic_fallback(self):
        """No terms anywhere gives the generic topic."""
        assert extract_potential_topic("ok", "yes") == FALLBACK_TOPIC
