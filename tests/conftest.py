"""Shared test fixtures for the parley test suite."""

from __future__ import annotations

import pytest

from parley.bidding.coalition import CoalitionBiddingStrategy
from parley.dialogue import DialogueState
from parley.social.coalition import Coalition
from tests.helpers import make_dialogue


@pytest.fixture
def strategy() -> CoalitionBiddingStrategy:
    """Strategy with default parameters (base 0.5, boost 0.3)."""
    return CoalitionBiddingStrategy()


@pytest.fixture
def empty_dialogue() -> DialogueState:
    """A dialogue with no messages."""
    return DialogueState()


@pytest.fixture
def pair_coalition() -> Coalition:
    """alice and bob backing 'budget' at strength 0.6."""
    return Coalition(members=("alice", "bob"), topic="budget", strength=0.6, formed=1.0)


@pytest.fixture
def two_agreements() -> DialogueState:
    """alice and bob agree twice; carol stays neutral."""
    return make_dialogue(
        ("alice", "I think budget matters"),
        ("bob", "I agree, budget matters"),
        ("carol", "Let us move on"),
        ("alice", "Budget transparency is key"),
        ("bob", "Exactly, transparency first"),
    )


@pytest.fixture
def crowded_agreement() -> DialogueState:
    """alice and bob agree twice; four others each agree with one of them on 'budget'."""
    return make_dialogue(
        ("alice", "budget matters"),
        ("bob", "yes, budget matters"),
        ("alice", "agree, budget"),
        ("dave", "indeed budget"),
        ("bob", "yes budget"),
        ("erin", "same budget"),
        ("alice", "yes budget"),
        ("frank", "indeed budget"),
        ("bob", "exactly budget"),
        ("gina", "correct budget"),
    )
