"""parley: coalition-aware turn bidding for multi-party dialogue."""

from __future__ import annotations

from parley.bidding import Bid, BidContext, BiddingStrategy, CoalitionBiddingStrategy, collect_bids
from parley.config import BiddingConfig
from parley.dialogue import DialogueState, Message
from parley.errors import ParleyError, ScenarioError, ValidationError
from parley.social import Coalition, FormationDecision, should_form_coalition

__version__ = "0.1.0"

__all__ = [
    "Bid",
    "BidContext",
    "BiddingConfig",
    "BiddingStrategy",
    "Coalition",
    "CoalitionBiddingStrategy",
    "DialogueState",
    "FormationDecision",
    "Message",
    "ParleyError",
    "ScenarioError",
    "ValidationError",
    "collect_bids",
    "should_form_coalition",
]
