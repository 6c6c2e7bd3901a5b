from __future__ import annotations

import random
import re
from typing import List, NamedTuple, Optional, Sequence

from agent.core.replies import (
    FALLBACK_HINT,
    FALLBACKS,
    FAQ_REPLIES,
    GREETINGS,
    PRODUCT_REPLIES,
)


class Rule(NamedTuple):
    name: str
    pattern: "re.Pattern[str]"
    replies: Sequence[str]


def _rule(name: str, pattern: str, *replies: str) -> Rule:
    return Rule(name, re.compile(pattern, re.IGNORECASE), tuple(replies))


# Evaluated top to bottom, first match wins. Patterns overlap, so order matters.
RULES: List[Rule] = [
    _rule("greeting", r"hi|hello|hey|greetings", *GREETINGS),
    _rule("classic", r"classic|original|regular", PRODUCT_REPLIES["classic"]),
    _rule("sugar-free", r"sugar[ -]?free|no sugar|diet|zero sugar", PRODUCT_REPLIES["sugarfree"]),
    _rule("strawberry", r"strawberry|berry", PRODUCT_REPLIES["strawberry"]),
    _rule("ginger", r"ginger|spicy|zing", PRODUCT_REPLIES["ginger"]),
    _rule("lavender", r"lavender|floral|purple", PRODUCT_REPLIES["lavender"]),
    _rule("shipping", r"shipping|delivery|how long", FAQ_REPLIES["shipping"]),
    _rule("returns", r"return|refund|money back", FAQ_REPLIES["returns"]),
    _rule("vegan", r"vegan|plant based|dairy free", FAQ_REPLIES["vegan"]),
    _rule("price", r"price|cost|how much", FAQ_REPLIES["price"]),
    _rule("flavor-list", r"flavor|flavours|types|kinds", FAQ_REPLIES["flavors"]),
    _rule("menu", r"menu|catalog|what do you sell", FAQ_REPLIES["menu"]),
]


class Responder:
    """Keyword responder for the support chat.

    Replies are picked from a fixed, ordered rule table. When a rule carries
    several candidate replies one is chosen uniformly at random; pass a seeded
    ``random.Random`` to make the choice repeatable.
    """

    def __init__(
        self,
        rules: Optional[Sequence[Rule]] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.rules = list(rules if rules is not None else RULES)
        self.rng = rng or random.Random()

    def match(self, message: Optional[str]) -> Optional[Rule]:
        msg = (message or "").lower()
        for rule in self.rules:
            if rule.pattern.search(msg):
                return rule
        return None

    def respond(self, message: Optional[str]) -> str:
        rule = self.match(message)
        if rule is None:
            return self.rng.choice(FALLBACKS) + FALLBACK_HINT
        return self.rng.choice(rule.replies)


_default = Responder()


def respond(message: Optional[str]) -> str:
    return _default.respond(message)
