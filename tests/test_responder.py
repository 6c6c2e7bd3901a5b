import random

import pytest

from agent.core.replies import FALLBACK_HINT, FALLBACKS, FAQ_REPLIES, GREETINGS, PRODUCT_REPLIES
from agent.responder import RULES, Responder, respond


@pytest.fixture
def responder():
    return Responder(rng=random.Random(42))


@pytest.mark.parametrize("message", ["hi", "Hello!", "hey there", "Greetings"])
def test_greeting_reply_from_greeting_set(responder, message):
    assert responder.respond(message) in GREETINGS


def test_greeting_wins_over_product(responder):
    assert responder.respond("hello, do you have ginger?") in GREETINGS
    assert responder.match("hello, strawberry please").name == "greeting"


def test_greeting_substring_wins_over_shipping(responder):
    # "shipping" contains "hi", so the greeting rule fires first
    assert responder.match("shipping").name == "greeting"


@pytest.mark.parametrize(
    "message, expected",
    [
        ("classic please", PRODUCT_REPLIES["classic"]),
        ("do you sell sugar free lemonade", PRODUCT_REPLIES["sugarfree"]),
        ("any zero sugar drinks?", PRODUCT_REPLIES["sugarfree"]),
        ("do you have strawberry?", PRODUCT_REPLIES["strawberry"]),
        ("STRAWBERRY", PRODUCT_REPLIES["strawberry"]),
        ("a spicy one please", PRODUCT_REPLIES["ginger"]),
        ("purple drink", PRODUCT_REPLIES["lavender"]),
        ("delivery time?", FAQ_REPLIES["shipping"]),
        ("can i get a refund", FAQ_REPLIES["returns"]),
        ("is it dairy free", FAQ_REPLIES["vegan"]),
        ("how much is it", FAQ_REPLIES["price"]),
        ("what kinds do you have", FAQ_REPLIES["flavors"]),
        ("show me the menu", FAQ_REPLIES["menu"]),
    ],
)
def test_rule_replies(responder, message, expected):
    assert responder.respond(message) == expected


def test_product_rules_precede_faq_rules(responder):
    # matches both "classic" and "price"
    assert responder.respond("classic price") == PRODUCT_REPLIES["classic"]


@pytest.mark.parametrize("message", ["qwerty", "", None])
def test_fallback_appends_hint(responder, message):
    reply = responder.respond(message)
    assert reply.endswith(FALLBACK_HINT)
    assert reply[: -len(FALLBACK_HINT)] in FALLBACKS


def test_seeded_choice_is_repeatable():
    first = [Responder(rng=random.Random(3)).respond("hey") for _ in range(3)]
    second = [Responder(rng=random.Random(3)).respond("hey") for _ in range(3)]
    assert first == second


def test_rule_order():
    assert [r.name for r in RULES] == [
        "greeting",
        "classic",
        "sugar-free",
        "strawberry",
        "ginger",
        "lavender",
        "shipping",
        "returns",
        "vegan",
        "price",
        "flavor-list",
        "menu",
    ]


def test_module_respond_never_empty():
    assert respond("anything at all?")
