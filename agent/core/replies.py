"""Canned reply text for the support responder."""

from __future__ import annotations

from typing import Dict, Tuple


GREETINGS: Tuple[str, ...] = (
    "Hi there! 👋 I'm Sunny, your lemonade expert. How can I help you today?",
    "Welcome to Sunny Sips! 🍋 What kind of lemonade are you looking for?",
    "Hey! Ready to find your perfect lemonade? 😊",
)

PRODUCT_REPLIES: Dict[str, str] = {
    "classic": "Our Classic Lemonade is our bestseller! Made with fresh lemons and cane sugar. Would you like to try it?",
    "sugarfree": "Yes! We have Sugar-Free Lemonade sweetened with stevia. It's delicious and has zero sugar!",
    "strawberry": "Our Strawberry Bliss Lemonade is amazing! Fresh strawberry puree mixed with our classic recipe.",
    "ginger": "The Ginger Zing Lemonade has a nice kick! Fresh ginger blended perfectly with our lemonade.",
    "lavender": "Lavender Dream is our most unique flavor - floral, refreshing, and absolutely delightful!",
}

FAQ_REPLIES: Dict[str, str] = {
    "shipping": "We ship within 2-3 business days. Standard shipping takes 3-5 days. 🚚",
    "returns": "If you're not satisfied, contact us within 7 days for a full refund! 👍",
    "vegan": "All our lemonades are 100% vegan and plant-based! 🌱",
    "price": "Our lemonades range from $4.99 to $27.99 for party packs. Which one interests you? 💰",
    "flavors": "We have Classic, Sugar-Free, Strawberry Bliss, Ginger Zing, and Lavender Dream! Which sounds good to you? 🍋🍓",
    "menu": "Here's our menu: Classic Lemonade, Sugar-Free Lemonade, Strawberry Bliss, Ginger Zing, Lavender Dream, and our Party Pack for groups! 📋",
}

FALLBACKS: Tuple[str, ...] = (
    "That's a great question! Let me help you with that.",
    "I'd be happy to help you find the perfect lemonade!",
    "Great choice! Let me tell you more about our options.",
)

FALLBACK_HINT = " You can ask me about our flavors, prices, or shipping!"
