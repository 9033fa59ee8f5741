# app/api/chat/assistant.py
"""
Rule-based stand-in for an AI assistant.

``generate_ai_response`` takes the user's text and returns the reply content
plus a list of structured recommendations. The keyword rules are checked in
order and the first one that matches wins. Swapping in a real model only has
to keep that contract.
"""
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from pydantic import BaseModel


class Recommendation(BaseModel):
    name: str
    distance: Optional[str] = None
    rating: Optional[float] = None
    offer: Optional[str] = None
    cuisine: Optional[str] = None
    expires: Optional[str] = None


@dataclass
class AssistantReply:
    content: str
    recommendations: List[Recommendation] = field(default_factory=list)


@dataclass(frozen=True)
class ResponseRule:
    keywords: Tuple[str, ...]
    content: str
    recommendations: Tuple[Recommendation, ...] = ()

    def matches(self, text: str) -> bool:
        return any(keyword in text for keyword in self.keywords)


DESSERT_RULE = ResponseRule(
    keywords=("cheesecake", "dessert"),
    content=(
        "I found several great places for cheesecake near you! Here are the top recommendations:\n\n"
        "🍰 **Sweet Dreams Bakery** - 2.3 miles away\n"
        "- Fresh New York style cheesecake\n"
        "- Rating: 4.8/5\n"
        "- Special offer: 20% off today!\n\n"
        "🍰 **Cafe Delight** - 1.8 miles away\n"
        "- Artisanal cheesecakes\n"
        "- Rating: 4.6/5\n"
        "- Free delivery on orders over $25"
    ),
    recommendations=(
        Recommendation(name="Sweet Dreams Bakery", distance="2.3 miles", rating=4.8, offer="20% off today"),
        Recommendation(name="Cafe Delight", distance="1.8 miles", rating=4.6, offer="Free delivery over $25"),
    ),
)

DEALS_RULE = ResponseRule(
    keywords=("deal", "offer", "discount"),
    content=(
        "Here are the best deals available right now:\n\n"
        "💰 **Flash Sale Alert!**\n"
        "- 50% off electronics at TechStore\n"
        "- Buy 2 get 1 free at Fashion Hub\n"
        "- Free shipping on orders over $50\n\n"
        "🔥 **Limited Time Offers:**\n"
        "- 30% off restaurant meals via FoodApp\n"
        "- 25% cashback on grocery shopping"
    ),
    recommendations=(
        Recommendation(name="TechStore", offer="50% off electronics", expires="24 hours"),
        Recommendation(name="Fashion Hub", offer="Buy 2 get 1 free", expires="48 hours"),
        Recommendation(name="FoodApp", offer="30% off meals", expires="This week"),
    ),
)

RESTAURANT_RULE = ResponseRule(
    keywords=("restaurant", "food", "eat"),
    content=(
        "I found some amazing restaurants near you:\n\n"
        "🍕 **Pizza Palace** - 1.2 miles\n"
        "- Authentic Italian pizza\n"
        "- Rating: 4.7/5\n"
        "- 15% off for new customers\n\n"
        "🍣 **Sushi Zen** - 2.1 miles\n"
        "- Fresh sushi and sashimi\n"
        "- Rating: 4.9/5\n"
        "- Happy hour: 3-6 PM daily"
    ),
    recommendations=(
        Recommendation(name="Pizza Palace", cuisine="Italian", distance="1.2 miles", rating=4.7),
        Recommendation(name="Sushi Zen", cuisine="Japanese", distance="2.1 miles", rating=4.9),
    ),
)

RULES = (DESSERT_RULE, DEALS_RULE, RESTAURANT_RULE)

HELP_MENU = (
    "I'm here to help you find the best deals, recommendations, and local businesses! "
    "You can ask me about:\n\n"
    "• Finding nearby restaurants, shops, or services\n"
    "• Getting the latest deals and offers\n"
    "• Personalized recommendations based on your preferences\n"
    "• Local business information and reviews\n\n"
    "What would you like to explore today?"
)


def generate_ai_response(message: str, language: str = "en") -> AssistantReply:
    # Replies are English only for now; ``language`` is accepted so a real
    # model can answer in the user's language without changing callers.
    text = message.lower()
    for rule in RULES:
        if rule.matches(text):
            return AssistantReply(
                content=rule.content,
                recommendations=[rec.model_copy() for rec in rule.recommendations],
            )
    return AssistantReply(content=HELP_MENU)
