"""Keyword tables for transaction text interpretation"""

from typing import Tuple
from fin_gateway.domain.models import Category


# Order is significant: the first category with a matching trigger wins.
CATEGORY_KEYWORDS: Tuple[Tuple[Category, Tuple[str, ...]], ...] = (
    (
        Category.FOOD_AND_DINING,
        (
            "food", "lunch", "dinner", "breakfast", "restaurant", "zomato", "swiggy",
            "cafe", "coffee", "tea", "snacks", "groceries", "vegetables", "fruits",
            "khana", "biryani", "pizza", "burger", "chai", "samosa",
        ),
    ),
    (
        Category.TRANSPORTATION,
        (
            "uber", "ola", "cab", "taxi", "auto", "rickshaw", "metro", "bus", "train",
            "petrol", "diesel", "fuel", "parking", "toll", "travel",
        ),
    ),
    (
        Category.SHOPPING,
        (
            "shopping", "amazon", "flipkart", "myntra", "clothes", "shoes", "dress",
            "shirt", "jeans", "bought", "purchase", "mall",
        ),
    ),
    (
        Category.ENTERTAINMENT,
        (
            "movie", "netflix", "prime", "hotstar", "spotify", "game", "gaming",
            "concert", "show", "entertainment", "fun",
        ),
    ),
    (
        Category.BILLS_AND_UTILITIES,
        (
            "electricity", "water", "gas", "internet", "wifi", "broadband", "mobile",
            "recharge", "bill", "airtel", "jio", "vi",
        ),
    ),
    (
        Category.HEALTHCARE,
        (
            "medicine", "doctor", "hospital", "medical", "health", "pharmacy",
            "chemist", "apollo", "clinic", "treatment",
        ),
    ),
    (
        Category.EDUCATION,
        (
            "book", "course", "udemy", "education", "school", "college", "tuition",
            "fees", "class", "coaching", "exam",
        ),
    ),
    (
        Category.TRAVEL,
        (
            "flight", "hotel", "vacation", "trip", "holiday", "booking", "makemytrip",
            "goibibo", "airbnb", "oyo",
        ),
    ),
    (Category.RENT, ("rent", "house rent", "pg", "hostel", "accommodation")),
    (Category.EMI, ("emi", "loan", "installment", "credit card bill")),
    (Category.INSURANCE, ("insurance", "lic", "policy", "premium")),
    (Category.GIFTS, ("gift", "present", "birthday", "anniversary", "wedding gift")),
    (Category.SALARY, ("salary", "paycheck", "monthly salary")),
    (Category.FREELANCE, ("freelance", "project payment", "client payment", "gig")),
    (Category.BUSINESS, ("business", "investment return", "profit", "dividend")),
    (
        Category.INVESTMENTS,
        ("mutual fund", "stocks", "sip", "investment", "fd", "fixed deposit"),
    ),
)

INCOME_KEYWORDS: Tuple[str, ...] = (
    "salary",
    "received",
    "got",
    "earned",
    "income",
    "bonus",
    "freelance",
    "payment received",
    "credited",
)

# Categories that are always income, whatever the wording says
INCOME_CATEGORIES = frozenset(
    {Category.SALARY, Category.FREELANCE, Category.BUSINESS, Category.INVESTMENTS}
)


def list_categories() -> list[Category]:
    """All categories in matching order, with the fallback last"""
    return [category for category, _ in CATEGORY_KEYWORDS] + [Category.OTHER]
