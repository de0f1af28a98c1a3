"""Free-text transaction interpreter - turns a sentence into a transaction draft"""

import logging
import re
from decimal import Decimal
from typing import Optional

from fin_gateway.domain.categories import CATEGORY_KEYWORDS, INCOME_CATEGORIES, INCOME_KEYWORDS
from fin_gateway.domain.models import Category, TransactionDraft, TransactionType
from fin_gateway.utils.numbers import parse_amount

logger = logging.getLogger(__name__)

# Numeral with optional thousands groups and two decimals, plus any currency
# marker directly around it: "₹500", "Rs. 1,200", "199rs", "50 rupees", "300 Rs.".
AMOUNT_PATTERN = re.compile(
    r"(?:₹|\b(?:rs\.?|rupees|inr)(?![a-z]))?\s*"
    r"(\d+(?:,\d{3})*(?:\.\d{2})?)"
    r"\s*(?:(?:rupees|rs\.?|inr)(?![a-z]))?",
    re.IGNORECASE,
)

# Amount token together with the whitespace on either side of it
AMOUNT_TOKEN_PATTERN = re.compile(r"\s*(?:" + AMOUNT_PATTERN.pattern + r")\s*", re.IGNORECASE)


def extract_amount(text: str) -> Decimal:
    """Return the first amount mentioned in text, or 0 if there is none"""
    match = AMOUNT_PATTERN.search(text)
    if not match:
        return Decimal("0")
    return parse_amount(match.group(1))


def has_income_keyword(text: str) -> bool:
    lowered = text.lower()
    return any(keyword in lowered for keyword in INCOME_KEYWORDS)


def resolve_category(text: str) -> Category:
    """
    Find the category of a transaction description.

    Case-insensitive substring search over CATEGORY_KEYWORDS in table order.
    An earlier category wins even when a later one also matches.
    """
    lowered = text.lower()
    for category, triggers in CATEGORY_KEYWORDS:
        if any(trigger in lowered for trigger in triggers):
            return category
    return Category.OTHER


def infer_type(text: str, category: Optional[Category] = None) -> TransactionType:
    """
    Decide whether a transaction is income or expense.

    Precedence:
    1. Income categories (Salary, Freelance, Business, Investments) are always income
    2. Income keywords anywhere in the text ("received", "bonus", ...) mean income
    3. Everything else is an expense
    """
    if category in INCOME_CATEGORIES:
        return TransactionType.INCOME
    if has_income_keyword(text):
        return TransactionType.INCOME
    return TransactionType.EXPENSE


def _token_gap(match: re.Match) -> str:
    # One space where the token sat between words, nothing where it was glued to them
    token = match.group(0)
    if token[:1].isspace() or token[-1:].isspace():
        return " "
    return ""


def clean_description(text: str, category: Category) -> str:
    """Strip every amount token from text; fall back to '<category> expense' when nothing is left"""
    description = AMOUNT_TOKEN_PATTERN.sub(_token_gap, text).strip()
    if not description:
        return f"{category.value} expense"
    return description


def interpret_transaction(text: str) -> TransactionDraft:
    """
    Main entry point: interpret free text as a transaction draft.

    Never raises. Text with no recognisable content gives amount 0,
    category Other and type expense.
    """
    amount = extract_amount(text)
    category = resolve_category(text)
    transaction_type = infer_type(text, category)
    description = clean_description(text, category)

    logger.debug(
        "Interpreted transaction text",
        extra={
            "amount": str(amount),
            "category": category.value,
            "transaction_type": transaction_type.value,
        },
    )

    return TransactionDraft(
        amount=amount,
        type=transaction_type,
        category=category,
        description=description,
    )
