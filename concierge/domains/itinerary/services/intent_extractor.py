"""
Travel Concierge - Intent Extractor
Best-effort pattern matching of travel parameters in chat text.

This is a heuristic: it never guesses a value it did not see,
and it can pick up capitalised words that are not destinations ("to Bob").
Callers treat every field as optional and ask the user for the rest.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from datetime import date

from concierge.domains.chat.schemas import Message, MessageRole
from concierge.domains.itinerary.schemas import TravelIntent

# ============ Patterns ============


DESTINATION_PATTERN = re.compile(r"(?:to|in|for)\s+([A-Z][a-z]+(?:\s+[A-Z][a-z]+)*)")
DURATION_PATTERN = re.compile(r"(\d+)(?:-|\s+)days?")
BUDGET_PATTERN = re.compile(r"\$(\d+(?:,\d+)*)")
INTERESTS_PATTERN = re.compile(
    r"(?:interest(?:ed)? in|enjoy|love)\s+([^.,:;!?]+)",
    re.IGNORECASE,
)
INTEREST_SPLIT_PATTERN = re.compile(r"(?:,|and|\s+)")
START_DATE_PATTERN = re.compile(r"\b(\d{4}-\d{2}-\d{2})\b")

TRAVEL_INDICATORS = [
    "travel to",
    "visit",
    "go to",
    "vacation in",
    "trip to",
    "holiday in",
    "flying to",
    "visiting",
    "staying in",
    "exploring",
    "discover",
    "planning to go to",
]

CAPITALIZED_WORD_PATTERN = re.compile(r"\b([A-Z][a-zA-Z]{3,})\b")

NON_DESTINATION_WORDS = {
    "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday",
    "January", "February", "March", "April", "June", "July", "August",
    "September", "October", "November", "December",
    "Hello", "Thanks", "Thank", "Please", "Great",
    "What", "When", "Where", "Which", "Could", "Would", "Should", "Plan", "Help",
}


# ============ Field Matchers ============


def _match_destination(text: str) -> str | None:
    match = DESTINATION_PATTERN.search(text)
    return match.group(1) if match else None


def _match_duration(text: str) -> int | None:
    match = DURATION_PATTERN.search(text)
    if not match:
        return None
    return int(match.group(1)) or None


def _match_budget(text: str) -> float | None:
    match = BUDGET_PATTERN.search(text)
    if not match:
        return None
    return float(match.group(1).replace(",", "")) or None


def _match_interests(text: str) -> list[str] | None:
    match = INTERESTS_PATTERN.search(text)
    if not match:
        return None
    tokens = INTEREST_SPLIT_PATTERN.split(match.group(1))
    interests = [token.strip() for token in tokens if len(token.strip()) > 2]
    return interests or None


def _match_start_date(text: str) -> date | None:
    for candidate in START_DATE_PATTERN.findall(text):
        try:
            return date.fromisoformat(candidate)
        except ValueError:
            continue
    return None


_MATCHERS = {
    "destination": _match_destination,
    "duration_days": _match_duration,
    "budget_amount": _match_budget,
    "interests": _match_interests,
    "start_date": _match_start_date,
}


# ============ Public API ============


def extract_intent(messages: Iterable[Message]) -> TravelIntent:
    """
    Extract travel intent from the user messages of a conversation.

    Messages are scanned in order and the first match for each field wins;
    later messages never overwrite a field that is already set. Fields that
    never match stay None.
    """
    found: dict[str, object] = {}

    for message in messages:
        if message.role != MessageRole.USER:
            continue

        for field, matcher in _MATCHERS.items():
            if field in found:
                continue
            value = matcher(message.content)
            if value is not None:
                found[field] = value

    return TravelIntent(**found)


def extract_destinations(text: str) -> list[str]:
    """
    Candidate destination names mentioned in ``text``, most likely first.

    Used to pick a location for weather lookups: phrases after travel
    indicators ("trip to Lisbon") come first, then remaining capitalised
    words that are not weekdays, months or greetings.
    """
    destinations: list[str] = []

    for indicator in TRAVEL_INDICATORS:
        pattern = re.compile(
            rf"{indicator}\s+([A-Z][a-zA-Z\s]+?)(?:[,.]|\s+for|\s+in|\s+on|$)",
            re.IGNORECASE,
        )
        for match in pattern.finditer(text):
            candidate = match.group(1).strip()
            if len(candidate) > 2 and candidate not in destinations:
                destinations.append(candidate)

    for word in CAPITALIZED_WORD_PATTERN.findall(text):
        if word not in NON_DESTINATION_WORDS and word not in destinations:
            destinations.append(word)

    return destinations
