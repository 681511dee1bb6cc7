"""
Tests for travel intent extraction from chat messages.
"""

from datetime import date

import pytest

from concierge.domains.chat.schemas import Message, MessageRole
from concierge.domains.itinerary.errors import ExtractionAmbiguity
from concierge.domains.itinerary.services.intent_extractor import (
    extract_destinations,
    extract_intent,
)


def user(text: str) -> Message:
    return Message(role=MessageRole.USER, content=text)


def assistant(text: str) -> Message:
    return Message(role=MessageRole.ASSISTANT, content=text)


class TestExtractIntent:
    def test_full_request_in_one_message(self):
        intent = extract_intent(
            [user("Plan a 5 day trip to Tokyo with $3000 budget, I love food and shopping")]
        )

        assert intent.destination == "Tokyo"
        assert intent.duration_days == 5
        assert intent.budget_amount == 3000
        assert intent.interests == ["food", "shopping"]
        assert intent.is_complete

    def test_multi_word_destination_and_hyphenated_duration(self):
        intent = extract_intent([user("We want a 4-day getaway to New York")])

        assert intent.destination == "New York"
        assert intent.duration_days == 4

    def test_budget_thousands_separator(self):
        intent = extract_intent([user("My budget is $12,500 in total")])

        assert intent.budget_amount == 12500

    def test_interests_stop_at_punctuation(self):
        intent = extract_intent(
            [user("I'm interested in museums and jazz. Thanks!")]
        )

        assert intent.interests == ["museums", "jazz"]

    def test_start_date(self):
        intent = extract_intent([user("Leaving on 2026-05-14 for a week")])

        assert intent.start_date == date(2026, 5, 14)

    def test_missing_fields_stay_none(self):
        intent = extract_intent([user("hello there")])

        assert intent.destination is None
        assert intent.duration_days is None
        assert intent.budget_amount is None
        assert intent.interests is None
        assert intent.missing_fields == ["destination", "durationDays", "budgetAmount", "interests"]

    def test_first_match_wins_across_messages(self):
        intent = extract_intent(
            [
                user("Thinking about a trip to Lisbon"),
                user("Actually maybe a trip to Porto for 3 days"),
            ]
        )

        assert intent.destination == "Lisbon"
        assert intent.duration_days == 3

    def test_assistant_messages_are_ignored(self):
        intent = extract_intent(
            [
                assistant("How about a trip to Rome for 7 days with $2000?"),
                user("Sounds nice"),
            ]
        )

        assert intent.destination is None
        assert intent.duration_days is None
        assert intent.budget_amount is None

    def test_extraction_is_idempotent(self):
        messages = [
            user("Plan a 5 day trip to Tokyo with $3000 budget"),
            user("I enjoy hiking and onsen"),
        ]

        assert extract_intent(messages) == extract_intent(messages)

    def test_capitalised_name_is_a_known_false_positive(self):
        intent = extract_intent([user("I talked to Bob yesterday")])

        assert intent.destination == "Bob"


class TestToPlanRequest:
    def test_complete_intent_builds_request(self):
        request = extract_intent(
            [user("Plan a 5 day trip to Tokyo with $3000 budget, I love food and shopping")]
        ).to_plan_request()

        assert request.destination == "Tokyo"
        assert request.duration_days == 5
        assert request.budget == 3000
        assert request.interests == ["food", "shopping"]

    def test_incomplete_intent_raises_with_missing_fields(self):
        intent = extract_intent([user("A trip to Tokyo please")])

        with pytest.raises(ExtractionAmbiguity) as exc_info:
            intent.to_plan_request()

        assert exc_info.value.missing_fields == ["durationDays", "budgetAmount", "interests"]
        assert exc_info.value.intent is intent


class TestExtractDestinations:
    def test_travel_indicator_comes_first(self):
        destinations = extract_destinations("Hello! I want to visit Lisbon, then maybe Porto.")

        assert destinations[0] == "Lisbon"
        assert "Porto" in destinations
        assert "Hello" not in destinations

    def test_months_and_weekdays_are_skipped(self):
        destinations = extract_destinations("Flying on Monday in September to Kyoto")

        assert "Monday" not in destinations
        assert "September" not in destinations
        assert "Kyoto" in destinations

    def test_no_candidates(self):
        assert extract_destinations("what's the weather like?") == []
