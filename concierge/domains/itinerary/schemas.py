"""Pydantic schemas for the Itinerary domain.

``TravelPlan`` and its parts are the wire contract consumed by the chat UI
and report renderers: serialize with ``by_alias=True`` to get the camelCase
field names.
"""

from datetime import date
from enum import Enum

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model exposing camelCase aliases on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_wire(self) -> dict:
        """JSON-compatible dict with camelCase keys."""
        return self.model_dump(mode="json", by_alias=True)


# ============ Intent Schemas ============


class TravelIntent(CamelModel):
    """Travel parameters inferred from chat text; every field is optional."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    destination: str | None = None
    duration_days: int | None = None
    budget_amount: float | None = None
    interests: list[str] | None = None
    start_date: date | None = None

    @property
    def missing_fields(self) -> list[str]:
        """Wire names of the fields a plan still needs."""
        missing = []
        if not self.destination:
            missing.append("destination")
        if not self.duration_days:
            missing.append("durationDays")
        if not self.budget_amount:
            missing.append("budgetAmount")
        if not self.interests:
            missing.append("interests")
        return missing

    @property
    def is_complete(self) -> bool:
        return not self.missing_fields

    def to_plan_request(self) -> "PlanRequest":
        """
        Build a plan request from this intent.

        Raises:
            ExtractionAmbiguity: if any required field is unresolved.
        """
        from concierge.domains.itinerary.errors import ExtractionAmbiguity

        if not self.is_complete:
            raise ExtractionAmbiguity(self.missing_fields, intent=self)

        return PlanRequest(
            destination=self.destination,
            duration_days=self.duration_days,
            budget=self.budget_amount,
            interests=list(self.interests or []),
            start_date=self.start_date,
        )


class PlanRequest(CamelModel):
    """Structured parameters for itinerary synthesis (the trip form)."""

    destination: str = Field(..., min_length=1, max_length=255)
    duration_days: int = Field(..., ge=1)
    budget: float = Field(..., gt=0)
    interests: list[str] = Field(default_factory=list)
    start_date: date | None = None


# ============ Plan Schemas ============


class ActivityType(str, Enum):
    """Fixed activity categories of the plan contract."""

    ACCOMMODATION = "accommodation"
    FOOD = "food"
    ACTIVITY = "activity"
    TRANSPORTATION = "transportation"


class Activity(CamelModel):
    """One costed item in a day of the itinerary."""

    type: ActivityType
    description: str
    cost: float = Field(..., ge=0)

    @field_validator("type", mode="before")
    @classmethod
    def normalize_type(cls, v):
        """Accept 'Food', ' FOOD ' and friends."""
        if isinstance(v, str):
            return v.strip().lower()
        return v


class ItineraryDay(CamelModel):
    """A single day of the itinerary."""

    day: int = Field(..., ge=1)
    title: str
    activities: list[Activity]


class BudgetBreakdown(CamelModel):
    """Spend split across the five fixed categories."""

    accommodation: float = Field(..., ge=0)
    food: float = Field(..., ge=0)
    activities: float = Field(..., ge=0)
    transportation: float = Field(..., ge=0)
    miscellaneous: float = Field(..., ge=0)

    @property
    def total(self) -> float:
        return (
            self.accommodation
            + self.food
            + self.activities
            + self.transportation
            + self.miscellaneous
        )


class Recommendation(CamelModel):
    """A place worth visiting, rated 1.0 to 5.0."""

    name: str
    rating: float = Field(..., ge=1.0, le=5.0)
    description: str


class PlanWeather(CamelModel):
    """Expected weather summary shown on the plan card."""

    temp: str
    condition: str

    @field_validator("temp", mode="before")
    @classmethod
    def stringify_temp(cls, v):
        """Models often answer 22 instead of "22°C"."""
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return f"{v:g}°C"
        return v


class TravelPlan(CamelModel):
    """Complete structured itinerary."""

    destination: str
    duration_days: int = Field(
        ...,
        ge=1,
        validation_alias=AliasChoices("durationDays", "duration", "duration_days"),
        serialization_alias="durationDays",
    )
    budget: float = Field(..., ge=0)
    remaining_budget: float
    weather: PlanWeather
    days: list[ItineraryDay]
    budget_breakdown: BudgetBreakdown
    recommendations: list[Recommendation]

    @property
    def total_activity_cost(self) -> float:
        return sum(activity.cost for day in self.days for activity in day.activities)
