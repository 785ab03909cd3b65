"""Itinerary request and result schemas.

Two itinerary flavours exist:

* ``Itinerary`` - day-by-day activity list spanning one or more destinations
  (the quick planner used when creating a trip).
* ``DetailedDestinationPlan`` - the comprehensive single-destination plan with
  hotels, restaurants, attractions, transport, a five-slot daily schedule and
  a cost breakdown.
"""

from datetime import date
from typing import Literal

from pydantic import Field, model_validator

from .common import CamelModel, CostRange


BudgetTier = Literal["budget", "mid-range", "luxury"]
TravelStyle = Literal["relaxed", "balanced", "packed"]


# --- Requests ---------------------------------------------------------------


class ItineraryRequest(CamelModel):
    """Request body for the multi-destination itinerary generator."""

    destinations: list[str] = Field(..., min_length=1, max_length=10)
    duration: int = Field(..., ge=1, le=30)
    start_date: date
    end_date: date | None = None
    budget: str = Field("mid-range", max_length=50)
    travel_style: str = Field("balanced", max_length=50)
    interests: list[str] = Field(default_factory=list, max_length=20)

    @model_validator(mode="after")
    def _check_dates(self) -> "ItineraryRequest":
        if self.end_date is not None and self.end_date < self.start_date:
            raise ValueError("endDate must not be before startDate")
        return self


class DetailedItineraryRequest(CamelModel):
    """Request body for the comprehensive single-destination plan."""

    destination: str = Field(..., min_length=1, max_length=200)
    duration: int = Field(..., ge=1, le=30)
    start_date: date
    budget: BudgetTier = "mid-range"
    travel_style: TravelStyle = "balanced"
    interests: list[str] = Field(default_factory=list, max_length=20)
    group_size: int = Field(1, ge=1, le=50)
    accessibility: list[str] | None = None


# --- Multi-destination itinerary ---------------------------------------------


class Activity(CamelModel):
    time: str
    end_time: str | None = None
    title: str
    description: str
    location: str
    type: str
    price_estimate: float = 0
    tips: str | None = None


class ItineraryDay(CamelModel):
    day: int
    date: str
    destination: str
    activities: list[Activity]


class Itinerary(CamelModel):
    days: list[ItineraryDay] = Field(..., min_length=1)
    total_estimated_cost: float
    travel_tips: list[str] = Field(default_factory=list)
    packing_recommendations: list[str] = Field(default_factory=list)


# --- Comprehensive plan ------------------------------------------------------


class HotelRecommendation(CamelModel):
    name: str
    category: str
    price_range: str
    location: str
    amenities: list[str] = Field(default_factory=list)
    rating: float | None = None
    booking_tips: str | None = None
    address: str | None = None


class RestaurantRecommendation(CamelModel):
    name: str
    cuisine: str
    meal_type: str
    price_range: str
    specialties: list[str] = Field(default_factory=list)
    location: str
    reservation_required: bool = False
    rating: float | None = None
    dietary_options: list[str] = Field(default_factory=list)


class AttractionRecommendation(CamelModel):
    name: str
    type: str
    description: str
    duration: str
    best_time: str
    ticket_price: str
    location: str
    crowd_level: str = "moderate"
    accessibility: list[str] = Field(default_factory=list)
    tips: list[str] = Field(default_factory=list)


class TransportRecommendation(CamelModel):
    mode: str
    description: str
    cost: str
    duration: str
    booking_info: str | None = None
    tips: list[str] = Field(default_factory=list)
    accessibility: list[str] = Field(default_factory=list)


class TransportationOptions(CamelModel):
    airport: list[TransportRecommendation] = Field(default_factory=list)
    local: list[TransportRecommendation] = Field(default_factory=list)
    intercity: list[TransportRecommendation] = Field(default_factory=list)


class ScheduledActivity(CamelModel):
    time: str | None = None
    activity: str
    location: str
    cost: str
    tips: list[str] = Field(default_factory=list)


class MealPlan(CamelModel):
    restaurant: str
    cuisine: str
    cost: str
    specialties: list[str] = Field(default_factory=list)


class DailyPlan(CamelModel):
    day: int
    date: str
    theme: str
    morning: ScheduledActivity
    lunch: MealPlan
    afternoon: ScheduledActivity
    dinner: MealPlan
    evening: ScheduledActivity


class CostBreakdown(CamelModel):
    accommodation: CostRange
    food: CostRange
    activities: CostRange
    transport: CostRange
    total: CostRange


class EmergencyInfo(CamelModel):
    emergency_number: str
    hospitals: list[str] = Field(default_factory=list)
    embassies: list[str] = Field(default_factory=list)
    important_phones: list[str] = Field(default_factory=list)


class DetailedDestinationPlan(CamelModel):
    destination: str
    overview: str
    best_time_to_visit: str
    safety_rating: float
    safety_tips: list[str]
    cultural_tips: list[str]
    hotels: list[HotelRecommendation]
    restaurants: list[RestaurantRecommendation]
    attractions: list[AttractionRecommendation]
    transportation: TransportationOptions
    daily_itinerary: list[DailyPlan] = Field(..., min_length=1)
    cost_breakdown: CostBreakdown
    packing_list: list[str]
    emergency_info: EmergencyInfo
