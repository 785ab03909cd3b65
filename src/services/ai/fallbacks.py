"""Deterministic fallback payloads served when the AI provider cannot answer.

Every builder is a pure function of the request: same input, same output,
no clock and no randomness. Each returns an instance of the feature's shape,
so a fallback is as complete as a parsed reply.
"""

from __future__ import annotations

import math
from datetime import date, timedelta

from schemas.chat import ChatReply
from schemas.common import CostRange
from schemas.itineraries import (
    Activity,
    AttractionRecommendation,
    BudgetTier,
    CostBreakdown,
    DailyPlan,
    DetailedDestinationPlan,
    DetailedItineraryRequest,
    EmergencyInfo,
    HotelRecommendation,
    Itinerary,
    ItineraryDay,
    ItineraryRequest,
    MealPlan,
    RestaurantRecommendation,
    ScheduledActivity,
    TransportationOptions,
    TransportRecommendation,
)
from schemas.recommendations import (
    LocalTransport,
    LocationRecommendations,
    NightlifePick,
    RestaurantPick,
    ShoppingPick,
    SightseeingPick,
    TransportAdvice,
)


TRAVEL_CHAT_FALLBACK = (
    "I'm currently unable to access my AI capabilities due to service "
    "limitations. However, I can still help you with general travel advice! "
    "Feel free to ask about popular destinations, travel tips, or planning "
    "strategies."
)

TRAVEL_EXPERT_FALLBACK = (
    "I'm your travel expert assistant, but I'm currently unable to access my "
    "full AI capabilities due to service limitations. I can still provide "
    "general travel guidance! What destination or travel question can I help "
    "you with?"
)

# Per-day cost of the four templated activities below
ITINERARY_DAILY_COST = 115

HOTEL_PRICE_BY_TIER: dict[str, str] = {
    "budget": "$60-90",
    "mid-range": "$120-180",
    "luxury": "$250-400",
}

# (min, max) per day, multiplied by the trip length
DAILY_COST_BOUNDS: dict[str, tuple[int, int]] = {
    "accommodation": (60, 400),
    "food": (50, 120),
    "activities": (30, 80),
    "transport": (25, 70),
    "total": (165, 670),
}


def travel_chat_fallback() -> ChatReply:
    return ChatReply(response=TRAVEL_CHAT_FALLBACK)


def travel_expert_fallback() -> ChatReply:
    return ChatReply(response=TRAVEL_EXPERT_FALLBACK)


def _trip_dates(start: date, duration: int) -> list[str]:
    return [(start + timedelta(days=i)).isoformat() for i in range(duration)]


def _destination_for_day(destinations: list[str], day_index: int, duration: int) -> str:
    """Spread the trip evenly: each destination gets ceil(duration / n) days."""
    days_per_stop = math.ceil(duration / len(destinations))
    stop = day_index // days_per_stop
    return destinations[stop] if stop < len(destinations) else destinations[0]


def _template_activities(destination: str) -> list[Activity]:
    return [
        Activity(
            time="09:00",
            end_time="12:00",
            title=f"Explore {destination}",
            description=f"Start your day exploring the highlights of {destination}",
            location=destination,
            type="sightseeing",
            price_estimate=30,
            tips="Start early to avoid crowds",
        ),
        Activity(
            time="12:00",
            end_time="14:00",
            title="Local Lunch",
            description=f"Try traditional cuisine in {destination}",
            location=f"Local restaurant in {destination}",
            type="dining",
            price_estimate=25,
            tips="Ask locals for recommendations",
        ),
        Activity(
            time="14:00",
            end_time="17:00",
            title="Cultural Experience",
            description=f"Visit museums or cultural sites in {destination}",
            location=destination,
            type="culture",
            price_estimate=20,
            tips="Check for student or group discounts",
        ),
        Activity(
            time="19:00",
            end_time="21:00",
            title="Dinner",
            description=f"Evening dining experience in {destination}",
            location=f"Restaurant district in {destination}",
            type="dining",
            price_estimate=40,
            tips="Make reservations in advance",
        ),
    ]


def build_itinerary_fallback(request: ItineraryRequest) -> Itinerary:
    """Four templated activities per day, destinations in request order."""
    days: list[ItineraryDay] = []
    for i, day_date in enumerate(_trip_dates(request.start_date, request.duration)):
        destination = _destination_for_day(request.destinations, i, request.duration)
        days.append(
            ItineraryDay(
                day=i + 1,
                date=day_date,
                destination=destination,
                activities=_template_activities(destination),
            )
        )
    return Itinerary(
        days=days,
        total_estimated_cost=request.duration * ITINERARY_DAILY_COST,
        travel_tips=[
            "Pack light and bring comfortable walking shoes",
            "Keep copies of important documents",
            "Learn basic phrases in the local language",
            "Research local customs and etiquette",
        ],
        packing_recommendations=[
            "Comfortable walking shoes",
            "Weather-appropriate clothing",
            "Portable charger",
            "Travel adapter",
            "First aid kit",
        ],
    )


def _daily_plan(destination: str, day_index: int, day_date: str) -> DailyPlan:
    return DailyPlan(
        day=day_index + 1,
        date=day_date,
        theme=(
            "Arrival & Orientation"
            if day_index == 0
            else f"Day {day_index + 1} Exploration"
        ),
        morning=ScheduledActivity(
            time="09:00",
            activity=f"Explore {destination} highlights",
            location="City Center",
            cost="$15",
            tips=["Start early for better photos"],
        ),
        lunch=MealPlan(
            restaurant="Midday Café",
            cuisine="Local",
            cost="$18",
            specialties=["Daily special", "Local favorite"],
        ),
        afternoon=ScheduledActivity(
            time="14:00",
            activity="Cultural experience",
            location="Heritage District",
            cost="$20",
            tips=["Ask about student discounts"],
        ),
        dinner=MealPlan(
            restaurant="Evening Bistro",
            cuisine="Contemporary",
            cost="$35",
            specialties=["Chef's special", "Local wine"],
        ),
        evening=ScheduledActivity(
            activity="Evening walk",
            location="Waterfront",
            cost="Free",
            tips=["Beautiful sunset views"],
        ),
    )


def _cost_breakdown(duration: int) -> CostBreakdown:
    ranges = {
        name: CostRange(min=low * duration, max=high * duration)
        for name, (low, high) in DAILY_COST_BOUNDS.items()
    }
    return CostBreakdown(**ranges)


def hotel_price_range(tier: BudgetTier) -> str:
    return HOTEL_PRICE_BY_TIER[tier]


def build_comprehensive_fallback(request: DetailedItineraryRequest) -> DetailedDestinationPlan:
    destination = request.destination
    return DetailedDestinationPlan(
        destination=destination,
        overview=f"{destination} offers rich cultural experiences and attractions.",
        best_time_to_visit="Year-round",
        safety_rating=8,
        safety_tips=["Stay aware of surroundings", "Use official transportation"],
        cultural_tips=["Learn basic local phrases", "Respect local customs"],
        hotels=[
            HotelRecommendation(
                name="Central Plaza Hotel",
                category=request.budget,
                price_range=hotel_price_range(request.budget),
                location="City Center",
                amenities=["WiFi", "Breakfast", "Concierge"],
                rating=4.2,
                booking_tips="Book 2 weeks in advance",
                address=f"Main Square, {destination}",
            )
        ],
        restaurants=[
            RestaurantRecommendation(
                name="Local Heritage Restaurant",
                cuisine="Traditional",
                meal_type="dinner",
                price_range="$25-40",
                specialties=["Regional specialty", "Traditional dessert"],
                location="Historic Quarter",
                reservation_required=True,
                rating=4.6,
                dietary_options=["Vegetarian options"],
            )
        ],
        attractions=[
            AttractionRecommendation(
                name=f"{destination} Cultural Center",
                type="Cultural Site",
                description="Main cultural attraction showcasing local heritage",
                duration="2-3 hours",
                best_time="Morning",
                ticket_price="$15-20",
                location="Cultural District",
                crowd_level="moderate",
                accessibility=["Wheelchair accessible"],
                tips=["Free guided tours at 10am and 2pm"],
            )
        ],
        transportation=TransportationOptions(
            airport=[
                TransportRecommendation(
                    mode="Airport Shuttle",
                    description="Direct service to city center",
                    cost="$15-25",
                    duration="45 minutes",
                    booking_info="Available at arrivals",
                    tips=["Runs every 30 minutes"],
                    accessibility=["Wheelchair accessible"],
                )
            ],
            local=[
                TransportRecommendation(
                    mode="City Bus",
                    description="Comprehensive bus network",
                    cost="$2 per ride",
                    duration="Varies",
                    booking_info="Pay on board or use app",
                    tips=["Get a day pass for $8"],
                    accessibility=["Most buses accessible"],
                )
            ],
            intercity=[
                TransportRecommendation(
                    mode="Regional Train",
                    description="Connect to nearby destinations",
                    cost="$20-45",
                    duration="1-4 hours",
                    booking_info="Book at station or online",
                    tips=["Discounts for advance booking"],
                    accessibility=["Accessible cars available"],
                )
            ],
        ),
        daily_itinerary=[
            _daily_plan(destination, i, day_date)
            for i, day_date in enumerate(_trip_dates(request.start_date, request.duration))
        ],
        cost_breakdown=_cost_breakdown(request.duration),
        packing_list=[
            "Comfortable walking shoes",
            "Weather-appropriate clothing",
            "Portable charger",
            "Travel documents",
            "Camera",
            "Sunscreen",
        ],
        emergency_info=EmergencyInfo(
            emergency_number="Emergency services",
            hospitals=[f"{destination} General Hospital"],
            embassies=["Contact your local embassy"],
            important_phones=["Tourist information: Local number"],
        ),
    )


def build_location_fallback(destination: str) -> LocationRecommendations:
    return LocationRecommendations(
        restaurants=[
            RestaurantPick(
                name="Local Favorite Restaurant",
                cuisine="Local",
                price_range="$$",
                description=f"Popular local restaurant in {destination}",
                location="City Center",
                must_try=["Local specialty dish", "Traditional dessert"],
            )
        ],
        sightseeing=[
            SightseeingPick(
                name=f"{destination} Main Attraction",
                type="Historical Site",
                description=f"Must-visit landmark in {destination}",
                duration="2-3 hours",
                best_time="Morning",
                ticket_price="Varies",
            )
        ],
        transportation=TransportAdvice(
            local=LocalTransport(
                modes=["Walking", "Public Transport", "Taxi"],
                tips=["Use local transport apps", "Keep small change handy"],
            )
        ),
        nightlife=[
            NightlifePick(
                name="Local Bar District",
                type="Entertainment Area",
                description=f"Popular nightlife area in {destination}",
                price_range="$$",
            )
        ],
        shopping=[
            ShoppingPick(
                name="Local Market",
                type="Traditional Market",
                description=f"Traditional shopping area in {destination}",
                specialties=["Local crafts", "Souvenirs"],
            )
        ],
        tips=[
            "Learn basic local phrases",
            "Carry local currency",
            "Respect local customs",
        ],
    )
