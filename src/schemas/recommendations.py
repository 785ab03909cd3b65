"""Point-of-interest recommendation schemas for a single destination."""

from pydantic import Field

from .common import CamelModel


class LocationRecommendationsRequest(CamelModel):
    destination: str = Field(..., min_length=1, max_length=200)
    previous_destination: str | None = Field(default=None, max_length=200)


class RestaurantPick(CamelModel):
    name: str
    cuisine: str
    price_range: str
    description: str
    location: str
    must_try: list[str] = Field(default_factory=list)


class SightseeingPick(CamelModel):
    name: str
    type: str
    description: str
    duration: str
    best_time: str
    ticket_price: str


class TransferFromPrevious(CamelModel):
    modes: list[str]
    duration: str
    cost: str
    recommendations: str


class LocalTransport(CamelModel):
    modes: list[str]
    tips: list[str] = Field(default_factory=list)


class TransportAdvice(CamelModel):
    from_previous: TransferFromPrevious | None = None
    local: LocalTransport


class NightlifePick(CamelModel):
    name: str
    type: str
    description: str
    price_range: str


class ShoppingPick(CamelModel):
    name: str
    type: str
    description: str
    specialties: list[str] = Field(default_factory=list)


class LocationRecommendations(CamelModel):
    restaurants: list[RestaurantPick]
    sightseeing: list[SightseeingPick]
    transportation: TransportAdvice
    nightlife: list[NightlifePick]
    shopping: list[ShoppingPick]
    tips: list[str]
