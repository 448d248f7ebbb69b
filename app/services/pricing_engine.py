# app/services/pricing_engine.py
from typing import Dict

from app.core.errors import InvalidInput
from app.schemas.quote import City, CleaningType, CostBreakdown, QuoteRequest

# rates per square foot
BASE_RATE = 0.10
LABOR_RATE = 0.05
SUPPLIES_RATE = 0.02
SPECIALIZED_RATE = 0.03

OVERHEAD_RATE = 0.15

TRAVEL_COST: Dict[City, float] = {
    City.QUEENS: 50.0,
    City.NASSAU: 30.0,
}


def travel_cost_for(city) -> float:
    try:
        return TRAVEL_COST[City(city)]
    except ValueError:
        raise InvalidInput(
            f"Unknown city: {city!r}. Valid options: {[c.value for c in City]}"
        ) from None


def compute_breakdown(request: QuoteRequest) -> CostBreakdown:
    """
    Price a cleaning quote.

    The request is trusted to be validated already (property_size > 0, enums
    in range). Nothing is rounded here; rounding to cents is up to whoever
    displays the numbers. service_frequency and additional_services do not
    change the price.

    Raises:
        InvalidInput: city is not one we have a travel fee for.
    """
    size = request.property_size

    base_cost = size * BASE_RATE
    labor_cost = size * LABOR_RATE
    supplies_cost = size * SUPPLIES_RATE
    specialized_cost = (
        size * SPECIALIZED_RATE if request.cleaning_type == CleaningType.SPECIALIZED else 0.0
    )
    overhead_cost = (base_cost + labor_cost + supplies_cost + specialized_cost) * OVERHEAD_RATE
    travel_cost = travel_cost_for(request.city)

    total_cost = (
        base_cost
        + labor_cost
        + supplies_cost
        + specialized_cost
        + overhead_cost
        + travel_cost
    )

    return CostBreakdown(
        base_cost=base_cost,
        labor_cost=labor_cost,
        supplies_cost=supplies_cost,
        specialized_cost=specialized_cost,
        overhead_cost=overhead_cost,
        travel_cost=travel_cost,
        total_cost=total_cost,
    )
