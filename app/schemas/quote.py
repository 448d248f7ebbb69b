# app/schemas/quote.py
from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from pydantic.alias_generators import to_camel


class City(str, Enum):
    QUEENS = "Queens"
    NASSAU = "Nassau"


class CleaningType(str, Enum):
    BASIC = "basic"
    DEEP = "deep"
    SPECIALIZED = "specialized"


class ServiceFrequency(str, Enum):
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    ONE_TIME = "one-time"


class AdditionalService(str, Enum):
    WINDOWS = "windows"
    CARPET = "carpet"
    DISINFECTION = "disinfection"


class _CamelModel(BaseModel):
    # JSON uses the form's camelCase names, python code uses snake_case
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class QuoteRequest(_CamelModel):
    client_name: str = Field(min_length=1)
    email: EmailStr
    address: str = Field(min_length=1)
    city: City
    # a JSON number only: no numeric strings, booleans or inf/nan
    property_size: float = Field(gt=0, strict=True, allow_inf_nan=False, description="square feet")
    cleaning_type: CleaningType
    service_frequency: ServiceFrequency
    additional_services: List[AdditionalService] = Field(default_factory=list)

    @field_validator("client_name", "address", mode="before")
    @classmethod
    def _strip(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator("additional_services", mode="before")
    @classmethod
    def _none_is_empty(cls, v):
        return [] if v is None else v

    @field_validator("additional_services")
    @classmethod
    def _unique(cls, v: List[AdditionalService]) -> List[AdditionalService]:
        # a set of services; keep the order they were picked in
        return list(dict.fromkeys(v))


class CostBreakdown(_CamelModel):
    base_cost: float
    labor_cost: float
    supplies_cost: float
    specialized_cost: float
    overhead_cost: float
    travel_cost: float
    total_cost: float


class QuoteSubmission(_CamelModel):
    breakdown: CostBreakdown
    total_cost: float
