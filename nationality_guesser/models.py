"""Wire-level models for the upstream prediction, country and identity services."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Prediction(BaseModel):
    """One nationality guess: a country code and its probability in [0, 1]."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    country_id: str
    probability: float


class PredictionsPayload(BaseModel):
    """Body returned by the prediction service. ``country`` is ordered most likely first."""

    model_config = ConfigDict(extra="ignore")

    name: str | None = None
    country: list[Prediction] = Field(default_factory=list)


class Country(BaseModel):
    """Country reference record, reduced to the fields the skill narrates."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    code: str = Field(alias="alpha2Code")
    demonym: str | None = None


class UserAttribute(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    Name: str
    Value: str = ""


class UserProfile(BaseModel):
    model_config = ConfigDict(extra="ignore")

    Username: str = ""
    UserAttributes: list[UserAttribute] = Field(default_factory=list)
