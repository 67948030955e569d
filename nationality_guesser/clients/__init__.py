"""HTTP clients for the upstream prediction, country and identity services."""

from nationality_guesser.clients.countries import CountryClient
from nationality_guesser.clients.http import UpstreamError
from nationality_guesser.clients.identity import IdentityClient
from nationality_guesser.clients.nationalize import PredictionClient

__all__ = ["CountryClient", "IdentityClient", "PredictionClient", "UpstreamError"]
