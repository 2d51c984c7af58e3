"""Civic library: Google Civic Information API access and normalization.

Public API:
    - GoogleCivicClient: Async provider client
    - normalize_voter_info / normalize_elections: Payload → domain records
    - CivicProviderError and subclasses: Provider failure types
"""

from election_watch.lib.civic.client import GoogleCivicClient
from election_watch.lib.civic.errors import (
    CivicProviderError,
    MalformedResponseError,
    ProviderConfigurationError,
    ProviderUnavailableError,
)
from election_watch.lib.civic.normalizer import normalize_elections, normalize_voter_info
from election_watch.lib.civic.records import ElectionList, VoterInfoResult

__all__ = [
    "CivicProviderError",
    "ElectionList",
    "GoogleCivicClient",
    "MalformedResponseError",
    "ProviderConfigurationError",
    "ProviderUnavailableError",
    "VoterInfoResult",
    "normalize_elections",
    "normalize_voter_info",
]
