"""Identity resolver — first name of a linked account via Cognito ``GetUser``.

The access token comes from the skill session once the user has linked
their account. Cognito answers with an unordered ``UserAttributes`` list
of ``{"Name": ..., "Value": ...}`` pairs.
"""

from __future__ import annotations

from collections.abc import Sequence

import httpx
from loguru import logger
from pydantic import ValidationError

from nationality_guesser.clients.http import UpstreamError, post_json
from nationality_guesser.models import UserAttribute, UserProfile
from nationality_guesser.settings import get_settings

_HEADERS = {
    "Content-Type": "application/x-amz-json-1.1",
    "X-Amz-Target": "AWSCognitoIdentityProviderService.GetUser",
}


def find_attribute(attributes: Sequence[UserAttribute], name: str) -> str:
    """Value of the first attribute called ``name``, or ``""``."""
    for attr in attributes:
        if attr.Name == name:
            return attr.Value
    return ""


class IdentityClient:
    """Exchanges an access token for the user's profile."""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        attribute: str | None = None,
    ):
        settings = get_settings()
        self._base_url = base_url or settings.cognito_url
        self._timeout = timeout if timeout is not None else settings.http_timeout
        self._transport = transport
        self._attribute = attribute or settings.given_name_attribute

    async def fetch_profile(self, access_token: str) -> UserProfile:
        data = await post_json(
            self._base_url,
            {"AccessToken": access_token},
            headers=_HEADERS,
            timeout=self._timeout,
            transport=self._transport,
        )
        try:
            return UserProfile.model_validate(data)
        except ValidationError as exc:
            raise UpstreamError(f"Unexpected identity payload: {exc}") from exc

    async def fetch_given_name(self, access_token: str) -> str:
        """First name on the linked account. Empty when unlinked or not set."""
        if not access_token:
            logger.warning("Guess with account requested but no access token in session")
            return ""
        profile = await self.fetch_profile(access_token)
        name = find_attribute(profile.UserAttributes, self._attribute)
        if not name:
            logger.warning(f"Linked profile has no '{self._attribute}' attribute")
        return name
