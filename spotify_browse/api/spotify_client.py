"""
Spotify Web API client implementation.
Provides OAuth 2.0 client-credentials authentication for the browse resources.
"""

import base64
import logging
from typing import Dict, Optional
from datetime import datetime, timedelta
from config.settings import Settings
from spotify_browse.api.base_client import BaseAPIClient, AuthenticationError

logger = logging.getLogger(__name__)

# Refresh this many seconds before the token actually expires
TOKEN_EXPIRY_MARGIN = 60

class SpotifyClient(BaseAPIClient):
    """Spotify Web API client with OAuth 2.0 Client Credentials flow."""

    def __init__(
        self,
        client_id: Optional[str] = None,
        client_secret: Optional[str] = None,
        access_token: Optional[str] = None,
        settings: Optional[Settings] = None
    ):
        """
        Initialize Spotify client.

        Args:
            client_id: Spotify application client ID
            client_secret: Spotify application client secret
            access_token: Pre-issued bearer token; skips the client-credentials flow
            settings: Settings to read the API configuration and credentials from
        """
        settings = settings or Settings()
        super().__init__(
            base_url=settings.spotify.base_url,
            timeout=settings.spotify.timeout,
            max_tries=settings.spotify.max_retries
        )
        self.client_id = client_id or settings.SPOTIFY_CLIENT_ID
        self.client_secret = client_secret or settings.SPOTIFY_CLIENT_SECRET
        self.access_token = access_token or settings.SPOTIFY_ACCESS_TOKEN
        self.auth_url = settings.SPOTIFY_AUTH_URL

    async def authenticate(self) -> str:
        """Return the configured access token, or fetch one with the client-credentials flow."""
        if self.access_token:
            self._token_expires_at = datetime.max
            return self.access_token

        if not self.client_id or not self.client_secret:
            raise AuthenticationError("Spotify client ID and secret are required")

        await self._ensure_session()

        # Prepare credentials
        credentials = f"{self.client_id}:{self.client_secret}"
        encoded_credentials = base64.b64encode(credentials.encode()).decode()

        headers = {
            "Authorization": f"Basic {encoded_credentials}",
            "Content-Type": "application/x-www-form-urlencoded"
        }

        data = {"grant_type": "client_credentials"}

        try:
            async with self.session.post(self.auth_url, headers=headers, data=data) as response:
                response.raise_for_status()
                token_data = await response.json()
        except Exception as e:
            logger.error(f"Spotify authentication failed: {e}")
            raise AuthenticationError(f"Failed to authenticate with Spotify: {e}") from e

        if "access_token" not in token_data:
            raise AuthenticationError("Token response did not contain an access token")

        # Set token expiration
        expires_in = token_data.get("expires_in", 3600)
        self._token_expires_at = datetime.now() + timedelta(seconds=expires_in - TOKEN_EXPIRY_MARGIN)
        logger.info(f"Obtained Spotify access token, valid for {expires_in}s")

        return token_data["access_token"]

    def _get_auth_headers(self) -> Dict[str, str]:
        """Get authentication headers for API requests."""
        if self._auth_token:
            return {"Authorization": f"Bearer {self._auth_token}"}
        return {}
