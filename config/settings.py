"""
Application settings and configuration management.
Handles environment variables, API configuration, and logging defaults.
"""

import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()

@dataclass
class APIConfig:
    """Configuration for external API services."""
    base_url: str
    timeout: int = 30
    max_retries: int = 3

class Settings:
    """Main application settings."""

    def __init__(self):
        # Spotify API Configuration
        self.spotify = APIConfig(
            base_url=os.getenv("SPOTIFY_API_BASE_URL", "https://api.spotify.com/v1"),
            timeout=int(os.getenv("SPOTIFY_TIMEOUT", "30")),
            max_retries=int(os.getenv("SPOTIFY_MAX_RETRIES", "3"))
        )
        self.SPOTIFY_CLIENT_ID = os.getenv("SPOTIFY_CLIENT_ID")
        self.SPOTIFY_CLIENT_SECRET = os.getenv("SPOTIFY_CLIENT_SECRET")
        self.SPOTIFY_ACCESS_TOKEN = os.getenv("SPOTIFY_ACCESS_TOKEN")
        self.SPOTIFY_AUTH_URL = os.getenv("SPOTIFY_AUTH_URL", "https://accounts.spotify.com/api/token")

        # Logging Configuration
        self.log_level = os.getenv("LOG_LEVEL", "INFO")
        self.log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    def validate(self) -> bool:
        """Validate that required configuration is present."""
        required_vars = []

        if not self.SPOTIFY_ACCESS_TOKEN:
            if not self.SPOTIFY_CLIENT_ID:
                required_vars.append("SPOTIFY_CLIENT_ID")
            if not self.SPOTIFY_CLIENT_SECRET:
                required_vars.append("SPOTIFY_CLIENT_SECRET")

        if required_vars:
            raise ValueError(f"Missing required environment variables: {', '.join(required_vars)}")

        return True
