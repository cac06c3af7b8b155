"""
CORS configuration settings.

Dependencies: pydantic_settings
System role: Browser origin allow-list for the dashboard front-end
"""

from pydantic import Field

from podcast_analytics.configs.base import BaseSettings


class CorsSettings(BaseSettings):
    """Allowed browser origins."""

    frontend_url: str | None = Field(default=None, description="Deployed front-end origin")
    cors_origins: list[str] = Field(
        default=[
            "http://localhost:5173",
            "http://localhost:5174",
            "http://localhost:3000",
        ],
        description="Additional allowed origins",
    )

    @property
    def allowed_origins(self) -> list[str]:
        """
        Merge configured origins with the front-end URL.

        Returns:
            list[str]: De-duplicated origin list, order preserved
        """
        origins = list(self.cors_origins)
        if self.frontend_url:
            origins.append(self.frontend_url.rstrip("/"))
        return list(dict.fromkeys(o for o in origins if o))
