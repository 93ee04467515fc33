"""Client configuration loaded from environment variables and .env file."""

from pydantic import Field
from pydantic_settings import BaseSettings

DEFAULT_BASE_URL = "https://api.emailsrvr.com/"
DEFAULT_USER_AGENT = "rackmail/1.0"


class Settings(BaseSettings):
    """All configuration for a Rackspace Email API client.

    Values are loaded from environment variables prefixed with RACKMAIL_
    or from a .env file in the working directory. They are read once, when
    the client is constructed.
    """

    # Endpoint
    base_url: str = Field(default=DEFAULT_BASE_URL, description="API base URL")
    user_agent: str = Field(
        default=DEFAULT_USER_AGENT, description="User-Agent sent with every request"
    )

    # Credentials
    user_key: str = Field(description="Rackspace API user key")
    secret_key: str = Field(description="Rackspace API secret key")

    # Diagnostics
    debug_http: bool = Field(
        default=False, description="Log full request/response dumps at DEBUG"
    )

    # Rate Limits
    read_rate_per_second: float = Field(
        default=1.9, gt=0, description="Sustained GET requests per second"
    )
    read_burst: int = Field(default=1, ge=1, description="Burst size for GET requests")
    write_rate_per_second: float = Field(
        default=1.4, gt=0, description="Sustained POST/PUT/DELETE requests per second"
    )
    write_burst: int = Field(
        default=1, ge=1, description="Burst size for POST/PUT/DELETE requests"
    )

    # HTTP Client
    http_timeout_seconds: float = Field(default=30, description="HTTP request timeout in seconds")

    # Listing
    default_page_size: int = Field(
        default=50, ge=1, description="Page size used when none is requested"
    )

    model_config = {
        "env_file": ".env",
        "env_prefix": "RACKMAIL_",
        "extra": "ignore",
    }
