"""
Ainfinit SDK Configuration Types and Schema
Type-safe configuration objects for the Ainfinit SDK
"""

from typing import Optional
from pydantic import BaseModel, Field, field_validator, model_validator


# Production endpoint of the vending platform
DEFAULT_BASE_URL = "https://ainfinit.mtm.mn"


class ConfigDefaults:
    """Default configuration values"""
    BASE_URL = DEFAULT_BASE_URL
    TIMEOUT = 30000
    DEBUG = False
    ENABLE_AUDIT_LOG = False
    USER_AGENT = "ainfinit-sdk-python"


# Environment variable mapping
ENV_VAR_MAPPING = {
    "AINFINIT_MERCHANT_CODE": "merchant_code",
    "AINFINIT_SECRET_KEY": "secret_key",
    "AINFINIT_BASE_URL": "base_url",
    "AINFINIT_TIMEOUT": "timeout",
    "AINFINIT_DEBUG": "debug",
    "AINFINIT_ENABLE_AUDIT_LOG": "enable_audit_log",
    "AINFINIT_USER_AGENT": "user_agent",
}


class AinfinitConfig(BaseModel):
    """
    Main Ainfinit configuration class
    Defines all configuration options for the SDK client
    """

    # Required - Merchant credentials
    merchant_code: str = Field(
        ...,
        description="Merchant code issued by the platform",
        min_length=1
    )
    secret_key: str = Field(
        ...,
        description="Merchant secret key used as the AES signing key",
        min_length=1,
        repr=False
    )

    # Optional - Transport settings
    base_url: Optional[str] = Field(
        default=None,
        description="Override default base URL"
    )
    timeout: int = Field(
        default=ConfigDefaults.TIMEOUT,
        description="Request timeout in milliseconds",
        ge=1000,
        le=300000
    )
    user_agent: str = Field(
        default=ConfigDefaults.USER_AGENT,
        description="User-Agent header sent with every request"
    )

    # Optional - Diagnostics
    debug: bool = Field(
        default=ConfigDefaults.DEBUG,
        description="Log requests and responses at DEBUG level"
    )
    enable_audit_log: bool = Field(
        default=ConfigDefaults.ENABLE_AUDIT_LOG,
        description="Emit audit entries to the registered callback"
    )

    model_config = {
        "str_strip_whitespace": True,
        "validate_assignment": True,
    }

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: Optional[str]) -> Optional[str]:
        """Validate base_url is a valid URL"""
        if v is not None and v != "":
            if not v.startswith(("http://", "https://")):
                raise ValueError("base_url must be a valid HTTP/HTTPS URL")
        return v

    @model_validator(mode="after")
    def set_default_base_url(self) -> "AinfinitConfig":
        """Fall back to the production URL when no base_url is given"""
        if not self.base_url:
            self.base_url = DEFAULT_BASE_URL
        return self

    def get_resolved_base_url(self) -> str:
        """Get the resolved base URL without a trailing slash"""
        return (self.base_url or DEFAULT_BASE_URL).rstrip("/")
