"""
Configuration settings for the Family-Care Leave Subsidy Eligibility Service
"""
from typing import List, Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # Application Configuration
    app_name: str = Field(default="Family-Care Leave Subsidy Eligibility Service")
    app_version: str = Field(default="1.0.0")
    debug: bool = Field(default=False)
    log_level: str = Field(default="INFO")

    # API Configuration
    api_prefix: str = Field(default="/api/v1")
    cors_origins: str = Field(default="http://localhost:3000,http://localhost:8080")

    # Subsidy order (monthly amounts per scenario)
    subsidy_order_year: int = Field(default=2025, description="Year of the governing administrative order")
    subsidy_orders_file: Optional[str] = Field(
        default=None,
        description="Path to an alternate subsidy orders JSON file"
    )

    # Evaluation policy
    hospitalization_blocking: bool = Field(
        default=True,
        description="Whether hospitalization is a blocking requirement in scenario A"
    )
    base_age_limit: int = Field(default=6, ge=1)
    extended_age_limit: int = Field(default=9, ge=1)
    disability_threshold: float = Field(default=33, ge=0, le=100)
    minimum_foster_months: int = Field(default=12, ge=0)

    def get_cors_origins_list(self) -> List[str]:
        """Get CORS origins as a list"""
        if ',' in self.cors_origins:
            return [origin.strip() for origin in self.cors_origins.split(',')]
        return [self.cors_origins.strip()]

    model_config = SettingsConfigDict(
        env_prefix="CARELEAVE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


# Create global settings instance
settings = Settings()
