"""Configuration management for ReviewLens."""

from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Application settings."""
    
    # Logging
    log_level: str = Field("INFO", description="Logging level")
    
    # Lexicon
    lexicon_source: str = Field("afinn", description="Lexicon source: afinn, vader or file")
    lexicon_path: str = Field("", description="Tab-separated word list used when lexicon_source=file")
    
    # Analysis settings
    min_reviews: int = Field(2, description="Minimum number of reviews for a report")
    
    # Store fetching
    store_country: str = Field("us", description="Store country code")
    store_lang: str = Field("en", description="Store review language")
    playstore_review_count: int = Field(150, description="Reviews requested from Google Play")
    appstore_max_pages: int = Field(5, description="RSS pages read from the App Store feed")
    request_timeout: float = Field(10.0, description="HTTP timeout in seconds")
    
    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


# Global settings instance
settings = Settings()
