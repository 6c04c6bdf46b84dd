"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field

OWM_WEATHER_URL = "http://api.openweathermap.org/data/2.5/weather"
IP_API_URL = "http://ip-api.com/json/?fields=lat,lon"


class ServiceConfig(BaseModel):
    model_config = {"extra": "forbid", "frozen": True}

    weather_url: str = OWM_WEATHER_URL
    geolocation_url: str = IP_API_URL
    language: str = Field(default="fi", min_length=1)
    timeout_seconds: float = Field(default=30.0, gt=0.0)
    user_agent: str = "kivakeli/0.1.0"


class KivaKeliConfig(BaseModel):
    model_config = {"extra": "forbid", "frozen": True}

    service: ServiceConfig = ServiceConfig()
    key_file: str = Field(default="api_key.txt", min_length=1)
