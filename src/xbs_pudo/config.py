"""Service configuration."""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class SenderDefaults(BaseModel):
    """Business address used when a shipment omits consignor fields."""

    name: str = "Andypola"
    company: str = "Andypola"
    address1: str = "Calafates 6"
    address2: str = ""
    city: str = "Santa Pola"
    zip: str = "03130"
    country_code: str = "ES"
    phone: str = ""
    email: str = ""
    vat: str = ""
    eori: str = ""

    def as_address(self) -> dict[str, str]:
        return {
            "Name": self.name,
            "Company": self.company,
            "Address1": self.address1,
            "Address2": self.address2,
            "City": self.city,
            "Zip": self.zip,
            "CountryCode": self.country_code,
            "Phone": self.phone,
            "Email": self.email,
            "Vat": self.vat,
            "Eori": self.eori,
        }


class PudoConfig(BaseSettings):
    """Runtime config for the PUDO service.

    Reads from environment variables with XBS_ prefix. Nested sender
    fields use a double underscore, e.g. ``XBS_SENDER__NAME``.
    """

    model_config = SettingsConfigDict(
        env_prefix="XBS_",
        env_file=".env",
        env_nested_delimiter="__",
        extra="ignore",
    )

    # Aggregator
    api_key: str = ""
    api_url: str = "https://mtapi.net/"
    test_mode: bool = True
    request_timeout: float = 10.0

    # Pickup-point lookup
    allowed_countries: list[str] = Field(
        default_factory=lambda: ["FR", "PL", "IT", "ES", "PT"]
    )
    city_required_countries: list[str] = Field(default_factory=lambda: ["IT"])
    carriers: dict[str, str] = Field(
        default_factory=lambda: {"FR": "colis prive", "PL": "inpost"}
    )
    shipping_methods: dict[str, str] = Field(
        default_factory=lambda: {
            "InPost z Hiszpanii": "PL",
            "France-Continent (Point Pack et Locker)": "FR",
        }
    )
    fallback_country: str = "FR"
    cache_enabled: bool = False
    cache_ttl_seconds: int = 6 * 60 * 60
    cache_max_countries: int | None = None

    # Shipments
    default_service: str = "CLLCT"
    pudo_services: list[str] = Field(default_factory=lambda: ["CLLCT"])
    default_currency: str = "EUR"
    default_hs_code: str = "392690"
    label_format: str = "PDF"
    sender: SenderDefaults = Field(default_factory=SenderDefaults)

    # Order platform
    shopify_domain: str = ""
    shopify_access_token: str = ""
    shopify_api_version: str = "2024-01"
    placeholder_orders: bool = False

    host: str = "0.0.0.0"
    port: int = 3000

    @property
    def shopify_configured(self) -> bool:
        return bool(self.shopify_domain and self.shopify_access_token)
