from pydantic import BaseModel, ConfigDict, Field


class CatalogEntry(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    symbol: str
    icon: str
    icon_color: str = Field(alias="iconColor", pattern=r"^[0-9A-Fa-f]{6}$")
    logo_url: str = Field(alias="logoUrl")


class PriceQuote(BaseModel):
    # int stays int so upstream values are emitted as received
    model_config = ConfigDict(populate_by_name=True, allow_inf_nan=False)

    price: int | float
    percent_change_24h: int | float = Field(alias="percentChange24h")
