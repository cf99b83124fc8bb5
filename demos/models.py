"""
Sample documents written by the document, trigger and UDF demos.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from shared.cosmos_config import DEMO_DOCUMENT_TAG


class _Document(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Location(_Document):
    city: str
    state_province_name: str


class Address(_Document):
    address_type: str = "Main Office"
    address_line1: str
    location: Location
    postal_code: str
    country_region_name: str


class Customer(_Document):
    id: str
    name: str
    address: Address
    demo: str = Field(default=DEMO_DOCUMENT_TAG)
    is_new: Optional[bool] = None

    def to_document(self) -> Dict[str, Any]:
        """Serialize with the camelCase property names stored in Cosmos DB."""
        return self.model_dump(by_alias=True, exclude_none=True)


def new_customer(
    id: str,
    name: str,
    city: str,
    state: str,
    postal_code: str,
    country: str = "United States",
) -> Customer:
    return Customer(
        id=id,
        name=name,
        address=Address(
            address_line1=f"123 {city} Street",
            location=Location(city=city, state_province_name=state),
            postal_code=postal_code,
            country_region_name=country,
        ),
    )
