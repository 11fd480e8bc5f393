"""
Customer Module - Address Model
=================================
Saved shipping addresses, append-only on the user record.
"""

from pydantic import BaseModel, ConfigDict


class Address(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    street: str
    city: str
    state: str
    zip: str
    country: str = "USA"

    def one_line(self) -> str:
        return f"{self.street}, {self.city}, {self.state} {self.zip}, {self.country}"
