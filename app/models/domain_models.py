# app/models/domain_models.py
from sqlmodel import SQLModel, Field
from typing import Optional


class Customer(SQLModel, table=True):
    """
    One customer record. The same model backs the JSON file store and the
    SQL table, so both backends hand the service identical objects.
    """
    id: Optional[int] = Field(default=None, primary_key=True)
    first_name: str
    last_name: str
    city: str = Field(index=True)
    company: str = Field(index=True)

    def to_record(self) -> dict:
        # field order matches the persisted JSON layout
        return {
            "id": self.id,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "city": self.city,
            "company": self.company,
        }
