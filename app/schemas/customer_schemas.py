# app/schemas/customer_schemas.py
from pydantic import BaseModel
from typing import Optional


class CustomerCreate(BaseModel):
    # all optional here so a missing field reaches the service and gets the 400 body
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    city: Optional[str] = None
    company: Optional[str] = None


class CustomerOut(BaseModel):
    id: int
    first_name: str
    last_name: str
    city: str
    company: str

    class Config:
        from_attributes = True


class CityCount(BaseModel):
    city: str
    customer_count: int


class ErrorOut(BaseModel):
    error: str
