import logging
import threading
from typing import List, Optional

from app.core.db import CustomerRepository
from app.core.errors import CustomerNotFoundError, CustomerReferenceError, CustomerValidationError
from app.models.domain_models import Customer
from app.schemas.customer_schemas import CityCount, CustomerCreate

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("first_name", "last_name", "city", "company")

# serializes the read-validate-append cycle of create_customer
_create_lock = threading.Lock()


def _contains(value: str, needle: Optional[str]) -> bool:
    if not needle:
        return True
    return needle.lower() in value.lower()


def list_customers(
    repo: CustomerRepository,
    first_name: Optional[str] = None,
    last_name: Optional[str] = None,
    city: Optional[str] = None,
    page: int = 1,
    limit: int = 10,
) -> List[Customer]:
    """
    Filter by case-insensitive substrings (all supplied filters must match),
    then return the requested page. Pages start at 1.
    """
    customers = [
        c for c in repo.all()
        if _contains(c.first_name, first_name)
        and _contains(c.last_name, last_name)
        and _contains(c.city, city)
    ]
    start = (page - 1) * limit
    return customers[start:start + limit]


def get_customer(repo: CustomerRepository, customer_id: int) -> Customer:
    for c in repo.all():
        if c.id == customer_id:
            return c
    raise CustomerNotFoundError()


def list_cities(repo: CustomerRepository) -> List[CityCount]:
    counts = {}
    for c in repo.all():
        counts[c.city] = counts.get(c.city, 0) + 1
    return [CityCount(city=city, customer_count=n) for city, n in counts.items()]


def next_customer_id(customers: List[Customer]) -> int:
    return max((c.id for c in customers), default=0) + 1


def create_customer(repo: CustomerRepository, payload: CustomerCreate) -> Customer:
    if not all(getattr(payload, f) for f in REQUIRED_FIELDS):
        logger.info("Rejected customer create: missing fields")
        raise CustomerValidationError()

    with _create_lock:
        customers = repo.all()

        # both the city and the company must already be on file
        city_known = any(c.city == payload.city for c in customers)
        company_known = any(c.company == payload.company for c in customers)
        if not city_known or not company_known:
            logger.info(
                "Rejected customer create: city=%r known=%s, company=%r known=%s",
                payload.city, city_known, payload.company, company_known,
            )
            raise CustomerReferenceError()

        customer = Customer(
            id=next_customer_id(customers),
            first_name=payload.first_name,
            last_name=payload.last_name,
            city=payload.city,
            company=payload.company,
        )
        repo.add(customer)

    logger.info("Created customer id=%s", customer.id)
    return customer
