import pytest

from app.core.db import InMemoryCustomerRepository
from app.core.errors import CustomerNotFoundError, CustomerReferenceError, CustomerValidationError
from app.models.domain_models import Customer
from app.schemas.customer_schemas import CustomerCreate
from app.services import customer_service


def seeded_repo():
    return InMemoryCustomerRepository([
        Customer(id=1, first_name="Aarav", last_name="Sharma", city="Mumbai", company="TCS"),
        Customer(id=2, first_name="Priya", last_name="Iyer", city="Chennai", company="Infosys"),
        Customer(id=3, first_name="Rohan", last_name="Mehta", city="Mumbai", company="Wipro"),
    ])


def test_list_without_filters_returns_everything_in_order():
    got = customer_service.list_customers(seeded_repo())
    assert [c.id for c in got] == [1, 2, 3]


def test_list_substring_match_anywhere():
    got = customer_service.list_customers(seeded_repo(), last_name="HT")
    assert [c.id for c in got] == [3]


def test_list_pagination_slices_filtered_set():
    got = customer_service.list_customers(seeded_repo(), city="mumbai", page=2, limit=1)
    assert [c.id for c in got] == [3]


def test_get_customer_by_id():
    assert customer_service.get_customer(seeded_repo(), 2).first_name == "Priya"


def test_get_missing_customer_raises():
    with pytest.raises(CustomerNotFoundError) as exc:
        customer_service.get_customer(seeded_repo(), 42)
    assert exc.value.status_code == 404
    assert exc.value.message == "Customer not found"


def test_list_cities():
    got = customer_service.list_cities(seeded_repo())
    assert [(c.city, c.customer_count) for c in got] == [("Mumbai", 2), ("Chennai", 1)]


def test_create_with_known_city_and_company():
    repo = seeded_repo()
    payload = CustomerCreate(first_name="A", last_name="B", city="Chennai", company="Wipro")
    created = customer_service.create_customer(repo, payload)
    assert created.id == 4
    assert repo.all()[-1] is created


def test_create_missing_field_raises_validation_error():
    payload = CustomerCreate(first_name="A", last_name="B", city="Chennai")
    with pytest.raises(CustomerValidationError):
        customer_service.create_customer(seeded_repo(), payload)


def test_create_unknown_company_raises_reference_error():
    payload = CustomerCreate(first_name="A", last_name="B", city="Chennai", company="Acme")
    with pytest.raises(CustomerReferenceError) as exc:
        customer_service.create_customer(seeded_repo(), payload)
    assert exc.value.message == "City or Company does not exist"


def test_next_id_follows_highest_existing_id():
    customers = [
        Customer(id=1, first_name="a", last_name="b", city="c", company="d"),
        Customer(id=7, first_name="a", last_name="b", city="c", company="d"),
    ]
    assert customer_service.next_customer_id(customers) == 8
    assert customer_service.next_customer_id([]) == 1
