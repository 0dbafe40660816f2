# app/api/routes_customers.py
import re
from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse
from typing import List, Optional

from app.core.config import settings
from app.core.db import CustomerRepository, get_repository
from app.core.errors import CustomerDirectoryError, CustomerNotFoundError
from app.schemas.customer_schemas import CityCount, CustomerCreate, CustomerOut, ErrorOut
from app.services import customer_service

router = APIRouter(tags=["customers"])

CUSTOMER_ID_RE = re.compile(r"[+-]?[0-9]+")


def error_response(err: CustomerDirectoryError) -> JSONResponse:
    return JSONResponse(status_code=err.status_code, content={"error": err.message})


@router.get("/customers", response_model=List[CustomerOut])
def list_customers(
    first_name: Optional[str] = None,
    last_name: Optional[str] = None,
    city: Optional[str] = None,
    page: int = Query(1, ge=1),
    limit: int = Query(settings.DEFAULT_PAGE_LIMIT, ge=1, le=settings.MAX_PAGE_LIMIT),
    repo: CustomerRepository = Depends(get_repository),
):
    return customer_service.list_customers(
        repo, first_name=first_name, last_name=last_name, city=city, page=page, limit=limit
    )


@router.get("/customers/{customer_id}", response_model=CustomerOut, responses={404: {"model": ErrorOut}})
def get_customer(customer_id: str, repo: CustomerRepository = Depends(get_repository)):
    # only a plain integer can match a record id
    if not CUSTOMER_ID_RE.fullmatch(customer_id):
        return error_response(CustomerNotFoundError())

    try:
        return customer_service.get_customer(repo, int(customer_id))
    except CustomerDirectoryError as err:
        return error_response(err)


@router.get("/cities", response_model=List[CityCount])
def list_cities(repo: CustomerRepository = Depends(get_repository)):
    return customer_service.list_cities(repo)


@router.post("/customers", response_model=CustomerOut, status_code=201, responses={400: {"model": ErrorOut}})
def create_customer(body: Optional[CustomerCreate] = None, repo: CustomerRepository = Depends(get_repository)):
    # no body at all counts as every field missing
    try:
        return customer_service.create_customer(repo, body or CustomerCreate())
    except CustomerDirectoryError as err:
        return error_response(err)
