import json
import logging
from abc import ABC, abstractmethod
from functools import lru_cache
from pathlib import Path
from typing import Iterable, List, Optional

from sqlmodel import SQLModel, Session, create_engine, select

from app.core.config import settings
from app.models.domain_models import Customer

logger = logging.getLogger(__name__)


class CustomerRepository(ABC):
    """Read/write contract the customer service depends on."""

    @abstractmethod
    def init(self) -> None:
        """Create the backing store if it does not exist yet."""

    @abstractmethod
    def all(self) -> List[Customer]:
        """Return every customer in stored order."""

    @abstractmethod
    def add(self, customer: Customer) -> Customer:
        """Append one customer and persist it."""


class JsonFileCustomerRepository(CustomerRepository):
    """
    Keeps the whole collection as one JSON array. Every read parses the full
    file and every write rewrites it.
    """

    def __init__(self, path):
        self.path = Path(path)

    def init(self) -> None:
        if self.path.exists():
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._write([])
        logger.info("Created empty customers file at %s", self.path)

    def all(self) -> List[Customer]:
        with open(self.path, "r", encoding="utf-8") as f:
            arr = json.load(f)
        return [Customer(**c) for c in arr]

    def add(self, customer: Customer) -> Customer:
        customers = self.all()
        customers.append(customer)
        self._write(customers)
        return customer

    def _write(self, customers: Iterable[Customer]) -> None:
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump([c.to_record() for c in customers], f, indent=2)


class InMemoryCustomerRepository(CustomerRepository):
    def __init__(self, customers: Optional[Iterable[Customer]] = None):
        self._customers = list(customers or [])

    def init(self) -> None:
        pass

    def all(self) -> List[Customer]:
        return list(self._customers)

    def add(self, customer: Customer) -> Customer:
        self._customers.append(customer)
        return customer


class SqlCustomerRepository(CustomerRepository):
    def __init__(self, database_url: str):
        connect_args = {}
        if database_url.startswith("sqlite"):
            # handlers run in the threadpool, not the thread that opened the connection
            connect_args = {"check_same_thread": False}
        self.engine = create_engine(database_url, echo=False, connect_args=connect_args)

    def init(self) -> None:
        SQLModel.metadata.create_all(bind=self.engine)

    def all(self) -> List[Customer]:
        with Session(self.engine) as db:
            return list(db.exec(select(Customer).order_by(Customer.id)).all())

    def add(self, customer: Customer) -> Customer:
        with Session(self.engine) as db:
            db.add(customer)
            db.commit()
            db.refresh(customer)
        return customer


def build_repository(backend: str) -> CustomerRepository:
    if backend == "json":
        return JsonFileCustomerRepository(settings.CUSTOMERS_FILE)
    if backend == "memory":
        return InMemoryCustomerRepository()
    if backend == "sql":
        return SqlCustomerRepository(settings.DATABASE_URL)
    raise ValueError(f"Unknown STORAGE_BACKEND: {backend!r}")


@lru_cache(maxsize=1)
def get_repository() -> CustomerRepository:
    return build_repository(settings.STORAGE_BACKEND)


def init_db():
    repo = get_repository()
    repo.init()
    logger.info("Storage backend %r ready", settings.STORAGE_BACKEND)
