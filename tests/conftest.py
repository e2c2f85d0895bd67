import pytest

from contactbook.application import ContactService
from contactbook.infrastructure import InMemoryContactRepository

ALICE = {"fname": "Alice", "lname": "Smith", "email": "alice@example.com", "birthday": "1990-04-12"}
BOB = {"fname": "Bob", "lname": "Jones", "email": "bob@example.com", "birthday": "1985-11-02"}
CAROL = {"fname": "Carol", "lname": "Adams", "email": "carol@example.com", "birthday": "1999-01-30"}


@pytest.fixture
def repo() -> InMemoryContactRepository:
    return InMemoryContactRepository()


@pytest.fixture
def service(repo) -> ContactService:
    return ContactService(repo)
