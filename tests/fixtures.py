"""Models, presenters and paginators shared by the test modules."""

from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel

from presenter import Presenter


class User:
    def __init__(self, firstname: str, lastname: str, email: str):
        self.firstname = firstname
        self.lastname = lastname
        self.email = email

    def fullname(self) -> str:
        return f"{self.firstname} {self.lastname}"

    def greet(self, greeting: str, punctuation: str = "!") -> str:
        return f"{greeting}, {self.firstname}{punctuation}"

    def fail(self) -> None:
        raise RuntimeError("model failure")

    def to_dict(self) -> dict[str, Any]:
        return {
            "firstname": self.firstname,
            "lastname": self.lastname,
            "email": self.email,
        }


class Account(BaseModel):
    id: int
    owner: str
    tags: list[str] = []

    def label(self) -> str:
        return f"#{self.id} {self.owner}"


class Opaque:
    """A model with no serializer of its own."""

    name = "opaque"


def make_users(count: int) -> list[User]:
    return [
        User(f"First{i}", f"Last{i}", f"user{i}@example.com")
        for i in range(1, count + 1)
    ]


class PlainPresenter(Presenter):
    pass


class UserPresenter(Presenter[User]):
    pass


class ContactPresenter(Presenter[User]):
    def to_dict(self):
        return {"fullname": self.fullname(), "email": self.email}


class ShoutingPresenter(Presenter[User]):
    @property
    def firstname(self) -> str:
        return self.get_model().firstname.upper()


@dataclass
class StubPaginator:
    items: list[Any] = field(default_factory=list)
    current_page: int = 1
    last_page: int = 100
    per_page: int = 15
    total: int = 10
    first_item: int | None = 1
    last_item: int | None = 10
    path: str = "http://example.com/pagination"


class IncompletePaginator:
    items: list[Any] = []
    current_page = 1
    path = "http://example.com/pagination"


class MisspelledPresenter(Presenter[User]):
    @property
    def firstname(self) -> str:
        return self.get_model().first_name
