from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Optional


class ItemKind(str, Enum):
    BOOK = "Book"
    MAGAZINE = "Magazine"


# Loan periods in days, per kind
LOAN_PERIOD_DAYS: Dict[ItemKind, int] = {
    ItemKind.BOOK: 21,
    ItemKind.MAGAZINE: 7,
}

STATUS_AVAILABLE = "Available"
STATUS_CHECKED_OUT = "Checked Out"


@dataclass
class Item:
    """A catalog entry: a book or a magazine, told apart by ``kind``.

    Kind-specific fields stay ``None`` on the other kind. Every item starts
    Available and ``id`` cannot be rebound after construction.
    ``checked_out`` is flipped only by :class:`library.CatalogManager`, which
    guards the Available/Checked Out transitions; :meth:`check_out` and
    :meth:`return_item` themselves do no checking.
    """

    id: int
    title: str
    kind: ItemKind
    author: Optional[str] = None
    isbn: Optional[str] = None
    issue_number: Optional[int] = None
    checked_out: bool = field(default=False, init=False)

    def __post_init__(self) -> None:
        self.title = self.title.strip()
        if self.author is not None:
            self.author = self.author.strip()
        if self.isbn is not None:
            self.isbn = self.isbn.strip() or None

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "id" and "id" in self.__dict__:
            raise AttributeError(f"Item id {self.id} cannot be changed.")
        super().__setattr__(name, value)

    @classmethod
    def book(cls, id: int, title: str, author: str, isbn: Optional[str] = None) -> "Item":
        return cls(id=id, title=title, kind=ItemKind.BOOK, author=author, isbn=isbn)

    @classmethod
    def magazine(cls, id: int, title: str, issue_number: int) -> "Item":
        return cls(id=id, title=title, kind=ItemKind.MAGAZINE, issue_number=issue_number)

    @property
    def status(self) -> str:
        return STATUS_CHECKED_OUT if self.checked_out else STATUS_AVAILABLE

    def display_details(self) -> str:
        """One line with id, title, the kind's own fields and the status."""
        return _DETAIL_FORMATTERS[self.kind](self)

    def loan_period_days(self) -> int:
        return LOAN_PERIOD_DAYS[self.kind]

    def check_out(self) -> None:
        self.checked_out = True

    def return_item(self) -> None:
        self.checked_out = False

    def __str__(self) -> str:  # pragma: no cover - string formatting trivial
        return self.display_details()

    def to_dict(self) -> dict:
        data = {
            "id": self.id,
            "kind": self.kind.value,
            "title": self.title,
            "status": self.status,
            "loan_period_days": self.loan_period_days(),
        }
        if self.kind is ItemKind.BOOK:
            data["author"] = self.author
            data["isbn"] = self.isbn
        else:
            data["issue_number"] = self.issue_number
        return data


def _book_details(item: Item) -> str:
    isbn = f" | ISBN: {item.isbn}" if item.isbn else ""
    return (
        f"Book      ID: {item.id} | Title: {item.title} | Author: {item.author}"
        f"{isbn} | Status: {item.status}"
    )


def _magazine_details(item: Item) -> str:
    return (
        f"Magazine  ID: {item.id} | Title: {item.title} | Issue: {item.issue_number}"
        f" | Status: {item.status}"
    )


_DETAIL_FORMATTERS: Dict[ItemKind, Callable[[Item], str]] = {
    ItemKind.BOOK: _book_details,
    ItemKind.MAGAZINE: _magazine_details,
}
