from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Optional

from config import settings


class UserKind(str, Enum):
    PATRON = "Patron"
    LIBRARIAN = "Librarian"


@dataclass(frozen=True)
class User:
    """A registered person: a patron or a librarian, told apart by ``kind``."""

    id: int
    name: str
    kind: UserKind
    # Patron only; displayed, never enforced
    max_items_allowed: Optional[int] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", self.name.strip())

    @classmethod
    def patron(cls, id: int, name: str, max_items_allowed: Optional[int] = None) -> "User":
        if max_items_allowed is None:
            max_items_allowed = settings.patron_max_items
        return cls(id=id, name=name, kind=UserKind.PATRON, max_items_allowed=max_items_allowed)

    @classmethod
    def librarian(cls, id: int, name: str) -> "User":
        return cls(id=id, name=name, kind=UserKind.LIBRARIAN)

    @property
    def can_manage_users(self) -> bool:
        return self.kind is UserKind.LIBRARIAN

    def display_info(self) -> str:
        return _INFO_FORMATTERS[self.kind](self)

    def details(self) -> str:
        """The kind-specific extra shown after the name."""
        return _EXTRA_FORMATTERS[self.kind](self)

    def manage_users(self) -> str:
        """Informational librarian action; check ``can_manage_users`` before calling."""
        return f"{self.name} is managing users."

    def __str__(self) -> str:  # pragma: no cover - string formatting trivial
        return self.display_info()

    def to_dict(self) -> dict:
        data = {"id": self.id, "kind": self.kind.value, "name": self.name}
        if self.kind is UserKind.PATRON:
            data["max_items_allowed"] = self.max_items_allowed
        return data


def _patron_info(user: User) -> str:
    return f"Patron    ID: {user.id} | Name: {user.name} | {user.details()}"


def _librarian_info(user: User) -> str:
    return f"Librarian ID: {user.id} | Name: {user.name} | {user.details()}"


_INFO_FORMATTERS: Dict[UserKind, Callable[[User], str]] = {
    UserKind.PATRON: _patron_info,
    UserKind.LIBRARIAN: _librarian_info,
}

_EXTRA_FORMATTERS: Dict[UserKind, Callable[[User], str]] = {
    UserKind.PATRON: lambda user: f"Max Items: {user.max_items_allowed}",
    UserKind.LIBRARIAN: lambda user: "Full privileges",
}
