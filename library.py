import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from items import Item
from users import User

logger = logging.getLogger(__name__)


class ErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    INVALID_STATE = "invalid_state"
    INVALID_CAPABILITY = "invalid_capability"


@dataclass(frozen=True)
class Outcome:
    """Result of a catalog operation: a success flag plus a printable message.

    Failures are expected outcomes, not faults; ``error`` says which kind.
    Truthy exactly when the operation succeeded.
    """

    success: bool
    message: str
    error: Optional[ErrorKind] = None
    loan_period_days: Optional[int] = None

    @classmethod
    def ok(cls, message: str, loan_period_days: Optional[int] = None) -> "Outcome":
        return cls(success=True, message=message, loan_period_days=loan_period_days)

    @classmethod
    def fail(cls, error: ErrorKind, message: str) -> "Outcome":
        return cls(success=False, message=message, error=error)

    def __bool__(self) -> bool:
        return self.success

    def to_dict(self) -> dict:
        data: Dict[str, Any] = {"success": self.success, "message": self.message}
        if self.error is not None:
            data["error"] = self.error.value
        if self.loan_period_days is not None:
            data["loan_period_days"] = self.loan_period_days
        return data


NO_ITEMS_MESSAGE = "No items in library."
NO_USERS_MESSAGE = "No users registered."


class CatalogManager:
    """Owns the items and users of the catalog and the checkout state machine."""

    def __init__(self) -> None:
        self._items: List[Item] = []
        self._users: List[User] = []

    # ------------------------- Registration ------------------------- #
    def add_item(self, item: Item) -> Outcome:
        """Add an item. Ids are not checked for uniqueness; lookups return the first match."""
        if self.find_item(item.id) is not None:
            logger.warning(f"Item id {item.id} already present; lookups keep returning the first one")
        self._items.append(item)
        logger.info(f"Item added: {item.kind.value} {item.id} '{item.title}'")
        return Outcome.ok("Item added.")

    def register_user(self, user: User) -> Outcome:
        """Register a user. Same lenient id handling as :meth:`add_item`."""
        if self.find_user(user.id) is not None:
            logger.warning(f"User id {user.id} already present; lookups keep returning the first one")
        self._users.append(user)
        logger.info(f"User added: {user.kind.value} {user.id} '{user.name}'")
        return Outcome.ok("User added.")

    # ------------------------- Lookups ------------------------- #
    def find_item(self, item_id: int) -> Optional[Item]:
        for item in self._items:
            if item.id == item_id:
                return item
        return None

    def find_user(self, user_id: int) -> Optional[User]:
        for user in self._users:
            if user.id == user_id:
                return user
        return None

    @property
    def items(self) -> Tuple[Item, ...]:
        return tuple(self._items)

    @property
    def users(self) -> Tuple[User, ...]:
        return tuple(self._users)

    def list_items(self) -> List[str]:
        """Details of every item in insertion order, or a single "no items" line."""
        if not self._items:
            return [NO_ITEMS_MESSAGE]
        return [item.display_details() for item in self._items]

    def list_users(self) -> List[str]:
        if not self._users:
            return [NO_USERS_MESSAGE]
        return [user.display_info() for user in self._users]

    # ------------------------- Transactions ------------------------- #
    def checkout_item(self, item_id: int, user_id: int) -> Outcome:
        """Check an item out to a user.

        Preconditions are checked in order, the first failing one is reported
        and nothing changes: the item exists, the user exists, the item is
        available. On success the outcome carries the item's loan period.
        """
        item = self.find_item(item_id)
        if item is None:
            return self._refuse(ErrorKind.NOT_FOUND, "Item not found.")
        user = self.find_user(user_id)
        if user is None:
            return self._refuse(ErrorKind.NOT_FOUND, "User not found.")
        if item.checked_out:
            return self._refuse(ErrorKind.INVALID_STATE, "Item already checked out.")

        item.check_out()
        days = item.loan_period_days()
        logger.info(f"Item {item.id} checked out by user {user.id} for {days} days")
        return Outcome.ok(f'{user.name} checked out "{item.title}" for {days} days.', loan_period_days=days)

    def return_item(self, item_id: int) -> Outcome:
        item = self.find_item(item_id)
        if item is None:
            return self._refuse(ErrorKind.NOT_FOUND, "Item not found.")
        if not item.checked_out:
            return self._refuse(ErrorKind.INVALID_STATE, "Item is already available.")

        item.return_item()
        logger.info(f"Item {item.id} returned")
        return Outcome.ok("Item returned.")

    def manage_users(self, user_id: int) -> Outcome:
        """Run the librarian-only manage-users action on behalf of ``user_id``."""
        user = self.find_user(user_id)
        if user is None:
            return self._refuse(ErrorKind.NOT_FOUND, "User not found.")
        if not user.can_manage_users:
            return self._refuse(ErrorKind.INVALID_CAPABILITY, "Only librarians can manage users.")
        return Outcome.ok(user.manage_users())

    # ------------------------- Statistics ------------------------- #
    def get_statistics(self) -> Dict[str, int]:
        checked_out = sum(1 for item in self._items if item.checked_out)
        return {
            "total_items": len(self._items),
            "checked_out": checked_out,
            "available": len(self._items) - checked_out,
            "total_users": len(self._users),
            "librarians": sum(1 for user in self._users if user.can_manage_users),
        }

    @staticmethod
    def _refuse(error: ErrorKind, message: str) -> Outcome:
        logger.info(f"Refused ({error.value}): {message}")
        return Outcome.fail(error, message)
