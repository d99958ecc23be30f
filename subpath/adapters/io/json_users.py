"""JSON user source adapter.

Reads a top-level list of user objects::

    [{"Nick": "...", "Email": "...", "Created_at": "...",
      "Subscribers": [{"Email": "...", "Created_at": "..."}]}]

and validates it with pydantic before converting to domain users.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from ...config import get_config
from ...domain.errors import EmptyUserSetError, InputUnreadableError
from ...domain.models import SubscriberRef, User


class SubscriberDocument(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    email: str = Field(alias="Email")
    created_at: str = Field(default="", alias="Created_at")


class UserDocument(BaseModel):
    """One entry of the users document."""

    model_config = ConfigDict(populate_by_name=True)

    nick: str = Field(default="", alias="Nick")
    email: str = Field(alias="Email")
    created_at: str = Field(default="", alias="Created_at")
    subscribers: Optional[List[SubscriberDocument]] = Field(
        default=None, alias="Subscribers"
    )

    def to_domain(self) -> User:
        return User(
            email=self.email,
            created=self.created_at,
            nick=self.nick,
            subscribers=tuple(
                SubscriberRef(email=s.email, created=s.created_at)
                for s in self.subscribers or ()
            ),
        )


_USERS_ADAPTER = TypeAdapter(Optional[List[UserDocument]])


def parse_users(raw: bytes | str) -> List[User]:
    """Parse a users document.

    Raises:
        pydantic.ValidationError: If the document does not match the layout.
    """
    documents = _USERS_ADAPTER.validate_json(raw)
    return [document.to_domain() for document in documents or ()]


@dataclass
class JSONUserSource:
    """User source that reads a JSON document.

    Attributes:
        path: Location of the users document
    """

    path: Path = field(default_factory=lambda: get_config().data.users_path)
    _logger: logging.Logger = field(init=False, repr=False)
    _users: Optional[List[User]] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self.path = Path(self.path)
        self._logger = logging.getLogger(__name__)

    def load(self) -> Sequence[User]:
        """Load every user record.

        Raises:
            InputUnreadableError: If the document cannot be read or parsed.
            EmptyUserSetError: If the document holds no users.
        """
        if self._users is not None:
            return self._users

        self._logger.debug("Loading users", extra={"users_path": str(self.path)})

        try:
            users = parse_users(self.path.read_bytes())
        except OSError as e:
            raise InputUnreadableError(
                f"Can't read users file {self.path}",
                file_path=str(self.path),
                cause=e,
            )
        except ValidationError as e:
            raise InputUnreadableError(
                f"Can't parse users file {self.path}",
                file_path=str(self.path),
                cause=e,
            )

        if not users:
            raise EmptyUserSetError(
                f"No users in file {self.path}", file_path=str(self.path)
            )

        self._users = users
        self._logger.info("Users loaded", extra={"users": len(users)})
        return users
