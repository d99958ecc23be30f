import json
from pathlib import Path
from typing import Dict, Iterable, List, Tuple

import pytest

from subpath.config import reset_config
from subpath.container import reset_container
from subpath.domain.models import SubscriberRef, User


def make_users(
    created: Dict[str, str], edges: Iterable[Tuple[str, str]]
) -> List[User]:
    """Build users from ``{email: created}`` and ``(user, subscriber)`` pairs."""
    subscribers: Dict[str, List[SubscriberRef]] = {email: [] for email in created}
    for parent, child in edges:
        subscribers[parent].append(SubscriberRef(email=child, created="ignored"))
    return [
        User(email=email, created=stamp, nick=email.split("@")[0],
             subscribers=tuple(subscribers[email]))
        for email, stamp in created.items()
    ]


def users_document(users: Iterable[User]) -> list:
    return [
        {
            "Nick": user.nick,
            "Email": user.email,
            "Created_at": user.created,
            "Subscribers": [
                {"Email": s.email, "Created_at": s.created} for s in user.subscribers
            ],
        }
        for user in users
    ]


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    for name in ("SUBPATH_SOLVER_STRATEGY", "SUBPATH_LOG_LEVEL", "SUBPATH_DATA_DATA_DIR"):
        monkeypatch.delenv(name, raising=False)
    reset_config()
    reset_container()
    yield
    reset_config()
    reset_container()


@pytest.fixture
def chain_users() -> List[User]:
    """a -> b -> c, with b created in 2021."""
    return make_users(
        {"a@x.io": "2020", "b@x.io": "2021", "c@x.io": "2022"},
        [("a@x.io", "b@x.io"), ("b@x.io", "c@x.io")],
    )


@pytest.fixture
def data_dir(tmp_path: Path, chain_users) -> Path:
    (tmp_path / "users.json").write_text(
        json.dumps(users_document(chain_users)), encoding="utf-8"
    )
    (tmp_path / "input.csv").write_text(
        "a@x.io,c@x.io\nc@x.io,a@x.io\na@x.io,a@x.io\n", encoding="utf-8"
    )
    return tmp_path


@pytest.fixture
def users_factory():
    return make_users


@pytest.fixture
def document_factory():
    return users_document
