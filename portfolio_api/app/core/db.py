"""
In‑memory database and seed data.

The portfolio keeps all of its state in process memory.  A
``MemoryDatabase`` owns one ``Table`` per record kind; each table maps
integer ids to plain dictionaries.  Ids come from an ``IdSequence``
that only ever moves forward, so an id is never handed out twice even
after the record that held it is deleted.  By default every table
shares a single sequence, which makes ids unique across all kinds.

``init_db`` seeds a freshly created database with the admin account
and the default profile.  Nothing is persisted: a new database always
starts from this seed.
"""

import itertools
import logging
from typing import Any, Callable, Dict, Iterator, List, Optional

from .config import Settings
from .security import hash_password


Row = Dict[str, Any]

TABLE_NAMES = ("users", "profiles", "projects", "skills", "experiences", "messages")

DEFAULT_PROFILE: Row = {
    "name": "John Doe",
    "title": "Full Stack Developer",
    "bio": (
        "Passionate developer with 5+ years of experience creating innovative web "
        "applications and solving complex problems with clean, efficient code."
    ),
    "about_text": (
        "I'm a passionate full-stack developer with over 5 years of experience building "
        "scalable web applications. My journey started with a Computer Science degree, "
        "and I've since worked with startups and established companies to bring "
        "innovative digital solutions to life."
    ),
    "about_text_2": (
        "I specialize in modern JavaScript frameworks, cloud architecture, and creating "
        "user-centric applications that solve real-world problems. When I'm not coding, "
        "you'll find me contributing to open-source projects or mentoring aspiring developers."
    ),
    "location": "San Francisco, CA",
    "experience": "5+ Years",
    "education": "CS Degree",
    "status": "Available",
    "email": "john.doe@example.com",
    "phone": "+1 (555) 123-4567",
    "github": "https://github.com/johndoe",
    "linkedin": "https://linkedin.com/in/johndoe",
    "twitter": "https://twitter.com/johndoe",
    "resume_url": None,
    "profile_image": None,
}


class IdSequence:
    """Monotonically increasing integer ids starting at 1."""

    def __init__(self, start: int = 1) -> None:
        self._counter = itertools.count(start)

    def next_id(self) -> int:
        return next(self._counter)


class Table:
    """A mapping of id to row with copy‑in/copy‑out semantics.

    Rows handed to and returned from a table are shallow copies (list
    values included), so callers can never mutate stored state by
    accident.
    """

    def __init__(self, name: str, sequence: IdSequence) -> None:
        self.name = name
        self._sequence = sequence
        self._rows: Dict[int, Row] = {}

    @staticmethod
    def _copy(row: Row) -> Row:
        return {key: list(value) if isinstance(value, list) else value for key, value in row.items()}

    def insert(self, values: Row) -> Row:
        """Store ``values`` under a fresh id; any ``id`` key in ``values`` is ignored."""
        row_id = self._sequence.next_id()
        row = self._copy(values)
        row["id"] = row_id
        self._rows[row_id] = row
        return self._copy(row)

    def get(self, row_id: int) -> Optional[Row]:
        row = self._rows.get(row_id)
        return self._copy(row) if row is not None else None

    def update(self, row_id: int, values: Row) -> Optional[Row]:
        """Merge ``values`` onto an existing row; ``None`` if the id is unknown."""
        row = self._rows.get(row_id)
        if row is None:
            return None
        changes = self._copy(values)
        changes.pop("id", None)
        row.update(changes)
        return self._copy(row)

    def delete(self, row_id: int) -> bool:
        return self._rows.pop(row_id, None) is not None

    def all(
        self,
        key: Optional[Callable[[Row], Any]] = None,
        reverse: bool = False,
    ) -> List[Row]:
        """Return copies of every row, in insertion order unless ``key`` is given."""
        rows = [self._copy(row) for row in self._rows.values()]
        if key is not None:
            rows.sort(key=key, reverse=reverse)
        return rows

    def find(self, predicate: Callable[[Row], bool]) -> Iterator[Row]:
        return (self._copy(row) for row in self._rows.values() if predicate(row))

    def first(self) -> Optional[Row]:
        for row in self._rows.values():
            return self._copy(row)
        return None

    def __len__(self) -> int:
        return len(self._rows)


class MemoryDatabase:
    """Container for the six portfolio tables."""

    def __init__(self, shared_sequence: bool = True) -> None:
        shared = IdSequence() if shared_sequence else None
        self.tables: Dict[str, Table] = {
            name: Table(name, shared or IdSequence()) for name in TABLE_NAMES
        }

    @property
    def users(self) -> Table:
        return self.tables["users"]

    @property
    def profiles(self) -> Table:
        return self.tables["profiles"]

    @property
    def projects(self) -> Table:
        return self.tables["projects"]

    @property
    def skills(self) -> Table:
        return self.tables["skills"]

    @property
    def experiences(self) -> Table:
        return self.tables["experiences"]

    @property
    def messages(self) -> Table:
        return self.tables["messages"]


def init_db(db: MemoryDatabase, settings: Settings) -> None:
    """Seed an empty database with the admin user and the default profile.

    The admin password is taken from ``settings.admin_password_hash``
    when set, otherwise ``settings.admin_password`` is hashed here.
    """
    logger = logging.getLogger(__name__)
    if settings.admin_password_hash:
        password_hash = settings.admin_password_hash
    else:
        if settings.admin_password == "admin123":
            logger.warning("Admin account uses the default password; set ADMIN_PASSWORD")
        password_hash = hash_password(settings.admin_password)
    admin = db.users.insert({"username": settings.admin_username, "password_hash": password_hash})
    profile = db.profiles.insert(DEFAULT_PROFILE)
    logger.info("Seeded admin user %s and profile %s", admin["id"], profile["id"])
