# taskboard/database.py
"""In-memory entity store

Six ordered collections live for the lifetime of the process. Nothing is
persisted; restarting the server reloads the seed fixture.
"""
import logging
import threading
from typing import Any, Callable, Dict, Generic, Iterator, List, Optional, Type, TypeVar

from taskboard.models import Comment, Department, Project, Record, Task, TimeEntry, User

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=Record)


class Collection(Generic[RecordT]):
    """Insertion-ordered records of one entity type, keyed by id"""

    def __init__(self, name: str, model: Type[RecordT]):
        self.name = name
        self.model = model
        self._records: List[RecordT] = []
        self._last_id = 0

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[RecordT]:
        return iter(list(self._records))

    def get_all(self) -> List[RecordT]:
        return list(self._records)

    def get_by_id(self, record_id: Optional[str]) -> Optional[RecordT]:
        if record_id is None:
            return None
        for record in self._records:
            if record.id == record_id:
                return record
        return None

    def find_index(self, predicate: Callable[[RecordT], bool]) -> int:
        """Index of the first matching record, -1 when none matches"""
        for index, record in enumerate(self._records):
            if predicate(record):
                return index
        return -1

    def append(self, record: RecordT) -> RecordT:
        if self.get_by_id(record.id) is not None:
            raise ValueError(f"Duplicate id {record.id!r} in {self.name}")
        self._records.append(record)
        self._track_id(record.id)
        return record

    def replace_at(self, index: int, record: RecordT) -> RecordT:
        if self._records[index].id != record.id:
            raise ValueError(f"Cannot replace {self.name} record {self._records[index].id!r} with {record.id!r}")
        self._records[index] = record
        return record

    def remove_at(self, index: int) -> RecordT:
        return self._records.pop(index)

    def next_id(self) -> str:
        """Next identifier from the collection's monotonic counter"""
        self._last_id += 1
        return str(self._last_id)

    def clear(self) -> None:
        self._records = []
        self._last_id = 0

    def _track_id(self, record_id: str) -> None:
        # Keep the counter ahead of any numeric id loaded from outside
        if record_id.isdigit():
            self._last_id = max(self._last_id, int(record_id))


class EntityStore:
    """Holds every collection and the lock operations run under"""

    def __init__(self):
        self.users: Collection[User] = Collection("users", User)
        self.departments: Collection[Department] = Collection("departments", Department)
        self.projects: Collection[Project] = Collection("projects", Project)
        self.tasks: Collection[Task] = Collection("tasks", Task)
        self.comments: Collection[Comment] = Collection("comments", Comment)
        self.time_entries: Collection[TimeEntry] = Collection("timeEntries", TimeEntry)

        self.lock = threading.RLock()
        self.is_initialized = False

    @property
    def collections(self) -> Dict[str, Collection]:
        return {
            "users": self.users,
            "departments": self.departments,
            "projects": self.projects,
            "tasks": self.tasks,
            "comments": self.comments,
            "time_entries": self.time_entries,
        }

    def init(self, fixture: Optional[Dict[str, List[Dict[str, Any]]]] = None) -> "EntityStore":
        """Load the fixture once; later calls are no-ops"""
        with self.lock:
            if self.is_initialized:
                return self

            if fixture is None:
                from taskboard.seed_data import SEED_DATA
                fixture = SEED_DATA

            for key, collection in self.collections.items():
                for raw in fixture.get(key, []):
                    collection.append(collection.model.model_validate(raw))

            self.is_initialized = True
            logger.info(
                "Entity store loaded: "
                + ", ".join(f"{len(c)} {c.name}" for c in self.collections.values())
            )
            return self

    def reset(self, fixture: Optional[Dict[str, List[Dict[str, Any]]]] = None) -> "EntityStore":
        """Drop every record and reload the fixture"""
        with self.lock:
            for collection in self.collections.values():
                collection.clear()
            self.is_initialized = False
            return self.init(fixture)


# Process-wide store, only reached through get_store
store = EntityStore()


def get_store() -> EntityStore:
    """FastAPI dependency returning the lazily initialized store"""
    return store.init()
