from abc import ABC
from abc import abstractmethod
from collections import defaultdict
from datetime import datetime
from typing import Final
from typing import Optional
from typing import final
from typing import override

from assistantbot.types.items import Alert
from assistantbot.types.items import Link
from assistantbot.types.items import Note
from assistantbot.types.items import Task


class ItemStore(ABC):
    @abstractmethod
    def add_alert(self, owner: str, *, message: str, due: datetime) -> Alert: ...

    @abstractmethod
    def get_alerts(self, owner: str) -> list[Alert]: ...

    @abstractmethod
    def add_task(self, owner: str, *, title: str, description: str, tag: Optional[str]) -> Task: ...

    @abstractmethod
    def get_tasks(self, owner: str, *, tag: Optional[str] = None) -> list[Task]: ...

    @abstractmethod
    def add_note(self, owner: str, *, title: str, description: str, tag: Optional[str]) -> Note: ...

    @abstractmethod
    def get_notes(self, owner: str, *, tag: Optional[str] = None) -> list[Note]: ...

    @abstractmethod
    def add_link(self, owner: str, *, url: str, title: str, description: str, tag: Optional[str]) -> Link: ...

    @abstractmethod
    def get_links(self, owner: str, *, tag: Optional[str] = None) -> list[Link]: ...


def _has_tag(tag: Optional[str], wanted: Optional[str]) -> bool:
    return wanted is None or (tag is not None and tag.casefold() == wanted.casefold())


@final
class InMemoryItemStore(ItemStore):
    """Keeps items for the lifetime of the process. Ids are unique per store."""

    def __init__(self) -> None:
        self._next_id = 1
        self._alerts: Final[defaultdict[str, list[Alert]]] = defaultdict(list)
        self._tasks: Final[defaultdict[str, list[Task]]] = defaultdict(list)
        self._notes: Final[defaultdict[str, list[Note]]] = defaultdict(list)
        self._links: Final[defaultdict[str, list[Link]]] = defaultdict(list)

    def _take_id(self) -> int:
        item_id: Final = self._next_id
        self._next_id += 1
        return item_id

    @override
    def add_alert(self, owner: str, *, message: str, due: datetime) -> Alert:
        alert: Final = Alert(id=self._take_id(), message=message, due=due)
        self._alerts[owner].append(alert)
        return alert

    @override
    def get_alerts(self, owner: str) -> list[Alert]:
        return sorted(self._alerts.get(owner, []), key=lambda alert: alert.due)

    @override
    def add_task(self, owner: str, *, title: str, description: str, tag: Optional[str]) -> Task:
        task: Final = Task(id=self._take_id(), title=title, description=description, tag=tag)
        self._tasks[owner].append(task)
        return task

    @override
    def get_tasks(self, owner: str, *, tag: Optional[str] = None) -> list[Task]:
        return [task for task in self._tasks.get(owner, []) if _has_tag(task.tag, tag)]

    @override
    def add_note(self, owner: str, *, title: str, description: str, tag: Optional[str]) -> Note:
        note: Final = Note(id=self._take_id(), title=title, description=description, tag=tag)
        self._notes[owner].append(note)
        return note

    @override
    def get_notes(self, owner: str, *, tag: Optional[str] = None) -> list[Note]:
        return [note for note in self._notes.get(owner, []) if _has_tag(note.tag, tag)]

    @override
    def add_link(self, owner: str, *, url: str, title: str, description: str, tag: Optional[str]) -> Link:
        link: Final = Link(id=self._take_id(), url=url, title=title, description=description, tag=tag)
        self._links[owner].append(link)
        return link

    @override
    def get_links(self, owner: str, *, tag: Optional[str] = None) -> list[Link]:
        return [link for link in self._links.get(owner, []) if _has_tag(link.tag, tag)]
