from datetime import datetime
from typing import NamedTuple
from typing import Optional
from typing import final


@final
class Alert(NamedTuple):
    id: int
    message: str
    due: datetime


@final
class Task(NamedTuple):
    id: int
    title: str
    description: str
    tag: Optional[str]


@final
class Note(NamedTuple):
    id: int
    title: str
    description: str
    tag: Optional[str]


@final
class Link(NamedTuple):
    id: int
    url: str
    title: str
    description: str
    tag: Optional[str]
