from typing import Final
from typing import NamedTuple
from typing import Self
from typing import final


@final
class InvalidMarkersError(ValueError):
    pass


@final
class DirectiveMarkers(NamedTuple):
    """
    Prefixes that mark variables and flags in chat messages. Build instances
    with `create()`, which rejects empty, whitespace and overlapping markers.
    """

    variable: str  # Prefix of a token that takes the following token as its value.
    flag: str  # Prefix of a standalone token.

    @classmethod
    def create(cls, *, variable: str, flag: str) -> Self:
        if not variable or not flag:
            raise InvalidMarkersError("Directive markers must not be empty.")
        if any(char.isspace() for char in variable + flag):
            raise InvalidMarkersError("Directive markers must not contain whitespace.")
        if variable.startswith(flag) or flag.startswith(variable):
            # Otherwise a single token could carry both markers.
            raise InvalidMarkersError(f"Markers '{variable}' and '{flag}' must not be prefixes of each other.")
        return cls(variable=variable, flag=flag)

    def is_marked(self, token: str) -> bool:
        return token.startswith((self.variable, self.flag))


DEFAULT_MARKERS: Final = DirectiveMarkers.create(variable=".", flag="-")
