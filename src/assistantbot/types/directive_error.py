from typing import final


@final
class DirectiveError(RuntimeError):
    """A directive could not be carried out. The message is shown to the sender."""
