"""Directory listing result."""

import os
from dataclasses import dataclass, field


@dataclass(frozen=True)
class ListingResult:
    """Entries of one directory listing, or the error that stopped it.

    A failed listing carries no entries: the directory is either listed
    completely or not at all.
    """

    path: str
    entries: list[os.DirEntry] = field(default_factory=list)
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None
