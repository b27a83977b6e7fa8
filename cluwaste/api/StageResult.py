"""What a ``cmd_*`` function hands back to the CLI."""

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field

Progress = Iterator[tuple[float, str]]


@dataclass
class StageResult:
    """A command run in four stages: announce, progress, result, output.

    Nothing happens until ``progress_callback`` is iterated. The generator
    yields ``(fraction, message)`` pairs and, before it finishes, fills in
    ``result``, ``output`` and ``success`` on the instance it was given.
    """

    announce: str
    progress_callback: Callable[["StageResult"], Progress]
    result: str = ""
    output: dict = field(default_factory=dict)
    success: bool = False
