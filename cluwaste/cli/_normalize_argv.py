"""Accept the DOS-style spellings of the sequential switch."""

_SEQUENTIAL_ALIASES = {"/s", "/S", "-S"}


def _normalize_argv(argv: list[str]) -> list[str]:
    """Rewrite ``/s``, ``/S`` and ``-S`` to ``-s``.

    Only the exact two-character tokens are rewritten, so POSIX paths that
    start with a slash stay positional arguments.
    """
    return ["-s" if arg in _SEQUENTIAL_ALIASES else arg for arg in argv]
