"""Character budget shared by every append while rendering one piece of text."""

from typing import Final

from mypy_extensions import mypyc_attr

from querylog.observability._config import UNLIMITED

__all__ = ("ELLIPSIS", "RenderBudget")

ELLIPSIS: Final = "..."


@mypyc_attr(allow_interpreted_subclasses=False)
class RenderBudget:
    """Accumulates text under a fixed character allowance.

    With a limit of ``-1`` every chunk is kept whole. Otherwise a chunk that
    fits is kept and charged against the allowance; the first chunk that does
    not fit is cut to the remaining characters and followed by ``...``. Once
    the allowance reaches zero every later chunk is dropped silently, so the
    output is always a prefix of the untruncated text. The ellipsis only
    follows a chunk that was cut and is not charged against the allowance.
    """

    __slots__ = ("_parts", "_truncated", "remaining")

    def __init__(self, limit: int = UNLIMITED) -> None:
        if limit < UNLIMITED:
            msg = f"Invalid render budget, should be >= 0 or {UNLIMITED}, got {limit}"
            raise ValueError(msg)
        self.remaining = limit
        self._parts: list[str] = []
        self._truncated = False

    @property
    def unlimited(self) -> bool:
        return self.remaining == UNLIMITED

    @property
    def exhausted(self) -> bool:
        return self.remaining == 0

    @property
    def truncated(self) -> bool:
        return self._truncated

    def append(self, chunk: str) -> None:
        if not chunk:
            return
        if self.remaining == UNLIMITED:
            self._parts.append(chunk)
            return
        if self.remaining == 0:
            return
        if len(chunk) > self.remaining:
            self._parts.append(chunk[: self.remaining])
            self._parts.append(ELLIPSIS)
            self._truncated = True
            self.remaining = 0
            return
        self._parts.append(chunk)
        self.remaining -= len(chunk)

    def endswith(self, suffix: str) -> bool:
        return bool(self._parts) and self._parts[-1].endswith(suffix)

    def getvalue(self) -> str:
        return "".join(self._parts)

    def __str__(self) -> str:
        return self.getvalue()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(remaining={self.remaining}, truncated={self._truncated})"
