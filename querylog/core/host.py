from dataclasses import dataclass
from typing import Final

__all__ = ("DEFAULT_PORT", "Host")

DEFAULT_PORT: Final = 9042


@dataclass(frozen=True, slots=True)
class Host:
    """Node a query was sent to."""

    address: str
    port: int = DEFAULT_PORT

    def __str__(self) -> str:
        if ":" in self.address:
            return f"[{self.address}]:{self.port}"
        return f"{self.address}:{self.port}"
