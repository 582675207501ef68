"""
Registry key generation.

A key generator maps an ordered (home, away) pair to an opaque, hashable
key. It must be pure and order-sensitive: (A, B) and (B, A) never share a
key, which is why reversed matches are detected by a second lookup rather
than by key collision.
"""

from typing import Hashable, Protocol


class KeyGenerator(Protocol):
    """Callable producing a registry key for an ordered team pair."""

    def __call__(self, home_team: str, away_team: str) -> Hashable: ...


def pair_key(home_team: str, away_team: str) -> tuple[str, str]:
    """Default key: the ordered pair itself."""
    return (home_team, away_team)


class SimpleMatchKeyGenerator:
    """
    Readable string keys such as "Mexico vs Canada".

    Inside each name, backslashes and the separator's first character are
    backslash-escaped, so the unescaped separator only ever marks the
    join and no two pairs share a key ("South\\ Korea vs Japan").
    """

    ESCAPE = "\\"

    def __init__(self, separator: str = " vs "):
        if not separator:
            raise ValueError("Key separator cannot be empty")
        if self.ESCAPE in separator:
            raise ValueError("Key separator cannot contain a backslash")
        self.separator = separator

    def escape(self, name: str) -> str:
        name = name.replace(self.ESCAPE, self.ESCAPE * 2)
        lead = self.separator[0]
        return name.replace(lead, self.ESCAPE + lead)

    def __call__(self, home_team: str, away_team: str) -> str:
        return f"{self.escape(home_team)}{self.separator}{self.escape(away_team)}"
