from __future__ import annotations

from typing import Iterable, List, Optional


class FragmentError(Exception):
    """Base class for fragment composition failures."""


class UnknownReferenceError(FragmentError):
    def __init__(self, name: str, *, referrer: Optional[str] = None):
        super().__init__(f'Found reference to unknown fragment "{name}".')
        self.name = name
        self.referrer = referrer


class InlineExpansionError(FragmentError):
    def __init__(self, names: Iterable[str], *, passes: int):
        names_list: List[str] = list(names)
        super().__init__(
            f"Inline expansion did not settle after {passes} passes "
            f"(still expanding: {', '.join(names_list)})"
        )
        self.names = names_list
        self.passes = passes


__all__ = ["FragmentError", "UnknownReferenceError", "InlineExpansionError"]
