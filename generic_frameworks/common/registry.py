"""
Name -> constructor dispatch table shared by ``ApiFactory`` and ``PageFactory``.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Generic, List, TypeVar


T = TypeVar("T")


class NotFoundError(LookupError):
    """Raised when a factory is asked for a name it does not know."""

    def __init__(self, kind: str, name: str, known: List[str]):
        self.kind = kind
        self.name = name
        self.known = known
        super().__init__(
            f'{kind} "{name}" not found. Known {kind.lower()} names: '
            f"{', '.join(known) or '<none>'}"
        )


class Registry(Generic[T]):
    """
    Maps string keys to construction callables.

    Every ``create()`` builds a fresh instance; nothing is cached.

    Usage:
        >>> pages = Registry("Page")
        >>> pages.register("LoginPage", LoginPage)
        >>> login = pages.create("LoginPage", session)
    """

    def __init__(self, kind: str):
        self.kind = kind
        self._constructors: Dict[str, Callable[..., T]] = {}

    def register(self, name: str, constructor: Callable[..., T]) -> Callable[..., T]:
        if name in self._constructors:
            raise ValueError(f"{self.kind} '{name}' is already registered")
        self._constructors[name] = constructor
        return constructor

    def create(self, name: str, *args: Any, **kwargs: Any) -> T:
        constructor = self._constructors.get(name)
        if constructor is None:
            raise NotFoundError(self.kind, name, self.names())
        return constructor(*args, **kwargs)

    def names(self) -> List[str]:
        return sorted(self._constructors)

    def __contains__(self, name: object) -> bool:
        return name in self._constructors


__all__ = [
    "NotFoundError",
    "Registry",
]
