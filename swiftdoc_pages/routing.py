"""Filesystem- and URL-safe route encoding for documentation pages.

Every page produced by the generator is keyed by a *route*: the symbol's
identifier with spaces turned into hyphens and Windows-reserved characters
replaced by underscores. Underscores are then stripped for convenience, except
in a small set of UIKit-style type names (``*_View``, ``*_Button`` ...) whose
underscore is part of the name readers search for.

The same encoding, prefixed with the configured base URL, produces the link
targets embedded in generated pages. Filenames use a lighter encoding,
:func:`stem_for`, which keeps underscores and never yields a `.` or `..`
path segment.

Examples
--------
>>> route_for("Array<Element>")
'ArrayElement'
>>> route_for("Login_ViewController")
'Login_ViewController'
>>> path_for("Foo Bar", "/docs/")
'/docs/Foo-Bar'
"""

from __future__ import annotations

from urllib.parse import SplitResult, urlsplit, urlunsplit

from ._constants import PROTECTED_SUFFIXES, RESERVED_CHARACTERS
from .errors import RouteConstructionError


class RouteEncoder:
    """Encode identifiers into routes, optionally composed onto a base URL."""

    def __init__(
        self,
        base_url: str | None = None,
        *,
        protected_suffixes: tuple[str, ...] = PROTECTED_SUFFIXES,
        strip_underscores: bool = True,
    ) -> None:
        self.base_url = base_url
        self.protected_suffixes = protected_suffixes
        self.strip_underscores = strip_underscores

    def encode(self, identifier: object) -> str:
        """Return the route for ``identifier``.

        Parameters
        ----------
        identifier : object
            Symbol, name, or any value whose ``str`` is the display name.

        Returns
        -------
        str
            Route free of reserved characters, composed onto ``base_url`` when
            one is configured.

        Raises
        ------
        RouteConstructionError
            If neither the base URL nor the bare route forms a valid address.
        """
        tail = replace_reserved(str(identifier).replace(" ", "-"))
        route = tail if self.base_url is None else self._compose(tail)
        if not self.strip_underscores or self._is_protected(route):
            return route
        return route.replace("_", "")

    def _compose(self, tail: str) -> str:
        """Append ``tail`` as a path component of the base URL."""
        base = self.base_url or ""
        parts = _split(base) if base else None
        if parts is None:
            if _split(tail) is None:
                msg = f"Unable to construct path for {tail} with base URL {base!r}"
                raise RouteConstructionError(msg)
            return tail
        path = parts.path
        if not path.endswith("/"):
            path = f"{path}/"
        return urlunsplit(parts._replace(path=f"{path}{tail}"))

    def _is_protected(self, route: str) -> bool:
        return any(suffix in route for suffix in self.protected_suffixes)


def _split(url: str) -> SplitResult | None:
    """Return the parsed ``url`` or None when it is not a valid address."""
    try:
        return urlsplit(url)
    except ValueError:
        return None


def replace_reserved(value: str) -> str:
    """Replace every reserved filename character in ``value`` with ``_``."""
    return "".join("_" if char in RESERVED_CHARACTERS else char for char in value)


def route_for(identifier: object) -> str:
    """Return the bare route (no base URL) used as a page key."""
    return RouteEncoder().encode(identifier)


def path_for(identifier: object, base_url: str) -> str:
    """Return the link target for ``identifier`` beneath ``base_url``."""
    return RouteEncoder(base_url).encode(identifier)


def link_for(key: str, base_url: str) -> str:
    """Return the link target for the page stored under ``key``.

    Ordinary keys are fixed points of :func:`route_for` and link exactly like
    :func:`path_for`. Fallback keys (pages whose route had no characters left)
    keep their underscores so the link still names the page.
    """
    if route_for(key) == key:
        return path_for(key, base_url)
    return RouteEncoder(base_url, strip_underscores=False).encode(key)


def stem_for(identifier: object) -> str:
    """Return the on-disk filename stem for ``identifier``.

    Only spaces and reserved characters are substituted, so ``_Sidebar`` keeps
    its leading underscore and ``<.>`` becomes ``_._``. Stems made only of
    dots are rewritten with underscores so no stem is ``.`` or ``..``.

    Examples
    --------
    >>> stem_for("<..>")
    '_.._'
    >>> stem_for("..")
    '__'
    """
    stem = replace_reserved(str(identifier).replace(" ", "-"))
    if not stem.strip("."):
        stem = stem.replace(".", "_")
    return stem or "_"


def has_route(route: str) -> bool:
    """Return whether ``route`` is usable as a page key and path segment."""
    return bool(route.strip("."))


__all__ = [
    "RouteEncoder",
    "has_route",
    "link_for",
    "path_for",
    "replace_reserved",
    "route_for",
    "stem_for",
]
