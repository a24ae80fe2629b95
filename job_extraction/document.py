"""Documents the adapters read from.

Adapters never walk a page themselves; they only ask a document for the first
or all nodes matching a locator. `HtmlDocument` answers those questions for
HTML with CSS selectors via BeautifulSoup. Anything else (a live browser, a
pre-parsed tree) can be plugged in by implementing the `Document` protocol.
"""

from __future__ import annotations

from typing import Any, List, Optional, Protocol, Union

import soupsieve
from bs4 import BeautifulSoup, Tag
from soupsieve import SelectorSyntaxError

from .errors import InvalidLocatorError


class Node(Protocol):
    def get_text(self, separator: str = "", strip: bool = False) -> str: ...

    def get(self, key: str, default: Any = None) -> Any: ...


class Document(Protocol):
    """What an adapter needs from a page: an address and locator queries."""

    address: Optional[str]

    def select_one(self, locator: str) -> Optional[Node]: ...

    def select(self, locator: str) -> List[Node]: ...


class HtmlDocument:
    """An HTML page (or a fragment of one) queried with CSS selectors."""

    def __init__(
        self,
        root: Union[BeautifulSoup, Tag],
        address: Optional[str] = None,
        base_url: Optional[str] = None,
    ) -> None:
        self.root = root
        self.address = address
        # Relative links resolve against this; a card keeps its page's base.
        self.base_url = base_url or address

    @classmethod
    def from_html(cls, html: str, address: Optional[str] = None, parser: str = "html.parser") -> "HtmlDocument":
        return cls(BeautifulSoup(html or "", parser), address=address)

    def scoped(self, node: Tag) -> "HtmlDocument":
        """A document rooted at `node`, e.g. one card on a listing page.

        The card has no address of its own, so ids come from its attributes
        instead of the listing page URL.
        """
        return HtmlDocument(node, address=None, base_url=self.base_url)

    def _root_matches(self, locator: str) -> bool:
        # bs4 only searches descendants; a scoped card must match itself too
        if isinstance(self.root, BeautifulSoup):
            return False
        return soupsieve.match(locator, self.root)

    def select_one(self, locator: str) -> Optional[Tag]:
        try:
            if self._root_matches(locator):
                return self.root
            return self.root.select_one(locator)
        except SelectorSyntaxError as exc:
            raise InvalidLocatorError(locator, str(exc)) from exc

    def select(self, locator: str) -> List[Tag]:
        try:
            matches = list(self.root.select(locator))
            if self._root_matches(locator):
                matches.insert(0, self.root)
            return matches
        except SelectorSyntaxError as exc:
            raise InvalidLocatorError(locator, str(exc)) from exc

    def __repr__(self) -> str:
        return f"HtmlDocument(address={self.address!r})"
