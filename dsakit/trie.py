"""Prefix tree over lowercase ASCII words."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass(slots=True)
class _Node:
    children: dict[str, _Node] = field(default_factory=dict)
    is_end: bool = False


def _check(text: str) -> None:
    for ch in text:
        if not "a" <= ch <= "z":
            raise ValueError(f"character {ch!r} is not a lowercase letter a-z")


class Trie:
    """Trie holding words made of the letters ``a`` to ``z``."""

    def __init__(self) -> None:
        self._root = _Node()

    def _walk(self, text: str) -> _Node | None:
        _check(text)
        node = self._root
        for ch in text:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def insert(self, word: str) -> None:
        _check(word)
        node = self._root
        for ch in word:
            node = node.children.setdefault(ch, _Node())
        node.is_end = True

    def search(self, word: str) -> bool:
        """True if ``word`` itself was inserted."""
        node = self._walk(word)
        return node is not None and node.is_end

    def starts_with(self, prefix: str) -> bool:
        """True if some inserted word begins with ``prefix``."""
        return self._walk(prefix) is not None

    def remove(self, word: str) -> bool:
        """Remove ``word`` and prune unused nodes; return whether it was present."""
        _check(word)
        path = [self._root]
        for ch in word:
            child = path[-1].children.get(ch)
            if child is None:
                return False
            path.append(child)
        if not path[-1].is_end:
            return False
        path[-1].is_end = False
        for ch, parent, child in zip(reversed(word), reversed(path[:-1]), reversed(path[1:])):
            if child.is_end or child.children:
                break
            del parent.children[ch]
        return True

    def count_words_with_prefix(self, prefix: str) -> int:
        node = self._walk(prefix)
        if node is None:
            return 0
        return sum(1 for _ in self._iter_words(node, prefix))

    @staticmethod
    def _iter_words(node: _Node, current: str) -> Iterator[str]:
        if node.is_end:
            yield current
        for ch in sorted(node.children):
            yield from Trie._iter_words(node.children[ch], current + ch)

    def words(self) -> list[str]:
        """Every stored word in alphabetical order."""
        return list(self._iter_words(self._root, ""))

    def is_empty(self) -> bool:
        return not self._root.children

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and word.isascii() and word.islower() and self.search(word)