"""Multi-pattern search with an Aho-Corasick automaton."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass, field


@dataclass(eq=False)
class _Node:
    trans: dict[str, _Node] = field(default_factory=dict)
    suffix: _Node | None = None
    lengths: list[int] = field(default_factory=list)


class AhoCorasick:
    """An automaton that finds every occurrence of a fixed set of words."""

    def __init__(self, words: Iterable[str]) -> None:
        self._root = _Node()
        for word in words:
            node = self._root
            for ch in word:
                node = node.trans.setdefault(ch, _Node())
            node.lengths.append(len(word))
        self._build_suffix_links()

    def _build_suffix_links(self) -> None:
        root = self._root
        queue = deque([root])
        while queue:
            parent = queue.popleft()
            for ch, child in parent.trans.items():
                queue.append(child)
                suffix = parent.suffix
                while True:
                    if suffix is None:
                        child.lengths.extend(root.lengths)
                        child.suffix = root
                        break
                    target = suffix.trans.get(ch)
                    if target is not None:
                        child.lengths.extend(target.lengths)
                        child.suffix = target
                        break
                    suffix = suffix.suffix

    def search(self, text: str) -> list[str]:
        """Return every matched word in ``text``, ordered by where it ends."""
        found: list[str] = []
        node = self._root
        for i, ch in enumerate(text):
            while True:
                child = node.trans.get(ch)
                if child is not None:
                    node = child
                    break
                if node.suffix is None:
                    break
                node = node.suffix
            found.extend(text[i - length + 1 : i + 1] for length in node.lengths)
        return found