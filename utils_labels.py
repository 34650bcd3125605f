"""
Label utilities: the artist label store, the selection set, and bulk text import/export
"""
import re
from typing import Iterable, Iterator, List

# One or more consecutive commas/newlines act as a single separator
_SEPARATOR_PATTERN = re.compile(r"[,\n]+")


class NoValidLabelsError(ValueError):
    """Raised when an import payload holds no non-empty labels"""


def clean_label(label):
    """Trim surrounding whitespace; returns "" for None"""
    if not label:
        return ""
    return label.strip()


def parse_label_text(raw_text: str) -> List[str]:
    """
    Split an import payload into labels

    Args:
        raw_text: Plain text, labels separated by commas and/or newlines

    Returns:
        List of trimmed, non-empty labels in payload order (duplicates kept)

    Example:
        >>> parse_label_text("mucha,, monet\\n\\nhokusai ")
        ['mucha', 'monet', 'hokusai']
    """
    if not raw_text:
        return []
    pieces = _SEPARATOR_PATTERN.split(raw_text)
    return [piece.strip() for piece in pieces if piece.strip()]


class LabelSearch:
    """
    Restartable, lazy view over the labels matching a query
    (case-insensitive substring). Iterating never mutates the store.
    """

    def __init__(self, labels, query):
        self._labels = labels
        self._needle = (query or "").lower()

    def __iter__(self) -> Iterator[str]:
        for label in self._labels:
            if self._needle in label.lower():
                yield label


class LabelStore:
    """Deduplicated, lexicographically sorted list of candidate labels"""

    def __init__(self, labels: Iterable[str] = ()):
        self._labels: List[str] = []
        self.replace_all(labels)

    def __len__(self):
        return len(self._labels)

    def __contains__(self, label):
        return label in self._labels

    def __iter__(self):
        return iter(self._labels)

    @property
    def labels(self) -> List[str]:
        return list(self._labels)

    def add(self, label) -> bool:
        """
        Add a single label

        Args:
            label: Raw label text (whitespace is trimmed)

        Returns:
            True if the label was inserted, False if empty or already present
        """
        label = clean_label(label)
        if not label or label in self._labels:
            return False
        self._labels.append(label)
        self._labels.sort()
        return True

    def import_bulk(self, raw_text: str) -> int:
        """
        Import labels from a comma/newline separated payload in one mutation

        Args:
            raw_text: Text payload from an uploaded file

        Returns:
            Number of labels actually added (0 if all were already present)

        Raises:
            NoValidLabelsError: payload contained no non-empty labels
        """
        parsed = parse_label_text(raw_text)
        if not parsed:
            raise NoValidLabelsError("No valid labels found in the imported text")

        existing = set(self._labels)
        novel = []
        for label in parsed:
            if label not in existing:
                existing.add(label)
                novel.append(label)

        if novel:
            self._labels = sorted(self._labels + novel)
        return len(novel)

    def replace_all(self, labels: Iterable[str]):
        """Replace the whole list; labels are trimmed, deduplicated and sorted"""
        cleaned = {clean_label(label) for label in labels}
        cleaned.discard("")
        self._labels = sorted(cleaned)

    def search(self, query: str) -> LabelSearch:
        """Labels containing `query`, case-insensitively, in store order"""
        return LabelSearch(self._labels, query)

    def export_text(self) -> str:
        """Full store as plain text, one label per line"""
        return "\n".join(self._labels)


class SelectionSet:
    """Labels currently chosen for combination"""

    def __init__(self, labels: Iterable[str] = ()):
        self._selected = set(labels)

    def __len__(self):
        return len(self._selected)

    def __contains__(self, label):
        return label in self._selected

    def __iter__(self):
        return iter(sorted(self._selected))

    @property
    def labels(self) -> List[str]:
        """Selected labels in sorted order"""
        return sorted(self._selected)

    def toggle(self, label):
        if label in self._selected:
            self._selected.discard(label)
        else:
            self._selected.add(label)

    def select(self, label):
        self._selected.add(label)

    def select_all(self, labels: Iterable[str]):
        """Replace the selection wholesale (used for "select all visible")"""
        self._selected = set(labels)

    def deselect_all(self):
        self._selected.clear()

    def retain(self, available: Iterable[str]) -> int:
        """
        Drop selected labels that no longer exist in the store

        Returns:
            Number of stale labels removed
        """
        available = set(available)
        stale = self._selected - available
        self._selected &= available
        return len(stale)
