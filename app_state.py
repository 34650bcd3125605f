"""
Application state for the Artist Tag Mixer
One TagMixerState lives in st.session_state; the page reads it and calls its methods to mutate.
"""
import sys
from typing import Iterable, List, Optional

import config
from tag_options import PrefixMode, WeightDistribution
from utils_combine import CombinationConfig, EmptySelectionError, generate_tags
from utils_history import HistoryLog
from utils_labels import LabelStore, NoValidLabelsError, SelectionSet


class TagMixerState:
    """Owns the label store, selection, settings, history and current output"""

    def __init__(self, labels: Iterable[str] = (), rng=None, settings: Optional[CombinationConfig] = None):
        self.store = LabelStore(labels)
        self.selection = SelectionSet()
        self.settings = settings or CombinationConfig()
        self.history = HistoryLog()
        self.current_output = ""
        self.rng = rng

    @classmethod
    def from_catalog(cls, rng=None):
        from artist_catalog import ARTIST_TAGS
        return cls(ARTIST_TAGS, rng=rng)

    # ---------------------------
    # Labels
    # ---------------------------

    def add_label(self, label) -> bool:
        """Add a custom label; newly inserted labels are selected right away"""
        added = self.store.add(label)
        if added:
            self.selection.select(label.strip())
        return added

    def import_text(self, raw_text: str) -> int:
        """
        Bulk import labels from a text payload

        Returns:
            Number of new labels added

        Raises:
            NoValidLabelsError: payload had no usable labels; store unchanged
        """
        try:
            added = self.store.import_bulk(raw_text)
        except NoValidLabelsError:
            print("[IMPORT] No valid labels in payload", file=sys.stderr)
            raise
        print(f"[IMPORT] Added {added} new labels ({len(self.store)} total)")
        return added

    def import_bytes(self, payload: bytes) -> int:
        """Decode an uploaded file as UTF-8 text (extension is ignored) and import it"""
        return self.import_text(payload.decode("utf-8-sig"))

    def replace_labels(self, labels: Iterable[str]):
        """Replace the whole store and drop selections that no longer exist"""
        self.store.replace_all(labels)
        dropped = self.selection.retain(self.store)
        if dropped:
            print(f"[LABELS] Dropped {dropped} stale selections")

    def export_text(self) -> str:
        return self.store.export_text()

    def visible_labels(self, query="") -> List[str]:
        return list(self.store.search(query))

    # ---------------------------
    # Selection
    # ---------------------------

    def toggle(self, label):
        if label in self.store:
            self.selection.toggle(label)

    def select_visible(self, query=""):
        self.selection.select_all(self.store.search(query))

    def deselect_all(self):
        self.selection.deselect_all()

    @property
    def selected_count(self) -> int:
        return len(self.selection)

    # ---------------------------
    # Settings
    # ---------------------------

    @property
    def tag_slider_max(self) -> int:
        return max(config.TAG_SLIDER_FLOOR, self.selected_count)

    def set_min_tags(self, value: int):
        value = max(1, int(value))
        self.settings.min_tags = value
        if value > self.settings.max_tags:
            self.settings.max_tags = value

    def set_max_tags(self, value: int):
        value = max(1, int(value))
        self.settings.max_tags = value
        if value < self.settings.min_tags:
            self.settings.min_tags = value

    def set_min_weight(self, value: float):
        self.settings.min_weight = float(value)

    def set_max_weight(self, value: float):
        self.settings.max_weight = float(value)

    def set_prefix_mode(self, mode):
        self.settings.prefix_mode = PrefixMode(mode)

    def set_distribution(self, distribution):
        self.settings.distribution = WeightDistribution(distribution)

    # ---------------------------
    # Generation & history
    # ---------------------------

    def generate(self) -> Optional[str]:
        """
        Combine the current selection and publish the result

        Returns:
            The generated string, or None when nothing is selected
            (the output area then shows the empty-selection message)
        """
        try:
            result = generate_tags(self.selection.labels, self.settings, self.rng)
        except EmptySelectionError as e:
            self.current_output = str(e)
            return None

        self.current_output = result
        self.history.record(result)
        print(f"[GENERATE] {result}")
        return result

    def select_history(self, entry: str):
        self.current_output = self.history.select(entry)

    def snapshot(self) -> dict:
        """Plain values for rendering"""
        return {
            "labels": self.store.labels,
            "selected": self.selection.labels,
            "settings": self.settings,
            "current_output": self.current_output,
            "history": self.history.entries,
        }
