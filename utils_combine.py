"""
Tag combination engine
Turns the selected artist labels plus the combination settings into one prompt string
"""
import random
import re
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import List, Optional, Sequence

import config
from tag_options import PrefixMode, WeightDistribution

_TRAILING_DIGIT = re.compile(r"\d$", re.ASCII)
_TWO_PLACES = Decimal("0.01")
ZERO_WEIGHT = "0.00"


class EmptySelectionError(ValueError):
    """Raised when generation is requested with no selected labels"""


@dataclass
class CombinationConfig:
    """Runtime settings for one generation; ranges may arrive inverted"""
    min_weight: float = config.DEFAULT_MIN_WEIGHT
    max_weight: float = config.DEFAULT_MAX_WEIGHT
    min_tags: int = config.DEFAULT_MIN_TAGS
    max_tags: int = config.DEFAULT_MAX_TAGS
    prefix_mode: PrefixMode = config.DEFAULT_PREFIX_MODE
    distribution: WeightDistribution = config.DEFAULT_DISTRIBUTION

    def weight_range(self):
        return min(self.min_weight, self.max_weight), max(self.min_weight, self.max_weight)

    def tag_range(self):
        low, high = min(self.min_tags, self.max_tags), max(self.min_tags, self.max_tags)
        return max(1, low), max(1, high)


def shape_factor(distribution, rng) -> float:
    """
    Draw a factor in [0, 1] shaped by the weight distribution

    FAVOR_LOW squares a uniform draw, FAVOR_HIGH mirrors that toward 1,
    NORMAL averages two draws (triangular). Anything else is uniform.
    """
    if distribution == WeightDistribution.FAVOR_LOW:
        return rng.random() ** 2
    if distribution == WeightDistribution.FAVOR_HIGH:
        return 1 - (1 - rng.random()) ** 2
    if distribution == WeightDistribution.NORMAL:
        return (rng.random() + rng.random()) / 2
    return rng.random()


def draw_weight(settings: CombinationConfig, rng) -> float:
    low, high = settings.weight_range()
    return shape_factor(settings.distribution, rng) * (high - low) + low


def format_weight(weight: float) -> str:
    """Two decimals, half-up on the exact float value (0.125 -> "0.13")"""
    return str(Decimal(weight).quantize(_TWO_PLACES, rounding=ROUND_HALF_UP))


def use_prefix(prefix_mode, rng) -> bool:
    if prefix_mode == PrefixMode.ALL:
        return True
    if prefix_mode == PrefixMode.RANDOM:
        return rng.random() < 0.5
    return False


def format_tag(label: str, weight_text: str, with_prefix: bool) -> str:
    """
    Build one output token

    Args:
        label: The artist label, untouched apart from the trailing-digit space
        weight_text: Two-decimal weight string; "0.00" means no weight wrapper
        with_prefix: Whether to prepend the "artist:" marker

    Returns:
        e.g. "1.20::artist:mucha::", "artist:mucha", "art3 "
    """
    # A trailing digit would run into the "::" weight syntax
    if _TRAILING_DIGIT.search(label):
        label = label + " "
    if with_prefix:
        label = config.ARTIST_PREFIX + label
    if weight_text == ZERO_WEIGHT:
        return label
    return f"{weight_text}::{label}::"


def pick_count(settings: CombinationConfig, available: int, rng) -> int:
    low, high = settings.tag_range()
    return min(rng.randint(low, high), available)


def generate_tags(selection: Sequence[str], settings: CombinationConfig,
                  rng: Optional[random.Random] = None) -> str:
    """
    Randomly combine selected labels into one weighted prompt string

    Args:
        selection: Selected labels (any iterable of unique strings)
        settings: Weight/tag-count ranges and prefix/distribution modes
        rng: random.Random-compatible source; a fresh unseeded one when None

    Returns:
        Tokens joined with ", "

    Raises:
        EmptySelectionError: nothing is selected
    """
    if rng is None:
        rng = random.Random()
    labels = sorted(selection)
    if not labels:
        raise EmptySelectionError("Select at least one artist tag to combine.")

    count = pick_count(settings, len(labels), rng)
    picked = rng.sample(labels, count)

    tokens: List[str] = []
    for label in picked:
        with_prefix = use_prefix(settings.prefix_mode, rng)
        weight_text = format_weight(draw_weight(settings, rng))
        tokens.append(format_tag(label, weight_text, with_prefix))

    return config.TOKEN_SEPARATOR.join(tokens)
