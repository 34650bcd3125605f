"""
Categorical options for tag combination
Edit the display labels here to change how the options read in the UI
"""
from enum import Enum


class PrefixMode(str, Enum):
    """Whether the "artist:" marker is put in front of each picked tag"""
    ALL = "all"
    NONE = "none"
    RANDOM = "random"


class WeightDistribution(str, Enum):
    """How a random weight is shaped inside the configured weight range"""
    UNIFORM = "uniform"
    FAVOR_LOW = "favor_low"
    FAVOR_HIGH = "favor_high"
    NORMAL = "normal"


PREFIX_LABELS = {
    PrefixMode.ALL: "Always",
    PrefixMode.NONE: "Never",
    PrefixMode.RANDOM: "Random",
}

DISTRIBUTION_LABELS = {
    WeightDistribution.UNIFORM: "Uniform",
    WeightDistribution.FAVOR_LOW: "Favor low weights",
    WeightDistribution.FAVOR_HIGH: "Favor high weights",
    WeightDistribution.NORMAL: "Favor middle weights",
}
