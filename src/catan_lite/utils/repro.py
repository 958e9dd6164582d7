from __future__ import annotations

import os
import random
from typing import Optional

import numpy as np


def seed_everything(seed: int) -> None:
    os.environ["PYTHONHASHSEED"] = str(seed)
    random.seed(seed)
    np.random.seed(seed)


def make_rng(seed: Optional[int] = None) -> random.Random:
    """Return the random source threaded through generation and play."""
    return random.Random(seed)
