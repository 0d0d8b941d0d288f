import sys
import os

# Add the project root to sys.path so tests run without an install
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

import numpy as np
import pytest


@pytest.fixture
def rng():
    """Seeded generator for reproducible random colors."""
    return np.random.default_rng(20240611)
