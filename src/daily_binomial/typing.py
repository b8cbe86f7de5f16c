from __future__ import annotations

import numpy as np
from typing import TypeAlias

from numpy.typing import NDArray

FloatArray: TypeAlias = NDArray[np.floating]  # typing only
BoolArray: TypeAlias = NDArray[np.bool_]  # typing only
