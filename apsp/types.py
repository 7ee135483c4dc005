"""Type aliases shared by the solver implementations."""

from __future__ import annotations

from typing import List, Sequence, Union

import numpy as np

#: A single distance entry. Either a finite path weight or the sentinel.
Distance = int

#: The solver's working representation: a list of mutable rows.
DistanceMatrix = List[List[Distance]]

#: Accepted input: nested sequences of ints or a 2-D integer numpy array.
MatrixLike = Union[Sequence[Sequence[Distance]], np.ndarray]
