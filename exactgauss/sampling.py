#!/usr/bin/env python3
#
# Copyright 2022 Max Planck Insitute Magdeburg
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
#
#
"""Sample linear systems for demonstrating and exercising the elimination"""

import logging
from typing import Iterator

import numpy as np

from .math import AugmentedMatrix
from .names import *

LOG = logging.getLogger(__name__)

__all__ = ["PREDEFINED_SYSTEMS", "predefined_matrices", "random_matrix", "describe"]

# Augmented systems, last column is the right-hand side
PREDEFINED_SYSTEMS = [
    [[3, 2, -3],
     [-2, 8, 4]],
    [[1, 1, 2, 9],
     [2, 4, -3, 1],
     [3, 6, -5, 0]],
    [[0, 1, 8, 0, 0, 4],
     [0, 0, 0, 1, 0, 3],
     [0, 0, 0, 0, 1, 1]],
    [[1, 2, 3, 4],
     [0, 1, 5, 6],
     [0, 0, 1, 7]],
    [[0, 0, -2, 0, 7, 12],
     [2, 4, -10, 6, 12, 28],
     [2, 4, -5, 6, -5, -1]],
    [[1, 0, 0, 4, -1],
     [0, 1, 0, 2, 6],
     [0, 0, 1, 3, 2]],
    [[1, 6, 0, 0, 4, -2],
     [0, 0, 1, 0, 3, 1],
     [0, 0, 0, 1, 5, 2],
     [0, 0, 0, 0, 0, 0]],
    [[1, 0, 0, 0],
     [0, 1, 2, 0],
     [0, 0, 0, 1]],
    [[1, 2, 3, 4, 1],
     [0, 0, 1, -1, 1],
     [0, 0, 0, 1, 4]],
    [[3, 5, 1, 2, 1],
     [2, -4, 3, 7, 2],
     [4, 14, -1, -3, 0],
     [13, 7, 9, 20, 7]],
]


def predefined_matrices() -> Iterator[AugmentedMatrix]:
    """Yield a fresh AugmentedMatrix for each of the predefined systems."""
    for grid in PREDEFINED_SYSTEMS:
        yield AugmentedMatrix(grid)


def random_matrix(**kwargs) -> AugmentedMatrix:
    """Generate an augmented system with random integer coefficients.

    Example:
        matrix = random_matrix(equations=3, variables=4, seed=42)

    Keyword Args:
        equations (int): Number of rows. Drawn from
            [EQUATIONS_VARIABLES_MIN, EQUATIONS_VARIABLES_MAX) when omitted.

        variables (int): Number of unknowns, the matrix gets one column more.
            Drawn like equations when omitted.

        value_min (int): Smallest coefficient (default 1).

        value_max (int): Exclusive upper bound of the coefficients (default 7).

        seed (int): Seed for numpy's random generator. A seed is drawn and
            logged when omitted, so every matrix can be regenerated.

    Returns:
        (AugmentedMatrix): A new matrix holding the random system.
    """
    allowed_keys = {EQUATIONS, VARIABLES, VALUE_MIN, VALUE_MAX, SEED}
    for key in kwargs:
        if key not in allowed_keys:
            raise ValueError("Key " + key + " is not supported.")

    if SEED not in kwargs:
        kwargs[SEED] = int(np.random.default_rng().integers(1, 2**16 - 1))
        LOG.info("  Using random seed " + str(kwargs[SEED]))
    else:
        LOG.info("  Using seed " + str(kwargs[SEED]))
    rng = np.random.default_rng(kwargs[SEED])

    value_min = int(kwargs.get(VALUE_MIN, DEFAULT_VALUE_MIN))
    value_max = int(kwargs.get(VALUE_MAX, DEFAULT_VALUE_MAX))
    if value_min >= value_max:
        raise ValueError(f"Empty value range [{value_min}, {value_max}).")

    if EQUATIONS in kwargs:
        equations = int(kwargs[EQUATIONS])
    else:
        equations = int(rng.integers(EQUATIONS_VARIABLES_MIN, EQUATIONS_VARIABLES_MAX))
    if VARIABLES in kwargs:
        variables = int(kwargs[VARIABLES])
    else:
        variables = int(rng.integers(EQUATIONS_VARIABLES_MIN, EQUATIONS_VARIABLES_MAX))
    if equations < 0 or variables < 0:
        raise ValueError(f"Cannot create a system of {equations} equations and {variables} variables.")

    values = rng.integers(value_min, value_max, size=(equations, variables + 1))
    LOG.info(f"Generated random system of {equations} equations and {variables} variables.")
    return AugmentedMatrix.from_numpy(values)


def describe(matrix: AugmentedMatrix, suffix: str) -> str:
    """Heading line such as '*** 3 EQUATIONS, 4 VARIABLES, AFTER ELIMINATION ***'"""
    equations = matrix.equations
    variables = matrix.variables
    return "*** {0} EQUATION{1}, {2} VARIABLE{3}, {4} ***".format(equations, "S" if equations != 1 else "",
                                                                  variables, "S" if variables != 1 else "", suffix)
