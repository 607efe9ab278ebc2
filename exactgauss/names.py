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
"""Static strings and defaults used in the exactgauss package

    Random systems

        EQUATIONS = 'equations'

        VARIABLES = 'variables'

        VALUE_MIN = 'value_min'

        VALUE_MAX = 'value_max'

        SEED = 'seed'

    Defaults

        EQUATIONS_VARIABLES_MIN = 1

        EQUATIONS_VARIABLES_MAX = 10

        DEFAULT_VALUE_MIN = 1

        DEFAULT_VALUE_MAX = 7

    Table headings

        BEFORE_ELIMINATION = 'BEFORE ELIMINATION'

        AFTER_ELIMINATION = 'AFTER ELIMINATION'

        AFTER_COLUMN = 'AFTER COLUMN'
"""
# Random systems
EQUATIONS = 'equations'
VARIABLES = 'variables'
VALUE_MIN = 'value_min'
VALUE_MAX = 'value_max'
SEED = 'seed'

# Defaults, upper bounds are exclusive
EQUATIONS_VARIABLES_MIN = 1
EQUATIONS_VARIABLES_MAX = 10
DEFAULT_VALUE_MIN = 1
DEFAULT_VALUE_MAX = 7

# Table headings
BEFORE_ELIMINATION = 'BEFORE ELIMINATION'
AFTER_ELIMINATION = 'AFTER ELIMINATION'
AFTER_COLUMN = 'AFTER COLUMN'
