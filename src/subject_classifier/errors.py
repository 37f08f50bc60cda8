# Copyright 2026 Google LLC
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
# SPDX-License-Identifier: Apache-2.0

"""Exceptions raised by subject_classifier.

Classification itself never raises: unmatched input becomes
:attr:`~subject_classifier.Category.UNRECOGNIZED`.  The only failures
are configuration problems (bad TOML values, unknown icon sets).
"""

from __future__ import annotations

__all__ = [
    'SubjectClassifierError',
]


class SubjectClassifierError(Exception):
    """Raised when classifier configuration is invalid.

    Attributes:
        message: Human-readable description of the problem.
        hint: Optional suggestion for fixing it.
    """

    def __init__(self, message: str, *, hint: str = '') -> None:
        self.message = message
        self.hint = hint
        text = f'{message}\n  hint: {hint}' if hint else message
        super().__init__(text)
