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

"""Pure types for subject classification.

This module has **zero** runtime dependencies beyond the standard library.
Everything here is a frozen dataclass or enum: no I/O, no logging, no
side effects.  It is safe to import from any module in the package.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

__all__ = [
    'MERGE_CATEGORIES',
    'Category',
    'Classification',
]


class Category(Enum):
    """Closed set of classification outcomes.

    The value is the stable lowercase name used in configuration files
    (e.g. ``icons.merge-github = "..."``).
    """

    FEAT = 'feat'
    FIX = 'fix'
    CHORE = 'chore'
    DOCS = 'docs'
    REFACTOR = 'refactor'
    TEST = 'test'
    PERF = 'perf'
    STYLE = 'style'
    BUILD = 'build'
    CI = 'ci'
    REVERT = 'revert'
    RENAME = 'rename'
    REMOVE = 'remove'
    DEPRECATE = 'deprecate'
    SECURITY = 'security'
    ISSUE = 'issue'
    BREAKING = 'breaking'
    ARCHIVE = 'archive'
    CHANGE = 'change'
    DEPS = 'deps'
    DEV = 'dev'
    I18N = 'i18n'
    IMPROVEMENT = 'improvement'
    REPO = 'repo'
    RELEASE = 'release'
    FIXUP = 'fixup'
    SUBTREE_IMPORT = 'subtree-import'
    SUBTREE_SPLIT = 'subtree-split'
    SUBTREE_UPDATE = 'subtree-update'
    MERGE = 'merge'
    MERGE_GITHUB = 'merge-github'
    MERGE_BORS = 'merge-bors'
    MERGE_AZURE = 'merge-azure'
    MERGE_BITBUCKET = 'merge-bitbucket'
    UNRECOGNIZED = 'unrecognized'

    @property
    def is_merge(self) -> bool:
        """``True`` for the generic merge and every platform merge."""
        return self in MERGE_CATEGORIES


MERGE_CATEGORIES: frozenset[Category] = frozenset({
    Category.MERGE,
    Category.MERGE_GITHUB,
    Category.MERGE_BORS,
    Category.MERGE_AZURE,
    Category.MERGE_BITBUCKET,
})


@dataclass(frozen=True)
class Classification:
    """What a single pattern rule extracted from a subject.

    Attributes:
        category: The resolved category.
        description: The subject text left after stripping the
            recognized type, scope, keyword or template wording.
        scope: Optional subsystem label, e.g. ``"parser"`` from
            ``feat(parser): ...``.
        breaking: Whether the subject signals a breaking change.
        reference: Identifier pulled out of the template: the PR
            number for merges, the version for releases, the git ref
            for subtree operations.
    """

    category: Category
    description: str
    scope: str | None = None
    breaking: bool = False
    reference: str | None = None
