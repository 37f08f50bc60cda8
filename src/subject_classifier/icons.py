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

r"""Icon tables: category → display glyph.

Two built-in sets are provided:

- ``nerdfont`` (default): glyphs from the `Nerd Fonts
  <https://www.nerdfonts.com/>`_ private-use area plus a few emoji.
- ``ascii``: one letter and a space, for terminals without patched fonts.

Every glyph is padded to two terminal cells so that log columns line up.
Emoji already occupy two cells and carry no padding.

Breaking changes substitute the breaking glyph regardless of category.
Unrecognized subjects get a blank icon so that unknown messages do not
clutter a rendered log.

Usage::

    from subject_classifier.icons import icon_for

    icon_for(Category.FIX, breaking=False)  # '\uf188 '
    icon_for(Category.FIX, breaking=True)  # '⚠ '
    icon_for(Category.FIX, breaking=False, icon_set='ascii')  # 'B '
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from subject_classifier._types import Category
from subject_classifier.errors import SubjectClassifierError

__all__ = [
    'ASCII_ICONS',
    'BLANK_ICON',
    'DEFAULT_ICON_SET',
    'ICON_SETS',
    'NERDFONT_ICONS',
    'icon_for',
]

BLANK_ICON = '  '

NERDFONT_ICONS: Mapping[Category, str] = MappingProxyType({
    Category.FEAT: '\U0001f381',  # wrapped present
    Category.FIX: '\uf188 ',
    Category.CHORE: '\U0001f6a7',  # construction sign
    Category.DOCS: '✎ ',
    Category.REFACTOR: '↺ ',
    Category.TEST: '\uf45e ',
    Category.PERF: '\uf9c4',
    Category.STYLE: '♥ ',
    Category.BUILD: '\U0001f528',  # hammer
    Category.CI: '\uf085 ',
    Category.REVERT: '\uf0e2 ',
    Category.RENAME: '\uf044 ',
    Category.REMOVE: '\uf48e ',
    Category.DEPRECATE: '\uf48e ',
    Category.SECURITY: '\uf49c ',
    Category.ISSUE: '\uf41b ',
    Category.BREAKING: '⚠ ',
    Category.ARCHIVE: '\uf53b ',
    Category.CHANGE: '\ue370 ',
    Category.DEPS: '\uf487 ',
    Category.DEV: '\U0001f6a9',  # triangular flag
    Category.I18N: '\ufac9',
    Category.IMPROVEMENT: '\ue370 ',
    Category.REPO: '\uf401 ',
    Category.RELEASE: '\uf412 ',
    Category.FIXUP: '\uf0e3 ',
    Category.SUBTREE_IMPORT: '⮈ ',
    Category.SUBTREE_SPLIT: '\uf403 ',
    Category.SUBTREE_UPDATE: '\uf419 ',
    Category.MERGE: '\ue727 ',
    Category.MERGE_GITHUB: '\uf407 ',
    Category.MERGE_BORS: '\uf407 ',
    Category.MERGE_AZURE: '\uf407 ',
    Category.MERGE_BITBUCKET: '\uf407 ',
    Category.UNRECOGNIZED: BLANK_ICON,
})

ASCII_ICONS: Mapping[Category, str] = MappingProxyType({
    Category.FEAT: '+ ',
    Category.FIX: 'B ',
    Category.CHORE: 'c ',
    Category.DOCS: 'D ',
    Category.REFACTOR: 'r ',
    Category.TEST: 'T ',
    Category.PERF: 'P ',
    Category.STYLE: 's ',
    Category.BUILD: 'b ',
    Category.CI: 'C ',
    Category.REVERT: 'R ',
    Category.RENAME: 'm ',
    Category.REMOVE: '- ',
    Category.DEPRECATE: 'x ',
    Category.SECURITY: 'S ',
    Category.ISSUE: 'I ',
    Category.BREAKING: '! ',
    Category.ARCHIVE: 'a ',
    Category.CHANGE: '~ ',
    Category.DEPS: 'd ',
    Category.DEV: 'v ',
    Category.I18N: 'L ',
    Category.IMPROVEMENT: '~ ',
    Category.REPO: 'o ',
    Category.RELEASE: 'V ',
    Category.FIXUP: 'f ',
    Category.SUBTREE_IMPORT: '< ',
    Category.SUBTREE_SPLIT: '/ ',
    Category.SUBTREE_UPDATE: '^ ',
    Category.MERGE: 'M ',
    Category.MERGE_GITHUB: 'M ',
    Category.MERGE_BORS: 'M ',
    Category.MERGE_AZURE: 'M ',
    Category.MERGE_BITBUCKET: 'M ',
    Category.UNRECOGNIZED: BLANK_ICON,
})

ICON_SETS: Mapping[str, Mapping[Category, str]] = MappingProxyType({
    'nerdfont': NERDFONT_ICONS,
    'ascii': ASCII_ICONS,
})

DEFAULT_ICON_SET = 'nerdfont'


def icon_for(
    category: Category,
    breaking: bool = False,
    *,
    icon_set: str = DEFAULT_ICON_SET,
    overrides: Mapping[Category, str] | None = None,
) -> str:
    """Return the display glyph for a category.

    Args:
        category: The classified category.
        breaking: Whether the subject is a breaking change.  Breaking
            subjects always get the breaking glyph.
        icon_set: Name of the built-in set (``"nerdfont"`` or ``"ascii"``).
        overrides: Per-category glyphs that replace the built-in ones,
            usually from the ``[icons]`` config table.

    Returns:
        The glyph string.  Never empty: unknown categories fall back to
        :data:`BLANK_ICON`.

    Raises:
        SubjectClassifierError: If *icon_set* is not a known set.
    """
    table = ICON_SETS.get(icon_set)
    if table is None:
        raise SubjectClassifierError(
            f'Unknown icon set {icon_set!r}',
            hint=f'Use one of: {", ".join(sorted(ICON_SETS))}',
        )
    key = Category.BREAKING if breaking else category
    if overrides and key in overrides:
        return overrides[key]
    return table.get(key, BLANK_ICON)
