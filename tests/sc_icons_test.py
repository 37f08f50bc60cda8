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

"""Tests for subject_classifier.icons."""

from __future__ import annotations

import pytest
from subject_classifier._types import Category
from subject_classifier.errors import SubjectClassifierError
from subject_classifier.icons import (
    ASCII_ICONS,
    BLANK_ICON,
    ICON_SETS,
    NERDFONT_ICONS,
    icon_for,
)


class TestIconTables:
    """Tests for the built-in icon tables."""

    @pytest.mark.parametrize('icon_set', sorted(ICON_SETS))
    def test_every_category_has_an_icon(self, icon_set: str) -> None:
        """Test every category has an icon."""
        table = ICON_SETS[icon_set]
        missing = [c for c in Category if c not in table]
        assert missing == []

    @pytest.mark.parametrize('icon_set', sorted(ICON_SETS))
    def test_icons_are_non_empty(self, icon_set: str) -> None:
        """Test icons are non empty."""
        assert all(ICON_SETS[icon_set].values())

    def test_unrecognized_is_blank(self) -> None:
        """Test unrecognized is blank."""
        assert NERDFONT_ICONS[Category.UNRECOGNIZED] == BLANK_ICON
        assert ASCII_ICONS[Category.UNRECOGNIZED] == BLANK_ICON
        assert BLANK_ICON.strip() == ''

    def test_only_unrecognized_is_blank(self) -> None:
        """Test only unrecognized is blank."""
        blank = [c for c, glyph in NERDFONT_ICONS.items() if not glyph.strip()]
        assert blank == [Category.UNRECOGNIZED]

    def test_tables_are_read_only(self) -> None:
        """Test tables are read only."""
        with pytest.raises(TypeError):
            NERDFONT_ICONS[Category.FEAT] = 'x'  # type: ignore[index]


class TestIconFor:
    """Tests for icon_for()."""

    def test_default_set(self) -> None:
        """Test default set."""
        assert icon_for(Category.FEAT) == NERDFONT_ICONS[Category.FEAT]
        assert icon_for(Category.FIX) == NERDFONT_ICONS[Category.FIX]

    def test_ascii_set(self) -> None:
        """Test ascii set."""
        assert icon_for(Category.FIX, icon_set='ascii') == 'B '
        assert icon_for(Category.FEAT, icon_set='ascii') == '+ '

    @pytest.mark.parametrize('category', list(Category))
    def test_breaking_substitutes(self, category: Category) -> None:
        """Test breaking substitutes."""
        assert icon_for(category, breaking=True) == '⚠ '
        assert icon_for(category, breaking=True, icon_set='ascii') == '! '

    def test_unrecognized_blank(self) -> None:
        """Test unrecognized blank."""
        assert icon_for(Category.UNRECOGNIZED) == BLANK_ICON

    def test_overrides(self) -> None:
        """Test overrides."""
        overrides = {Category.FEAT: 'F ', Category.BREAKING: 'X '}
        assert icon_for(Category.FEAT, overrides=overrides) == 'F '
        assert icon_for(Category.FIX, overrides=overrides) == NERDFONT_ICONS[Category.FIX]
        assert icon_for(Category.FIX, breaking=True, overrides=overrides) == 'X '

    def test_unknown_set_raises(self) -> None:
        """Test unknown set raises."""
        with pytest.raises(SubjectClassifierError, match='Unknown icon set'):
            icon_for(Category.FEAT, icon_set='emoji')
