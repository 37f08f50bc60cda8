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

"""Classifier configuration from TOML.

Settings live either in ``[tool.subject-classifier]`` of a
``pyproject.toml`` or at the top level of a ``subject-classifier.toml``::

    icon_set = "ascii"

    [icons]
    feat = "F "

    [keywords]
    implement = "feat"

    [types]
    wip = "chore"

Lookup order for :func:`load_config`:

1. The explicit ``path`` argument.
2. ``$SUBJECT_CLASSIFIER_CONFIG``.
3. ``subject-classifier.toml`` in the working directory.
4. ``pyproject.toml`` in the working directory.

A missing file means defaults.  Invalid values raise
:class:`~subject_classifier.errors.SubjectClassifierError` naming the
offending key.
"""

from __future__ import annotations

import os
import re
import sys
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from subject_classifier._types import Category
from subject_classifier.errors import SubjectClassifierError
from subject_classifier.icons import DEFAULT_ICON_SET, ICON_SETS
from subject_classifier.logging import get_logger

__all__ = [
    'CONFIG_ENV_VAR',
    'CONFIG_FILENAME',
    'ClassifierConfig',
    'load_config',
]

logger = get_logger(__name__)

CONFIG_FILENAME = 'subject-classifier.toml'
CONFIG_ENV_VAR = 'SUBJECT_CLASSIFIER_CONFIG'
_PYPROJECT = 'pyproject.toml'
_TOOL_SECTION = 'subject-classifier'

_ALLOWED_KEYS = frozenset({'icon_set', 'icons', 'keywords', 'types'})

# Keywords and types are matched as a single word.
_WORD = re.compile(r'^[^\W_]+$')


@dataclass(frozen=True)
class ClassifierConfig:
    """Validated classifier settings.

    Attributes:
        icon_set: Built-in icon set name.
        icons: Per-category glyph overrides.
        keywords: Extra or overriding first-word keywords (lowercase).
        types: Extra or overriding Conventional Commits types (lowercase).
    """

    icon_set: str = DEFAULT_ICON_SET
    icons: Mapping[Category, str] = field(default_factory=lambda: MappingProxyType({}))
    keywords: Mapping[str, Category] = field(default_factory=lambda: MappingProxyType({}))
    types: Mapping[str, Category] = field(default_factory=lambda: MappingProxyType({}))


def _parse_category(value: object, key: str) -> Category:
    if not isinstance(value, str):
        raise SubjectClassifierError(f'{key} must be a string, got {type(value).__name__}')
    try:
        return Category(value.strip().lower())
    except ValueError:
        raise SubjectClassifierError(
            f'{key}: unknown category {value!r}',
            hint=f'Valid categories: {", ".join(c.value for c in Category)}',
        ) from None


def _parse_table(raw: Mapping[str, object], key: str) -> Mapping[str, object]:
    value = raw.get(key, {})
    if not isinstance(value, dict):
        raise SubjectClassifierError(f'{key} must be a table, got {type(value).__name__}')
    return value


def _parse_words(raw: Mapping[str, object], key: str) -> Mapping[str, Category]:
    parsed: dict[str, Category] = {}
    for word, category in _parse_table(raw, key).items():
        if not _WORD.match(word):
            raise SubjectClassifierError(
                f'{key}.{word} is not a single word',
                hint='Use letters and digits only, e.g. "implement".',
            )
        parsed[word.lower()] = _parse_category(category, f'{key}.{word}')
    return MappingProxyType(parsed)


def _parse_icons(raw: Mapping[str, object]) -> Mapping[Category, str]:
    parsed: dict[Category, str] = {}
    for name, glyph in _parse_table(raw, 'icons').items():
        category = _parse_category(name, f'icons.{name}')
        if not isinstance(glyph, str) or not glyph:
            raise SubjectClassifierError(f'icons.{name} must be a non-empty string')
        parsed[category] = glyph
    return MappingProxyType(parsed)


def _parse_config(raw: Mapping[str, object]) -> ClassifierConfig:
    """Validate a raw TOML table into a :class:`ClassifierConfig`."""
    unknown = sorted(set(raw) - _ALLOWED_KEYS)
    if unknown:
        raise SubjectClassifierError(
            f'Unknown key(s) in classifier config: {", ".join(unknown)}',
            hint=f'Allowed keys: {", ".join(sorted(_ALLOWED_KEYS))}',
        )

    icon_set = raw.get('icon_set', DEFAULT_ICON_SET)
    if not isinstance(icon_set, str):
        raise SubjectClassifierError(f'icon_set must be a string, got {type(icon_set).__name__}')
    if icon_set not in ICON_SETS:
        raise SubjectClassifierError(
            f'icon_set: unknown icon set {icon_set!r}',
            hint=f'Use one of: {", ".join(sorted(ICON_SETS))}',
        )

    return ClassifierConfig(
        icon_set=icon_set,
        icons=_parse_icons(raw),
        keywords=_parse_words(raw, 'keywords'),
        types=_parse_words(raw, 'types'),
    )


def _resolve_config_path(path: Path | None, cwd: Path) -> Path | None:
    if path is not None:
        if not path.is_file():
            raise SubjectClassifierError(f'Config file not found: {path}')
        return path

    env_path = os.environ.get(CONFIG_ENV_VAR, '')
    if env_path:
        candidate = Path(env_path)
        if not candidate.is_file():
            raise SubjectClassifierError(
                f'Config file not found: {candidate}',
                hint=f'Unset {CONFIG_ENV_VAR} or point it at an existing file.',
            )
        return candidate

    for name in (CONFIG_FILENAME, _PYPROJECT):
        candidate = cwd / name
        if candidate.is_file():
            return candidate
    return None


def load_config(path: Path | None = None, *, cwd: Path | None = None) -> ClassifierConfig:
    """Load classifier settings.

    Args:
        path: Explicit config file.  A ``pyproject.toml`` is read from its
            ``[tool.subject-classifier]`` table; any other file from its
            top level.
        cwd: Directory searched when no path is given.  Defaults to the
            process working directory.

    Returns:
        The validated configuration, or defaults when no file exists.

    Raises:
        SubjectClassifierError: If the file is unreadable or invalid.
    """
    config_path = _resolve_config_path(path, cwd or Path.cwd())
    if config_path is None:
        logger.debug('config_not_found', cwd=str(cwd or Path.cwd()))
        return ClassifierConfig()

    try:
        with config_path.open('rb') as f:
            data = tomllib.load(f)
    except OSError as exc:
        raise SubjectClassifierError(f'Cannot read config file {config_path}: {exc}') from exc
    except tomllib.TOMLDecodeError as exc:
        raise SubjectClassifierError(f'Invalid TOML in {config_path}: {exc}') from exc

    if config_path.name == _PYPROJECT:
        tool = data.get('tool', {})
        data = tool.get(_TOOL_SECTION, {}) if isinstance(tool, dict) else {}
        if not isinstance(data, dict):
            raise SubjectClassifierError(f'[tool.{_TOOL_SECTION}] in {config_path} must be a table')

    config = _parse_config(data)
    logger.debug(
        'config_loaded',
        path=str(config_path),
        icon_set=config.icon_set,
        keywords=len(config.keywords),
        types=len(config.types),
    )
    return config
