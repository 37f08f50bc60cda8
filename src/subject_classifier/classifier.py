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

r"""Subject classification: raw text in, :class:`Subject` out.

Key Concepts::

    ┌──────────────────┬─────────────────────────────────────────────────┐
    │ Concept          │ Plain-English                                   │
    ├──────────────────┼─────────────────────────────────────────────────┤
    │ Subject          │ The first line of a commit message, classified. │
    │                  │ Immutable once built.                           │
    ├──────────────────┼─────────────────────────────────────────────────┤
    │ Classifier       │ Holds an ordered rule tuple and icon settings.  │
    │                  │ The first rule that matches wins.               │
    ├──────────────────┼─────────────────────────────────────────────────┤
    │ Unrecognized     │ What you get when nothing matches. A normal     │
    │                  │ result with a blank icon, never an error.       │
    └──────────────────┴─────────────────────────────────────────────────┘

Usage::

    from subject_classifier import Subject

    subject = Subject.from_text('feat(parser): add new rule')
    subject.category  # Category.FEAT
    subject.scope  # 'parser'
    subject.description  # 'add new rule'
    subject.icon  # '\U0001f381'
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType

from subject_classifier._normalize import has_breaking_footer, mark_breaking, normalize_subject
from subject_classifier._types import Category, Classification
from subject_classifier.config import ClassifierConfig
from subject_classifier.errors import SubjectClassifierError
from subject_classifier.icons import DEFAULT_ICON_SET, ICON_SETS, icon_for
from subject_classifier.logging import get_logger
from subject_classifier.rules import (
    CONVENTIONAL_TYPES,
    DEFAULT_RULES,
    KEYWORDS,
    PatternRule,
    build_rules,
    first_match,
)

__all__ = [
    'Classifier',
    'Subject',
    'get_default_classifier',
]

logger = get_logger(__name__)


@dataclass(frozen=True)
class Subject:
    """A classified commit subject.

    Attributes:
        text: The input exactly as given.
        category: The resolved category.  Always set; unmatched input is
            :attr:`Category.UNRECOGNIZED`.
        description: Cleaned text after the recognized prefix.  Empty
            only when the input was empty.
        scope: Optional subsystem label, ``None`` when absent.
        breaking: Whether the subject signals a breaking change.
        reference: PR number, version or git ref pulled out of the
            template, when the rule has one.
    """

    text: str
    category: Category
    description: str
    scope: str | None = None
    breaking: bool = False
    reference: str | None = None

    @classmethod
    def from_text(cls, text: str, *, classifier: Classifier | None = None) -> Subject:
        """Classify *text*.  Never raises.

        Args:
            text: A commit subject line, or a whole commit message (only
                its first line is classified; footers may flag a
                breaking change).
            classifier: Classifier to use.  Defaults to the shared
                default classifier.
        """
        return (classifier or get_default_classifier()).classify(text)

    @property
    def icon(self) -> str:
        """Default nerd-font glyph for this subject."""
        return icon_for(self.category, self.breaking)

    @property
    def is_merge(self) -> bool:
        """``True`` for generic and platform merge commits."""
        return self.category.is_merge


@dataclass(frozen=True)
class Classifier:
    """Applies pattern rules in priority order.

    Instances are immutable and safe to share between threads.  Build one
    from configuration with :meth:`from_config`, or use
    :func:`get_default_classifier`.

    Attributes:
        rules: Pattern rules in priority order.
        icon_set: Name of the built-in icon set used by :meth:`icon`.
        icon_overrides: Per-category glyph overrides.
    """

    rules: tuple[PatternRule, ...] = DEFAULT_RULES
    icon_set: str = DEFAULT_ICON_SET
    icon_overrides: Mapping[Category, str] = field(default_factory=lambda: MappingProxyType({}))

    def __post_init__(self) -> None:
        """Validate the icon set eagerly so :meth:`icon` never fails."""
        if self.icon_set not in ICON_SETS:
            raise SubjectClassifierError(
                f'Unknown icon set {self.icon_set!r}',
                hint=f'Use one of: {", ".join(sorted(ICON_SETS))}',
            )

    @classmethod
    def from_config(cls, config: ClassifierConfig) -> Classifier:
        """Build a classifier whose tables include the configured additions."""
        types = {**CONVENTIONAL_TYPES, **config.types}
        keywords = {**KEYWORDS, **config.keywords}
        logger.debug(
            'classifier_built',
            icon_set=config.icon_set,
            extra_types=sorted(config.types),
            extra_keywords=sorted(config.keywords),
        )
        return cls(
            rules=build_rules(types=MappingProxyType(types), keywords=MappingProxyType(keywords)),
            icon_set=config.icon_set,
            icon_overrides=MappingProxyType(dict(config.icons)),
        )

    def classify(self, text: str) -> Subject:
        """Classify a subject line.

        Resolution:

        1. Take the trimmed first line.  Empty input is unrecognized
           straight away.
        2. Try each rule in order; the first match wins.
        3. A ``BREAKING CHANGE:`` footer further down the message marks
           a Conventional Commits result as breaking.
        4. Nothing matched: unrecognized, description = trimmed subject.
        """
        subject = normalize_subject(text)
        if not subject:
            return Subject(text=text, category=Category.UNRECOGNIZED, description='')

        found = first_match(self.rules, subject)
        if found is None:
            return Subject(text=text, category=Category.UNRECOGNIZED, description=subject)

        rule, result = found
        if rule.reads_footers and not result.breaking and has_breaking_footer(text):
            result = replace(result, breaking=True, description=mark_breaking(result.description))
        return _to_subject(text, result)

    def icon(self, subject: Subject) -> str:
        """Glyph for *subject* using this classifier's icon settings."""
        return icon_for(
            subject.category,
            subject.breaking,
            icon_set=self.icon_set,
            overrides=self.icon_overrides,
        )


def _to_subject(text: str, result: Classification) -> Subject:
    return Subject(
        text=text,
        category=result.category,
        description=result.description,
        scope=result.scope,
        breaking=result.breaking,
        reference=result.reference,
    )


# Shared default classifier, built on first use.
_default_classifier: Classifier | None = None


def get_default_classifier() -> Classifier:
    """Return the shared classifier with the built-in rules and icons."""
    global _default_classifier  # noqa: PLW0603
    if _default_classifier is None:
        _default_classifier = Classifier()
    return _default_classifier
