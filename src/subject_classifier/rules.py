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

r"""Ordered pattern rules for commit subjects.

A :class:`PatternRule` pairs a compiled regex (the match predicate) with
an extractor that turns the match into a
:class:`~subject_classifier._types.Classification`.  An extractor may
return ``None`` to decline, in which case resolution falls through to
the next rule.  :func:`first_match` walks a rule tuple and returns the
first result, so **order is part of the contract**:

.. list-table::
   :header-rows: 1

   * - Group
     - Rules
     - Example
   * - Conventional Commits
     - ``conventional``
     - ``feat(parser)!: drop v1 syntax``
   * - Platform merges
     - ``merge-github``, ``merge-github-tracking``, ``merge-bitbucket``,
       ``merge-bors``, ``merge-azure``
     - ``Merge pull request #12 from octo/topic``
   * - Special shapes
     - ``revert-quoted``, ``fixup``, ``release-scoped``, ``release``,
       ``subtree-update``, ``subtree-import``, ``subtree-split``
     - ``Release foo@v2.11.0``
   * - Keyword prefixes
     - ``keyword``
     - ``move old_module to new_module``

Platform merges come before keyword prefixes because a Bors message such
as ``Merge #42`` would otherwise be taken by the ``merge`` keyword.

Pure implementation: depends only on ``re`` and sibling modules.
No I/O, no logging, no side effects.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from subject_classifier._normalize import mark_breaking, strip_keyword_separator
from subject_classifier._types import Category, Classification

__all__ = [
    'CONVENTIONAL_TYPES',
    'DEFAULT_RULES',
    'KEYWORDS',
    'MERGE_RULES',
    'SHAPE_RULES',
    'PatternRule',
    'build_rules',
    'conventional_rule',
    'first_match',
    'keyword_rule',
]

Extractor = Callable[[re.Match[str]], 'Classification | None']

# Conventional Commits types, lowercase.  Two-word types are matched
# literally by the subject regex.
CONVENTIONAL_TYPES: Mapping[str, Category] = MappingProxyType({
    'feat': Category.FEAT,
    'feature': Category.FEAT,
    'add': Category.FEAT,
    'done': Category.FEAT,
    'fix': Category.FIX,
    'bugfix': Category.FIX,
    'hotfix': Category.FIX,
    'chore': Category.CHORE,
    'docs': Category.DOCS,
    'doc': Category.DOCS,
    'refactor': Category.REFACTOR,
    'test': Category.TEST,
    'tests': Category.TEST,
    'perf': Category.PERF,
    'style': Category.STYLE,
    'build': Category.BUILD,
    'ci': Category.CI,
    'revert': Category.REVERT,
    'rename': Category.RENAME,
    'move': Category.RENAME,
    'remove': Category.REMOVE,
    'deprecate': Category.DEPRECATE,
    'security': Category.SECURITY,
    'security fix': Category.SECURITY,
    'issue': Category.ISSUE,
    'gi': Category.ISSUE,
    'breaking change': Category.BREAKING,
    'archive': Category.ARCHIVE,
    'change': Category.CHANGE,
    'deps': Category.DEPS,
    'dev': Category.DEV,
    'i18n': Category.I18N,
    'improvement': Category.IMPROVEMENT,
    'repo': Category.REPO,
    'release': Category.RELEASE,
    'merge': Category.MERGE,
})

# First-word keywords for subjects without Conventional Commits syntax.
KEYWORDS: Mapping[str, Category] = MappingProxyType({
    **{word: category for word, category in CONVENTIONAL_TYPES.items() if ' ' not in word},
    'fixed': Category.FIX,
    'fixes': Category.FIX,
    'fixing': Category.FIX,
    'delete': Category.REMOVE,
})


@dataclass(frozen=True)
class PatternRule:
    """One recognizer in the ordered rule list.

    Attributes:
        name: Stable identifier, used in debug logs and tests.
        pattern: Match predicate, applied with :meth:`re.Pattern.match`
            to the normalized subject.
        extract: Builds the classification from the match, or returns
            ``None`` to let the next rule try.
        reads_footers: Whether a ``BREAKING CHANGE:`` footer in the full
            message also marks the result as breaking.
    """

    name: str
    pattern: re.Pattern[str]
    extract: Extractor
    reads_footers: bool = False

    def apply(self, subject: str) -> Classification | None:
        """Run the rule against a normalized subject line."""
        match = self.pattern.match(subject)
        if match is None:
            return None
        return self.extract(match)


def first_match(
    rules: Iterable[PatternRule],
    subject: str,
) -> tuple[PatternRule, Classification] | None:
    """Return the first rule that classifies *subject*, with its result.

    Args:
        rules: Rules in priority order.
        subject: The normalized subject line.

    Returns:
        ``(rule, classification)``, or ``None`` if no rule matched.
    """
    for rule in rules:
        result = rule.apply(subject)
        if result is not None:
            return rule, result
    return None


# Conventional Commits.

_CONVENTIONAL_PATTERN: re.Pattern[str] = re.compile(
    r'^(?P<type>security fix|breaking change|[^\W_]+)'  # type
    r'(?:\((?P<scope>[^()]*(?:\([^()]*\)[^()]*)*)\))?'  # optional scope, one nested level
    r'(?P<breaking>!)?'  # optional breaking change indicator
    r':\s*'  # colon + space
    r'(?P<description>.+)$',  # description
    re.IGNORECASE,
)

_VERSION_PATTERN: re.Pattern[str] = re.compile(r'v?(?P<version>\d+(?:\.\d+)*)')


def conventional_rule(types: Mapping[str, Category] = CONVENTIONAL_TYPES) -> PatternRule:
    """Build the ``type(scope)!: description`` rule for a type table.

    Types are matched case-insensitively.  Unknown types, and subjects
    with nothing after the colon, are declined.
    """

    def extract(match: re.Match[str]) -> Classification | None:
        category = types.get(match.group('type').lower())
        description = match.group('description').strip()
        if category is None or not description:
            return None
        scope = (match.group('scope') or '').strip() or None
        breaking = bool(match.group('breaking')) or category is Category.BREAKING

        reference = None
        if category is Category.RELEASE:
            version = _VERSION_PATTERN.search(description)
            reference = version.group('version') if version else None

        return Classification(
            category=category,
            description=mark_breaking(description) if breaking else description,
            scope=scope,
            breaking=breaking,
            reference=reference,
        )

    return PatternRule('conventional', _CONVENTIONAL_PATTERN, extract, reads_footers=True)


# Platform merges.  Each template is case-sensitive, as the platforms
# write them.


def _merge(category: Category, description_group: str) -> Extractor:
    def extract(match: re.Match[str]) -> Classification:
        return Classification(
            category=category,
            description=match.group(description_group).strip(),
            reference=match.group('id'),
        )

    return extract


MERGE_RULES: tuple[PatternRule, ...] = (
    PatternRule(
        'merge-github',
        re.compile(r'^Merge pull request #(?P<id>\d+) from (?P<branch>\S.*)$'),
        _merge(Category.MERGE_GITHUB, 'branch'),
    ),
    PatternRule(
        'merge-github-tracking',
        re.compile(r"^Merge remote-tracking branch '(?P<ref>[^']+/pr/(?P<id>\d+))'$"),
        _merge(Category.MERGE_GITHUB, 'ref'),
    ),
    PatternRule(
        'merge-bitbucket',
        re.compile(r'^Merge pull request #(?P<id>\d+) in \S+ from (?P<branch>\S+)(?: to \S.*)?$'),
        _merge(Category.MERGE_BITBUCKET, 'branch'),
    ),
    PatternRule(
        'merge-bors',
        re.compile(r'^Merge (?P<prs>#(?P<id>\d+)(?:\s+#\d+)*)$'),
        _merge(Category.MERGE_BORS, 'prs'),
    ),
    PatternRule(
        'merge-azure',
        re.compile(r'^Merged PR (?P<id>\d+):\s*(?P<title>\S.*)$'),
        _merge(Category.MERGE_AZURE, 'title'),
    ),
)


# Special shapes: reverts, fixups, releases and git-subtree commits.


def _revert_quoted(match: re.Match[str]) -> Classification:
    return Classification(category=Category.REVERT, description=match.group('inner'))


def _fixup(match: re.Match[str]) -> Classification:
    return Classification(
        category=Category.FIXUP,
        description=match.group('rest') or match.string,
    )


def _release(match: re.Match[str]) -> Classification:
    groups = match.groupdict()
    return Classification(
        category=Category.RELEASE,
        description=match.string,
        scope=groups.get('scope'),
        reference=groups['version'],
    )


def _subtree(category: Category) -> Extractor:
    def extract(match: re.Match[str]) -> Classification:
        return Classification(
            category=category,
            description=match.string,
            scope=match.group('subtree'),
            reference=match.group('ref'),
        )

    return extract


SHAPE_RULES: tuple[PatternRule, ...] = (
    # GitHub's default revert format: Revert "feat: add X"
    PatternRule('revert-quoted', re.compile(r'^[Rr]evert\s+"(?P<inner>.+)"'), _revert_quoted),
    PatternRule('fixup', re.compile(r'^(?:fixup|squash|amend)!\s*(?P<rest>.*)$'), _fixup),
    PatternRule(
        'release-scoped',
        re.compile(r'^(?:Release|Bump) :?(?P<scope>[^\s@]+)@v?(?P<version>\d+(?:\.\d+)*)\b', re.IGNORECASE),
        _release,
    ),
    PatternRule(
        'release',
        re.compile(r'^(?:Release|Bump)\s.*?\bv?(?P<version>\d+(?:\.\d+)*)', re.IGNORECASE),
        _release,
    ),
    PatternRule(
        'subtree-update',
        re.compile(r'^Update :(?P<subtree>\S+) to (?P<ref>\S+)$'),
        _subtree(Category.SUBTREE_UPDATE),
    ),
    PatternRule(
        'subtree-import',
        re.compile(r'^:?(?P<subtree>\S+) Import .+⸪(?P<ref>\S+)$'),
        _subtree(Category.SUBTREE_IMPORT),
    ),
    PatternRule(
        'subtree-split',
        re.compile(r"^Split '(?P<subtree>.+)/' into commit '(?P<ref>[^']+)'$"),
        _subtree(Category.SUBTREE_SPLIT),
    ),
)


# Keyword prefixes.

_KEYWORD_PATTERN: re.Pattern[str] = re.compile(r'^(?P<keyword>[^\W_]+)(?P<rest>(?:[\s:;,/(].*)?)$')


def keyword_rule(keywords: Mapping[str, Category] = KEYWORDS) -> PatternRule:
    """Build the first-word keyword rule for a keyword table.

    The keyword is stripped from the description together with the
    separator after it.  A bare keyword keeps the whole subject as its
    description.  A parenthesized label right after the keyword
    (``fix(parser) crash``) stays in the description, since keyword
    subjects never carry a scope.
    """

    def extract(match: re.Match[str]) -> Classification | None:
        category = keywords.get(match.group('keyword').lower())
        if category is None:
            return None
        description = strip_keyword_separator(match.group('rest')) or match.string
        return Classification(category=category, description=description)

    return PatternRule('keyword', _KEYWORD_PATTERN, extract)


def build_rules(
    *,
    types: Mapping[str, Category] | None = None,
    keywords: Mapping[str, Category] | None = None,
) -> tuple[PatternRule, ...]:
    """Assemble the full rule tuple in priority order.

    Args:
        types: Conventional Commits type table.  Defaults to
            :data:`CONVENTIONAL_TYPES`.
        keywords: First-word keyword table.  Defaults to :data:`KEYWORDS`.

    Returns:
        Conventional rule, platform merges, special shapes, keyword rule.
    """
    return (
        conventional_rule(CONVENTIONAL_TYPES if types is None else types),
        *MERGE_RULES,
        *SHAPE_RULES,
        keyword_rule(KEYWORDS if keywords is None else keywords),
    )


DEFAULT_RULES: tuple[PatternRule, ...] = build_rules()
