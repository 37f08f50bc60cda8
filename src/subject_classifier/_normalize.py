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

"""Text normalization helpers shared by the pattern rules."""

from __future__ import annotations

import re

__all__ = [
    'BREAKING_PREFIX',
    'has_breaking_footer',
    'mark_breaking',
    'normalize_subject',
    'strip_keyword_separator',
]

BREAKING_PREFIX = '! '

# Characters dropped between a prefix keyword and the description.
_KEYWORD_SEPARATORS = ' \t-:;,/'

# "BREAKING CHANGE" must be uppercase; "BREAKING-CHANGE" is a synonym.
_BREAKING_FOOTER: re.Pattern[str] = re.compile(r'^BREAKING[- ]CHANGE:\s*\S')


def normalize_subject(text: str) -> str:
    """Return the trimmed first line of *text*.

    Callers may hand over a full commit message; only the subject line
    takes part in classification.
    """
    lines = text.strip().splitlines()
    if not lines:
        return ''
    return lines[0].strip()


def has_breaking_footer(text: str) -> bool:
    """Check whether a multi-line message carries a breaking-change footer.

    The subject line itself is skipped: ``BREAKING CHANGE: ...`` as a
    subject is handled by the Conventional Commits rule.
    """
    lines = text.strip().splitlines()
    return any(_BREAKING_FOOTER.match(line.strip()) for line in lines[1:])


def strip_keyword_separator(rest: str) -> str:
    """Drop whitespace and light punctuation left after a prefix keyword."""
    return rest.lstrip(_KEYWORD_SEPARATORS).rstrip()


def mark_breaking(description: str) -> str:
    """Prefix a description with the breaking-change marker.

    >>> mark_breaking('remove legacy API')
    '! remove legacy API'
    """
    return f'{BREAKING_PREFIX}{description}'
