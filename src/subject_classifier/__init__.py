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

r"""Commit subject classification.

Classifies a commit subject line into a :class:`Category` and derives a
display icon, an optional scope and a cleaned description.  Supports
`Conventional Commits v1.0.0 <https://www.conventionalcommits.org/en/v1.0.0/>`_,
platform merge messages (GitHub, Bitbucket, Bors, Azure DevOps), git
subtree and release messages, and keyword prefixes such as ``move`` or
``done``.

Classification is total: anything unmatched is
:attr:`Category.UNRECOGNIZED`, which renders with a blank icon.

Usage::

    from subject_classifier import Category, Subject, classify

    subject = Subject.from_text('feat(parser): add new rule')
    assert subject.category is Category.FEAT
    assert subject.scope == 'parser'
    assert subject.description == 'add new rule'

    subject = classify('feat!: remove legacy API')
    assert subject.breaking is True
    assert subject.description == '! remove legacy API'

    # Team-specific keywords and icons from pyproject.toml:
    classifier = Classifier.from_config(load_config())
    subject = classifier.classify('implement search')
    classifier.icon(subject)
"""

from subject_classifier._types import Category, Classification
from subject_classifier.classifier import Classifier, Subject, get_default_classifier
from subject_classifier.config import ClassifierConfig, load_config
from subject_classifier.errors import SubjectClassifierError
from subject_classifier.icons import icon_for
from subject_classifier.rules import PatternRule, first_match


def classify(text: str) -> Subject:
    """Classify a commit subject with the default classifier.

    Convenience wrapper around :meth:`Subject.from_text`.

    Args:
        text: The commit subject line (or full message).

    Returns:
        The classified :class:`Subject`.  Never raises.
    """
    return get_default_classifier().classify(text)


__all__ = [
    'Category',
    'Classification',
    'Classifier',
    'ClassifierConfig',
    'PatternRule',
    'Subject',
    'SubjectClassifierError',
    'classify',
    'first_match',
    'get_default_classifier',
    'icon_for',
    'load_config',
]
