"""Candidate extraction from source text.

A candidate is any maximal run of characters from the class-name
alphabet: letters and digits in any script, and ``- _ : / . % [ ]``.
Runs are kept verbatim; deciding which candidates are real utilities is
the generator's job.
"""
from __future__ import annotations

import re
from typing import Callable, Final

CANDIDATE_RE: Final[re.Pattern[str]] = re.compile(r"[\w:/.%\[\]-]+")

Extractor = Callable[[str], frozenset[str]]


def extract_candidates(text: str) -> frozenset[str]:
    """Return the set of candidate class names found in ``text``.

    >>> sorted(extract_candidates('<div class="p-128">'))
    ['class', 'div', 'p-128']
    """
    return frozenset(CANDIDATE_RE.findall(text))
