"""
Case restoration and replacement template interpolation.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

# `$` followed by one or two digits: $0 is the whole match, $1..$99 are groups
_TEMPLATE_REF = re.compile(r"\$(\d{1,2})")


def restore_case(reference: str, candidate: str) -> str:
    """
    Re-case ``candidate`` to follow the casing style of ``reference``.

    Args:
        reference: Word whose casing is mimicked
        candidate: Word to re-case

    Returns:
        The re-cased candidate

    Examples:
        >>> restore_case("hello", "WORLD")
        'world'
        >>> restore_case("WHISKY", "whiskies")
        'WHISKIES'
        >>> restore_case("Alumnus", "alumni")
        'Alumni'
        >>> restore_case("mIxEd", "Words")
        'words'
    """
    if reference == candidate:
        return candidate

    # Lower cased words. E.g. "hello".
    if reference == reference.lower():
        return candidate.lower()

    # Upper cased words. E.g. "WHISKY".
    if reference == reference.upper():
        return candidate.upper()

    # Title cased words. E.g. "Title".
    if reference[0] == reference[0].upper():
        return candidate[:1].upper() + candidate[1:]

    return candidate.lower()


def interpolate(template: str, args: Sequence[str]) -> str:
    """
    Substitute ``$N`` references in a replacement template.

    ``args[0]`` is the whole match and ``args[1:]`` the captured groups.
    References to groups that do not exist become the empty string.

    Examples:
        >>> interpolate("$1ies", ["city", "cit"])
        'cities'
        >>> interpolate("$1$2ves", ["lf", "", "l"])
        'lves'
    """

    def _lookup(match: re.Match[str]) -> str:
        index = int(match.group(1))
        return args[index] if index < len(args) else ""

    return _TEMPLATE_REF.sub(_lookup, template)
