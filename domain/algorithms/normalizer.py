"""Name normalization: raw algorithm strings to canonical comparison forms."""

import re

from domain.algorithms.models import SEPARATORS

# Leading word-character run, optionally followed by a dash and any qualifier (mode, key size, ...)
_MODE_SUFFIX_RE = re.compile(r"(\w+)(?:-.*)?", re.ASCII)


def strip_separators(s: str) -> str:
    """Delete every '-', '_' and space character."""
    for sep in SEPARATORS:
        s = s.replace(sep, "")
    return s


def drop_mode_suffix(s: str) -> str:
    """
    Truncate at the first dash when the string is a word run followed by a dash qualifier.

    Examples:
        >>> drop_mode_suffix("AES-CBC")
        'AES'
        >>> drop_mode_suffix("RC2-40")
        'RC2'
        >>> drop_mode_suffix("SHA 256")
        'SHA 256'

    Strings that do not have that shape are returned unchanged.
    """
    m = _MODE_SUFFIX_RE.fullmatch(s)
    if m is None:
        return s
    return m.group(1)


def normalize_name(raw: str) -> tuple[str, ...]:
    """
    Turn a raw algorithm name into its candidate canonical forms.

    Form A strips separators from the upper-cased input; Form B first drops a
    dash-separated mode suffix, then strips separators. Form A always comes first;
    Form B is included only when it differs.

    Examples:
        >>> normalize_name("sha-256")
        ('SHA256', 'SHA')
        >>> normalize_name("md5")
        ('MD5',)
        >>> normalize_name("AES-256-CBC")
        ('AES256CBC', 'AES')
    """
    upper = str(raw).upper()
    form_a = strip_separators(upper)
    form_b = strip_separators(drop_mode_suffix(upper))
    if form_b == form_a:
        return (form_a,)
    return (form_a, form_b)
