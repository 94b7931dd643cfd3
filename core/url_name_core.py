"""
URL Name Core - Folder name to display/URL name transformation.

Each column may carry a match/replace regex pair and a map of special
cases. The transformation either yields a name (possibly with advisory
warnings about bad configuration) or decides to skip the entry.
"""

import re
from collections.abc import Iterable
from typing import Any

from markupsafe import escape

from core.models import ColumnRule, Rendered, Skipped, TransformResult

# Delimiters accepted for PCRE-style patterns such as "/^v\d+/i"
_DELIMITERS = "/#~"
_PCRE_FLAGS = {
    "i": re.IGNORECASE,
    "m": re.MULTILINE,
    "s": re.DOTALL,
    "x": re.VERBOSE,
    "u": 0,
}


def compile_pattern(pattern: str) -> re.Pattern:
    """
    Compiles a column regex.

    Plain Python patterns are used as-is. Patterns written with PCRE
    delimiters (``/.../flags``, ``#...#``, ``~...~``) have the delimiters
    stripped and their flags translated. A modifier outside ``i m s x u``
    is rejected rather than compiled as a literal.

    Raises:
        re.error: If the pattern (or a PCRE flag) is invalid.
    """
    if len(pattern) >= 2 and pattern[0] in _DELIMITERS:
        delimiter = pattern[0]
        end = pattern.rfind(delimiter)
        if end > 0:
            body, modifiers = pattern[1:end], pattern[end + 1 :]
            flags = 0
            for char in modifiers:
                if char not in _PCRE_FLAGS:
                    raise re.error(f"unsupported pattern modifier {char!r}", pattern)
                flags |= _PCRE_FLAGS[char]
            return re.compile(body, flags)
    return re.compile(pattern)


def _column_label(rule: ColumnRule) -> str:
    return str(escape(rule.title))


def transform_url_name(raw_name: str, rule: ColumnRule) -> TransformResult:
    """
    Computes the URL name for a folder entry.

    Order of operations:
        1. No match/replace configured: name passes through.
        2. Only one side configured: warning, name passes through.
        3. Match regex does not compile: warning, name passes through.
        4. Name does not match: Skipped.
        5. Substitution applied; a bad replacement is a warning and the
           name passes through unchanged.
        6. Exact special-case override on the resulting name.

    Args:
        raw_name: Folder name as listed on disk.
        rule: Column configuration.

    Returns:
        Rendered(name, errors) or Skipped().
    """
    errors: list[str] = []
    url_name = raw_name
    label = _column_label(rule)

    match = (rule.url_match or "").strip()
    replace = rule.url_replace
    match_set = match != ""
    # An explicitly configured empty replacement means "strip the match"
    replace_set = replace is not None and (replace.strip() != "" or match_set)

    if not match_set and not replace_set:
        pass
    elif match_set != replace_set:
        errors.append(
            "Both urlRules.match and urlRules.replace must be set "
            f'(or both empty) for column "{label}".'
        )
    else:
        try:
            compiled = compile_pattern(match)
        except re.error:
            errors.append(f'Invalid regex in urlRules.match for column "{label}".')
        else:
            if compiled.search(raw_name) is None:
                return Skipped()
            try:
                url_name = compiled.sub(replace.strip(), raw_name)
            except re.error:
                errors.append(
                    f'Invalid regex in urlRules.replace for column "{label}".'
                )

    if url_name in rule.special_cases:
        url_name = rule.special_cases[url_name]

    return Rendered(url_name, errors)


def special_cases_from_rows(rows: Iterable[dict[str, Any]]) -> dict[str, str]:
    """
    Collapses editable ``{match, replace}`` rows into a special-case map.

    Both sides are trimmed; rows with both sides empty are dropped. When
    two rows share a match, the later row wins.
    """
    cases: dict[str, str] = {}
    for row in rows:
        match = str(row.get("match") or "").strip()
        replace = str(row.get("replace") or "").strip()
        if match or replace:
            cases[match] = replace
    return cases
