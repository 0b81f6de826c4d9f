"""Text normalization for darija.

Collapses the interchangeable Latin spelling conventions of Darija
transliterations into one canonical form, so that "chukran", "shokran"
and "shukran" all compare equal.

Only the transliteration field goes through this path. Arabic-script text
and the English/French glosses are compared as-is.
"""

import re
import unicodedata

# Ordered rewrite chain. Earlier rules can create or destroy patterns that
# later rules look for, so the order is part of the contract.
REWRITE_RULES: tuple[tuple[re.Pattern, str], ...] = (
    # Vowel digraphs
    (re.compile(r"ou"), "u"),
    (re.compile(r"oo"), "u"),
    (re.compile(r"ee"), "i"),
    (re.compile(r"ei"), "i"),
    (re.compile(r"ai"), "a"),
    (re.compile(r"ay"), "a"),
    # Consonant digraphs
    (re.compile(r"ch"), "sh"),
    (re.compile(r"tch"), "sh"),
    (re.compile(r"ph"), "f"),
    (re.compile(r"dh"), "d"),
    (re.compile(r"th"), "t"),
    # Pharyngeal ain written as a long vowel
    (re.compile(r"aa"), "3"),
    (re.compile(r"o"), "u"),
    # Long consonant runs keep a double so emphatics stay distinct
    (re.compile(r"([^aeiou3789])\1+"), r"\1\1"),
    (re.compile(r"[-\s]"), ""),
    # Word-final vowel spellings
    (re.compile(r"ah$"), "a"),
    (re.compile(r"eh$"), "a"),
    (re.compile(r"iya$"), "ia"),
)

ARABIC_PATTERN = re.compile(
    r"[\u0600-\u06FF\u0750-\u077F\u08A0-\u08FF\uFB50-\uFDFF\uFE70-\uFEFF]"
)


def fold_accents(text: str) -> str:
    """Strip combining marks from accented Latin letters.

    Args:
        text: Text to fold.

    Returns:
        Text with e.g. "é" turned into "e". Characters whose decomposition
        is not ASCII are kept unchanged.
    """
    result = []
    for char in text:
        if char.isascii():
            result.append(char)
            continue
        decomposed = unicodedata.normalize("NFD", char)
        base = "".join(c for c in decomposed if unicodedata.category(c) != "Mn")
        result.append(base if base.isascii() and base else char)
    return "".join(result)


def apply_rules(text: str, rules=REWRITE_RULES) -> str:
    """Run one pass of the rewrite chain over already-lowered text."""
    for pattern, replacement in rules:
        text = pattern.sub(replacement, text)
    return text


def normalize_darija(text: str, rules=REWRITE_RULES) -> str:
    """Normalize a Latin Darija transliteration to its canonical form.

    The text is lowercased, trimmed and accent-folded (see fold_accents)
    before the rewrite chain runs, so "chôu" folds to "chou" and then
    rewrites to "shu". Accent folding is an extra step ahead of the
    rule table, not one of its rules.

    The chain is re-applied until the text stops changing. A single pass
    can expose new matches (stripping the hyphen in "c-h" yields "ch"), and
    every pass either shortens the text or removes a "c"/"o", so the loop
    terminates.

    Args:
        text: Raw transliteration or query.
        rules: Rewrite chain to apply.

    Returns:
        Normalized form (may be empty).
    """
    current = fold_accents(text.lower().strip())
    while True:
        rewritten = apply_rules(current, rules)
        if rewritten == current:
            return rewritten
        current = rewritten


def is_arabic_script(text: str) -> bool:
    """Check if text contains any Arabic-script character."""
    return bool(ARABIC_PATTERN.search(text))
