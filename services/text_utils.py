import unicodedata


def normalize_name(s: str) -> str:
    if not isinstance(s, str):
        s = str(s)
    s = s.strip()
    # NFKC folds full-width forms; kana are kept as-is
    s = unicodedata.normalize('NFKC', s)
    s = s.lower()
    # Map gender symbols to letters so "Nidoran♀" matches "nidoran-f"
    s = s.replace('♂', 'm').replace('♀', 'f')
    # Drop separators and punctuation, keep letters (any script) and digits
    s = ''.join(ch for ch in s if ch.isalnum())
    return s


def matches_search(term: str, *names) -> bool:
    """True when the normalized term is contained in any of the given names."""
    t = normalize_name(term or '')
    if not t:
        return True
    return any(t in normalize_name(n) for n in names if n)
