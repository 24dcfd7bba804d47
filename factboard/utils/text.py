import unicodedata

MAX_FACT_LENGTH = 900


def normalize_fact(raw):
    """Trim a raw fact string. Returns '' for None or whitespace-only input."""
    if not isinstance(raw, str):
        return ''
    return raw.strip()


def fact_key(text):
    """
    Collation key used for uniqueness: case-folded with accents removed,
    so 'Café' and 'cafe' collide the way they would under a CI/AI collation.
    """
    decomposed = unicodedata.normalize('NFKD', normalize_fact(text))
    stripped = ''.join(ch for ch in decomposed if not unicodedata.combining(ch))
    return stripped.casefold()


def collapse_batch(raw_items):
    """
    Normalize a batch and group it by collation key.

    Returns a dict ``key -> {'text': first normalized spelling, 'count': n}``
    in first-seen order, plus the number of items dropped (empty or too long).
    """
    grouped = {}
    dropped = 0
    for raw in raw_items:
        text = normalize_fact(raw)
        if not text or len(text) > MAX_FACT_LENGTH:
            dropped += 1
            continue
        key = fact_key(text)
        entry = grouped.get(key)
        if entry is None:
            grouped[key] = {'text': text, 'count': 1}
        else:
            entry['count'] += 1
    return grouped, dropped
