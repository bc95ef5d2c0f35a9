"""Name matching that also tries the query as if typed on the other layout."""
from typing import Iterable, List

from layoutswap.transliterator import CharacterMap


def query_variants(query: str, mapper: CharacterMap) -> List[str]:
    """Return the query as typed, then its transliteration if it differs."""
    variants = [query]
    converted = mapper.transliterate(query)
    if converted and converted.lower() != query.lower():
        variants.append(converted)
    return variants


def matches(name: str, query: str, mapper: CharacterMap) -> bool:
    if not query:
        return True
    haystack = name.lower()
    return any(v.lower() in haystack for v in query_variants(query, mapper))


def filter_names(names: Iterable[str], query: str, mapper: CharacterMap) -> List[str]:
    return [name for name in names if matches(name, query, mapper)]
