"""Built-in keyboard layout tables and the registry that holds them."""
from types import MappingProxyType
from typing import List

from layoutswap.transliterator import CharacterMap

# Maps EN key position → UA character (QWERTY → ЙЦУКЕН, Ukrainian)
EN_UA_TABLE = {
    'q': 'й', 'w': 'ц', 'e': 'у', 'r': 'к', 't': 'е', 'y': 'н',
    'u': 'г', 'i': 'ш', 'o': 'щ', 'p': 'з', '[': 'х', ']': 'ї',
    'a': 'ф', 's': 'і', 'd': 'в', 'g': 'а', 'h': 'п',
    'j': 'о', 'k': 'л', 'l': 'д', ';': 'ж', "'": 'є',
    'z': 'я', 'x': 'ч', 'c': 'с', 'v': 'м', 'b': 'и', 'n': 'т',
    'm': 'ь', ',': 'б', '.': 'ю', '\\': 'ґ',
}

EN_UA = CharacterMap(EN_UA_TABLE)

DEFAULT_LAYOUT = "en_ua"

LAYOUTS = MappingProxyType({
    DEFAULT_LAYOUT: EN_UA,
})


class UnknownLayoutError(KeyError):
    """Raised when a layout name is not in the registry."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(name)

    def __str__(self):
        known = ", ".join(available_layouts())
        return f"unknown layout {self.name!r} (available: {known})"


def available_layouts() -> List[str]:
    return sorted(LAYOUTS)


def get_layout(name: str) -> CharacterMap:
    try:
        return LAYOUTS[name]
    except (KeyError, TypeError):
        raise UnknownLayoutError(name) from None
