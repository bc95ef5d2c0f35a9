"""Bidirectional character map — converts text typed on the wrong layout."""
import logging
from types import MappingProxyType
from typing import Mapping, Optional

logger = logging.getLogger(__name__)


class CharacterMap:
    """Character-to-character mapping plus its inverse.

    The reverse map is built once from the forward map, in the forward
    map's iteration order. When several keys share a value, the last one
    wins the reverse slot.

    Both maps are exposed as read-only views. The forward table is copied
    on construction, so mutating the caller's dict afterwards has no effect.
    """

    def __init__(self, forward: Mapping[str, str]):
        self._forward = dict(forward)
        self._reverse = {}
        for key, value in self._forward.items():
            self._reverse[value] = key

        collapsed = len(self._forward) - len(self._reverse)
        if collapsed:
            logger.debug("Forward map is not injective: %d reverse entries overwritten",
                         collapsed)
        logger.debug("Built character map: %d forward, %d reverse",
                     len(self._forward), len(self._reverse))

    @property
    def forward(self) -> Mapping[str, str]:
        return MappingProxyType(self._forward)

    @property
    def reverse(self) -> Mapping[str, str]:
        return MappingProxyType(self._reverse)

    def lookup_forward(self, key: str) -> Optional[str]:
        return self._forward.get(key)

    def lookup_reverse(self, key: str) -> Optional[str]:
        return self._reverse.get(key)

    def transliterate(self, text: str) -> str:
        """Map text through the forward table, or the reverse one if that yields nothing.

        The choice is made for the whole string: a single forward hit means
        the forward result is returned, with every character that has no
        forward mapping dropped. Unmapped characters are dropped in the
        reverse result too, so 'qй' gives 'й' and '1' gives ''.
        """
        primary = ''.join(self._forward.get(c, '') for c in text)
        if primary:
            logger.debug("Transliterated %r forward → %r", text, primary)
            return primary

        secondary = ''.join(self._reverse.get(c, '') for c in text)
        logger.debug("Transliterated %r reverse → %r", text, secondary)
        return secondary

    def __len__(self):
        return len(self._forward)

    def __repr__(self):
        return f"{type(self).__name__}({self._forward!r})"
