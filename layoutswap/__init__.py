"""layoutswap — retype text typed on the wrong keyboard layout."""
from layoutswap.transliterator import CharacterMap
from layoutswap.layouts import EN_UA, get_layout

__version__ = "0.1.0"
