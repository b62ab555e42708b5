"""
Key Codec - Converts key names from the menu document into KeyBindings.

Names are looked up verbatim in the platform key-symbol table ("a", "F1",
"space", "Return", ...). Case matters: "a" and "A" are different keys.
"""

from tilemenu.errors import InvalidKeyName
from tilemenu.models import KeyBinding
from tilemenu.services.platform import KeySymbols


class KeyCodec:
    """Parse and format key bindings using a key-symbol table."""

    def __init__(self, symbols: KeySymbols):
        self.symbols = symbols

    def parse(self, name: str) -> KeyBinding:
        """
        Parse a key name into a binding.

        Args:
            name: Key name as written in the menu document

        Returns:
            KeyBinding for the named key

        Raises:
            InvalidKeyName: If the table has no key by that name
        """
        if not isinstance(name, str) or not name:
            raise InvalidKeyName(name)

        keyval = self.symbols.from_name(name)
        if keyval is None:
            raise InvalidKeyName(name)

        return KeyBinding(keyval=keyval, name=name)

    def format(self, binding: KeyBinding) -> str:
        """Canonical name for a binding, falling back to how it was written."""
        return self.symbols.to_name(binding.keyval) or binding.name
