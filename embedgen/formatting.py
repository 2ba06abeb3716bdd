"""Pure text helpers shared by the C templates."""

import os
import string

# Number of byte entries per line of an initializer list
HEX_COLS = 12

_GUARD_LETTERS = frozenset(string.ascii_letters.encode())


def hex_initializer(data: bytes, columns: int = HEX_COLS, indent: str = '\t\t') -> str:
    """Render bytes as a comma separated list of 0xNN literals followed by a 0x00 terminator."""
    entries = [f'0x{b:02X}' for b in data]
    entries.append('0x00')
    rows = [', '.join(entries[start:start + columns]) for start in range(0, len(entries), columns)]
    return f',\n{indent}'.join(rows)


def guard_name(path: str) -> str:
    """Upper-case ASCII letters and turn every other byte of the path into '_'."""
    return ''.join(chr(b).upper() if b in _GUARD_LETTERS else '_' for b in os.fsencode(path))


def comment_text(text: str) -> str:
    # Keeps the text inside a /* */ block: ASCII only, no early terminator
    safe = os.fsencode(text).decode('ascii', errors='backslashreplace')
    return safe.replace('*/', '*\\/')
