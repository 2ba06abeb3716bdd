import re

import pytest

COMMENT = re.compile(r'/\*.*?\*/', re.DOTALL)
LITERAL = re.compile(r'\(char\[\]\)\{(.*?)\}', re.DOTALL)
HEX_BYTE = re.compile(r'0x([0-9A-F]{2})')


def _table(source: str, name: str) -> str:
    start = source.index(f'{name}[] = {{')
    return source[start:source.index('\n};', start)]


def _literals(table: str) -> list[bytes]:
    return [bytes(int(h, 16) for h in HEX_BYTE.findall(body)) for body in LITERAL.findall(table)]


def parse_tables(source: str) -> list[tuple[bytes, bytes, int]]:
    """Reads generated tables back as (name, data, size) rows; literals keep their 0x00 terminator."""
    source = COMMENT.sub('', source)
    names = _literals(_table(source, 'EMBEDDED_FILE_NAMES'))
    data = _literals(_table(source, 'EMBEDDED_FILE_DATA'))
    sizes_table = _table(source, 'EMBEDDED_FILE_DATA_SIZES')
    sizes = [int(n) for n in re.findall(r'^\s*(\d+),$', sizes_table, re.MULTILINE)]
    assert len(names) == len(data) == len(sizes)
    return list(zip(names, data, sizes))


def lookup(rows: list[tuple[bytes, bytes, int]], name: bytes) -> tuple[bytes, int] | None:
    for row_name, data, size in rows:
        if row_name[:-1] == name:
            return data, size
    return None


@pytest.fixture
def tables():
    return parse_tables


@pytest.fixture
def table_lookup():
    return lookup
