import os
import sys

import pytest

# Allow running tests without installing the package.
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from market_loader import load_market  # noqa: E402

HEADER = "Lender,Rate,Available"


@pytest.fixture
def reference_market_path():
    return os.path.join(ROOT, 'data', 'market.csv')


@pytest.fixture
def reference_market(reference_market_path):
    return load_market(reference_market_path)


@pytest.fixture
def write_market(tmp_path):
    """Write market rows to a CSV file and return its path."""
    def _write(rows, header=HEADER, name='market.csv'):
        lines = ([header] if header else []) + list(rows)
        path = tmp_path / name
        path.write_text('\n'.join(lines) + '\n', encoding='utf-8')
        return str(path)
    return _write
