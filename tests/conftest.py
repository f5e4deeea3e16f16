import pytest

from fakes import symbol_board


@pytest.fixture
def board4():
    return symbol_board(4)

@pytest.fixture
def board8():
    return symbol_board(8)
