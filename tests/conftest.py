from typing import Iterator

import pytest

from loxscan.lox import Lox


@pytest.fixture(autouse=True)
def reset_lox() -> Iterator[None]:
    # Lox.had_error is class level state shared by every test.
    Lox.had_error = False
    yield
    Lox.had_error = False
