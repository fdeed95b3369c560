from __future__ import annotations

import pytest

from sqlstitch import Select


@pytest.fixture
def users_select() -> Select:
    return Select("login").from_("users")


@pytest.fixture
def addresses_select() -> Select:
    return Select("login").from_("addresses")
