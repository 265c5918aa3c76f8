from pathlib import Path

import pytest

from fieldabi import Abi, Function, Param, Types


@pytest.fixture
def book_abi_path() -> Path:
    return Path(__file__).parent / "abi" / "book_example.json"


@pytest.fixture
def book_abi(book_abi_path: Path) -> Abi:
    return Abi.from_json(book_abi_path)


@pytest.fixture
def funname() -> Function:
    return Function(
        "funname",
        inputs=[
            Param("", Types.Address()),
            Param("x", Types.FixedArray(Types.U32(), 2)),
        ],
    )
