import pytest

from fieldabi.codec.types import Types
from fieldabi.errors import GrammarError, SchemaError
from fieldabi.schema.params import Param


@pytest.mark.parametrize(
    "type_string, ty",
    [
        ("u32", Types.U32()),
        ("u256", Types.U256()),
        ("field", Types.Field()),
        ("address", Types.Address()),
        ("hash", Types.Hash()),
        ("bool", Types.Bool()),
        ("string", Types.String()),
        ("fields", Types.Fields()),
        ("u32[]", Types.Array(Types.U32())),
        ("address[][]", Types.Array(Types.Array(Types.Address()))),
        ("string[2][]", Types.Array(Types.FixedArray(Types.String(), 2))),
        ("string[][3]", Types.FixedArray(Types.Array(Types.String()), 3)),
    ],
)
def test_serde_simple(type_string, ty):
    v = {"name": "a", "type": type_string}

    param = Param.from_json(v)
    assert param == Param("a", ty)
    assert param.to_json() == v


def test_serde_indexed():
    v = {"name": "who", "type": "address", "indexed": True}
    param = Param.from_json(v)
    assert param == Param("who", Types.Address(), indexed=True)
    assert param.is_indexed
    assert param.to_json() == v


def test_serde_tuple():
    v = {
        "name": "s",
        "type": "tuple",
        "components": [
            {"name": "a", "type": "u32"},
            {"name": "b", "type": "u32[]"},
            {
                "name": "c",
                "type": "tuple[]",
                "components": [
                    {"name": "x", "type": "u32"},
                    {"name": "y", "type": "u32"},
                ],
            },
        ],
    }

    param = Param.from_json(v)
    assert param == Param(
        "s",
        Types.Tuple(
            [
                ("a", Types.U32()),
                ("b", Types.Array(Types.U32())),
                ("c", Types.Array(Types.Tuple([("x", Types.U32()), ("y", Types.U32())]))),
            ]
        ),
    )
    assert param.to_json() == v


def test_serde_fixed_tuple_array():
    v = {
        "name": "pair",
        "type": "tuple[2]",
        "components": [{"name": "k", "type": "hash"}, {"name": "v", "type": "fields"}],
    }
    param = Param.from_json(v)
    assert param.type == Types.FixedArray(Types.Tuple([("k", Types.Hash()), ("v", Types.Fields())]), 2)
    assert param.to_json() == v


def test_extra_keys_are_ignored():
    param = Param.from_json({"name": "n", "type": "u32", "internalType": "u32"})
    assert param == Param("n", Types.U32())
    assert "internalType" not in param.to_json()


def test_missing_name():
    with pytest.raises(SchemaError):
        Param.from_json({"type": "u32"})


def test_missing_type():
    with pytest.raises(SchemaError):
        Param.from_json({"name": "a"})


def test_bad_type_string():
    with pytest.raises(GrammarError):
        Param.from_json({"name": "a", "type": "uint256"})


def test_tuple_without_components():
    with pytest.raises(GrammarError):
        Param.from_json({"name": "a", "type": "tuple"})


def test_tuple_double_array_loses_components():
    """Only one array layer is unwrapped when surfacing components."""
    inner = Types.Tuple([("x", Types.U32())])
    param = Param("grid", Types.Array(Types.Array(inner)))

    v = param.to_json()
    assert v == {"name": "grid", "type": "tuple[][]"}

    with pytest.raises(GrammarError):
        Param.from_json(v)

    # loading with explicit components still works
    loaded = Param.from_json({**v, "components": [{"name": "x", "type": "u32"}]})
    assert loaded == param
