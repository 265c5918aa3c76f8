import pytest

from fieldabi.codec.types import Types
from fieldabi.codec.values import Values
from fieldabi.schema.decoded import DecodedParam, DecodedParams
from fieldabi.schema.params import Param


@pytest.fixture
def decoded() -> DecodedParams:
    return DecodedParams(
        [
            (Param("", Types.U32()), Values.U32(1)),
            (Param("name", Types.String()), Values.String("olavm")),
        ]
    )


def test_reader_by_index_keeps_order(decoded):
    reader = decoded.reader()
    assert [dp.value for dp in reader.by_index] == [Values.U32(1), Values.String("olavm")]


def test_reader_omits_unnamed_params(decoded):
    reader = decoded.reader()
    assert list(reader.by_name) == ["name"]
    assert reader.by_name["name"].value == Values.String("olavm")


def test_reader_holds_references(decoded):
    reader = decoded.reader()
    assert reader.by_index[1] is decoded[1]
    assert reader.by_name["name"] is decoded[1]


def test_reader_is_read_only(decoded):
    reader = decoded.reader()
    with pytest.raises(TypeError):
        reader.by_name["other"] = decoded[0]  # type: ignore[index]


def test_duplicate_names_last_wins():
    decoded = DecodedParams(
        [
            (Param("x", Types.U32()), Values.U32(1)),
            (Param("x", Types.U32()), Values.U32(2)),
        ]
    )
    reader = decoded.reader()
    assert len(reader.by_index) == 2
    assert reader.by_name["x"].value == Values.U32(2)
    assert reader.by_name["x"] is decoded[1]


def test_decoded_params_sequence(decoded):
    assert len(decoded) == 2
    assert decoded[0] == DecodedParam(Param("", Types.U32()), Values.U32(1))
    assert decoded[1].name == "name"
    assert decoded.values() == (Values.U32(1), Values.String("olavm"))
    assert decoded == DecodedParams(
        [
            (Param("", Types.U32()), Values.U32(1)),
            (Param("name", Types.String()), Values.String("olavm")),
        ]
    )
    assert DecodedParams() != decoded
    assert len(DecodedParams().reader().by_name) == 0
