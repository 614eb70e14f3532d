import pytest

from regcomms.endian import Endian
from regcomms.errors import SpecError


def test_abbrev():
    assert Endian.BIG.abbrev() == "be"
    assert Endian.LITTLE.abbrev() == "le"


@pytest.mark.parametrize("endian", list(Endian))
def test_parse_round_trip(endian):
    assert Endian.parse(endian.value) is endian
    assert Endian.parse(endian) is endian


@pytest.mark.parametrize("bad", ["big", "BIG", "", 1, None])
def test_parse_rejects_unknown(bad):
    with pytest.raises(SpecError):
        Endian.parse(bad)