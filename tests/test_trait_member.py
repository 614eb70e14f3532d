import pytest

from regcomms.errors import SpecError
from regcomms.trait_member import TraitMember


def test_comms_member():
    member = TraitMember("comms", "C", "RegComms<4, u32>")
    assert member.member_name() == "comms"
    assert member.generic() == "C"
    assert member.bound() == "RegComms<4, u32>"


def test_generic_is_pascal_cased():
    member = TraitMember("delay", "d", "embedded_hal_async::delay::DelayNs")
    assert member.generic() == "D"
    assert member.bound() == "embedded_hal_async::delay::DelayNs"


def test_round_trip():
    data = {"name": "delay", "generic_type": "D", "trait_bound": "embedded_hal_async::delay::DelayNs"}
    member = TraitMember.from_dict(data)
    assert member.to_dict() == data
    assert TraitMember.from_dict(member.to_dict()) == member


@pytest.mark.parametrize(
    "data",
    [
        {"name": "delay", "generic_type": "D"},
        {"name": "delay", "trait_bound": "X"},
        {"name": None, "generic_type": "D", "trait_bound": "X"},
        ["delay"],
    ],
)
def test_invalid(data):
    with pytest.raises(SpecError):
        TraitMember.from_dict(data)