import pytest

from dracgraph.places import (
    CONNECTIONS,
    PLACES,
    LocationID,
    PlaceType,
    TransportID,
    abbrev_to_id,
    id_to_abbrev,
    id_to_name,
    id_to_type,
    is_land,
    is_sea,
    name_to_id,
    transport_to_name,
    valid_place,
)


def test_places_indexed_by_id():
    for index, place in enumerate(PLACES):
        assert name_to_id(place.name) == index
        assert id_to_name(index) == place.name


def test_places_sorted_by_name():
    names = [id_to_name(index) for index in range(len(PLACES))]
    assert names == sorted(names)


def test_places_cover_map_range():
    assert valid_place(int(LocationID.ADRIATIC_SEA))
    assert valid_place(int(LocationID.ZURICH))
    assert not valid_place(int(LocationID.ZURICH) + 1)
    assert id_to_name(int(LocationID.ADRIATIC_SEA)) == "Adriatic Sea"
    assert id_to_name(int(LocationID.ZURICH)) == "Zurich"


def test_name_to_id_known():
    assert name_to_id("Paris") == LocationID.PARIS
    assert name_to_id("St Joseph and St Marys") == LocationID.ST_JOSEPH_AND_ST_MARYS
    assert name_to_id("Zurich") == LocationID.ZURICH
    assert name_to_id("Adriatic Sea") == LocationID.ADRIATIC_SEA


def test_name_to_id_unknown():
    assert name_to_id("Atlantis") == LocationID.NOWHERE
    assert name_to_id("") == LocationID.NOWHERE
    assert name_to_id("paris") == LocationID.NOWHERE


def test_abbrev_to_id_known():
    assert abbrev_to_id("PA") == LocationID.PARIS
    assert abbrev_to_id("JM") == LocationID.ST_JOSEPH_AND_ST_MARYS
    assert abbrev_to_id("CD") == LocationID.CASTLE_DRACULA


def test_abbrev_to_id_unknown():
    assert abbrev_to_id("XX") == LocationID.NOWHERE
    assert abbrev_to_id("P") == LocationID.NOWHERE


@pytest.mark.parametrize("place", PLACES, ids=lambda p: p.abbrev)
def test_name_and_abbrev_round_trip(place):
    assert name_to_id(id_to_name(place.id)) == place.id
    assert abbrev_to_id(id_to_abbrev(place.id)) == place.id


def test_special_names_and_abbrevs():
    assert id_to_name(LocationID.HIDE) == "Hide"
    assert id_to_name(LocationID.UNKNOWN_LOCATION) == "Unknown Location"
    assert id_to_name(LocationID.NOWHERE) == "Unknown Location"
    assert id_to_abbrev(LocationID.TELEPORT) == "TP"
    assert id_to_abbrev(LocationID.DOUBLE_BACK_3) == "D3"
    assert id_to_abbrev(LocationID.CITY_UNKNOWN) == "C?"


@pytest.mark.parametrize("bad", [99, 109, -2, len(PLACES)])
def test_unknown_ids_raise(bad):
    with pytest.raises(ValueError):
        id_to_name(bad)
    with pytest.raises(ValueError):
        id_to_abbrev(bad)


def test_valid_place_bounds():
    assert valid_place(LocationID.ADRIATIC_SEA)
    assert valid_place(LocationID.ZURICH)
    assert not valid_place(LocationID.NOWHERE)
    assert not valid_place(LocationID.HIDE)


def test_types():
    assert id_to_type(LocationID.PARIS) == PlaceType.LAND
    assert id_to_type(LocationID.NORTH_SEA) == PlaceType.SEA
    assert is_land(LocationID.CASTLE_DRACULA)
    assert not is_sea(LocationID.CASTLE_DRACULA)
    assert is_sea(LocationID.BLACK_SEA)
    assert not is_land(LocationID.BLACK_SEA)


def test_type_of_invalid_place_raises():
    with pytest.raises(ValueError):
        id_to_type(LocationID.TELEPORT)
    with pytest.raises(ValueError):
        is_land(LocationID.NOWHERE)


def test_transport_names():
    assert transport_to_name(TransportID.ROAD) == "road"
    assert transport_to_name(TransportID.RAIL) == "rail"
    assert transport_to_name(TransportID.BOAT) == "boat"
    assert transport_to_name(TransportID.ANY) == "????"
    assert transport_to_name(TransportID.NONE) == "????"


def test_connections_are_well_formed():
    for link in CONNECTIONS:
        assert valid_place(link.v) and valid_place(link.w)
        assert link.v != link.w
        assert TransportID.ROAD <= link.t <= TransportID.BOAT


def test_rail_never_touches_sea():
    for link in CONNECTIONS:
        if link.t != TransportID.BOAT:
            assert is_land(link.v) and is_land(link.w)


def test_boat_links_touch_sea():
    for link in CONNECTIONS:
        if link.t == TransportID.BOAT:
            assert is_sea(link.v) or is_sea(link.w)