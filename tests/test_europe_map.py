import pytest

from dracgraph.europe_map import EuropeMap
from dracgraph.places import CONNECTIONS, PLACES, LocationID, TransportID


@pytest.fixture(scope="module")
def europe():
    return EuropeMap()


def test_vertex_count(europe):
    assert europe.num_vertices() == len(PLACES)


def test_edge_counts_sum(europe):
    by_kind = sum(
        europe.num_edges(kind)
        for kind in (TransportID.ROAD, TransportID.RAIL, TransportID.BOAT)
    )
    assert by_kind == europe.num_edges(TransportID.ANY)


def test_each_link_counted_from_both_ends(europe):
    assert europe.num_edges(TransportID.ANY) == 2 * len(CONNECTIONS)
    rails = [link for link in CONNECTIONS if link.t == TransportID.RAIL]
    assert europe.num_edges(TransportID.RAIL) == 2 * len(rails)


def test_no_edges_of_kind_none(europe):
    assert europe.num_edges(TransportID.NONE) == 0


def test_invalid_transport_raises(europe):
    with pytest.raises(ValueError):
        europe.num_edges(7)


def test_road_and_rail_between_paris_and_le_havre(europe):
    kinds = europe.connections(LocationID.PARIS, LocationID.LE_HAVRE)
    assert sorted(kinds) == [TransportID.ROAD, TransportID.RAIL]


def test_boat_only(europe):
    assert europe.connections(LocationID.LONDON, LocationID.ENGLISH_CHANNEL) == [
        TransportID.BOAT
    ]


def test_no_direct_connection(europe):
    assert europe.connections(LocationID.PARIS, LocationID.ATHENS) == []
    assert europe.connections(LocationID.PARIS, LocationID.PARIS) == []


def test_connections_are_symmetric(europe):
    for link in CONNECTIONS:
        forward = sorted(europe.connections(link.v, link.w))
        backward = sorted(europe.connections(link.w, link.v))
        assert forward == backward
        assert link.t in forward


def test_connections_invalid_place_raises(europe):
    with pytest.raises(ValueError):
        europe.connections(LocationID.NOWHERE, LocationID.PARIS)
    with pytest.raises(ValueError):
        europe.connections(LocationID.PARIS, LocationID.HIDE)


def test_show_output(europe, capsys):
    europe.show()
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == f"V={len(PLACES)}, E={len(CONNECTIONS)}"
    assert len(lines) == 1 + 2 * len(CONNECTIONS)
    assert "Paris connects to Le Havre by rail" in lines
    assert "Le Havre connects to Paris by road" in lines


def test_show_lists_places_in_id_order(europe, capsys):
    europe.show()
    lines = capsys.readouterr().out.splitlines()[1:]
    sources = [line.split(" connects to ")[0] for line in lines]
    order = [next(p.id for p in PLACES if p.name == name) for name in sources]
    assert order == sorted(order)