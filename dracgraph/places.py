"""Places on the map of Europe and the connections between them."""

from __future__ import annotations

import bisect
from dataclasses import dataclass
from enum import IntEnum


class PlaceType(IntEnum):
    """Kind of terrain a place lies on."""

    UNKNOWN = 0
    LAND = 1
    SEA = 2


class TransportID(IntEnum):
    """Kind of connection between two places."""

    NONE = 0
    ROAD = 1
    RAIL = 2
    BOAT = 3
    ANY = 4


MIN_TRANSPORT = TransportID.ROAD
MAX_TRANSPORT = TransportID.BOAT


class LocationID(IntEnum):
    """Identifiers of real places and of the special pseudo-locations."""

    ADRIATIC_SEA = 0
    ALICANTE = 1
    AMSTERDAM = 2
    ATHENS = 3
    ATLANTIC_OCEAN = 4
    BARCELONA = 5
    BARI = 6
    BAY_OF_BISCAY = 7
    BELGRADE = 8
    BERLIN = 9
    BLACK_SEA = 10
    BORDEAUX = 11
    BRUSSELS = 12
    BUCHAREST = 13
    BUDAPEST = 14
    CADIZ = 15
    CAGLIARI = 16
    CASTLE_DRACULA = 17
    CLERMONT_FERRAND = 18
    COLOGNE = 19
    CONSTANTA = 20
    DUBLIN = 21
    EDINBURGH = 22
    ENGLISH_CHANNEL = 23
    FLORENCE = 24
    FRANKFURT = 25
    GALATZ = 26
    GALWAY = 27
    GENEVA = 28
    GENOA = 29
    GRANADA = 30
    HAMBURG = 31
    IONIAN_SEA = 32
    IRISH_SEA = 33
    KLAUSENBURG = 34
    LE_HAVRE = 35
    LEIPZIG = 36
    LISBON = 37
    LIVERPOOL = 38
    LONDON = 39
    MADRID = 40
    MANCHESTER = 41
    MARSEILLES = 42
    MEDITERRANEAN_SEA = 43
    MILAN = 44
    MUNICH = 45
    NANTES = 46
    NAPLES = 47
    NORTH_SEA = 48
    NUREMBURG = 49
    PARIS = 50
    PLYMOUTH = 51
    PRAGUE = 52
    ROME = 53
    SALONICA = 54
    SANTANDER = 55
    SARAGOSSA = 56
    SARAJEVO = 57
    SOFIA = 58
    ST_JOSEPH_AND_ST_MARYS = 59
    STRASBOURG = 60
    SWANSEA = 61
    SZEGED = 62
    TOULOUSE = 63
    TYRRHENIAN_SEA = 64
    VALONA = 65
    VARNA = 66
    VENICE = 67
    VIENNA = 68
    ZAGREB = 69
    ZURICH = 70

    CITY_UNKNOWN = 100
    SEA_UNKNOWN = 101
    HIDE = 102
    DOUBLE_BACK_1 = 103
    DOUBLE_BACK_2 = 104
    DOUBLE_BACK_3 = 105
    DOUBLE_BACK_4 = 106
    DOUBLE_BACK_5 = 107
    TELEPORT = 108
    UNKNOWN_LOCATION = -1
    NOWHERE = -1


MIN_MAP_LOCATION = LocationID.ADRIATIC_SEA
MAX_MAP_LOCATION = LocationID.ZURICH
NUM_MAP_LOCATIONS = int(LocationID.ZURICH) + 1


@dataclass(frozen=True)
class Place:
    """A real place on the map."""

    name: str
    abbrev: str
    id: LocationID
    type: PlaceType


@dataclass(frozen=True)
class Connection:
    """An undirected link between two places by one kind of transport."""

    v: LocationID
    w: LocationID
    t: TransportID


_L = LocationID
_LAND = PlaceType.LAND
_SEA = PlaceType.SEA

# Alphabetical by name; PLACES[i].id == i.
PLACES: tuple[Place, ...] = (
    Place("Adriatic Sea", "AS", _L.ADRIATIC_SEA, _SEA),
    Place("Alicante", "AL", _L.ALICANTE, _LAND),
    Place("Amsterdam", "AM", _L.AMSTERDAM, _LAND),
    Place("Athens", "AT", _L.ATHENS, _LAND),
    Place("Atlantic Ocean", "AO", _L.ATLANTIC_OCEAN, _SEA),
    Place("Barcelona", "BA", _L.BARCELONA, _LAND),
    Place("Bari", "BI", _L.BARI, _LAND),
    Place("Bay of Biscay", "BB", _L.BAY_OF_BISCAY, _SEA),
    Place("Belgrade", "BE", _L.BELGRADE, _LAND),
    Place("Berlin", "BR", _L.BERLIN, _LAND),
    Place("Black Sea", "BS", _L.BLACK_SEA, _SEA),
    Place("Bordeaux", "BO", _L.BORDEAUX, _LAND),
    Place("Brussels", "BU", _L.BRUSSELS, _LAND),
    Place("Bucharest", "BC", _L.BUCHAREST, _LAND),
    Place("Budapest", "BD", _L.BUDAPEST, _LAND),
    Place("Cadiz", "CA", _L.CADIZ, _LAND),
    Place("Cagliari", "CG", _L.CAGLIARI, _LAND),
    Place("Castle Dracula", "CD", _L.CASTLE_DRACULA, _LAND),
    Place("Clermont-Ferrand", "CF", _L.CLERMONT_FERRAND, _LAND),
    Place("Cologne", "CO", _L.COLOGNE, _LAND),
    Place("Constanta", "CN", _L.CONSTANTA, _LAND),
    Place("Dublin", "DU", _L.DUBLIN, _LAND),
    Place("Edinburgh", "ED", _L.EDINBURGH, _LAND),
    Place("English Channel", "EC", _L.ENGLISH_CHANNEL, _SEA),
    Place("Florence", "FL", _L.FLORENCE, _LAND),
    Place("Frankfurt", "FR", _L.FRANKFURT, _LAND),
    Place("Galatz", "GA", _L.GALATZ, _LAND),
    Place("Galway", "GW", _L.GALWAY, _LAND),
    Place("Geneva", "GE", _L.GENEVA, _LAND),
    Place("Genoa", "GO", _L.GENOA, _LAND),
    Place("Granada", "GR", _L.GRANADA, _LAND),
    Place("Hamburg", "HA", _L.HAMBURG, _LAND),
    Place("Ionian Sea", "IO", _L.IONIAN_SEA, _SEA),
    Place("Irish Sea", "IR", _L.IRISH_SEA, _SEA),
    Place("Klausenburg", "KL", _L.KLAUSENBURG, _LAND),
    Place("Le Havre", "LE", _L.LE_HAVRE, _LAND),
    Place("Leipzig", "LI", _L.LEIPZIG, _LAND),
    Place("Lisbon", "LS", _L.LISBON, _LAND),
    Place("Liverpool", "LV", _L.LIVERPOOL, _LAND),
    Place("London", "LO", _L.LONDON, _LAND),
    Place("Madrid", "MA", _L.MADRID, _LAND),
    Place("Manchester", "MN", _L.MANCHESTER, _LAND),
    Place("Marseilles", "MR", _L.MARSEILLES, _LAND),
    Place("Mediterranean Sea", "MS", _L.MEDITERRANEAN_SEA, _SEA),
    Place("Milan", "MI", _L.MILAN, _LAND),
    Place("Munich", "MU", _L.MUNICH, _LAND),
    Place("Nantes", "NA", _L.NANTES, _LAND),
    Place("Naples", "NP", _L.NAPLES, _LAND),
    Place("North Sea", "NS", _L.NORTH_SEA, _SEA),
    Place("Nuremburg", "NU", _L.NUREMBURG, _LAND),
    Place("Paris", "PA", _L.PARIS, _LAND),
    Place("Plymouth", "PL", _L.PLYMOUTH, _LAND),
    Place("Prague", "PR", _L.PRAGUE, _LAND),
    Place("Rome", "RO", _L.ROME, _LAND),
    Place("Salonica", "SA", _L.SALONICA, _LAND),
    Place("Santander", "SN", _L.SANTANDER, _LAND),
    Place("Saragossa", "SR", _L.SARAGOSSA, _LAND),
    Place("Sarajevo", "SJ", _L.SARAJEVO, _LAND),
    Place("Sofia", "SO", _L.SOFIA, _LAND),
    Place("St Joseph and St Marys", "JM", _L.ST_JOSEPH_AND_ST_MARYS, _LAND),
    Place("Strasbourg", "ST", _L.STRASBOURG, _LAND),
    Place("Swansea", "SW", _L.SWANSEA, _LAND),
    Place("Szeged", "SZ", _L.SZEGED, _LAND),
    Place("Toulouse", "TO", _L.TOULOUSE, _LAND),
    Place("Tyrrhenian Sea", "TS", _L.TYRRHENIAN_SEA, _SEA),
    Place("Valona", "VA", _L.VALONA, _LAND),
    Place("Varna", "VR", _L.VARNA, _LAND),
    Place("Venice", "VE", _L.VENICE, _LAND),
    Place("Vienna", "VI", _L.VIENNA, _LAND),
    Place("Zagreb", "ZA", _L.ZAGREB, _LAND),
    Place("Zurich", "ZU", _L.ZURICH, _LAND),
)

_ROAD_LINKS = (
    (_L.ALICANTE, _L.GRANADA),
    (_L.ALICANTE, _L.MADRID),
    (_L.ALICANTE, _L.SARAGOSSA),
    (_L.AMSTERDAM, _L.BRUSSELS),
    (_L.AMSTERDAM, _L.COLOGNE),
    (_L.ATHENS, _L.VALONA),
    (_L.BARCELONA, _L.SARAGOSSA),
    (_L.BARCELONA, _L.TOULOUSE),
    (_L.BARI, _L.NAPLES),
    (_L.BARI, _L.ROME),
    (_L.BELGRADE, _L.BUCHAREST),
    (_L.BELGRADE, _L.KLAUSENBURG),
    (_L.BELGRADE, _L.SARAJEVO),
    (_L.BELGRADE, _L.SOFIA),
    (_L.BELGRADE, _L.ST_JOSEPH_AND_ST_MARYS),
    (_L.BELGRADE, _L.SZEGED),
    (_L.BERLIN, _L.HAMBURG),
    (_L.BERLIN, _L.LEIPZIG),
    (_L.BERLIN, _L.PRAGUE),
    (_L.BORDEAUX, _L.CLERMONT_FERRAND),
    (_L.BORDEAUX, _L.NANTES),
    (_L.BORDEAUX, _L.SARAGOSSA),
    (_L.BORDEAUX, _L.TOULOUSE),
    (_L.BRUSSELS, _L.COLOGNE),
    (_L.BRUSSELS, _L.LE_HAVRE),
    (_L.BRUSSELS, _L.PARIS),
    (_L.BRUSSELS, _L.STRASBOURG),
    (_L.BUCHAREST, _L.CONSTANTA),
    (_L.BUCHAREST, _L.GALATZ),
    (_L.BUCHAREST, _L.KLAUSENBURG),
    (_L.BUCHAREST, _L.SOFIA),
    (_L.BUDAPEST, _L.KLAUSENBURG),
    (_L.BUDAPEST, _L.SZEGED),
    (_L.BUDAPEST, _L.VIENNA),
    (_L.BUDAPEST, _L.ZAGREB),
    (_L.CADIZ, _L.GRANADA),
    (_L.CADIZ, _L.LISBON),
    (_L.CADIZ, _L.MADRID),
    (_L.CASTLE_DRACULA, _L.GALATZ),
    (_L.CASTLE_DRACULA, _L.KLAUSENBURG),
    (_L.CLERMONT_FERRAND, _L.GENEVA),
    (_L.CLERMONT_FERRAND, _L.MARSEILLES),
    (_L.CLERMONT_FERRAND, _L.NANTES),
    (_L.CLERMONT_FERRAND, _L.PARIS),
    (_L.CLERMONT_FERRAND, _L.TOULOUSE),
    (_L.COLOGNE, _L.FRANKFURT),
    (_L.COLOGNE, _L.HAMBURG),
    (_L.COLOGNE, _L.LEIPZIG),
    (_L.COLOGNE, _L.STRASBOURG),
    (_L.CONSTANTA, _L.GALATZ),
    (_L.CONSTANTA, _L.VARNA),
    (_L.DUBLIN, _L.GALWAY),
    (_L.EDINBURGH, _L.MANCHESTER),
    (_L.FLORENCE, _L.GENOA),
    (_L.FLORENCE, _L.ROME),
    (_L.FLORENCE, _L.VENICE),
    (_L.FRANKFURT, _L.LEIPZIG),
    (_L.FRANKFURT, _L.NUREMBURG),
    (_L.FRANKFURT, _L.STRASBOURG),
    (_L.GALATZ, _L.KLAUSENBURG),
    (_L.GENEVA, _L.MARSEILLES),
    (_L.GENEVA, _L.PARIS),
    (_L.GENEVA, _L.STRASBOURG),
    (_L.GENEVA, _L.ZURICH),
    (_L.GENOA, _L.MARSEILLES),
    (_L.GENOA, _L.MILAN),
    (_L.GENOA, _L.VENICE),
    (_L.GRANADA, _L.MADRID),
    (_L.HAMBURG, _L.LEIPZIG),
    (_L.KLAUSENBURG, _L.SZEGED),
    (_L.LEIPZIG, _L.NUREMBURG),
    (_L.LE_HAVRE, _L.NANTES),
    (_L.LE_HAVRE, _L.PARIS),
    (_L.LISBON, _L.MADRID),
    (_L.LISBON, _L.SANTANDER),
    (_L.LIVERPOOL, _L.MANCHESTER),
    (_L.LIVERPOOL, _L.SWANSEA),
    (_L.LONDON, _L.MANCHESTER),
    (_L.LONDON, _L.PLYMOUTH),
    (_L.LONDON, _L.SWANSEA),
    (_L.MADRID, _L.SANTANDER),
    (_L.MADRID, _L.SARAGOSSA),
    (_L.MARSEILLES, _L.MILAN),
    (_L.MARSEILLES, _L.TOULOUSE),
    (_L.MARSEILLES, _L.ZURICH),
    (_L.MILAN, _L.MUNICH),
    (_L.MILAN, _L.VENICE),
    (_L.MILAN, _L.ZURICH),
    (_L.MUNICH, _L.NUREMBURG),
    (_L.MUNICH, _L.STRASBOURG),
    (_L.MUNICH, _L.VENICE),
    (_L.MUNICH, _L.VIENNA),
    (_L.MUNICH, _L.ZAGREB),
    (_L.MUNICH, _L.ZURICH),
    (_L.NANTES, _L.PARIS),
    (_L.NAPLES, _L.ROME),
    (_L.NUREMBURG, _L.PRAGUE),
    (_L.NUREMBURG, _L.STRASBOURG),
    (_L.PARIS, _L.STRASBOURG),
    (_L.PRAGUE, _L.VIENNA),
    (_L.SALONICA, _L.SOFIA),
    (_L.SALONICA, _L.VALONA),
    (_L.SANTANDER, _L.SARAGOSSA),
    (_L.SARAGOSSA, _L.TOULOUSE),
    (_L.SARAJEVO, _L.SOFIA),
    (_L.SARAJEVO, _L.ST_JOSEPH_AND_ST_MARYS),
    (_L.SARAJEVO, _L.VALONA),
    (_L.SARAJEVO, _L.ZAGREB),
    (_L.SOFIA, _L.VALONA),
    (_L.SOFIA, _L.VARNA),
    (_L.STRASBOURG, _L.ZURICH),
    (_L.ST_JOSEPH_AND_ST_MARYS, _L.SZEGED),
    (_L.ST_JOSEPH_AND_ST_MARYS, _L.ZAGREB),
    (_L.SZEGED, _L.ZAGREB),
    (_L.VIENNA, _L.ZAGREB),
)

_RAIL_LINKS = (
    (_L.ALICANTE, _L.BARCELONA),
    (_L.ALICANTE, _L.MADRID),
    (_L.BARCELONA, _L.SARAGOSSA),
    (_L.BARI, _L.NAPLES),
    (_L.BELGRADE, _L.SOFIA),
    (_L.BELGRADE, _L.SZEGED),
    (_L.BERLIN, _L.HAMBURG),
    (_L.BERLIN, _L.LEIPZIG),
    (_L.BERLIN, _L.PRAGUE),
    (_L.BORDEAUX, _L.PARIS),
    (_L.BORDEAUX, _L.SARAGOSSA),
    (_L.BRUSSELS, _L.COLOGNE),
    (_L.BRUSSELS, _L.PARIS),
    (_L.BUCHAREST, _L.CONSTANTA),
    (_L.BUCHAREST, _L.GALATZ),
    (_L.BUCHAREST, _L.SZEGED),
    (_L.BUDAPEST, _L.SZEGED),
    (_L.BUDAPEST, _L.VIENNA),
    (_L.COLOGNE, _L.FRANKFURT),
    (_L.EDINBURGH, _L.MANCHESTER),
    (_L.FLORENCE, _L.MILAN),
    (_L.FLORENCE, _L.ROME),
    (_L.FRANKFURT, _L.LEIPZIG),
    (_L.FRANKFURT, _L.STRASBOURG),
    (_L.GENEVA, _L.MILAN),
    (_L.GENOA, _L.MILAN),
    (_L.LEIPZIG, _L.NUREMBURG),
    (_L.LE_HAVRE, _L.PARIS),
    (_L.LISBON, _L.MADRID),
    (_L.LIVERPOOL, _L.MANCHESTER),
    (_L.LONDON, _L.MANCHESTER),
    (_L.LONDON, _L.SWANSEA),
    (_L.MADRID, _L.SANTANDER),
    (_L.MADRID, _L.SARAGOSSA),
    (_L.MARSEILLES, _L.PARIS),
    (_L.MILAN, _L.ZURICH),
    (_L.MUNICH, _L.NUREMBURG),
    (_L.NAPLES, _L.ROME),
    (_L.PRAGUE, _L.VIENNA),
    (_L.SALONICA, _L.SOFIA),
    (_L.SOFIA, _L.VARNA),
    (_L.STRASBOURG, _L.ZURICH),
    (_L.VENICE, _L.VIENNA),
)

_BOAT_LINKS = (
    (_L.ADRIATIC_SEA, _L.BARI),
    (_L.ADRIATIC_SEA, _L.IONIAN_SEA),
    (_L.ADRIATIC_SEA, _L.VENICE),
    (_L.ALICANTE, _L.MEDITERRANEAN_SEA),
    (_L.AMSTERDAM, _L.NORTH_SEA),
    (_L.ATHENS, _L.IONIAN_SEA),
    (_L.ATLANTIC_OCEAN, _L.BAY_OF_BISCAY),
    (_L.ATLANTIC_OCEAN, _L.CADIZ),
    (_L.ATLANTIC_OCEAN, _L.ENGLISH_CHANNEL),
    (_L.ATLANTIC_OCEAN, _L.GALWAY),
    (_L.ATLANTIC_OCEAN, _L.IRISH_SEA),
    (_L.ATLANTIC_OCEAN, _L.LISBON),
    (_L.ATLANTIC_OCEAN, _L.MEDITERRANEAN_SEA),
    (_L.ATLANTIC_OCEAN, _L.NORTH_SEA),
    (_L.BARCELONA, _L.MEDITERRANEAN_SEA),
    (_L.BAY_OF_BISCAY, _L.BORDEAUX),
    (_L.BAY_OF_BISCAY, _L.NANTES),
    (_L.BAY_OF_BISCAY, _L.SANTANDER),
    (_L.BLACK_SEA, _L.CONSTANTA),
    (_L.BLACK_SEA, _L.IONIAN_SEA),
    (_L.BLACK_SEA, _L.VARNA),
    (_L.CAGLIARI, _L.MEDITERRANEAN_SEA),
    (_L.CAGLIARI, _L.TYRRHENIAN_SEA),
    (_L.DUBLIN, _L.IRISH_SEA),
    (_L.EDINBURGH, _L.NORTH_SEA),
    (_L.ENGLISH_CHANNEL, _L.LE_HAVRE),
    (_L.ENGLISH_CHANNEL, _L.LONDON),
    (_L.ENGLISH_CHANNEL, _L.NORTH_SEA),
    (_L.ENGLISH_CHANNEL, _L.PLYMOUTH),
    (_L.GENOA, _L.TYRRHENIAN_SEA),
    (_L.HAMBURG, _L.NORTH_SEA),
    (_L.IONIAN_SEA, _L.SALONICA),
    (_L.IONIAN_SEA, _L.TYRRHENIAN_SEA),
    (_L.IONIAN_SEA, _L.VALONA),
    (_L.IRISH_SEA, _L.LIVERPOOL),
    (_L.IRISH_SEA, _L.SWANSEA),
    (_L.MARSEILLES, _L.MEDITERRANEAN_SEA),
    (_L.MEDITERRANEAN_SEA, _L.TYRRHENIAN_SEA),
    (_L.NAPLES, _L.TYRRHENIAN_SEA),
    (_L.ROME, _L.TYRRHENIAN_SEA),
)

CONNECTIONS: tuple[Connection, ...] = (
    tuple(Connection(v, w, TransportID.ROAD) for v, w in _ROAD_LINKS)
    + tuple(Connection(v, w, TransportID.RAIL) for v, w in _RAIL_LINKS)
    + tuple(Connection(v, w, TransportID.BOAT) for v, w in _BOAT_LINKS)
)

_PLACE_NAMES = [place.name for place in PLACES]

_SPECIAL_NAMES = {
    LocationID.CITY_UNKNOWN: "Unknown City",
    LocationID.SEA_UNKNOWN: "Unknown Sea",
    LocationID.HIDE: "Hide",
    LocationID.DOUBLE_BACK_1: "Double Back 1",
    LocationID.DOUBLE_BACK_2: "Double Back 2",
    LocationID.DOUBLE_BACK_3: "Double Back 3",
    LocationID.DOUBLE_BACK_4: "Double Back 4",
    LocationID.DOUBLE_BACK_5: "Double Back 5",
    LocationID.TELEPORT: "Teleport",
    LocationID.UNKNOWN_LOCATION: "Unknown Location",
}

_SPECIAL_ABBREVS = {
    LocationID.CITY_UNKNOWN: "C?",
    LocationID.SEA_UNKNOWN: "S?",
    LocationID.HIDE: "HI",
    LocationID.DOUBLE_BACK_1: "D1",
    LocationID.DOUBLE_BACK_2: "D2",
    LocationID.DOUBLE_BACK_3: "D3",
    LocationID.DOUBLE_BACK_4: "D4",
    LocationID.DOUBLE_BACK_5: "D5",
    LocationID.TELEPORT: "TP",
    LocationID.UNKNOWN_LOCATION: "??",
}

_TRANSPORT_NAMES = {
    TransportID.ROAD: "road",
    TransportID.RAIL: "rail",
    TransportID.BOAT: "boat",
}


def valid_place(place: int) -> bool:
    """Return True if ``place`` identifies a real place on the map."""
    return MIN_MAP_LOCATION <= place <= MAX_MAP_LOCATION


def name_to_id(name: str) -> LocationID:
    """Return the id of the place with this full name, or NOWHERE."""
    index = bisect.bisect_left(_PLACE_NAMES, name)
    if index < len(_PLACE_NAMES) and _PLACE_NAMES[index] == name:
        return PLACES[index].id
    return LocationID.NOWHERE


def abbrev_to_id(abbrev: str) -> LocationID:
    """Return the id of the place with this two-letter code, or NOWHERE."""
    code = abbrev[:2]
    return next(
        (place.id for place in PLACES if place.abbrev == code),
        LocationID.NOWHERE,
    )


def _require_valid(place: int) -> None:
    if not valid_place(place):
        raise ValueError(f"not a place on the map: {place!r}")


def id_to_type(place: int) -> PlaceType:
    """Return whether a real place is on land or at sea."""
    _require_valid(place)
    return PLACES[place].type


def id_to_name(place: int) -> str:
    """Return the full name of a place or pseudo-location."""
    if valid_place(place):
        return PLACES[place].name
    try:
        return _SPECIAL_NAMES[place]
    except KeyError:
        raise ValueError(f"unknown location id: {place!r}") from None


def id_to_abbrev(place: int) -> str:
    """Return the two-character code of a place or pseudo-location."""
    if valid_place(place):
        return PLACES[place].abbrev
    try:
        return _SPECIAL_ABBREVS[place]
    except KeyError:
        raise ValueError(f"unknown location id: {place!r}") from None


def transport_to_name(transport: int) -> str:
    """Return the name of a transport type, or '????' for others."""
    return _TRANSPORT_NAMES.get(transport, "????")


def is_land(place: int) -> bool:
    """Return True if a real place is on land."""
    return id_to_type(place) == PlaceType.LAND


def is_sea(place: int) -> bool:
    """Return True if a real place is at sea."""
    return id_to_type(place) == PlaceType.SEA