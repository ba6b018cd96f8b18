# Code generated by gen_edit_types.py from musicbrainz-server's Constants.pm. DO NOT EDIT.

"""Names of MusicBrainz edit types."""

from typing import Dict


class UnknownEditTypeError(LookupError):
    """The supplied edit type name does not match any known type."""


EDIT_TYPES: Dict[int, str] = {
    1: "ARTIST_CREATE",
    2: "ARTIST_EDIT",
    3: "ARTIST_DELETE",
    4: "ARTIST_MERGE",
    5: "ARTIST_ADD_ANNOTATION",
    6: "ARTIST_ADD_ALIAS",
    7: "ARTIST_DELETE_ALIAS",
    8: "ARTIST_EDIT_ALIAS",
    9: "ARTIST_EDITCREDIT",
    10: "LABEL_CREATE",
    11: "LABEL_EDIT",
    13: "LABEL_DELETE",
    14: "LABEL_MERGE",
    15: "LABEL_ADD_ANNOTATION",
    16: "LABEL_ADD_ALIAS",
    17: "LABEL_DELETE_ALIAS",
    18: "LABEL_EDIT_ALIAS",
    20: "RELEASEGROUP_CREATE",
    21: "RELEASEGROUP_EDIT",
    22: "RELEASEGROUP_SET_COVER_ART",
    23: "RELEASEGROUP_DELETE",
    24: "RELEASEGROUP_MERGE",
    25: "RELEASEGROUP_ADD_ANNOTATION",
    26: "RELEASEGROUP_ADD_ALIAS",
    27: "RELEASEGROUP_DELETE_ALIAS",
    28: "RELEASEGROUP_EDIT_ALIAS",
    31: "RELEASE_CREATE",
    32: "RELEASE_EDIT",
    33: "RELEASE_MOVE",
    34: "RELEASE_ADDRELEASELABEL",
    35: "RELEASE_ADD_ANNOTATION",
    36: "RELEASE_DELETERELEASELABEL",
    37: "RELEASE_EDITRELEASELABEL",
    38: "RELEASE_CHANGE_QUALITY",
    39: "RELEASE_EDIT_BARCODES",
    41: "WORK_CREATE",
    42: "WORK_EDIT",
    43: "WORK_DELETE",
    44: "WORK_MERGE",
    45: "WORK_ADD_ANNOTATION",
    46: "WORK_ADD_ALIAS",
    47: "WORK_DELETE_ALIAS",
    48: "WORK_EDIT_ALIAS",
    49: "WORK_ADD_ISWCS",
    51: "MEDIUM_CREATE",
    52: "MEDIUM_EDIT",
    53: "MEDIUM_DELETE",
    54: "MEDIUM_REMOVE_DISCID",
    55: "MEDIUM_ADD_DISCID",
    56: "MEDIUM_MOVE_DISCID",
    58: "SET_TRACK_LENGTHS",
    61: "PLACE_CREATE",
    62: "PLACE_EDIT",
    63: "PLACE_DELETE",
    64: "PLACE_MERGE",
    65: "PLACE_ADD_ANNOTATION",
    66: "PLACE_ADD_ALIAS",
    67: "PLACE_DELETE_ALIAS",
    68: "PLACE_EDIT_ALIAS",
    71: "RECORDING_CREATE",
    72: "RECORDING_EDIT",
    73: "RECORDING_DELETE",
    74: "RECORDING_MERGE",
    75: "RECORDING_ADD_ANNOTATION",
    76: "RECORDING_ADD_ISRCS",
    77: "RECORDING_ADD_PUIDS",
    78: "RECORDING_REMOVE_ISRC",
    81: "AREA_CREATE",
    82: "AREA_EDIT",
    83: "AREA_DELETE",
    84: "AREA_MERGE",
    85: "AREA_ADD_ANNOTATION",
    86: "AREA_ADD_ALIAS",
    87: "AREA_DELETE_ALIAS",
    88: "AREA_EDIT_ALIAS",
    90: "RELATIONSHIP_CREATE",
    91: "RELATIONSHIP_EDIT",
    92: "RELATIONSHIP_DELETE",
    93: "RELATIONSHIP_REMOVE_LINK_TYPE",
    94: "RELATIONSHIP_REMOVE_LINK_ATTRIBUTE",
    95: "RELATIONSHIP_EDIT_LINK_TYPE",
    96: "RELATIONSHIP_ADD_TYPE",
    97: "RELATIONSHIP_ATTRIBUTE",
    98: "RELATIONSHIP_ADD_ATTRIBUTE",
    99: "RELATIONSHIPS_REORDER",
    101: "URL_EDIT",
    113: "PUID_DELETE",
    120: "WIKIDOC_CHANGE",
    131: "INSTRUMENT_CREATE",
    132: "INSTRUMENT_EDIT",
    133: "INSTRUMENT_DELETE",
    134: "INSTRUMENT_MERGE",
    135: "INSTRUMENT_ADD_ANNOTATION",
    136: "INSTRUMENT_ADD_ALIAS",
    137: "INSTRUMENT_DELETE_ALIAS",
    138: "INSTRUMENT_EDIT_ALIAS",
    140: "SERIES_CREATE",
    141: "SERIES_EDIT",
    142: "SERIES_DELETE",
    143: "SERIES_MERGE",
    144: "SERIES_ADD_ANNOTATION",
    145: "SERIES_ADD_ALIAS",
    146: "SERIES_DELETE_ALIAS",
    147: "SERIES_EDIT_ALIAS",
    150: "EVENT_CREATE",
    151: "EVENT_EDIT",
    152: "EVENT_DELETE",
    153: "EVENT_MERGE",
    154: "EVENT_ADD_ANNOTATION",
    155: "EVENT_ADD_ALIAS",
    156: "EVENT_DELETE_ALIAS",
    157: "EVENT_EDIT_ALIAS",
    158: "EVENT_ADD_EVENT_ART",
    159: "EVENT_REMOVE_EVENT_ART",
    160: "GENRE_CREATE",
    161: "GENRE_EDIT",
    162: "GENRE_DELETE",
    163: "GENRE_ADD_ANNOTATION",
    164: "GENRE_ADD_ALIAS",
    165: "GENRE_DELETE_ALIAS",
    166: "GENRE_EDIT_ALIAS",
    201: "HISTORIC_EDIT_RELEASE_NAME",
    202: "HISTORIC_EDIT_TRACKNAME",
    203: "HISTORIC_EDIT_TRACKNUM",
    204: "HISTORIC_ADD_TRACK",
    205: "HISTORIC_MOVE_RELEASE",
    206: "HISTORIC_SAC_TO_MAC",
    207: "HISTORIC_CHANGE_TRACK_ARTIST",
    208: "HISTORIC_REMOVE_TRACK",
    209: "HISTORIC_REMOVE_RELEASE",
    210: "HISTORIC_MAC_TO_SAC",
    211: "HISTORIC_REMOVE_DISCID",
    212: "HISTORIC_ADD_DISCID",
    213: "HISTORIC_MOVE_DISCID",
    214: "HISTORIC_MERGE_RELEASE",
    215: "HISTORIC_REMOVE_RELEASES",
    216: "HISTORIC_MERGE_RELEASE_MAC",
    217: "HISTORIC_EDIT_RELEASE_ATTRS",
    218: "HISTORIC_ADD_TRACK_KV",
    219: "HISTORIC_ADD_RELEASE",
    220: "HISTORIC_ADD_RELEASE_ANNOTATION",
    223: "HISTORIC_SET_TRACK_LENGTHS_FROM_CDTOC",
    224: "HISTORIC_EDIT_RELEASE_LANGUAGE",
    225: "HISTORIC_EDIT_TRACK_LENGTH",
    226: "HISTORIC_REMOVE_PUID",
    227: "HISTORIC_ADD_RELEASE_EVENTS",
    228: "HISTORIC_EDIT_RELEASE_EVENTS",
    229: "HISTORIC_REMOVE_RELEASE_EVENTS",
    230: "HISTORIC_CHANGE_ARTIST_QUALITY",
    231: "HISTORIC_SET_RELEASE_DURATIONS",
    232: "HISTORIC_ADD_LINK",
    233: "HISTORIC_EDIT_LINK",
    234: "HISTORIC_REMOVE_LINK",
    235: "HISTORIC_EDIT_LINK_TYPE",
    236: "HISTORIC_REMOVE_LINK_TYPE",
    237: "HISTORIC_REMOVE_LINK_ATTR",
    239: "HISTORIC_EDIT_LINK_ATTR",
    240: "HISTORIC_ADD_LINK_ATTR",
    241: "HISTORIC_ADD_LINK_TYPE",
    244: "HISTORIC_MERGE_LABEL",
    245: "HISTORIC_REMOVE_LABEL_ALIAS",
    246: "HISTORIC_ADD_TRACK_ISRC",
    247: "HISTORIC_EDIT_ISRC",
    248: "HISTORIC_REMOVE_ISRC",
    249: "HISTORIC_EDIT_RELEASE_GROUP_TYPE",
    310: "RELEASE_DELETE",
    311: "RELEASE_MERGE",
    312: "RELEASE_ARTIST",
    313: "RELEASE_REORDER_MEDIUMS",
    314: "RELEASE_ADD_COVER_ART",
    315: "RELEASE_REMOVE_COVER_ART",
    316: "RELEASE_EDIT_COVER_ART",
    317: "RELEASE_REORDER_COVER_ART",
    318: "RELEASE_ADD_ALIAS",
    319: "RELEASE_DELETE_ALIAS",
    320: "RELEASE_EDIT_ALIAS",
    410: "WORK_REMOVE_ISWC",
}

_NAMED_EDIT_TYPES = {name: code for code, name in EDIT_TYPES.items()}


def edit_type_name(code: int) -> str:
    """Return the name for code, or a synthetic UNKNOWN_<code> label."""
    name = EDIT_TYPES.get(code)
    if name is None:
        return f"UNKNOWN_{code}"
    return name


def named_edit_type(name: str) -> int:
    """Return the code for name (e.g. 'ARTIST_CREATE'), ignoring case."""
    code = _NAMED_EDIT_TYPES.get(name.strip().upper())
    if code is None:
        raise UnknownEditTypeError(f"unknown edit type {name!r}")
    return code
