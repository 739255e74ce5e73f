from __future__ import annotations

from range_rover.util.sized_int import SizedInt, parse_metadata_from_name


@parse_metadata_from_name
class int8(SizedInt):
    pass


@parse_metadata_from_name
class uint8(SizedInt):
    pass


@parse_metadata_from_name
class int16(SizedInt):
    pass


@parse_metadata_from_name
class uint16(SizedInt):
    pass


@parse_metadata_from_name
class int32(SizedInt):
    pass


@parse_metadata_from_name
class uint32(SizedInt):
    pass


@parse_metadata_from_name
class int64(SizedInt):
    pass


@parse_metadata_from_name
class uint64(SizedInt):
    pass


@parse_metadata_from_name
class uint128(SizedInt):
    pass
