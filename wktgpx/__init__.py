"""
wktgpx
"""


#: Coordinate reference system of the WKT input. Web Mercator is what
#: tracks exported from most web maps use.
SOURCE_CRS = "EPSG:3857"
#: GPX coordinates are always WGS 84 longitude/latitude.
TARGET_CRS = "EPSG:4326"

#: Field separator of an input record: ``identifier|activities|wkt``.
SEPARATOR = "|"


class geometry:
    LINESTRING = "LINESTRING"
    MULTILINESTRING = "MULTILINESTRING"
