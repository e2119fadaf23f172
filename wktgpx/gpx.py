from datetime import datetime, timezone

from lxml import etree

from wktgpx import geometry, SOURCE_CRS, TARGET_CRS
from wktgpx.errors import GPXError
from wktgpx.parsers import is_multi, Layout
from wktgpx.proj import reproject


XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'

#: Layout assumed for a coordinate when none is given.
LAYOUTS_BY_DIMENSIONS = {
    2: Layout.XY,
    3: Layout.XYZ,
    4: Layout.XYZM,
}


def timestamp(seconds):
    """Format Unix seconds as an ISO 8601 UTC string with milliseconds."""
    try:
        dt = datetime.fromtimestamp(seconds, tz=timezone.utc)
    except (OverflowError, OSError, ValueError) as e:
        raise GPXError('Measure {!r} is not a valid time: {}'
                       .format(seconds, e)) from e
    return dt.isoformat(timespec='milliseconds').replace('+00:00', 'Z')


def trkpt(coordinate, source=SOURCE_CRS, target=TARGET_CRS, layout=None):
    """Create a ``trkpt`` element for a single coordinate.

    A Z value is written as the elevation and an M value is read as the
    time of the point in Unix seconds. Without a ``layout``, a third
    component is taken as Z and a fourth as M.
    """
    if layout is None:
        layout = LAYOUTS_BY_DIMENSIONS.get(len(coordinate), Layout.XY)
    lng, lat = reproject(coordinate, source, target)
    elem = etree.Element('trkpt', lat=str(lat), lon=str(lng))
    if layout in (Layout.XYZ, Layout.XYZM):
        etree.SubElement(elem, 'ele').text = str(coordinate[2])
    if layout is Layout.XYM:
        etree.SubElement(elem, 'time').text = timestamp(coordinate[2])
    elif layout is Layout.XYZM:
        etree.SubElement(elem, 'time').text = timestamp(coordinate[3])
    return elem


def trkseg(coordinates, source=SOURCE_CRS, target=TARGET_CRS, layout=None):
    """Create a ``trkseg`` element holding a point for each coordinate."""
    elem = etree.Element('trkseg')
    for coordinate in coordinates:
        elem.append(trkpt(coordinate, source, target, layout))
    return elem


def write_gpx(coordinates, geometry_type=None, source=SOURCE_CRS,
              target=TARGET_CRS, layout=None):
    """Serialize a parsed coordinate tree as a GPX document.

    Each line string becomes a track segment of a single track. If
    ``geometry_type`` is not given, it is inferred from the nesting depth
    of ``coordinates``. ``layout`` tells Z values from M values; without
    it the layout is guessed from the number of components.
    """
    if not coordinates:
        raise ValueError('Cannot write an empty geometry as GPX')
    if geometry_type is None:
        geometry_type = geometry.MULTILINESTRING if is_multi(coordinates) \
            else geometry.LINESTRING
    if geometry_type == geometry.MULTILINESTRING:
        segments = coordinates
    elif geometry_type == geometry.LINESTRING:
        segments = [coordinates]
    else:
        raise ValueError('Unsupported geometry type: {}'
                         .format(geometry_type))
    root = etree.Element('gpx')
    trk = etree.SubElement(root, 'trk')
    for segment in segments:
        trk.append(trkseg(segment, source, target, layout))
    return XML_DECLARATION + etree.tostring(root, encoding='unicode')
