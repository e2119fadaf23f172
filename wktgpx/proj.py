import threading

from pyproj import Transformer

from wktgpx import SOURCE_CRS, TARGET_CRS


class _Transformers:
    """A threadsafe cache of pyproj transformers.

    ``Transformer`` objects are not safe to share between threads, so each
    thread gets its own, keyed by the pair of coordinate reference systems.
    Use the module-level ``transformers`` instance of this class.
    """
    def __init__(self):
        self._local = threading.local()

    def __call__(self, source, target):
        try:
            cache = self._local.cache
        except AttributeError:
            cache = self._local.cache = {}
        key = (source, target)
        if key not in cache:
            cache[key] = Transformer.from_crs(source, target, always_xy=True)
        return cache[key]


transformers = _Transformers()


def reproject(coordinate, source=SOURCE_CRS, target=TARGET_CRS):
    """Reproject a coordinate and return a ``(lng, lat)`` pair.

    Only the first two components of the coordinate are used; any
    elevation or measure value is ignored.
    """
    if len(coordinate) < 2:
        raise ValueError('Coordinate must have at least two components: {}'
                         .format(coordinate))
    x, y = coordinate[0], coordinate[1]
    return transformers(source, target).transform(x, y)
