from ..constants import float_percent
from ..util import WeakChimNamespace


DEFAULTS = WeakChimNamespace()
"""
- :term:`min_per_id`
"""
DEFAULTS.add(
    'min_per_id', 80.0, cast_type=float_percent,
    defn='minimum percent identity (0-100) of an alignment span for it to be considered as part of a fusion')
