"""
Dict optics.
- at(key):    Lens[Dict[K, V], Maybe[V]]; setting NOTHING removes the key
- index(key): Optional[Dict[K, V], V]; only an existing key is a target
Updates return new dicts.
"""

from typing import Dict

from ..datatypes import Just, NOTHING, Maybe
from ..lens import Lens, PLens
from ..optional import Optional, optional


def _without(d: Dict, key) -> Dict:
    return {k: v for k, v in d.items() if k != key}


def at(key) -> Lens:
    def get(d: Dict) -> Maybe:
        return Just(d[key]) if key in d else NOTHING

    def set_(m: Maybe, d: Dict) -> Dict:
        return m.fold(lambda: _without(d, key), lambda v: {**d, key: v})

    return PLens(get, set_)


def index(key) -> Optional:
    return optional(
        lambda d: Just(d[key]) if key in d else NOTHING,
        lambda v, d: {**d, key: v}
    )
