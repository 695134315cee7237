class FrozenDict(dict):
    def _immutable(self, *args, **kws):
        raise TypeError(f"cannot change {self.__class__.__name__} - object is immutable")

    __setitem__ = _immutable
    __delitem__ = _immutable
    __ior__ = _immutable
    pop = _immutable
    popitem = _immutable
    clear = _immutable
    update = _immutable
    setdefault = _immutable

    def __hash__(self):
        return hash(frozenset(self.items()))

    def __reduce__(self):
        return (self.__class__, (dict(self),))
