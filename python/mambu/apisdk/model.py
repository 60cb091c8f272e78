"""
a generic, read-only representation of the entities returned by the Mambu API
"""
from collections.abc import Mapping
from copy import deepcopy

from .endpoints import EntityKind

class MambuEntity(Mapping):
    """
    an entity returned by (or to be sent to) the Mambu API.  It is a read-only Mapping of the
    entity's JSON properties, tagged with the kind of entity it represents.  Top-level properties
    are also available as attributes (e.g. ``loan.loanAmount``).
    """

    def __init__(self, kind: EntityKind, data: Mapping=None, **props):
        """
        create the entity
        :param EntityKind kind:  the kind of entity this is
        :param Mapping data:     the entity's properties
        :param props:            additional properties to set
        """
        if kind is None:
            raise ValueError("MambuEntity: kind must not be None")
        self._kind = kind
        self._data = deepcopy(dict(data)) if data else {}
        self._data.update(props)

    @property
    def kind(self) -> EntityKind:
        """the kind of entity this is"""
        return self._kind

    @property
    def id(self):
        """
        the entity's identifier:  its ``id`` property, falling back to its ``encodedKey``
        """
        return self._data.get('id', self._data.get('encodedKey'))

    def __getitem__(self, key):
        return self._data[key]

    def __iter__(self):
        return iter(self._data)

    def __len__(self):
        return len(self._data)

    def __getattr__(self, name):
        if name.startswith('_'):
            raise AttributeError(name)
        try:
            return self._data[name]
        except KeyError:
            raise AttributeError("{0} has no property {1}".format(self._kind.value, name)) from None

    def __eq__(self, other):
        if not isinstance(other, MambuEntity):
            return NotImplemented
        return self._kind == other._kind and self._data == other._data

    def __ne__(self, other):
        out = self.__eq__(other)
        if out is NotImplemented:
            return out
        return not out

    __hash__ = None

    def to_dict(self) -> dict:
        """
        return a copy of the entity's properties as a plain dictionary
        """
        return deepcopy(self._data)

    def __repr__(self):
        ident = self.id
        return "<{0}{1}>".format(self._kind.value, (" "+str(ident)) if ident is not None else "")
