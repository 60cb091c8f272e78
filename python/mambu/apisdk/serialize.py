"""
Conversion between Mambu's JSON representations and :py:class:`~mambu.apisdk.model.MambuEntity` objects
"""
import simplejson as json
from collections.abc import Mapping
from datetime import date, datetime

from .model import MambuEntity
from .endpoints import EntityKind
from .exceptions import MambuDecodeError

# the date format used by Mambu for JSON dates
DEF_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S%z"

class JSONSerializer:
    """
    a codec for Mambu entities.  Entities are decoded generically:  the JSON properties of an object
    are kept as is and tagged with the expected :py:class:`~mambu.apisdk.endpoints.EntityKind`.

    Money amounts must not pass through binary floats:  JSON numbers with a fractional part are
    decoded as ``Decimal`` values, and ``Decimal`` values are encoded in their exact decimal form.
    """

    def __init__(self, date_format: str=None):
        """
        :param str date_format:  the strftime format to write datetime values with when encoding
                                 (default: ISO 8601 with a numeric timezone offset)
        """
        self.date_format = date_format or DEF_DATE_FORMAT

    def decode(self, text: str, kind: EntityKind) -> MambuEntity:
        """
        convert the JSON description of a single entity into a MambuEntity
        :raises MambuDecodeError:  if the text is not a JSON object
        """
        data = self._load(text)
        if not isinstance(data, Mapping):
            raise MambuDecodeError(response=text,
                                   message="Expected a JSON object for {0}; got {1}"
                                           .format(_kindname(kind), type(data).__name__))
        return MambuEntity(kind, data)

    def decode_list(self, text: str, kind: EntityKind) -> list:
        """
        convert a JSON array of entity descriptions into a list of MambuEntity objects.  An empty
        (or all-whitespace) text is an empty list.
        :raises MambuDecodeError:  if the text is not a JSON array of objects
        """
        if not text or not text.strip():
            return []
        data = self._load(text)
        if not isinstance(data, list):
            raise MambuDecodeError(response=text,
                                   message="Expected a JSON array of {0}; got {1}"
                                           .format(_kindname(kind), type(data).__name__))
        bad = [i for i, item in enumerate(data) if not isinstance(item, Mapping)]
        if bad:
            raise MambuDecodeError(response=text,
                                   message="Expected a JSON array of {0}; item {1} is not an object"
                                           .format(_kindname(kind), bad[0]))
        return [MambuEntity(kind, item) for item in data]

    def encode(self, obj) -> str:
        """
        convert an entity (or a Mapping or list of them) into its JSON representation
        """
        return json.dumps(obj, default=self._default, use_decimal=True)

    def _default(self, obj):
        if isinstance(obj, MambuEntity):
            return obj.to_dict()
        if isinstance(obj, Mapping):
            return dict(obj)
        if isinstance(obj, datetime):
            return obj.strftime(self.date_format)
        if isinstance(obj, date):
            return obj.isoformat()
        if isinstance(obj, (set, tuple)):
            return list(obj)
        raise TypeError("Object of type {0} is not JSON serializable".format(type(obj).__name__))

    def _load(self, text):
        if isinstance(text, bytes):
            text = text.decode('utf-8')
        try:
            return json.loads(text, use_decimal=True)
        except (TypeError, ValueError) as ex:
            if text and ("<body" in text or "<BODY" in text):
                raise MambuDecodeError(response=text, cause=ex,
                                       message="HTML returned where JSON expected (is service URL "
                                               "correct?)") from ex
            raise MambuDecodeError(response=text, cause=ex,
                                   message="Unable to parse response as JSON: "+str(ex)) from ex

def _kindname(kind):
    return getattr(kind, 'value', str(kind))
