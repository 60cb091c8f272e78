"""
The map of parameters sent with a Mambu API request
"""
import re
from collections import OrderedDict
from datetime import date, datetime
from decimal import Decimal

from .exceptions import InvalidParameter

_bad_chars_re = re.compile(r'[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]')

def to_param_value(name, value):
    """
    convert a value into the string form that should be sent to Mambu as a request parameter.
    Booleans become "true" or "false", dates are written as YYYY-MM-DD, and numbers are written
    in their plain decimal form.
    :raises InvalidParameter:  if the value cannot be sent (e.g. it is of an unsupported type or is
                               not a finite number)
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        value = value.date()
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        # the shortest repr of a float is exact as a decimal; it is rendered without an exponent
        value = Decimal(repr(value))
    if isinstance(value, Decimal):
        if not value.is_finite():
            raise InvalidParameter(name, value, "API parameter, {0}, is not a finite number: {1}"
                                                .format(name, value))
        return format(value, 'f')
    if not isinstance(value, str):
        raise InvalidParameter(name, value)
    if _bad_chars_re.search(value):
        raise InvalidParameter(name, value, "API parameter, {0}, contains control characters"
                                            .format(name))
    return value

class ParamsMap(OrderedDict):
    """
    an ordered mapping of parameter names to string values.  Values are converted to strings as they
    are set (see :py:func:`to_param_value`); parameters set to None are left out of the map, allowing
    a service to add optional parameters without first testing them.
    """

    def __init__(self, *args, **kwargs):
        super(ParamsMap, self).__init__()
        self.update(*args, **kwargs)

    def __setitem__(self, name, value):
        if not isinstance(name, str) or not name:
            raise InvalidParameter(name, value, "API parameter name is not a non-empty string: "+
                                   repr(name))
        if value is None:
            self.pop(name, None)
            return
        super(ParamsMap, self).__setitem__(name, to_param_value(name, value))

    def update(self, *args, **kwargs):
        # OrderedDict.update() may bypass __setitem__ on some implementations
        for name, value in OrderedDict(*args, **kwargs).items():
            self[name] = value

    def put(self, name: str, value):
        """
        set a parameter value (or remove the parameter if value is None), returning this map so
        that calls can be chained.
        """
        self[name] = value
        return self

    def copy(self):
        return ParamsMap(self)
