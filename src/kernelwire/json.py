''' Wrapper module around :mod:`orjson` providing the equivalent of
    :func:`json.loads` and :func:`json.dumps`. Every frame on the wire is
    bytes, so :func:`dumps` always returns bytes, and :func:`loads` accepts
    bytes directly without an intermediate decode step.
'''

import orjson

# orjson raises subclasses of the standard exceptions: JSONEncodeError is a
# TypeError, JSONDecodeError is a ValueError. Callers that need to catch
# serialization failures can rely on these names.

EncodeError = orjson.JSONEncodeError
DecodeError = orjson.JSONDecodeError


def dumps(value):
    return orjson.dumps(value)


def loads(data):

    # pyzmq hands back memoryview-like objects when receiving without a copy.
    # orjson only accepts bytes, bytearray, memoryview, or str.

    if not isinstance(data, (bytes, bytearray, memoryview, str)):
        data = bytes(data)

    return orjson.loads(data)

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
