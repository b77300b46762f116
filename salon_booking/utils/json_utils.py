import re
from datetime import date, datetime
from decimal import Decimal

from flask.json.provider import DefaultJSONProvider
from werkzeug.datastructures import MultiDict

_CAMEL_BOUNDARY = re.compile(r'(?<!^)(?=[A-Z])')


class DecimalJSONProvider(DefaultJSONProvider):
    """
    JSON provider that can handle Decimal objects
    Used for properly serializing money values and ISO dates
    """
    @staticmethod
    def default(obj):
        if isinstance(obj, Decimal):
            return float(obj)
        if isinstance(obj, (datetime, date)):
            return obj.isoformat()
        return DefaultJSONProvider.default(obj)


def snake_case(name):
    return _CAMEL_BOUNDARY.sub('_', name).lower()


def camel_case(name):
    head, *rest = name.split('_')
    return head + ''.join(part.title() for part in rest)


def camelize_keys(value):
    """Recursively convert dict keys from snake_case to camelCase"""
    if isinstance(value, dict):
        return {camel_case(str(k)): camelize_keys(v) for k, v in value.items()}
    if isinstance(value, list):
        return [camelize_keys(v) for v in value]
    return value


def json_formdata(payload, prefix=''):
    """
    Flatten a JSON body into form data that WTForms understands.

    Keys are converted to snake_case and nested objects are joined with '-',
    which is the separator FormField uses for its subfields.
    """
    formdata = MultiDict()
    if not isinstance(payload, dict):
        return formdata

    for key, value in payload.items():
        name = f"{prefix}{snake_case(key)}"
        if value is None:
            continue
        if isinstance(value, dict):
            formdata.update(json_formdata(value, prefix=f"{name}-"))
        elif isinstance(value, bool):
            formdata.add(name, 'true' if value else 'false')
        elif isinstance(value, (list, tuple)):
            for item in value:
                formdata.add(name, str(item))
        else:
            formdata.add(name, str(value))
    return formdata
