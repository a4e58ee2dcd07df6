"""Default error message templates and the message formatter.

Templates take two positional placeholders: ``%1$`` for the field name and
``%2$`` for the location name.
"""

from typing import Optional

FIELD_PLACEHOLDER = "%1$"
LOCATION_PLACEHOLDER = "%2$"

# Pseudo-rule reported when a whole location is empty
EMPTY_LOCATION_RULE = "isEmpty"

DEFAULT_TEMPLATES: dict[str, str] = {
    "isEmpty": "Bad request. Empty '%1$' provided.",
    "isNotEmpty": "Bad request. Empty '%1$' provided.",
    "isExists": "Bad request. Required '%1$' is missing in '%2$'.",
    "isString": "Bad request. Provided '%1$' is not a string.",
    "isNumber": "Bad request. Provided '%1$' is not a number.",
    "isBoolean": "Bad request. Provided '%1$' is not a boolean.",
    "isObject": "Bad request. Provided '%1$' is not an object.",
    "isArray": "Bad request. Provided '%1$' is not an array.",
    "isMongoId": "Bad request. Provided '%1$' is not a Mongo ID.",
    "isFirebaseId": "Bad request. Provided '%1$' is not a Firebase ID.",
    "isUUIDv1": "Bad request. Provided '%1$' is not a UUID Version 1.",
    "isUUIDv4": "Bad request. Provided '%1$' is not a UUID Version 4.",
    "hasLength": "Bad request. Provided '%1$' has an invalid length.",
    "hasArrayItem": "Bad request. Provided '%1$' does not contain a required item.",
    "hasObjectKey": "Bad request. Provided '%1$' does not contain a required key.",
}


def format_message(template: str, field: str, location: Optional[str] = None) -> str:
    """Fill a template with the field and, if the template asks for it, the location."""
    message = template.replace(FIELD_PLACEHOLDER, str(field), 1)

    if location and LOCATION_PLACEHOLDER in template:
        message = message.replace(LOCATION_PLACEHOLDER, str(location), 1)

    return message
