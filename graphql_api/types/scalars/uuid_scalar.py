import uuid

from ariadne import ScalarType

uuid_scalar = ScalarType("UUID")


@uuid_scalar.serializer
def serialize_uuid(value):
    return str(value)


@uuid_scalar.value_parser
def parse_uuid_value(value):
    if not isinstance(value, str):
        raise ValueError(f"UUID cannot represent non-string value: {value!r}")
    # raises ValueError, which GraphQL turns into a coercion error
    return uuid.UUID(value)
