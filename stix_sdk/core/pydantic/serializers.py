"""Custom Pydantic serializers for the STIX models."""

from typing import Any

from pydantic import BaseModel, SerializerFunctionWrapHandler


def stix_object_serializer(
    model: BaseModel, handler: SerializerFunctionWrapHandler
) -> dict[str, Any]:
    """Serialize a model the way STIX expects it on the wire.

    Intended for a Pydantic `model_serializer(mode="wrap")`: the default
    serialization is computed by `handler`, then reshaped:
    - declared fields come first, in declaration order;
    - declared fields holding `None` are omitted (no `null` literal);
    - extra (custom) properties are merged at the top level, values untouched
      (a custom `null` is kept).

    Examples:
    - Report(name="r", description=None, x_foo=None) -> {"name": "r", "x_foo": None}
    """
    serialized = handler(model)
    fields = type(model).model_fields
    output = {
        name: serialized[name]
        for name in fields
        if name in serialized and serialized[name] is not None
    }
    # model_extra never holds a declared name: validation binds it to the field.
    output.update(
        {name: serialized[name] for name in model.model_extra or {} if name in serialized}
    )
    return output
