"""CustomStix."""

from stix_sdk.models._model_registry import DOMAIN_OBJECTS
from stix_sdk.models.base_core_object import BaseDomainObject


@DOMAIN_OBJECTS.register_catch_all
class CustomStix(BaseDomainObject):
    """Represent a domain object of a kind unknown to this package.

    The common properties are validated; every other property is kept as a
    custom property, so the object round-trips unchanged.

    Examples:
        >>> custom = CustomStix.new(type="x-acme-widget", custom_properties={"x_size": 3})
        >>> custom.encode()["x_size"]
        3
    """
