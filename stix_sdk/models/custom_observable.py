"""CustomObservable."""

from stix_sdk.models._model_registry import OBSERVABLES
from stix_sdk.models.base_observable import BaseObservable


@OBSERVABLES.register_catch_all
class CustomObservable(BaseObservable):
    """Represent an observable of a kind unknown to this package, e.g. `x-acme-device`."""
