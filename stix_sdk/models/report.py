"""Report."""

from typing import Literal

from pydantic import Field, StrictStr
from stix_sdk.core.pydantic import IdentifierList, Timestamp
from stix_sdk.models._model_registry import DOMAIN_OBJECTS
from stix_sdk.models.base_core_object import BaseDomainObject
from stix_sdk.models.enums import ReportType


@DOMAIN_OBJECTS.register
class Report(BaseDomainObject):
    """Represent a collection of threat intelligence focused on one or more topics.

    Examples:
        >>> report = Report.new(
        ...     name="analysis id 1",
        ...     published="2016-01-20T12:31:12Z",
        ...     report_types=["malware"],
        ...     object_refs=["file--30038539-3eb6-44bc-a59e-d0d3fe84695a"],
        ... )
    """

    type: Literal["report"] = Field(description="The type of the object.")
    name: StrictStr = Field(description="Name of the report.")
    published: Timestamp = Field(
        description="The date the report was officially published.",
    )
    object_refs: IdentifierList = Field(
        description="The objects the report is about.",
    )
    description: StrictStr | None = Field(
        default=None,
        description="Description of the report.",
    )
    report_types: list[ReportType] | None = Field(
        default=None,
        description="The primary subjects of the report.",
    )
