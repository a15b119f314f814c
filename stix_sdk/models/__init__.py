"""Offer models."""

from stix_sdk.models.artifact import Artifact
from stix_sdk.models.attack_pattern import AttackPattern
from stix_sdk.models.autonomous_system import AutonomousSystem
from stix_sdk.models.base_core_object import (
    BaseCoreObject,
    BaseDomainObject,
    BaseRelationshipObject,
)
from stix_sdk.models.base_identified_object import BaseIdentifiedObject
from stix_sdk.models.base_object import BaseObject
from stix_sdk.models.base_observable import BaseObservable
from stix_sdk.models.bundle import Bundle
from stix_sdk.models.campaign import Campaign
from stix_sdk.models.course_of_action import CourseOfAction
from stix_sdk.models.custom_observable import CustomObservable
from stix_sdk.models.custom_stix import CustomStix
from stix_sdk.models.directory import Directory
from stix_sdk.models.domain_name import DomainName
from stix_sdk.models.email_address import EmailAddress
from stix_sdk.models.email_message import EmailMessage, EmailMimeComponent
from stix_sdk.models.extensions import (
    AlternateDataStream,
    ArchiveExt,
    BaseExtension,
    CustomExtension,
    HTTPRequestExt,
    ICMPExt,
    NTFSExt,
    PDFExt,
    RasterImageExt,
    SocketExt,
    TCPExt,
    UnixAccountExt,
    WindowsPEBinaryExt,
    WindowsPEOptionalHeader,
    WindowsPESection,
    WindowsProcessExt,
    WindowsServiceExt,
    X509V3Extensions,
)
from stix_sdk.models.external_reference import ExternalReference
from stix_sdk.models.file import File
from stix_sdk.models.granular_marking import GranularMarking
from stix_sdk.models.identity import Identity
from stix_sdk.models.indicator import Indicator
from stix_sdk.models.intrusion_set import IntrusionSet
from stix_sdk.models.ipv4_address import IPV4Address
from stix_sdk.models.ipv6_address import IPV6Address
from stix_sdk.models.kill_chain_phase import KillChainPhase
from stix_sdk.models.mac_address import MACAddress
from stix_sdk.models.malware import Malware
from stix_sdk.models.marking_definition import (
    TLP_AMBER,
    TLP_GREEN,
    TLP_RED,
    TLP_WHITE,
    BaseMarkingObject,
    MarkingDefinition,
    StatementMarking,
    TLPMarking,
)
from stix_sdk.models.mutex import Mutex
from stix_sdk.models.network_traffic import NetworkTraffic
from stix_sdk.models.observed_data import ObservedData
from stix_sdk.models.process import Process
from stix_sdk.models.relationship import Relationship
from stix_sdk.models.report import Report
from stix_sdk.models.sighting import Sighting
from stix_sdk.models.software import Software
from stix_sdk.models.threat_actor import ThreatActor
from stix_sdk.models.tool import Tool
from stix_sdk.models.url import URL
from stix_sdk.models.user_account import UserAccount
from stix_sdk.models.vulnerability import Vulnerability
from stix_sdk.models.windows_registry_key import (
    WindowsRegistryKey,
    WindowsRegistryValue,
)
from stix_sdk.models.x509_certificate import X509Certificate

__all__ = [
    # Typing purpose
    "BaseCoreObject",
    "BaseDomainObject",
    "BaseExtension",
    "BaseIdentifiedObject",
    "BaseMarkingObject",
    "BaseObject",
    "BaseObservable",
    "BaseRelationshipObject",
    # Supporting types
    "AlternateDataStream",
    "EmailMimeComponent",
    "ExternalReference",
    "GranularMarking",
    "KillChainPhase",
    "WindowsPEOptionalHeader",
    "WindowsPESection",
    "WindowsRegistryValue",
    # Domain objects
    "AttackPattern",
    "Campaign",
    "CourseOfAction",
    "CustomStix",
    "Identity",
    "Indicator",
    "IntrusionSet",
    "Malware",
    "ObservedData",
    "Report",
    "ThreatActor",
    "Tool",
    "Vulnerability",
    # Relationship objects
    "Relationship",
    "Sighting",
    # Observables
    "Artifact",
    "AutonomousSystem",
    "CustomObservable",
    "Directory",
    "DomainName",
    "EmailAddress",
    "EmailMessage",
    "File",
    "IPV4Address",
    "IPV6Address",
    "MACAddress",
    "Mutex",
    "NetworkTraffic",
    "Process",
    "Software",
    "URL",
    "UserAccount",
    "WindowsRegistryKey",
    "X509Certificate",
    # Extensions
    "ArchiveExt",
    "CustomExtension",
    "HTTPRequestExt",
    "ICMPExt",
    "NTFSExt",
    "PDFExt",
    "RasterImageExt",
    "SocketExt",
    "TCPExt",
    "UnixAccountExt",
    "WindowsPEBinaryExt",
    "WindowsProcessExt",
    "WindowsServiceExt",
    "X509V3Extensions",
    # Markings
    "MarkingDefinition",
    "StatementMarking",
    "TLPMarking",
    "TLP_AMBER",
    "TLP_GREEN",
    "TLP_RED",
    "TLP_WHITE",
    # Container
    "Bundle",
]
