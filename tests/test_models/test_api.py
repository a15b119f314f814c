# pragma: no cover # Do not compute coverage on test files
"""Offer tests for the models public API."""

import stix_sdk.models as models_api


def test_models_public_api_is_valid():
    """Test that models are not removed by mistake."""
    # Given the model names
    # Then they should all be present
    imports = {
        # Base classes
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
    }
    missing = imports - set(models_api.__all__)
    extra = set(models_api.__all__) - imports
    assert not missing, f"Missing features in models public api: {missing}"
    assert not extra, f"Unexpected features in models public api: {extra}"
