"""Offer enums for the STIX 2.1 open vocabularies."""

from __future__ import annotations

import warnings
from enum import StrEnum

from stix_sdk.exceptions import VocabularyWarning

__all__ = [
    "AttackMotivation",
    "AttackResourceLevel",
    "IdentityClass",
    "IndicatorType",
    "MalwareType",
    "RelationshipType",
    "ReportType",
    "ThreatActorRole",
    "ThreatActorSophistication",
    "ThreatActorType",
    "ToolType",
]


class _PermissiveEnum(StrEnum):
    """Enum that allows for values outside of the vocabulary."""

    @classmethod
    def _missing_(cls: type[_PermissiveEnum], value: object) -> _PermissiveEnum | None:
        if not isinstance(value, str):
            return None  # not a string at all: let validation fail
        warnings.warn(VocabularyWarning(cls.__name__, value), stacklevel=3)
        # Return a dynamically created instance
        obj = str.__new__(cls, value)
        obj._value_ = value
        return obj


class AttackMotivation(_PermissiveEnum):
    """Attack Motivation Open Vocabulary.

    See https://docs.oasis-open.org/cti/stix/v2.1/os/stix-v2.1-os.html#_dmb1khqsn650
    """

    ACCIDENTAL = "accidental"
    COERCION = "coercion"
    DOMINANCE = "dominance"
    IDEOLOGY = "ideology"
    NOTORIETY = "notoriety"
    ORGANIZATIONAL_GAIN = "organizational-gain"
    PERSONAL_GAIN = "personal-gain"
    PERSONAL_SATISFACTION = "personal-satisfaction"
    REVENGE = "revenge"
    UNPREDICTABLE = "unpredictable"


class AttackResourceLevel(_PermissiveEnum):
    """Attack Resource Level Open Vocabulary.

    See https://docs.oasis-open.org/cti/stix/v2.1/os/stix-v2.1-os.html#_moarppphq8vq
    """

    INDIVIDUAL = "individual"
    CLUB = "club"
    CONTEST = "contest"
    TEAM = "team"
    ORGANIZATION = "organization"
    GOVERNMENT = "government"


class IdentityClass(_PermissiveEnum):
    """Identity Class Open Vocabulary."""

    INDIVIDUAL = "individual"
    GROUP = "group"
    SYSTEM = "system"
    ORGANIZATION = "organization"
    CLASS = "class"
    UNKNOWN = "unknown"


class IndicatorType(_PermissiveEnum):
    """Indicator Type Open Vocabulary."""

    ANOMALOUS_ACTIVITY = "anomalous-activity"
    ANONYMIZATION = "anonymization"
    BENIGN = "benign"
    COMPROMISED = "compromised"
    MALICIOUS_ACTIVITY = "malicious-activity"
    ATTRIBUTION = "attribution"
    UNKNOWN = "unknown"


class MalwareType(_PermissiveEnum):
    """Malware Type Open Vocabulary."""

    ADWARE = "adware"
    BACKDOOR = "backdoor"
    BOT = "bot"
    BOOTKIT = "bootkit"
    DDOS = "ddos"
    DOWNLOADER = "downloader"
    DROPPER = "dropper"
    EXPLOIT_KIT = "exploit-kit"
    KEYLOGGER = "keylogger"
    RANSOMWARE = "ransomware"
    REMOTE_ACCESS_TROJAN = "remote-access-trojan"
    RESOURCE_EXPLOITATION = "resource-exploitation"
    ROGUE_SECURITY_SOFTWARE = "rogue-security-software"
    ROOTKIT = "rootkit"
    SCREEN_CAPTURE = "screen-capture"
    SPYWARE = "spyware"
    TROJAN = "trojan"
    UNKNOWN = "unknown"
    VIRUS = "virus"
    WEBSHELL = "webshell"
    WIPER = "wiper"
    WORM = "worm"


class RelationshipType(_PermissiveEnum):
    """Relationship types defined by the STIX 2.1 objects."""

    USES = "uses"
    TARGETS = "targets"
    INDICATES = "indicates"
    MITIGATES = "mitigates"
    ATTRIBUTED_TO = "attributed-to"
    VARIANT_OF = "variant-of"
    DUPLICATE_OF = "duplicate-of"
    DERIVED_FROM = "derived-from"
    RELATED_TO = "related-to"
    IMPERSONATES = "impersonates"
    BASED_ON = "based-on"
    AUTHORED_BY = "authored-by"
    BEACONS_TO = "beacons-to"
    COMMUNICATES_WITH = "communicates-with"
    COMPROMISES = "compromises"
    CONSISTS_OF = "consists-of"
    CONTROLS = "controls"
    DELIVERS = "delivers"
    DOWNLOADS = "downloads"
    DROPS = "drops"
    EXFILTRATES_TO = "exfiltrates-to"
    EXPLOITS = "exploits"
    HAS = "has"
    HOSTS = "hosts"
    INVESTIGATES = "investigates"
    LOCATED_AT = "located-at"
    ORIGINATES_FROM = "originates-from"
    OWNS = "owns"
    REMEDIATES = "remediates"


class ReportType(_PermissiveEnum):
    """Report Type Open Vocabulary."""

    ATTACK_PATTERN = "attack-pattern"
    CAMPAIGN = "campaign"
    IDENTITY = "identity"
    INDICATOR = "indicator"
    INTRUSION_SET = "intrusion-set"
    MALWARE = "malware"
    OBSERVED_DATA = "observed-data"
    THREAT_ACTOR = "threat-actor"
    THREAT_REPORT = "threat-report"
    TOOL = "tool"
    VULNERABILITY = "vulnerability"


class ThreatActorRole(_PermissiveEnum):
    """Threat Actor Role Open Vocabulary."""

    AGENT = "agent"
    DIRECTOR = "director"
    INDEPENDENT = "independent"
    INFRASTRUCTURE_ARCHITECT = "infrastructure-architect"
    INFRASTRUCTURE_OPERATOR = "infrastructure-operator"
    MALWARE_AUTHOR = "malware-author"
    SPONSOR = "sponsor"


class ThreatActorSophistication(_PermissiveEnum):
    """Threat Actor Sophistication Open Vocabulary."""

    NONE = "none"
    MINIMAL = "minimal"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"
    EXPERT = "expert"
    INNOVATOR = "innovator"
    STRATEGIC = "strategic"


class ThreatActorType(_PermissiveEnum):
    """Threat Actor Type Open Vocabulary."""

    ACTIVIST = "activist"
    COMPETITOR = "competitor"
    CRIME_SYNDICATE = "crime-syndicate"
    CRIMINAL = "criminal"
    HACKER = "hacker"
    INSIDER_ACCIDENTAL = "insider-accidental"
    INSIDER_DISGRUNTLED = "insider-disgruntled"
    NATION_STATE = "nation-state"
    SENSATIONALIST = "sensationalist"
    SPY = "spy"
    TERRORIST = "terrorist"
    UNKNOWN = "unknown"


class ToolType(_PermissiveEnum):
    """Tool Type Open Vocabulary."""

    DENIAL_OF_SERVICE = "denial-of-service"
    EXPLOITATION = "exploitation"
    INFORMATION_GATHERING = "information-gathering"
    NETWORK_CAPTURE = "network-capture"
    CREDENTIAL_EXPLOITATION = "credential-exploitation"
    REMOTE_ACCESS = "remote-access"
    VULNERABILITY_SCANNING = "vulnerability-scanning"
    UNKNOWN = "unknown"
