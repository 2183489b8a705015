#!/usr/bin/env python3
"""
Resolve the ACM certificate ARN to use for a custom API domain.
- With an explicit certificate name: the first certificate whose DomainName equals it.
- Otherwise: the certificate with the most specific (longest) name contained in the domain.
Wildcard names are compared with their leading '*' removed.
"""
from dataclasses import dataclass
from enum import Enum

# Expired, revoked, failed etc. are filtered out by the listing itself.
CERTIFICATE_STATUSES = ("PENDING_VALIDATION", "ISSUED", "INACTIVE")


class EndpointType(str, Enum):
    EDGE = "EDGE"
    PRIVATE = "PRIVATE"
    REGIONAL = "REGIONAL"

    @classmethod
    def parse(cls, value):
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().upper())
        except ValueError:
            choices = ", ".join(member.value.lower() for member in cls)
            raise ValueError(f"Invalid endpoint type: {value!r}. Expected one of: {choices}") from None


@dataclass(frozen=True)
class DomainRequest:
    given_domain_name: str
    certificate_name: str = None
    endpoint_type: EndpointType = EndpointType.EDGE

    def __post_init__(self):
        if not self.given_domain_name:
            raise ValueError("A domain name is required to select a certificate")
        object.__setattr__(self, 'endpoint_type', EndpointType.parse(self.endpoint_type))


class CertificateSelectionError(Exception):
    """Base class for certificate selection failures."""


class DirectoryQueryFailed(CertificateSelectionError):
    """Listing certificates failed (network, credentials, malformed response)."""


class CertificateNotFound(CertificateSelectionError):
    """No certificate matched the requested name or domain."""

    def __init__(self, display_name, endpoint_type):
        self.display_name = display_name
        self.endpoint_type = endpoint_type
        super().__init__(f"Could not find an in-date certificate for '{display_name}'.")


def find_arn_by_certificate_name(certificates, certificate_name):
    """Return the ARN of the first certificate whose DomainName is exactly certificate_name."""
    for cert in certificates:
        if cert.domain_name == certificate_name:
            return cert.arn
    return None


def find_arn_by_domain_name(certificates, domain_name):
    """
    Return the ARN of the certificate with the longest name found inside domain_name.
    Names are checked as plain substrings of domain_name, so 'example.com' also matches
    'notexample.com'. On equal lengths the first certificate listed wins.
    """
    best_length = 0
    best_arn = None
    for cert in certificates:
        for name in cert.all_domain_names:
            # *.example.com -> .example.com
            if name.startswith('*'):
                name = name[1:]
            if name in domain_name and len(name) > best_length:
                best_length = len(name)
                best_arn = cert.arn
    return best_arn


def select_certificate_arn(directory, request):
    """
    Pick the certificate ARN for a DomainRequest from everything the directory lists.
    Raises DirectoryQueryFailed if listing fails and CertificateNotFound if nothing matches.
    """
    try:
        certificates = directory.list_certificates(CERTIFICATE_STATUSES)
    except Exception as e:
        raise DirectoryQueryFailed(f"Could not search certificates in Certificate Manager.\n{e}") from e

    if request.certificate_name:
        display_name = request.certificate_name
        certificate_arn = find_arn_by_certificate_name(certificates, display_name)
    else:
        display_name = request.given_domain_name
        certificate_arn = find_arn_by_domain_name(certificates, display_name)

    if certificate_arn is None:
        raise CertificateNotFound(display_name, request.endpoint_type)
    return certificate_arn
