#!/usr/bin/env python3
"""
AWS Certificate Manager (ACM) certificate directory.
"""
from dataclasses import dataclass, field

import boto3
from botocore.config import Config

from cert_resolve import EndpointType


@dataclass(frozen=True)
class Certificate:
    """One entry of an ACM certificate listing."""
    domain_name: str
    arn: str
    status: str = ""
    alternative_names: tuple = field(default_factory=tuple)

    @classmethod
    def from_summary(cls, summary):
        """
        Build a Certificate from a CertificateSummaryList entry.
        Raises ValueError when the ARN or domain name is missing.
        """
        arn = summary.get('CertificateArn')
        domain_name = summary.get('DomainName')
        if not arn:
            raise ValueError(f"Certificate summary without CertificateArn: {summary!r}")
        if domain_name is None:
            raise ValueError(f"Certificate {arn} has no DomainName")
        alternative_names = summary.get('SubjectAlternativeNameSummaries') or []
        return cls(
            domain_name=str(domain_name),
            arn=str(arn),
            status=str(summary.get('Status', '')),
            alternative_names=tuple(str(name) for name in alternative_names),
        )

    @property
    def all_domain_names(self):
        return [self.domain_name, *self.alternative_names]


def certificate_region(config):
    """
    Region the certificate must live in.
    Edge-optimized API endpoints sit behind CloudFront, so their certificates must be in us-east-1.
    """
    if config.endpoint_type == EndpointType.EDGE:
        return config.default_region
    return config.region


def _session(config):
    if config.profile and config.profile != "default":
        return boto3.Session(profile_name=config.profile)
    return boto3.Session()


def create_acm_client(config, session=None):
    """
    Create the ACM client described by a DirectoryConfig.
    """
    session = session or _session(config)
    client_config = Config(
        retries={'max_attempts': config.max_attempts, 'mode': config.retry_mode},
        connect_timeout=config.connect_timeout,
        read_timeout=config.read_timeout,
    )
    kwargs = {'region_name': certificate_region(config), 'config': client_config}
    if config.endpoint_url:
        kwargs['endpoint_url'] = config.endpoint_url
    return session.client('acm', **kwargs)


class CertificateDirectory:
    """Read-only view over the certificates of one ACM region."""

    def __init__(self, acm_client):
        self.client = acm_client

    @classmethod
    def from_config(cls, config, session=None):
        return cls(create_acm_client(config, session=session))

    def list_certificates(self, statuses):
        """
        Return every certificate in one of the given statuses, all pages concatenated in listing order.
        """
        certificates = []
        paginator = self.client.get_paginator('list_certificates')
        for page in paginator.paginate(CertificateStatuses=list(statuses)):
            for summary in page.get('CertificateSummaryList', []):
                certificates.append(Certificate.from_summary(summary))
        return certificates
