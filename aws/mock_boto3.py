#!/usr/bin/env python3
"""
In-memory mock boto3 ACM client with the same interface as the real one.
All state is stored in memory for testing without hitting AWS.
"""
from botocore.exceptions import ClientError


def _client_error(code, message="", operation_name="Operation"):
    return ClientError({"Error": {"Code": code, "Message": message}}, operation_name)


class MockACMClient:
    """
    In-memory ACM client. State: ordered list of certificate dicts.
    list_certificates returns at most page_size summaries per call and hands out a NextToken for the rest.
    """

    def __init__(self, state=None, region="us-east-1", page_size=100):
        self._region = region
        self._page_size = page_size
        if state is not None:
            self._certs = state.setdefault("certificates", [])
        else:
            self._certs = []
        self.calls = []
        self.error = None

    @property
    def state(self):
        return {"certificates": list(self._certs)}

    @property
    def region(self):
        return self._region

    def add_certificate(self, arn, domain, alternative_names=None, status="ISSUED"):
        cert = {"CertificateArn": arn, "DomainName": domain, "Status": status}
        if alternative_names is not None:
            cert["SubjectAlternativeNameSummaries"] = list(alternative_names)
        self._certs.append(cert)
        return cert

    def fail_with(self, code, message=""):
        """Make every following list_certificates call raise a ClientError."""
        self.error = _client_error(code, message, "ListCertificates")

    def list_certificates(self, CertificateStatuses=None, NextToken=None, MaxItems=None):
        self.calls.append({"CertificateStatuses": CertificateStatuses, "NextToken": NextToken})
        if self.error is not None:
            raise self.error
        certs = [c for c in self._certs if not CertificateStatuses or c.get("Status") in CertificateStatuses]
        start = 0
        if NextToken is not None:
            if not NextToken.startswith("token-"):
                raise _client_error("InvalidArgsException", "Invalid NextToken", "ListCertificates")
            start = int(NextToken[len("token-"):])
        end = start + (MaxItems or self._page_size)
        response = {"CertificateSummaryList": [dict(c) for c in certs[start:end]]}
        if end < len(certs):
            response["NextToken"] = f"token-{end}"
        return response

    def get_paginator(self, operation_name):
        if operation_name != "list_certificates":
            raise ValueError(f"Unknown paginator: {operation_name}")

        class Paginator:
            def __init__(pag_self, client):
                pag_self._client = client

            def paginate(pag_self, **kwargs):
                token = None
                while True:
                    page = pag_self._client.list_certificates(NextToken=token, **kwargs)
                    yield page
                    token = page.get("NextToken")
                    if not token:
                        break

        return Paginator(self)


class MockSession:
    """Mock boto3.Session that returns in-memory clients. State is shared per service type."""

    def __init__(self, profile_name=None, region_name=None, page_size=100):
        self.profile_name = profile_name
        self.region_name = region_name
        self._page_size = page_size
        self._acm_state = {}
        self.client_kwargs = []

    def client(self, service_name, region_name=None, **kwargs):
        self.client_kwargs.append(dict(kwargs, service_name=service_name, region_name=region_name))
        region = region_name or self.region_name
        if service_name == "acm":
            return MockACMClient(self._acm_state, region=region or "us-east-1", page_size=self._page_size)
        raise ValueError(f"Unknown service: {service_name}")

    def seed_acm_certificate(self, arn, domain, alternative_names=None, status="ISSUED"):
        """Add an ACM certificate for tests."""
        cert = {"CertificateArn": arn, "DomainName": domain, "Status": status}
        if alternative_names is not None:
            cert["SubjectAlternativeNameSummaries"] = list(alternative_names)
        self._acm_state.setdefault("certificates", []).append(cert)
