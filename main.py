#!/usr/bin/env python3
"""
Find the ACM certificate ARN to attach to a custom API domain.
Reads an optional YAML config; command-line flags override it.
"""
import os
import sys
import argparse

from botocore.exceptions import BotoCoreError

from cert_resolve import (
    CertificateNotFound,
    DirectoryQueryFailed,
    EndpointType,
    select_certificate_arn,
)
from aws.acm import CertificateDirectory, certificate_region
from aws.config import DEFAULT_REGION, DirectoryConfig, domain_request_from_config, load_config


def describe_missing_certificate(error, region, default_region=DEFAULT_REGION):
    """Turn a CertificateNotFound into a message pointing at the region to check."""
    message = str(error)
    if error.endpoint_type == EndpointType.EDGE:
        message += (f" The endpoint type '{EndpointType.EDGE.value}' is used. "
                    f"Make sure the needed ACM certificate exists in the '{default_region}' region.")
    elif error.endpoint_type == EndpointType.PRIVATE:
        message += (f" The endpoint type '{EndpointType.PRIVATE.value}' is used. "
                    f"Make sure the needed ACM certificate exists in the '{region}' region.")
    return message


def build_config(args):
    """Merge the YAML config (if any) with command-line overrides. Returns a plain dict."""
    if args.config:
        config_path = args.config
        if not os.path.isabs(config_path):
            config_path = os.path.join(os.getcwd(), config_path)
        if not os.path.exists(config_path):
            print(f"Error: Config file not found: {config_path}", file=sys.stderr)
            sys.exit(1)
        config = load_config(config_path)
    else:
        config = {}

    overrides = {
        'domain': args.domain,
        'certificate_name': args.certificate_name,
        'endpoint_type': args.endpoint_type,
        'profile': args.profile,
        'region': args.region,
    }
    config.update({k: v for k, v in overrides.items() if v is not None})

    if not config.get('domain'):
        print("Error: A domain must be given with --domain or in the config file", file=sys.stderr)
        sys.exit(1)
    if not config.get('region'):
        print("Error: A region must be given with --region or in the config file", file=sys.stderr)
        sys.exit(1)
    try:
        config['endpoint_type'] = EndpointType.parse(config.get('endpoint_type', EndpointType.EDGE))
    except ValueError as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)
    return config


def resolve(config, session=None):
    """
    Run the certificate lookup for a resolved config dict.
    Returns the ARN; prints the reason and exits 1 on failure.
    """
    directory_config = DirectoryConfig.from_dict(config)
    request = domain_request_from_config(config)
    print(f"Listing ACM certificates in {certificate_region(directory_config)}...")
    try:
        directory = CertificateDirectory.from_config(directory_config, session=session)
    except BotoCoreError as e:
        print(f"Error: Could not create the ACM client.\n{e}", file=sys.stderr)
        sys.exit(1)
    try:
        certificate_arn = select_certificate_arn(directory, request)
    except CertificateNotFound as e:
        print(describe_missing_certificate(e, directory_config.region, directory_config.default_region), file=sys.stderr)
        sys.exit(1)
    except DirectoryQueryFailed as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    print(f"Found a certificate ARN: '{certificate_arn}'")
    return certificate_arn


def main(argv=None):
    parser = argparse.ArgumentParser(description="Find the ACM certificate ARN for a custom API domain")
    parser.add_argument("--config", "-c", help="Path to YAML config")
    parser.add_argument("--domain", "-d", help="Domain name that needs a certificate")
    parser.add_argument("--certificate-name", help="Pick the certificate whose domain name is exactly this")
    parser.add_argument("--endpoint-type", choices=[t.value.lower() for t in EndpointType], type=str.lower,
                        help="API endpoint type (default: edge)")
    parser.add_argument("--profile", help="AWS profile")
    parser.add_argument("--region", help="AWS region of the API")
    args = parser.parse_args(argv)

    config = build_config(args)
    certificate_arn = resolve(config)
    print(certificate_arn)


if __name__ == "__main__":
    main()
