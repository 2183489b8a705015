#!/usr/bin/env python3
"""
Configuration loading and validation.
"""
import sys
from dataclasses import dataclass

import yaml

from cert_resolve import DomainRequest, EndpointType

DEFAULT_REGION = 'us-east-1'
RETRY_MODES = ('legacy', 'standard', 'adaptive')


@dataclass(frozen=True)
class DirectoryConfig:
    """Everything needed to build the ACM client for one lookup."""
    region: str
    endpoint_type: EndpointType = EndpointType.EDGE
    default_region: str = DEFAULT_REGION
    profile: str = None
    endpoint_url: str = None
    max_attempts: int = 5
    retry_mode: str = 'standard'
    connect_timeout: int = 10
    read_timeout: int = 30

    @classmethod
    def from_dict(cls, config_dict):
        return cls(
            region=config_dict['region'],
            endpoint_type=EndpointType.parse(config_dict.get('endpoint_type', EndpointType.EDGE)),
            default_region=config_dict.get('default_region') or DEFAULT_REGION,
            profile=config_dict.get('profile'),
            endpoint_url=config_dict.get('endpoint_url'),
            max_attempts=int(config_dict.get('max_attempts', 5)),
            retry_mode=config_dict.get('retry_mode', 'standard'),
            connect_timeout=config_dict.get('connect_timeout', 10),
            read_timeout=config_dict.get('read_timeout', 30),
        )


def domain_request_from_config(config_dict):
    return DomainRequest(
        given_domain_name=config_dict['domain'],
        certificate_name=config_dict.get('certificate_name') or None,
        endpoint_type=config_dict.get('endpoint_type', EndpointType.EDGE),
    )


def load_config(config_file):
    """
    Load configuration from YAML file.
    """
    try:
        with open(config_file, 'r') as f:
            config = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        print(f"Error loading configuration: {str(e)}", file=sys.stderr)
        sys.exit(1)

    if not isinstance(config, dict):
        print("Error: The configuration file must contain a mapping", file=sys.stderr)
        sys.exit(1)

    aws_config = config.get('aws') or {}
    domain_config = config.get('domain') or {}
    for section, value in (('aws', aws_config), ('domain', domain_config)):
        if not isinstance(value, dict):
            print(f"Error: '{section}' must be a mapping in the configuration", file=sys.stderr)
            sys.exit(1)

    # Validate AWS configuration
    if 'region' not in aws_config:
        print("Error: 'region' must be specified in the AWS configuration", file=sys.stderr)
        sys.exit(1)

    # Validate domain configuration
    if not domain_config.get('name'):
        print("Error: 'name' must be specified in the domain configuration", file=sys.stderr)
        sys.exit(1)

    try:
        endpoint_type = EndpointType.parse(domain_config.get('endpoint_type', 'edge'))
    except ValueError as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)

    retry_mode = aws_config.get('retry_mode', 'standard')
    if retry_mode not in RETRY_MODES:
        print(f"Error: 'retry_mode' must be one of: {', '.join(RETRY_MODES)}", file=sys.stderr)
        sys.exit(1)

    max_attempts = aws_config.get('max_attempts', 5)
    if not isinstance(max_attempts, int) or max_attempts < 1:
        print("Error: 'max_attempts' must be a positive integer", file=sys.stderr)
        sys.exit(1)

    return {
        'profile': aws_config.get('profile', 'default'),
        'region': aws_config['region'],
        'default_region': aws_config.get('default_region', DEFAULT_REGION),
        'endpoint_url': aws_config.get('endpoint_url'),
        'max_attempts': max_attempts,
        'retry_mode': retry_mode,
        'connect_timeout': aws_config.get('connect_timeout', 10),
        'read_timeout': aws_config.get('read_timeout', 30),
        'domain': domain_config['name'],
        'certificate_name': domain_config.get('certificate_name'),
        'endpoint_type': endpoint_type,
    }
