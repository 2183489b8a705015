#!/usr/bin/env python3
"""
AWS Certificate Manager lookup package.
"""
from .acm import Certificate, CertificateDirectory
from .config import DirectoryConfig, load_config

__all__ = ['Certificate', 'CertificateDirectory', 'DirectoryConfig', 'load_config']
