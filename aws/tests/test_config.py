"""Unit tests for aws.config loading and validation."""
import os
import sys
import tempfile
import pytest

_repo_root = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
if _repo_root not in sys.path:
    sys.path.insert(0, _repo_root)

from aws import config
from cert_resolve import EndpointType


def _write_config(d, text):
    path = os.path.join(d, "cert.yaml")
    with open(path, "w") as f:
        f.write(text)
    return path


class TestLoadConfig:
    """Tests for load_config."""

    def test_minimal_config_defaults(self):
        with tempfile.TemporaryDirectory() as d:
            path = _write_config(d, "aws:\n  region: us-east-2\ndomain:\n  name: api.example.com\n")
            result = config.load_config(path)
        assert result["region"] == "us-east-2"
        assert result["domain"] == "api.example.com"
        assert result["profile"] == "default"
        assert result["default_region"] == "us-east-1"
        assert result["certificate_name"] is None
        assert result["endpoint_type"] == EndpointType.EDGE
        assert result["max_attempts"] == 5
        assert result["retry_mode"] == "standard"

    def test_full_config(self):
        with tempfile.TemporaryDirectory() as d:
            path = _write_config(d, (
                "aws:\n"
                "  profile: work\n"
                "  region: eu-west-1\n"
                "  endpoint_url: http://localhost:4566\n"
                "  max_attempts: 3\n"
                "  retry_mode: adaptive\n"
                "domain:\n"
                "  name: api.example.com\n"
                "  certificate_name: '*.example.com'\n"
                "  endpoint_type: Private\n"
            ))
            result = config.load_config(path)
        assert result["profile"] == "work"
        assert result["endpoint_url"] == "http://localhost:4566"
        assert result["max_attempts"] == 3
        assert result["retry_mode"] == "adaptive"
        assert result["certificate_name"] == "*.example.com"
        assert result["endpoint_type"] == EndpointType.PRIVATE

    def test_missing_file_exits(self):
        with pytest.raises(SystemExit):
            config.load_config("/nonexistent/cert.yaml")

    def test_missing_region_exits(self):
        with tempfile.TemporaryDirectory() as d:
            path = _write_config(d, "domain:\n  name: api.example.com\n")
            with pytest.raises(SystemExit):
                config.load_config(path)

    def test_missing_domain_exits(self):
        with tempfile.TemporaryDirectory() as d:
            path = _write_config(d, "aws:\n  region: us-east-2\n")
            with pytest.raises(SystemExit):
                config.load_config(path)

    def test_empty_file_exits(self):
        with tempfile.TemporaryDirectory() as d:
            path = _write_config(d, "")
            with pytest.raises(SystemExit):
                config.load_config(path)

    def test_top_level_list_exits(self, capsys):
        with tempfile.TemporaryDirectory() as d:
            path = _write_config(d, "- just\n- a list\n")
            with pytest.raises(SystemExit) as exc_info:
                config.load_config(path)
        assert exc_info.value.code == 1
        assert "must contain a mapping" in capsys.readouterr().err

    def test_top_level_scalar_exits(self):
        with tempfile.TemporaryDirectory() as d:
            path = _write_config(d, "eu-west-1\n")
            with pytest.raises(SystemExit):
                config.load_config(path)

    def test_aws_section_not_mapping_exits(self, capsys):
        with tempfile.TemporaryDirectory() as d:
            path = _write_config(d, "aws: eu-west-1\ndomain:\n  name: a.com\n")
            with pytest.raises(SystemExit) as exc_info:
                config.load_config(path)
        assert exc_info.value.code == 1
        assert "'aws' must be a mapping" in capsys.readouterr().err

    def test_domain_section_not_mapping_exits(self):
        with tempfile.TemporaryDirectory() as d:
            path = _write_config(d, "aws:\n  region: us-east-2\ndomain:\n  - a.com\n")
            with pytest.raises(SystemExit):
                config.load_config(path)

    def test_invalid_endpoint_type_exits(self, capsys):
        with tempfile.TemporaryDirectory() as d:
            path = _write_config(d, "aws:\n  region: us-east-2\ndomain:\n  name: a.com\n  endpoint_type: global\n")
            with pytest.raises(SystemExit):
                config.load_config(path)
        assert "Invalid endpoint type" in capsys.readouterr().err

    def test_invalid_retry_mode_exits(self):
        with tempfile.TemporaryDirectory() as d:
            path = _write_config(d, "aws:\n  region: us-east-2\n  retry_mode: forever\ndomain:\n  name: a.com\n")
            with pytest.raises(SystemExit):
                config.load_config(path)

    def test_invalid_max_attempts_exits(self):
        with tempfile.TemporaryDirectory() as d:
            path = _write_config(d, "aws:\n  region: us-east-2\n  max_attempts: 0\ndomain:\n  name: a.com\n")
            with pytest.raises(SystemExit):
                config.load_config(path)


class TestDirectoryConfig:
    """Tests for DirectoryConfig.from_dict and domain_request_from_config."""

    def test_from_dict_defaults(self):
        directory_config = config.DirectoryConfig.from_dict({"region": "eu-west-1"})
        assert directory_config.region == "eu-west-1"
        assert directory_config.endpoint_type == EndpointType.EDGE
        assert directory_config.default_region == "us-east-1"
        assert directory_config.profile is None
        assert directory_config.max_attempts == 5

    def test_from_dict_parses_endpoint_type(self):
        directory_config = config.DirectoryConfig.from_dict({"region": "eu-west-1", "endpoint_type": "regional"})
        assert directory_config.endpoint_type == EndpointType.REGIONAL

    def test_domain_request_from_config(self):
        request = config.domain_request_from_config({
            "domain": "api.example.com",
            "certificate_name": "",
            "endpoint_type": EndpointType.PRIVATE,
        })
        assert request.given_domain_name == "api.example.com"
        assert request.certificate_name is None
        assert request.endpoint_type == EndpointType.PRIVATE
