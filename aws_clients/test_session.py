#!/usr/bin/env python3
"""
Test AWS Session Module
"""

import pytest
from unittest.mock import Mock, patch
from botocore.exceptions import ProfileNotFound
from aws_clients.session import create_aws_session, resolve_region
from errors import ConfigurationError


class TestCreateAwsSession:
    """Test cases for session creation."""
    
    @patch("aws_clients.session.boto3.Session")
    def test_default_session_without_profile(self, mock_session):
        """Test that no profile uses the default credential chain."""
        create_aws_session()
        mock_session.assert_called_once_with()
    
    @patch("aws_clients.session.boto3.Session")
    def test_named_profile(self, mock_session):
        """Test that a profile is passed to boto3."""
        create_aws_session("dev")
        mock_session.assert_called_once_with(profile_name="dev")
    
    @patch("aws_clients.session.boto3.Session")
    def test_missing_profile_raises_configuration_error(self, mock_session):
        """Test that an unknown profile is reported as a configuration error."""
        mock_session.side_effect = ProfileNotFound(profile="missing")
        
        with pytest.raises(ConfigurationError, match="missing"):
            create_aws_session("missing")


class TestResolveRegion:
    """Test cases for region resolution."""
    
    def test_session_region_wins(self, monkeypatch):
        monkeypatch.setenv("AWS_DEFAULT_REGION", "eu-west-1")
        session = Mock(region_name="us-west-2")
        assert resolve_region(session) == "us-west-2"
    
    def test_falls_back_to_environment(self, monkeypatch):
        monkeypatch.setenv("AWS_DEFAULT_REGION", "eu-west-1")
        session = Mock(region_name=None)
        assert resolve_region(session) == "eu-west-1"
    
    def test_falls_back_to_aws_region(self, monkeypatch):
        monkeypatch.delenv("AWS_DEFAULT_REGION", raising=False)
        monkeypatch.setenv("AWS_REGION", "ap-southeast-2")
        session = Mock(region_name=None)
        assert resolve_region(session) == "ap-southeast-2"
    
    def test_defaults_to_us_east_1(self, monkeypatch):
        monkeypatch.delenv("AWS_DEFAULT_REGION", raising=False)
        monkeypatch.delenv("AWS_REGION", raising=False)
        session = Mock(region_name=None)
        assert resolve_region(session) == "us-east-1"
