#!/usr/bin/env python3
"""
Test Main Entry Point

Command line parsing and exit codes, with activation mocked out.
"""

import pytest
from unittest.mock import Mock, patch
from cli.account_activate import AccountActivateOpts, AccountActivateVars
from errors import RegistryVerificationError, ConfigurationError
from aws_clients.ecr_client import ImageReference
from main import build_parser, main


class TestBuildParser:
    """Test cases for the command line parser."""
    
    def test_global_flags(self):
        args = build_parser().parse_args(["--verbose", "--profile", "dev", "account", "activate"])
        
        assert args.verbose is True
        assert args.profile == "dev"
        assert args.command == "account"
        assert args.account_command == "activate"
    
    def test_defaults(self):
        args = build_parser().parse_args(["account", "activate"])
        
        assert args.verbose is False
        assert args.profile is None
        assert args.log_dir is None
        assert args.bucket == ""
        assert args.vpc == ""
    
    def test_command_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])
    
    def test_account_subcommand_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["account"])


@patch("main.setup_logging")
class TestMain:
    """Test cases for exit codes."""
    
    @patch.object(AccountActivateOpts, "from_profile")
    def test_success_exit_code(self, mock_from_profile, mock_setup_logging):
        opts = Mock(bucket_name="my-bucket", vpc_id="vpc-123")
        mock_from_profile.return_value = opts
        
        exit_code = main(["account", "activate", "--bucket", "my-bucket", "--vpc", "vpc-123"])
        
        assert exit_code == 0
        mock_setup_logging.assert_called_once_with(verbose=False, log_dir=None)
        mock_from_profile.assert_called_once_with(
            AccountActivateVars(bucket_name="my-bucket", vpc_id="vpc-123"), profile=None, verbose=False
        )
        opts.execute.assert_called_once_with()
    
    @patch.object(AccountActivateOpts, "from_profile")
    def test_failure_exit_code(self, mock_from_profile, mock_setup_logging, caplog):
        """Test that a failed activation exits non-zero with the hint logged."""
        opts = Mock(bucket_name="", vpc_id="")
        opts.execute.side_effect = RegistryVerificationError(
            ImageReference("555741728588", "us-east-1", "64", "aws/cromwell-mirror"), "image not found"
        )
        mock_from_profile.return_value = opts
        
        exit_code = main(["--verbose", "account", "activate"])
        
        assert exit_code == 1
        mock_setup_logging.assert_called_once_with(verbose=True, log_dir=None)
        assert "check you have valid aws credentials" in caplog.text
        assert "aws/cromwell-mirror:64" in caplog.text
    
    @patch.object(AccountActivateOpts, "from_profile")
    def test_setup_failure_exit_code(self, mock_from_profile, mock_setup_logging, caplog):
        mock_from_profile.side_effect = ConfigurationError("AWS profile 'missing' not found")
        
        exit_code = main(["--profile", "missing", "account", "activate"])
        
        assert exit_code == 1
        assert "AWS profile 'missing' not found" in caplog.text
        assert "check you have valid aws credentials" in caplog.text
