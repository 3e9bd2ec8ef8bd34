#!/usr/bin/env python3
"""
Test CLI Error Module
"""

import unittest
from cli.account_activate import AccountActivateVars
from cli.cli_error import CliError
from errors import StorageAccessError


class TestCliError(unittest.TestCase):
    """Test cases for command error formatting."""
    
    def test_format_with_dataclass_variables(self):
        error = CliError(
            "account activate",
            AccountActivateVars(bucket_name="my-bucket", vpc_id=""),
            StorageAccessError("unable to check bucket 'my-bucket'"),
            "check the bucket exists"
        )
        
        self.assertEqual(
            str(error),
            "an error occurred invoking 'account activate'\n"
            "with variables: {bucket_name: 'my-bucket', vpc_id: ''}\n"
            "error: unable to check bucket 'my-bucket'\n"
            "suggestion: check the bucket exists"
        )
    
    def test_format_with_mapping_variables(self):
        error = CliError("account activate", {"bucket": "b"}, ValueError("bad"), "retry")
        self.assertIn("with variables: {bucket: 'b'}", str(error))
    
    def test_keeps_cause(self):
        cause = StorageAccessError("denied")
        error = CliError("account activate", None, cause, "hint")
        self.assertIs(error.cause, cause)
        self.assertIn("with variables: {}", str(error))
