#!/usr/bin/env python3
"""
Configuration variables for the AGC command line.
"""

CLI_NAME = "agc"

BUCKET_PREFIX = "agc"  # Autogenerated bucket names are <prefix>-<account id>-<region>
CDK_CORE_DIR = ".agc/cdk/apps/core"  # Core CDK app, relative to the AGC home directory
HOME_DIR_ENV_VAR = "AGC_HOME"  # Overrides the user home directory when set

DEFAULT_AWS_REGION = "us-east-1"

# CDK deployment
CDK_DEPLOY_COMMAND = ["cdk", "deploy", "--all", "--require-approval", "never"]
ACTIVATE_PROGRESS_DESCRIPTION = "Activating account..."

ACCOUNT_ACTIVATE_HINT = "check you have valid aws credentials, check the custom bucket and VPC (if any) exist"
