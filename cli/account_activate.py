#!/usr/bin/env python3
"""
Account Activate Command

Activates AGC in an AWS account: resolves the AGC bucket, verifies the
platform container images are published, and deploys the core CDK app.
"""

import argparse
import os
from dataclasses import dataclass
from typing import Dict, List, Optional
from aws_clients import (
    CdkClient,
    EcrClient,
    ImageReference,
    S3Client,
    StsClient,
    create_aws_session,
    resolve_region
)
from aws_clients.cdk_client import ProgressEvent
from environment.common_images import COMMON_IMAGES, IMAGE_KEYS
from errors import DeploymentError
from configuration import (
    ACCOUNT_ACTIVATE_HINT,
    ACTIVATE_PROGRESS_DESCRIPTION,
    BUCKET_PREFIX,
    CDK_CORE_DIR,
    CLI_NAME
)
from cli.cli_error import CliError
from cli.home_dir import determine_home_dir
from logger.log_wrapper import get_logger

logger = get_logger("cli:account_activate", __name__)

ACCOUNT_BUCKET_FLAG_DESCRIPTION = """The name of an S3 bucket that AGC will use to store its data.
An autogenerated name will be used if not specified. A new bucket will be created if the bucket does not exist."""
ACCOUNT_VPC_FLAG_DESCRIPTION = """The ID of a VPC that AGC will run in.
A new VPC will be created if not specified."""


def generate_bucket_name(account_id: str, region: str) -> str:
    """Generate the default AGC bucket name for an account and region."""
    return f"{BUCKET_PREFIX}-{account_id}-{region}"


@dataclass
class AccountActivateVars:
    """Flag values of 'account activate'. Empty strings mean not specified."""
    bucket_name: str = ""
    vpc_id: str = ""


class AccountActivateOpts:
    """
    Executes 'account activate' against a set of AWS collaborators.
    """

    def __init__(self,
                 activate_vars: AccountActivateVars,
                 sts_client: StsClient,
                 s3_client: S3Client,
                 ecr_client: EcrClient,
                 cdk_client: CdkClient,
                 image_refs: Dict[str, ImageReference],
                 region: str,
                 verbose: bool = False):
        self.bucket_name = activate_vars.bucket_name
        self.vpc_id = activate_vars.vpc_id
        self.sts_client = sts_client
        self.s3_client = s3_client
        self.ecr_client = ecr_client
        self.cdk_client = cdk_client
        self.image_refs = image_refs
        self.region = region
        self.verbose = verbose

    @classmethod
    def from_profile(cls, activate_vars: AccountActivateVars, profile: Optional[str] = None,
                     verbose: bool = False) -> "AccountActivateOpts":
        """
        Create options backed by real AWS clients.

        Args:
            activate_vars: Flag values
            profile: AWS named profile, or None for the default credential chain
            verbose: Replay CDK output on failure instead of showing a progress bar

        Returns:
            AccountActivateOpts: Ready to execute
        """
        session = create_aws_session(profile)
        region = resolve_region(session)
        return cls(
            activate_vars=activate_vars,
            sts_client=StsClient(session, region),
            s3_client=S3Client(session, region),
            ecr_client=EcrClient(session),
            cdk_client=CdkClient(profile),
            image_refs=COMMON_IMAGES,
            region=region,
            verbose=verbose
        )

    def execute(self) -> None:
        """
        Activate AGC.

        Raises:
            IdentityLookupError: If the bucket name must be generated and the account id is unavailable
            StorageAccessError: If the bucket cannot be checked
            RegistryVerificationError: If any image is missing from ECR
            DeploymentError: If the core CDK app fails to deploy
        """
        if not self.bucket_name:
            self.bucket_name = self.generate_default_bucket()

        exists = self.s3_client.bucket_exists(self.bucket_name)

        for image_key in IMAGE_KEYS:
            logger.debug(f"Verifying {image_key} image")
            self.ecr_client.verify_image_exists(self.image_refs[image_key])

        environment_vars = self.build_environment_vars(bucket_exists=exists)
        self.deploy_core_infrastructure(environment_vars)

    def generate_default_bucket(self) -> str:
        account_id = self.sts_client.get_account()
        return generate_bucket_name(account_id, self.region)

    def build_environment_vars(self, bucket_exists: bool) -> List[str]:
        """
        Build the KEY=VALUE environment passed to the core CDK app.

        Args:
            bucket_exists: Whether the AGC bucket already exists

        Returns:
            List[str]: Bucket entries, then four entries per image in IMAGE_KEYS order,
                then VPC_ID if a VPC was specified
        """
        environment_vars = [
            f"AGC_BUCKET_NAME={self.bucket_name}",
            f"CREATE_AGC_BUCKET={str(not bucket_exists).lower()}",
        ]
        for image_key in IMAGE_KEYS:
            image_ref = self.image_refs[image_key]
            environment_vars.extend([
                f"ECR_{image_key}_ACCOUNT_ID={image_ref.registry_id}",
                f"ECR_{image_key}_REGION={image_ref.region}",
                f"ECR_{image_key}_TAG={image_ref.image_tag}",
                f"ECR_{image_key}_REPOSITORY={image_ref.repository_name}",
            ])
        if self.vpc_id:
            environment_vars.append(f"VPC_ID={self.vpc_id}")
        return environment_vars

    def deploy_core_infrastructure(self, environment_vars: List[str]) -> None:
        """
        Deploy the core CDK app with the given environment.

        Raises:
            DeploymentError: If the deployment fails
        """
        cdk_app_path = os.path.join(determine_home_dir(), CDK_CORE_DIR)
        progress_stream = self.cdk_client.deploy_app(cdk_app_path, environment_vars)

        if not self.verbose:
            try:
                progress_stream.display_progress(ACTIVATE_PROGRESS_DESCRIPTION)
            except DeploymentError:
                raise
            except Exception as e:
                raise DeploymentError(str(e)) from e
            return

        last_event = ProgressEvent()
        try:
            for event in progress_stream:
                if event.err is not None:
                    raise event.err
                last_event = event
        except Exception as e:
            for line in last_event.outputs:
                logger.error(line)
            if isinstance(e, DeploymentError):
                raise
            raise DeploymentError(str(e), last_event.outputs) from e


def run_account_activate(args: argparse.Namespace) -> None:
    """
    Run 'account activate' for parsed command line arguments.

    Raises:
        CliError: If activation fails
    """
    activate_vars = AccountActivateVars(bucket_name=args.bucket, vpc_id=args.vpc)
    try:
        opts = AccountActivateOpts.from_profile(activate_vars, profile=args.profile, verbose=args.verbose)
        logger.info(f"Activating AGC with bucket '{opts.bucket_name}' and VPC '{opts.vpc_id}'")
        opts.execute()
    except Exception as e:
        raise CliError("account activate", activate_vars, e, ACCOUNT_ACTIVATE_HINT) from e


def build_account_activate_command(account_subparsers) -> argparse.ArgumentParser:
    """
    Build the command for activating AGC in an AWS account.

    Args:
        account_subparsers: Subparsers action of the 'account' command

    Returns:
        argparse.ArgumentParser: The 'activate' parser
    """
    parser = account_subparsers.add_parser(
        "activate",
        help="Activate AGC in an AWS account.",
        description="""Activate AGC in an AWS account.
AGC will use your default AWS credentials to deploy all AWS resources
it needs to that account and region.""",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Examples:
  Activate AGC in your AWS account with a custom S3 bucket and VPC.
  {CLI_NAME} account activate --bucket my-custom-bucket --vpc my-vpc-id
        """
    )

    parser.add_argument(
        "--bucket",
        type=str,
        default="",
        help=ACCOUNT_BUCKET_FLAG_DESCRIPTION
    )

    parser.add_argument(
        "--vpc",
        type=str,
        default="",
        help=ACCOUNT_VPC_FLAG_DESCRIPTION
    )

    parser.set_defaults(func=run_account_activate)
    return parser
