#!/usr/bin/env python3
"""
CDK Client Module

Deploys CDK apps by running the `cdk` CLI and exposes its output as a stream
of progress events. Events are produced lazily while the deployment runs, so
consumers see each line as soon as CDK prints it.
"""

import os
import re
import subprocess
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional
from rich.progress import BarColumn, MofNCompleteColumn, Progress, SpinnerColumn, TextColumn, TimeElapsedColumn
from errors import DeploymentError
from configuration import CDK_DEPLOY_COMMAND
from logger.log_wrapper import get_logger

logger = get_logger("aws:cdk", __name__)

# e.g. "agc-core |  3/12 | 10:22:01 AM | CREATE_COMPLETE | AWS::S3::Bucket | Bucket (Bucket83908E77)"
STACK_ACTIVITY_PATTERN = re.compile(
    r"^\s*(?P<stack>[^|\s]+)\s*\|\s*(?P<current>\d+)\s*/\s*(?P<total>\d+)\s*\|"
    r"\s*(?P<time>[^|]*?)\s*\|\s*(?P<status>[^|\s]+)\s*\|\s*(?P<resource_type>[^|]*?)\s*\|\s*(?P<resource>.*?)\s*$"
)


@dataclass
class ProgressEvent:
    """
    A single progress update from a CDK deployment.

    Attributes:
        outputs: All output lines printed by CDK so far. The stream shares one list
            across its events, so copy it to keep a snapshot of an earlier event
        err: Set on the terminal event of a failed deployment
        current_step: Last reported completed resource count
        total_steps: Last reported total resource count
        step_description: Last reported stack activity
    """
    outputs: List[str] = field(default_factory=list)
    err: Optional[Exception] = None
    current_step: int = 0
    total_steps: int = 0
    step_description: str = ""


class ProgressStream:
    """Finite, single-pass stream of ProgressEvents."""

    def __init__(self, events: Iterator[ProgressEvent]):
        self._events = events

    def __iter__(self) -> Iterator[ProgressEvent]:
        return self._events

    def display_progress(self, description: str) -> None:
        """
        Consume the stream, rendering a summarised progress bar.

        Args:
            description: Label shown next to the progress bar

        Raises:
            Exception: The error carried by the first error event
        """
        progress = Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            MofNCompleteColumn(),
            TimeElapsedColumn(),
        )
        with progress:
            task = progress.add_task(description, total=None)
            for event in self._events:
                if event.err is not None:
                    raise event.err
                if event.total_steps:
                    progress.update(task, total=event.total_steps, completed=event.current_step)
                if event.step_description:
                    logger.debug(event.step_description)


class CdkClient:
    """Runs CDK deployments."""

    def __init__(self, profile: Optional[str] = None):
        self.profile = profile

    def deploy_app(self, app_dir: str, environment_vars: List[str]) -> ProgressStream:
        """
        Deploy every stack of a CDK app.

        Args:
            app_dir: Directory holding the CDK app
            environment_vars: KEY=VALUE entries added to the CDK process environment

        Returns:
            ProgressStream: Live progress of the deployment

        Raises:
            DeploymentError: If the app directory or the cdk CLI is missing
        """
        if not os.path.isdir(app_dir):
            raise DeploymentError(f"CDK app directory not found: {app_dir}")

        cmd = list(CDK_DEPLOY_COMMAND)
        if self.profile:
            cmd.extend(["--profile", self.profile])

        env = self._get_cdk_env(environment_vars)
        logger.debug(f"Running {' '.join(cmd)} in {app_dir}")

        try:
            process = subprocess.Popen(
                cmd,
                cwd=app_dir,
                env=env,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                encoding="utf-8",
                errors="replace"
            )
        except FileNotFoundError as e:
            raise DeploymentError("'cdk' command not found. Please ensure the AWS CDK CLI is installed and in your PATH.") from e

        return ProgressStream(self._stream_events(process))

    def _get_cdk_env(self, environment_vars: List[str]) -> Dict[str, str]:
        """
        Get environment variables for the cdk subprocess.

        Returns:
            dict: Current environment overlaid with the given KEY=VALUE entries
        """
        env = os.environ.copy()
        for entry in environment_vars:
            key, sep, value = entry.partition("=")
            if not sep or not key:
                raise ValueError(f"Invalid environment variable entry: {entry}")
            env[key] = value
        return env

    def _stream_events(self, process: subprocess.Popen) -> Iterator[ProgressEvent]:
        outputs: List[str] = []
        last_event = ProgressEvent()
        try:
            for raw_line in process.stdout:
                line = raw_line.rstrip("\n")
                if not line.strip():
                    continue
                outputs.append(line)
                event = ProgressEvent(
                    outputs=outputs,
                    current_step=last_event.current_step,
                    total_steps=last_event.total_steps,
                    step_description=last_event.step_description
                )
                match = STACK_ACTIVITY_PATTERN.match(line)
                if match:
                    event.current_step = int(match.group('current'))
                    event.total_steps = int(match.group('total'))
                    event.step_description = (
                        f"{match.group('stack')}: {match.group('status')} "
                        f"{match.group('resource_type')} {match.group('resource')}"
                    ).strip()
                last_event = event
                yield event
            return_code = process.wait()
        finally:
            if process.poll() is None:
                process.terminate()
                process.wait()
            process.stdout.close()

        if return_code != 0:
            logger.debug(f"cdk deploy exited with code {return_code}")
            yield ProgressEvent(
                outputs=outputs,
                err=DeploymentError(f"cdk deploy failed with exit code {return_code}", outputs),
                current_step=last_event.current_step,
                total_steps=last_event.total_steps,
                step_description=last_event.step_description
            )
