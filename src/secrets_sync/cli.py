#!/usr/bin/env python
"""Command-line interface for secrets-sync.

This module provides the main CLI entry point, handling command-line
argument parsing and running one reconciliation pass against AWS
Secrets Manager.
"""

import sys

import click
from icecream import ic

from secrets_sync import __version__, console
from secrets_sync.core.reconciler import Reconciler
from secrets_sync.core.store import SecretStore, create_session
from secrets_sync.exceptions import ConfigInvalidError, ConfigParsingError, SessionError
from secrets_sync.models import SyncAction, SyncOptions, SyncReport
from secrets_sync.secrets.parsing import load_config
from secrets_sync.secrets.validation import validate_secrets

_SUMMARY_LABELS = {
    SyncAction.CREATED: "Created",
    SyncAction.UPDATED: "Updated",
    SyncAction.UNCHANGED: "Unchanged",
    SyncAction.RESOLUTION_FAILED: "Resolution failed",
    SyncAction.DESCRIBE_FAILED: "Describe failed",
    SyncAction.CREATE_FAILED: "Create failed",
    SyncAction.UPDATE_FAILED: "Update failed",
}


def print_summary(report: SyncReport) -> None:
    """Print the per-action counts of a finished run.

    Args:
        report: The report returned by the reconciler.

    """
    counts = report.counts()
    items = {label: str(counts[act]) for act, label in _SUMMARY_LABELS.items() if counts.get(act)}
    items["Total"] = str(len(report.results))

    console.newline()
    console.summary_panel("Secrets Sync", items, failed=not report.ok)


def sync_secrets(options: SyncOptions) -> SyncReport:
    """Load, validate and reconcile the secrets described by the options.

    Args:
        options: Resolved settings for this run.

    Returns:
        The reconciliation report.

    Raises:
        ConfigParsingError: If the config file cannot be loaded.
        ConfigInvalidError: If a declared secret is invalid.
        SessionError: If the AWS session cannot be established.

    """
    secrets = load_config(options.config_path)
    ic(sorted(secrets))
    validate_secrets(secrets)

    if not secrets:
        console.warning(f"No secrets declared in {console.highlight(options.config_path)}")
        return SyncReport()

    with console.spinner("Connecting to AWS Secrets Manager..."):
        session = create_session(options.profile, options.region)
        store = SecretStore.from_session(session)

    console.action(
        f"Syncing {len(secrets)} secret(s) to {console.highlight(options.region)} "
        f"using profile {console.highlight(options.profile)}"
    )
    return Reconciler(store, kms_key=options.kms_key).reconcile(secrets)


@click.command(help="Synchronize secrets declared in a YAML file with AWS Secrets Manager")
@click.option("--version", "-v", required=False, is_flag=True, help="print version")
@click.option("--debug", required=False, is_flag=True, help="print debug information")
@click.option("--config", "-c", "config_path", required=False, help="path to the config file")
@click.option("--profile", required=False, default="default", show_default=True, help="AWS profile to use")
@click.option("--region", required=False, default="us-east-1", show_default=True, help="AWS region")
@click.option("--kms", required=False, help="KMS key ID or alias to use for encrypting the secrets")
def cli(
    debug: bool,
    config_path: str | None,
    profile: str,
    region: str,
    kms: str | None,
    version: bool,
) -> None:
    """Process CLI arguments and run the synchronization.

    Args:
        debug: Enable debug output.
        config_path: Path to the YAML config file.
        profile: AWS profile to use.
        region: AWS region to use.
        kms: KMS key ID or alias for encrypting secrets.
        version: Print version and exit.

    """
    if not debug:
        ic.disable()

    if version:
        click.echo(__version__)
        return

    if not config_path:
        raise click.UsageError("Missing option '--config' / '-c'.")

    options = SyncOptions(config_path=config_path, profile=profile, region=region, kms_key=kms)
    ic(options)

    try:
        report = sync_secrets(options)
    except (ConfigParsingError, ConfigInvalidError) as e:
        console.error(f"Invalid config: {e}")
        sys.exit(1)
    except SessionError as e:
        console.error(f"AWS session failed: {e}")
        sys.exit(1)

    if report.results:
        print_summary(report)

    if not report.ok:
        sys.exit(1)


if __name__ == "__main__":
    cli()
