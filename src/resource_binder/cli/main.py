"""
Main CLI module with argument parsing and command execution.

Usage:
    resource-binder read azurerm_resource_group /subscriptions/.../resourceGroups/example
    resource-binder --provider aws read AWS::S3::Bucket my-bucket --format yaml
"""
import argparse
import os
import sys
from typing import List, Optional

from resource_binder.application.reader.service import ResourceStateReader
from resource_binder.cli.formatters import format_output
from resource_binder.config.loader import load_config
from resource_binder.config.schemas.app_schema import AppConfig
from resource_binder.domain.base.exceptions import ResourceBinderError
from resource_binder.domain.resource.credentials import (
    ClientCertificateCredentials,
    CredentialDescriptor,
)
from resource_binder.infrastructure.logging.logger import get_logger, setup_logging
from resource_binder.providers.registry import UnsupportedProviderError

logger = get_logger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="resource-binder",
        description="Read the current state of a cloud resource as a JSON document",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s read azurerm_resource_group /subscriptions/<sub>/resourceGroups/example
  %(prog)s --provider aws read AWS::S3::Bucket my-bucket
  %(prog)s read azurerm_resource <id> --client-id <app> --tenant-id <tenant> --certificate cert.pem
        """,
    )

    # Global options
    parser.add_argument("--config", help="Configuration file path")
    parser.add_argument("--provider", help="Provider type (overrides configuration)")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set logging level",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")
    subparsers.required = True

    read_parser = subparsers.add_parser("read", help="Read one resource")
    read_parser.add_argument("resource_type", help="Resource type name")
    read_parser.add_argument("resource_id", help="Resource identifier")
    read_parser.add_argument("--format", choices=["json", "yaml"], default="json", help="Output format")
    read_parser.add_argument("--output", help="Output file (default: stdout)")

    credentials = read_parser.add_argument_group("client certificate credentials")
    credentials.add_argument("--client-id", help="Service principal client ID")
    credentials.add_argument("--tenant-id", help="Tenant ID")
    credentials.add_argument("--certificate", help="Path to a PEM or PKCS12 client certificate")
    credentials.add_argument(
        "--certificate-password",
        default=os.environ.get("RESOURCE_BINDER_CERTIFICATE_PASSWORD"),
        help="Certificate password (default: $RESOURCE_BINDER_CERTIFICATE_PASSWORD)",
    )

    args = parser.parse_args(argv)

    given = [args.client_id, args.tenant_id, args.certificate]
    if any(given) and not all(given):
        parser.error("--client-id, --tenant-id and --certificate must be given together")
    return args


def build_credentials(args: argparse.Namespace) -> Optional[CredentialDescriptor]:
    """Build credentials from arguments; None selects the ambient session."""
    if not args.certificate:
        return None
    return ClientCertificateCredentials.from_file(
        client_id=args.client_id,
        certificate_path=args.certificate,
        tenant_id=args.tenant_id,
        certificate_password=args.certificate_password,
    )


def apply_overrides(config: AppConfig, args: argparse.Namespace) -> AppConfig:
    """Apply command line overrides to the loaded configuration."""
    updates = {}
    if args.provider:
        updates["provider"] = config.provider.model_copy(update={"type": args.provider.lower()})
    if args.log_level:
        updates["logging"] = config.logging.model_copy(update={"level": args.log_level})
    return config.model_copy(update=updates) if updates else config


def execute_read(args: argparse.Namespace, config: AppConfig) -> int:
    reader = ResourceStateReader.from_config(config)
    document = reader.read_resource(args.resource_type, args.resource_id, build_credentials(args))
    output = format_output(document, args.format)
    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(output + "\n")
    else:
        print(output)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = parse_args(argv)

    try:
        config = apply_overrides(load_config(args.config), args)
        setup_logging(config.logging)
        return execute_read(args, config)
    except ResourceBinderError as e:
        logger.debug("Command failed", error=e.message)
        print(format_output(e.to_dict(), "json"), file=sys.stderr)
        return 1
    except UnsupportedProviderError as e:
        print(format_output({"error": type(e).__name__, "message": str(e)}, "json"), file=sys.stderr)
        return 2
    except OSError as e:
        print(format_output({"error": type(e).__name__, "message": str(e)}, "json"), file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
