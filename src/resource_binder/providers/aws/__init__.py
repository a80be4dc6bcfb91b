"""AWS provider."""

from .registration import create_aws_provider, register_aws_provider

__all__ = ["create_aws_provider", "register_aws_provider"]
