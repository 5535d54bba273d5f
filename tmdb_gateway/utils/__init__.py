"""
Shared utilities package.

This package contains logging configuration used by the API and the
command-line scripts.
"""

from tmdb_gateway.utils.logging_config import (
    configure_api_logging,
    configure_cli_logging,
    get_logger,
    setup_logging,
)

__all__ = ['configure_api_logging', 'configure_cli_logging', 'get_logger', 'setup_logging']
