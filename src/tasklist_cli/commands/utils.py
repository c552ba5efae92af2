"""Helpers shared by command modules."""

from tasklist_cli.services.config_service import get_config_service


def detail_options() -> dict[str, str]:
    """Display settings for the task detail view, taken from the config."""
    config = get_config_service().config
    return {
        "timestamp_format": config.timestamp_format,
        "currency_symbol": config.currency_symbol,
    }
