"""
Centralized DateTime Utilities
==============================

Timestamps stored by repositories (account creation, list additions)
use the timezone configured in movielist.core.config.
"""
import logging
import zoneinfo
from datetime import datetime, timezone as dt_timezone, tzinfo

from movielist.core.config import get_settings

logger = logging.getLogger(__name__)


def _get_app_timezone() -> tzinfo:
    """
    Get the application timezone from config.
    Returns timezone object (defaults to UTC if invalid).
    """
    tz_str = get_settings().timezone
    
    if tz_str.upper() == "UTC":
        return dt_timezone.utc
    
    try:
        return zoneinfo.ZoneInfo(tz_str)
    except (zoneinfo.ZoneInfoNotFoundError, ValueError):
        logger.warning("Invalid timezone '%s', falling back to UTC", tz_str)
        return dt_timezone.utc


def now() -> datetime:
    """
    Get current datetime with application-configured timezone.
    
    Returns:
        timezone-aware datetime object
    """
    return datetime.now(_get_app_timezone())
