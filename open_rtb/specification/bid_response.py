"""Enumerated lists for bid response fields."""

from __future__ import annotations

from enum import IntEnum


class NoBidReason(IntEnum):
    UNKNOWN_ERROR = 0
    TECHNICAL_ERROR = 1
    INVALID_REQUEST = 2
    KNOWN_WEB_SPIDER = 3
    SUSPECTED_NON_HUMAN_TRAFFIC = 4
    CLOUD_DATA_CENTER_PROXY_IP = 5
    UNSUPPORTED_DEVICE = 6
    BLOCKED_PUBLISHER_SITE = 7
    UNMATCHED_USER = 8
    DAILY_READER_CAP_MET = 9
    DAILY_DOMAIN_CAP_MET = 10
