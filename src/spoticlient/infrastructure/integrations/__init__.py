"""Spotify Web API integration: HTTP util and raw record schemas."""

from spoticlient.infrastructure.integrations.http_client import HttpUtil
from spoticlient.infrastructure.integrations.schemas import decode, decode_bool_list

__all__ = ["HttpUtil", "decode", "decode_bool_list"]
