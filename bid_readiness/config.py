# bid_readiness/config.py
import os
from dotenv import load_dotenv


def _optional_path(key: str) -> str | None:
    value = os.getenv(key, "").strip()
    return value or None


def load_settings() -> dict:
    load_dotenv()
    return {
        "BID_READINESS_CONFIG_PATH": _optional_path("BID_READINESS_CONFIG_PATH"),
        "BID_READINESS_TAXONOMY_PATH": _optional_path("BID_READINESS_TAXONOMY_PATH"),
    }
