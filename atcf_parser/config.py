import os
from dotenv import load_dotenv

load_dotenv()


def _optional_int(value):
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


class Config:
    # Logging
    LOG_LEVEL = os.getenv("ATCF_LOG_LEVEL", "WARNING").upper()
    LOG_FORMAT = os.getenv("ATCF_LOG_FORMAT", "text").lower()  # text or json

    # JSON output
    JSON_INDENT = _optional_int(os.getenv("ATCF_JSON_INDENT"))

    # Input decoding for deck files read from disk
    INPUT_ENCODING = os.getenv("ATCF_INPUT_ENCODING", "utf-8")
