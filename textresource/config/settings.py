"""Application configuration and settings"""

import codecs
import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


class Settings:
    """Application settings"""

    # Text encoding for every resource
    ENCODING: str = os.getenv("TEXTRESOURCE_ENCODING", "utf-8")

    # Resource read when the caller names none
    DEFAULT_RESOURCE: str = os.getenv("TEXTRESOURCE_DEFAULT_RESOURCE", "hello.txt")

    # Handler policy: create a missing resource instead of reporting it
    CREATE_MISSING: bool = os.getenv("TEXTRESOURCE_CREATE_MISSING", "true").lower() == "true"

    @classmethod
    def validate(cls) -> bool:
        """Validate that settings are usable"""
        try:
            codecs.lookup(cls.ENCODING)
        except LookupError:
            raise ValueError(
                f"Unknown encoding '{cls.ENCODING}'. Please fix TEXTRESOURCE_ENCODING in .env file"
            )
        if not cls.DEFAULT_RESOURCE:
            raise ValueError("TEXTRESOURCE_DEFAULT_RESOURCE must not be empty. Please set it in .env file")
        return True
