# itemhelper/settings.py
import os
from dotenv import load_dotenv

load_dotenv()

# Content type used when an item carries no type alias (an article)
DEFAULT_TYPE_ALIAS = os.getenv("ITEMHELPER_DEFAULT_TYPE_ALIAS", "com_content.article")

def _int_env(name: str, default: int) -> int:
    """Integer from the environment; a missing or non-numeric value gives `default`."""
    try:
        return int(os.getenv(name, default))
    except ValueError:
        return default

# Number of characters truncate() aims for
DEFAULT_TRUNCATE_LIMIT = _int_env("ITEMHELPER_TRUNCATE_LIMIT", 160)

CHECKBOXES_TYPE = "checkboxes"
ELLIPSIS = "..."
