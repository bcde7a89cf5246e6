from enum import Enum

VERSION = "0.1.0"

# --- Log and Debug ---
# Short aliases for module names to keep CLI/env concise
LOG_ALIAS_MAP = {
    "client": "snapbuilder.client",
    "conf": "snapbuilder.config",
    "ui": "snapbuilder.ui",
    "steps": "snapbuilder.steps",
    "pre": "snapbuilder.steps.pre_validate",
    "prevalidate": "snapbuilder.steps.pre_validate",
}

# Top-level modules within snapbuilder for auto-prefixing
KNOWN_TOP_MODULES = {
    "client",
    "config",
    "datacls",
    "steps",
    "ui",
    "utils",
}

LOG_LEVELS_ENV = "SNAPB_LOG_LEVELS"

# --- Provider API ---
DEFAULT_ENDPOINT = "https://api.hetzner.cloud/v1"
DEFAULT_TIMEOUT = 30.0
# Largest page the image API hands out
MAX_PAGE_SIZE = 50
TOKEN_ENV = "HCLOUD_TOKEN"
USER_AGENT = f"snapbuilder/{VERSION}"

IMAGES_PATH = "/images"


class ImageType(str, Enum):
    """Image kinds reported by the provider."""
    SYSTEM = "system"
    SNAPSHOT = "snapshot"
    BACKUP = "backup"
    APP = "app"
    TEMPORARY = "temporary"


class StepAction(str, Enum):
    """Outcome of a single pipeline step."""
    CONTINUE = "continue"
    HALT = "halt"
