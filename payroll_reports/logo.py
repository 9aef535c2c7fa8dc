import logging
import os
import urllib.request
from io import BytesIO
from pathlib import Path
from typing import Optional, Union

from PIL import Image

from .config import DEFAULT_LOGO_PATH, ENV_LOGO_PATH

logger = logging.getLogger(__name__)

LogoSource = Union[str, Path, None]


def resolve_logo_source(source: LogoSource = None) -> str:
    if source:
        return str(source)
    return os.getenv(ENV_LOGO_PATH, "").strip() or str(DEFAULT_LOGO_PATH)


def _read_bytes(source: str, timeout: int) -> bytes:
    if source.startswith(("http://", "https://")):
        req = urllib.request.Request(source, headers={"User-Agent": "Mozilla/5.0"})
        with urllib.request.urlopen(req, timeout=timeout) as resp:
            return resp.read()
    return Path(source).read_bytes()


def load_logo(source: LogoSource = None, timeout: int = 10) -> Optional[Image.Image]:
    """
    Fetch and decode the report logo. The report renders without a logo,
    so every failure here resolves to None instead of raising.
    """
    target = resolve_logo_source(source)
    try:
        with Image.open(BytesIO(_read_bytes(target, timeout))) as img:
            img.load()
            return img.convert("RGBA") if img.mode in ("RGBA", "LA", "P") else img.convert("RGB")
    except Exception as exc:
        logger.debug("Logo unavailable at %s: %s", target, exc)
        return None
