"""Site photo editing — not supported by text-only models."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


async def edit_site_image(image_b64: str, prompt: str) -> str | None:
    """Always returns ``None`` without calling the model."""
    logger.warning("Image editing is not supported by the current model.")
    return None
