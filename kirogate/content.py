"""Text and image extraction from unified message content."""

from __future__ import annotations

import logging

from kirogate.models import (
    ImageBlock,
    ImageUrlBlock,
    MessageContent,
    TextBlock,
    ToolResultBlock,
    UnifiedImage,
)

logger = logging.getLogger(__name__)


def extract_text_content(content: MessageContent | None) -> str:
    """Return the text of a message: the string itself or the joined text blocks.

    Tool result blocks count as text; image and tool-use blocks are skipped.
    """
    if content is None:
        return ""
    if isinstance(content, str):
        return content
    parts = []
    for block in content:
        if isinstance(block, TextBlock):
            parts.append(block.text)
        elif isinstance(block, ToolResultBlock):
            parts.append(block.content)
    return "".join(parts)


def parse_data_url(url: str) -> tuple[str, str] | None:
    """Split ``data:<media>;base64,<data>`` into (media type, data), or None."""
    if not url.startswith("data:"):
        return None
    header, sep, data = url.partition(",")
    if not sep:
        return None
    media_part = header.split(";", 1)[0]
    return media_part[len("data:"):], data


def extract_images_from_content(content: MessageContent | None) -> list[UnifiedImage]:
    """Collect inline images from content blocks in OpenAI or Anthropic form."""
    if content is None or isinstance(content, str):
        return []

    images = []
    for block in content:
        if isinstance(block, ImageUrlBlock):
            parsed = parse_data_url(block.url)
            if parsed is not None:
                media_type, data = parsed
                if data:
                    images.append(UnifiedImage(media_type=media_type, data=data))
            elif block.url.startswith("http"):
                logger.warning(
                    "URL-based images are not supported by Kiro API, skipping: %s...",
                    block.url[:80],
                )
        elif isinstance(block, ImageBlock):
            source = block.source
            if source.source_type == "base64":
                if source.data:
                    images.append(
                        UnifiedImage(
                            media_type=source.media_type or "image/jpeg",
                            data=source.data,
                        )
                    )
            elif source.source_type == "url" and source.url is not None:
                logger.warning(
                    "URL-based images are not supported by Kiro API, skipping: %s...",
                    source.url[:80],
                )

    if images:
        logger.debug("Extracted %d image(s) from content", len(images))
    return images


def convert_images_to_kiro_format(images: list[UnifiedImage] | None) -> list[dict]:
    """Convert unified images to Kiro's ``{"format", "source": {"bytes"}}`` form."""
    if images is None:
        return []

    kiro_images = []
    for image in images:
        data = image.data
        media_type = image.media_type

        if data.startswith("data:"):
            parsed = parse_data_url(data)
            if parsed is not None:
                media_type, data = parsed
                logger.debug("Stripped data URL prefix, extracted media_type: %s", media_type)

        if not data:
            logger.warning("Skipping image with empty data")
            continue

        kiro_images.append(
            {
                "format": media_type.rsplit("/", 1)[-1],
                "source": {"bytes": data},
            }
        )

    if kiro_images:
        logger.debug("Converted %d image(s) to Kiro format", len(kiro_images))
    return kiro_images