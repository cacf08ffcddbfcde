"""Replace images with textual placeholders."""

from __future__ import annotations

from bs4 import BeautifulSoup

IMAGE_REPLACEMENT_CLASS = "mw-mf-image-replacement"


def replace_images(soup: BeautifulSoup, missing_image_label: str) -> int:
    """Replace every ``<img>`` with a ``<span>`` holding ``[alt text]``.

    Images without a non-empty ``alt`` attribute get ``[missing_image_label]``
    instead.  The placeholder takes the image's place in the tree, so it
    takes part in section partitioning like any other node.  Text is
    escaped when the tree is serialized.

    Returns:
        The number of images replaced.
    """
    images = soup.find_all("img")
    for image in images:
        alt = image.get("alt") or missing_image_label
        placeholder = soup.new_tag("span", attrs={"class": IMAGE_REPLACEMENT_CLASS})
        placeholder.string = f"[{alt}]"
        image.replace_with(placeholder)
    return len(images)
