"""
Icon Resolver - Strict image/icon selection for a menu entry.

Policy, in order:
  - image and icon both set: AmbiguousIconSource
  - neither set: NoIconSpecified
  - only image: load the file (ImageLoadFailed if it can't be read)
  - only icon: theme lookup, which always yields something

The resolver never substitutes anything on failure. Callers pick the
fallback that makes sense for them (a folder glyph, the application's own
icon, a blank placeholder).
"""

import os
from typing import Optional

from loguru import logger

from tilemenu.errors import AmbiguousIconSource, ImageLoadFailed, NoIconSpecified
from tilemenu.models import ImageOrigin, ResolvedImage
from tilemenu.services.platform import IconTheme


class IconResolver:
    """Resolve entry images at a fixed pixel size."""

    def __init__(self, theme: IconTheme, size: int):
        self.theme = theme
        self.size = size

    def resolve(self, image: Optional[str], icon: Optional[str]) -> ResolvedImage:
        """
        Produce the image for an explicit image path or icon name.

        Args:
            image: Path to an image file, or None
            icon: Icon theme name, or None

        Returns:
            ResolvedImage with origin FILE or THEME

        Raises:
            AmbiguousIconSource, NoIconSpecified, ImageLoadFailed
        """
        if image is not None and icon is not None:
            raise AmbiguousIconSource(image, icon)
        if image is None and icon is None:
            raise NoIconSpecified()

        if image is not None:
            path = os.path.expanduser(image)
            try:
                paintable = self.theme.load_image(path)
            except OSError as e:
                raise ImageLoadFailed(path) from e
            logger.debug(f"Loaded image {path}")
            return ResolvedImage(paintable, ImageOrigin.FILE)

        return self.themed(icon, ImageOrigin.THEME)

    def themed(self, name: str, origin: ImageOrigin) -> ResolvedImage:
        """Theme lookup by name, tagged with the given origin."""
        return ResolvedImage(self.theme.lookup_icon(name, self.size), origin)

    def placeholder(self) -> ResolvedImage:
        """1x1 blank image used when nothing else could be found."""
        return ResolvedImage(self.theme.empty_image(1, 1), ImageOrigin.PLACEHOLDER)
