# -*- coding: utf-8 -*-

from typing import Tuple

from PIL import Image, ImageChops, ImageDraw

from core.render_blend import (
    Fill,
    LinearGradientFill,
    RadialGradientFill,
    ShapeGeometry,
    SolidFill,
)
from domain.models import AnimationShape
from services.breathing_service import FrameSnapshot


class FillPainter:
    """
    Paints one FrameSnapshot with Pillow.

    Frames are drawn at `scale` of the viewport and resized up; gradients
    hide the loss of detail and it keeps 60fps affordable on large screens.
    """

    def __init__(self, scale: float = 0.5):
        self.scale = max(0.1, min(1.0, float(scale)))

    def render(self, frame: FrameSnapshot, width: int, height: int) -> Image.Image:
        w = max(1, int(width * self.scale))
        h = max(1, int(height * self.scale))

        img = Image.new("RGBA", (w, h), frame.background.to_rgba255())
        box = self._scaled_box(frame.geometry)
        bw, bh = box[2] - box[0], box[3] - box[1]

        if bw >= 1 and bh >= 1:
            shape_img = self._fill_image(frame.fill, (bw, bh))
            if frame.shape == AnimationShape.CIRCLE:
                shape_img = self._mask_ellipse(shape_img)

            layer = Image.new("RGBA", (w, h), (0, 0, 0, 0))
            layer.paste(shape_img, (box[0], box[1]))
            img = Image.alpha_composite(img, layer)

        img = img.convert("RGB")
        if (w, h) != (width, height):
            img = img.resize((max(1, width), max(1, height)), Image.Resampling.BILINEAR)
        return img

    # ---------- internals ----------
    def _scaled_box(self, g: ShapeGeometry) -> Tuple[int, int, int, int]:
        s = self.scale
        return (
            int(round(g.x0 * s)),
            int(round(g.y0 * s)),
            int(round(g.x1 * s)),
            int(round(g.y1 * s)),
        )

    def _fill_image(self, fill: Fill, size: Tuple[int, int]) -> Image.Image:
        if isinstance(fill, SolidFill):
            return Image.new("RGBA", size, fill.color.to_rgba255())

        if isinstance(fill, LinearGradientFill):
            # black at top -> white at bottom
            mask = Image.linear_gradient("L").resize(size, Image.Resampling.BILINEAR)
            top = Image.new("RGBA", size, fill.top.to_rgba255())
            bottom = Image.new("RGBA", size, fill.bottom.to_rgba255())
            return Image.composite(bottom, top, mask)

        if isinstance(fill, RadialGradientFill):
            # black at center -> white at the inscribed circle
            mask = Image.radial_gradient("L").resize(size, Image.Resampling.BILINEAR)
            inner = Image.new("RGBA", size, fill.inner.to_rgba255())
            outer = Image.new("RGBA", size, fill.outer.to_rgba255())
            return Image.composite(outer, inner, mask)

        raise TypeError(f"Unsupported fill: {fill!r}")

    def _mask_ellipse(self, img: Image.Image) -> Image.Image:
        mask = Image.new("L", img.size, 0)
        ImageDraw.Draw(mask).ellipse(
            [0, 0, img.size[0] - 1, img.size[1] - 1], fill=255
        )
        r, g, b, a = img.split()
        return Image.merge("RGBA", (r, g, b, ImageChops.multiply(a, mask)))
