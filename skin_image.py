import io
import logging
from typing import NamedTuple, Optional

from PIL import Image, ImageCms, ImageOps

from skin_geometry import Geometry, normalize

log = logging.getLogger(__name__)

DEFAULT_MODE = "fit"
MODES = ("fit", "crop")

# modes littlecms can map straight to sRGB
ICC_MODES = {"RGB": "RGB", "RGBA": "RGBA", "CMYK": "RGB"}


class ConversionResult(NamedTuple):
    ok: bool
    source: Optional[Geometry] = None
    target: Optional[Geometry] = None
    error: Optional[str] = None


def load_skin(path):
    with Image.open(path) as img:
        return img.copy()


def conform(img):
    """
    Bring an image to 8 bit sRGB with an alpha channel.

    An embedded ICC profile is applied first and then dropped, so the
    written PNG carries plain sRGB data.
    """
    icc = img.info.get("icc_profile")
    if icc and img.mode in ICC_MODES:
        src = ImageCms.ImageCmsProfile(io.BytesIO(icc))
        srgb = ImageCms.createProfile("sRGB")
        img = ImageCms.profileToProfile(img, src, srgb, outputMode=ICC_MODES[img.mode])

    if img.mode != "RGBA":
        img = img.convert("RGBA")
    img.info.pop("icc_profile", None)
    return img


def fit_to(img, target, mode=DEFAULT_MODE):
    if mode not in MODES:
        raise ValueError(f"unknown resize mode {mode!r}, expected one of {MODES}")

    size = (target.width, target.height)
    if img.size == size:
        return img

    if mode == "crop":
        # pixels outside the source come out fully transparent
        return img.crop((target.x, target.y, target.x + target.width, target.y + target.height))

    # cover the target keeping the aspect ratio, anchored top-left
    return ImageOps.fit(img, size, method=Image.LANCZOS, centering=(0.0, 0.0))


def save_skin(img, path):
    img.save(path, format="PNG")


def convert_skin(input_path, output_path, mode=DEFAULT_MODE):
    source = None
    target = None
    try:
        log.info("Reading %s", input_path)
        img = conform(load_skin(input_path))

        source = Geometry(*img.size)
        target = normalize(source)
        log.info("Resizing %s -> %s (%s)", source, target, mode)
        img = fit_to(img, target, mode)

        log.info("Writing %s", output_path)
        save_skin(img, output_path)
    except (OSError, ValueError, Image.DecompressionBombError, ImageCms.PyCMSError) as e:
        log.error("Failed to convert %s: %s", input_path, e)
        return ConversionResult(False, source, target, str(e))

    return ConversionResult(True, source, target)
