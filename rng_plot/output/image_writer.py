# rng_plot/output/image_writer.py
from __future__ import annotations
import io
import os
import stat
import tempfile

from ..sim.config import IMAGE, ImageConfig
from ..sim.models import Chart, RenderError


def output_name(generator: str, sample_range: int, count: int, ext: str = "png") -> str:
    return f"{generator}_{sample_range}_{count}_rng.{ext}"


def rasterize(chart: Chart, image: ImageConfig = IMAGE) -> bytes:
    """Render the chart to PNG bytes at exactly image.width x image.height."""
    fig = chart.figure
    fig.set_size_inches(image.width / image.dpi, image.height / image.dpi)
    buf = io.BytesIO()
    try:
        # no bbox_inches="tight": that would change the pixel size
        fig.savefig(buf, format="png", dpi=image.dpi)
    except (ValueError, RuntimeError) as e:
        raise RenderError(f"rasterization failed: {e}") from e
    data = buf.getvalue()
    if not data:
        raise RenderError("rasterization produced no data")
    return data


def _default_mode(path: str) -> int:
    """Mode a plain open(path, "w") would leave: existing mode, else 0o666 minus umask."""
    try:
        return stat.S_IMODE(os.stat(path).st_mode)
    except FileNotFoundError:
        mask = os.umask(0)
        os.umask(mask)
        return 0o666 & ~mask


def _replace_into(path: str, data: bytes, mode: str) -> None:
    # write through a symlink at the target, not over it
    path = os.path.realpath(path)
    d = os.path.dirname(path)
    fd, tmp = tempfile.mkstemp(dir=d, prefix=".", suffix=".part")
    try:
        with os.fdopen(fd, mode) as f:
            f.write(data)
        os.chmod(tmp, _default_mode(path))
        os.replace(tmp, path)
    except BaseException:
        if os.path.exists(tmp):
            os.unlink(tmp)
        raise


def write_png(chart: Chart, path: str, image: ImageConfig = IMAGE) -> str:
    """
    Rasterize and write to `path`, replacing any file already there.
    The directory must exist; filesystem errors propagate as OSError.
    """
    _replace_into(path, rasterize(chart, image), "wb")
    return path


def write_svg(chart: Chart, path: str) -> str:
    _replace_into(path, chart.to_svg(), "w")
    return path
