"""
Helper functions for file and directory paths used in FootyCast.
"""

from pathlib import Path
from typing import Union

from footycast.config import OUTPUT_DIR, OUTPUT_FILENAME

PathLike = Union[str, Path]


def get_output_path(filename: str | None = None) -> Path:
    """
    Return the path of an output artifact.

    Parameters
    ----------
    filename : str | None
        Specific filename, or None for the default predictions file.

    Returns
    -------
    Path
        Path inside the output directory (relative to the working directory).
    """
    if filename is None:
        filename = OUTPUT_FILENAME
    return OUTPUT_DIR / filename


def ensure_parent_dir(path: PathLike) -> Path:
    """Create the parent directory of `path` if needed and return it as Path."""
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    return out
