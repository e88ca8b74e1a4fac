"""
Persist validated predictions to disk.
"""

from __future__ import annotations

import json
from pathlib import Path

from footycast.data.schema import PredictionResponse
from footycast.utils.logging_utils import get_logger
from footycast.utils.paths import PathLike, ensure_parent_dir, get_output_path

logger = get_logger(__name__)


def write_predictions(response: PredictionResponse, path: PathLike | None = None) -> Path:
    """
    Write predictions as indented camelCase JSON, replacing any existing file.

    Parameters
    ----------
    response : PredictionResponse
        Validated predictions.
    path : pathlib.Path | str | None
        Target file. If None, uses output/data.json.

    Returns
    -------
    pathlib.Path
        The path written.
    """
    out_path = ensure_parent_dir(path if path is not None else get_output_path())
    # Not atomic: the file is truncated before the new content is written.
    with out_path.open("w", encoding="utf-8") as fh:
        json.dump(response.model_dump(by_alias=True), fh, indent=2)
        fh.write("\n")

    logger.info(
        "Saved %d predictions to %s", len(response.predictions), out_path
    )
    return out_path
