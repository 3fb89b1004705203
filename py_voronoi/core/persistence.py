"""JSON persistence of the site list.

Format: a flat JSON array of ``[x, y]`` pairs, e.g.
``[[120.5,340.0],[88.0,12.25]]``. Colors are not stored.
"""

import json
from pathlib import Path
from typing import List, Tuple, Union

import numpy as np
import structlog
from pydantic import FiniteFloat, TypeAdapter, ValidationError

from .errors import MalformedInputError, PersistedFileError

logger = structlog.get_logger()

_SITES_ADAPTER = TypeAdapter(List[Tuple[FiniteFloat, FiniteFloat]])


def save(sites) -> str:
    """Serialize sites, in order, as compact JSON."""
    pairs = [[float(x), float(y)] for x, y in np.asarray(sites, dtype=float).reshape(-1, 2)]
    return json.dumps(pairs, separators=(",", ":"))


def load(text: Union[str, bytes]) -> np.ndarray:
    """
    Parse the output of ``save`` back into an (N, 2) array.

    Raises:
        MalformedInputError: if ``text`` is not an array of 2-element
            arrays of finite numbers
    """
    try:
        pairs = _SITES_ADAPTER.validate_json(text, strict=True)
    except ValidationError as e:
        raise MalformedInputError(
            f"Expected a JSON array of [x, y] number pairs: {e.error_count()} error(s)"
        ) from e
    return np.array(pairs, dtype=float).reshape(-1, 2)


def load_file(path: Union[str, Path]) -> np.ndarray:
    """Read and parse a sites file; any failure is a ``PersistedFileError``."""
    path = Path(path)
    try:
        data = path.read_bytes()
    except OSError as e:
        raise PersistedFileError(f"Can't read sites file {path}: {e}") from e
    try:
        sites = load(data)
    except MalformedInputError as e:
        raise PersistedFileError(f"Can't convert {path} to sites: {e}") from e
    logger.info("Loaded sites", path=str(path), count=len(sites))
    return sites
