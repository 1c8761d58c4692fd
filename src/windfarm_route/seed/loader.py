"""Loading and saving turbine layout seed files."""

import json
import logging
from pathlib import Path
from typing import List, Sequence, Union

from ..waypoints import MalformedSeedError, Position, to_positions
from .schema import validate_seed

logger = logging.getLogger(__name__)


def parse_seed(data) -> List[Position]:
    """Extract positions from parsed seed records.

    Args:
        data: Parsed JSON, an array of objects each with a ``position`` array

    Returns:
        Positions in record order

    Raises:
        MalformedSeedError: If any record is invalid; nothing is returned
            for the valid ones
    """
    is_valid, errors = validate_seed(data)
    if not is_valid:
        for error in errors:
            logger.debug(f"Seed validation error: {error}")
        raise MalformedSeedError(
            f"Invalid seed: {len(errors)} error(s), first: {errors[0]}",
            errors=errors,
        )

    return to_positions(record["position"] for record in data)


def load_seed_file(path: Union[str, Path]) -> List[Position]:
    """Read a JSON seed file and return its positions.

    Raises:
        MalformedSeedError: If the file is not valid JSON or fails validation
        OSError: If the file cannot be read
    """
    path = Path(path)
    with open(path, encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise MalformedSeedError(f"Seed file {path} is not valid JSON: {e}") from e
        except UnicodeDecodeError as e:
            raise MalformedSeedError(f"Seed file {path} is not valid UTF-8: {e}") from e

    positions = parse_seed(data)
    logger.info(f"Loaded {len(positions)} turbine positions from {path}")
    return positions


def save_seed_file(path: Union[str, Path], positions: Sequence[Position]):
    """Write positions in the seed record format so they can be loaded again."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    records = [{"position": list(position)} for position in positions]
    with open(path, "w", encoding="utf-8") as f:
        json.dump(records, f, indent=2)

    logger.info(f"Saved {len(records)} turbine positions to {path}")
