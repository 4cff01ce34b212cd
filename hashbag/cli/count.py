"""Script for counting the items listed in a text file using a `Bag`.

Example invocation:
    python ./hashbag/cli/count.py \
        items_file=[ITEMS_FILE_PATH] \
        num_buckets=5 \
        queries="[Honda Pilot,Yugo]" \
        results_dir=[RESULTS_DIR]

Items are read one per line (blank lines are skipped). Optionally, single occurrences of the values
listed in `delete_file` are removed afterwards, followed by all occurrences of the values listed in
`delete_all_file`.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from pprint import pformat
from typing import Any, Dict, List, Optional

import yaml
from omegaconf import MISSING, DictConfig, OmegaConf
from tqdm import tqdm

from hashbag.interface.bag import Bag
from hashbag.table.analysis import occupancy_stats
from hashbag.utils.config import BagConfig, get_config, get_error_message_for_missing_value
from hashbag.utils.misc import dictify

logger = logging.getLogger(__name__)


@dataclass
class CountConfig(BagConfig):
    """Config for counting the items from a file."""

    items_file: str = MISSING  # File with the items to insert, one per line
    delete_file: Optional[str] = None  # Items to remove a single occurrence of
    delete_all_file: Optional[str] = None  # Items to remove all occurrences of
    queries: List[str] = field(default_factory=list)  # Values to report counts for

    results_dir: str = "."  # Directory to save the results in
    save_results: bool = True  # Whether to write `summary.json` and `config.yaml`


def read_items(path: str) -> List[str]:
    with open(path, "rt") as f_items:
        return [line.strip() for line in f_items if line.strip()]


def _apply_deletions(bag: Bag, path: str, delete_all: bool) -> int:
    """Delete the values listed in `path` from `bag`, returning how many of them were absent."""
    num_absent = 0
    for item in tqdm(read_items(path), desc="delete_all" if delete_all else "delete"):
        removed = bag.delete_all(item) if delete_all else bag.delete(item)
        num_absent += int(not removed)

    if num_absent > 0:
        logger.warning(f"{num_absent} values listed in {path} were not present in the bag")

    return num_absent


def run_from_config(config: CountConfig) -> Dict[str, Any]:
    if not isinstance(config, DictConfig):
        config = OmegaConf.structured(config)

    logger.info(f"Running count with the following config:\n{OmegaConf.to_yaml(config)}")

    if OmegaConf.is_missing(config, "items_file"):
        raise ValueError(get_error_message_for_missing_value("items_file"))

    items = read_items(config.items_file)
    if not items:
        logger.warning(f"No items found in {config.items_file}; the bag will be empty")

    bag: Bag = Bag(num_buckets=config.num_buckets)
    for item in tqdm(items, desc="insert"):
        bag.insert(item)
    logger.info(f"Inserted {len(items)} items into a bag with {bag.num_buckets} buckets")

    if config.delete_file is not None:
        _apply_deletions(bag, config.delete_file, delete_all=False)

    if config.delete_all_file is not None:
        _apply_deletions(bag, config.delete_all_file, delete_all=True)

    summary = dictify(
        {
            "num_buckets": bag.num_buckets,
            "length": bag.length(),
            "num_distinct": len(bag.distinct()),
            "counts": {query: bag.count(query) for query in config.queries},
            "occupancy": occupancy_stats(bag.hash_table),
        }
    )
    logger.info(pformat(summary))

    if config.save_results:
        results_dir = Path(config.results_dir)
        results_dir.mkdir(parents=True, exist_ok=True)
        logger.info(f"Outputs will be saved under {results_dir}")

        with open(results_dir / "summary.json", "wt") as f_summary:
            f_summary.write(json.dumps(summary, indent=2))

        with open(results_dir / "config.yaml", "wt") as f_config:
            yaml.safe_dump(OmegaConf.to_container(config), f_config)

    return summary


def main(argv: Optional[List[str]] = None) -> Dict[str, Any]:
    config: CountConfig = get_config(argv=argv, config_cls=CountConfig)
    return run_from_config(config)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    main()
