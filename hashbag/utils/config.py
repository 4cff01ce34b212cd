import argparse
import sys
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, TypeVar, Union, cast

from omegaconf import DictConfig, ListConfig, OmegaConf

from hashbag.table.hash_table import DEFAULT_NUM_BUCKETS

R = TypeVar("R")


@dataclass
class BagConfig:
    """Config fields shared by everything that builds a `Bag`."""

    num_buckets: int = DEFAULT_NUM_BUCKETS  # Fixed for the lifetime of the bag


def get_config(
    argv: Optional[List[str]],
    config_cls: Callable[..., R],
    defaults: Optional[Dict[str, Any]] = None,
) -> R:
    """
    Build a read-only `OmegaConf` config from defaults, yaml files and command line overrides.

    Args:
        argv: Command line arguments to parse; if `None`, they are taken from `sys.argv`. Besides
            `key=value` overrides, `--config path.yml` may be given (possibly multiple times, with
            later files overriding earlier ones).
        config_cls: Dataclass (the class itself, not an instance) specifying the config structure.
        defaults: Optional values applied before any yaml files or command line overrides.

    Returns:
        Config object which will pass as an instance of `config_cls`.
    """

    if argv is None:
        argv = sys.argv[1:]

    parser = argparse.ArgumentParser(allow_abbrev=False)  # prevent prefix matching issues
    parser.add_argument(
        "--config",
        type=str,
        action="append",
        default=list(),
        help="Path to a yaml config file. "
        "Argument can be repeated multiple times, with later configs overwriting previous ones.",
    )
    args, config_changes = parser.parse_known_args(argv)

    conf_yamls: List[Union[DictConfig, ListConfig]] = []
    if defaults:
        conf_yamls = [OmegaConf.create(defaults)]

    conf_yamls += [OmegaConf.load(c) for c in args.config]
    conf_cli = OmegaConf.from_cli(config_changes)

    # Command line options take priority over yaml files, which take priority over defaults
    schema = OmegaConf.structured(config_cls)
    config = OmegaConf.merge(schema, *conf_yamls, conf_cli)
    OmegaConf.set_readonly(config, True)
    return cast(R, config)


def get_error_message_for_missing_value(name: str) -> str:
    return f"{name} has to be set, e.g. by passing `{name}=...` on the command line"
