import json
import sys
from pathlib import Path
from typing import List

import pytest
import yaml
from omegaconf import OmegaConf

from hashbag.cli.count import CountConfig, main, run_from_config


def write_lines(path: Path, lines: List[str]) -> str:
    with open(path, "wt") as f:
        f.write("\n".join(lines) + "\n")
    return str(path)


@pytest.fixture
def items_file(tmpdir: Path) -> str:
    return write_lines(tmpdir / "items.txt", ["Honda Pilot", "Honda Fit", "", "Honda Pilot"])


def test_count(tmpdir: Path, items_file: str) -> None:
    config_path = tmpdir / "config.yml"
    with open(config_path, "wt") as f_config:
        yaml.safe_dump({"queries": ["Honda Pilot", "Honda Fit", "Yugo"]}, f_config)

    results_dir = tmpdir / "results"
    summary = main(
        argv=[
            "--config",
            str(config_path),
            f"items_file={items_file}",
            "num_buckets=5",
            f"results_dir={results_dir}",
        ]
    )

    assert summary["length"] == 3
    assert summary["num_distinct"] == 2
    assert summary["counts"] == {"Honda Pilot": 2, "Honda Fit": 1, "Yugo": 0}
    assert summary["occupancy"]["num_buckets"] == 5
    assert summary["occupancy"]["num_entries"] == 2

    with open(results_dir / "summary.json", "rt") as f_summary:
        assert json.load(f_summary) == summary

    with open(results_dir / "config.yaml", "rt") as f_config:
        saved_config = yaml.safe_load(f_config)
    assert saved_config["num_buckets"] == 5
    assert saved_config["items_file"] == items_file


def test_count_with_deletions(tmpdir: Path, items_file: str) -> None:
    config = OmegaConf.structured(
        CountConfig(
            items_file=items_file,
            delete_file=write_lines(tmpdir / "delete.txt", ["Honda Pilot", "Yugo"]),
            delete_all_file=write_lines(tmpdir / "delete_all.txt", ["Honda Fit"]),
            queries=["Honda Pilot", "Honda Fit"],
            save_results=False,
        )
    )
    summary = run_from_config(config)  # type: ignore[arg-type]

    assert summary["length"] == 1
    assert summary["counts"] == {"Honda Pilot": 1, "Honda Fit": 0}
    assert not (Path(tmpdir) / "summary.json").exists()


def test_missing_items_file() -> None:
    with pytest.raises(ValueError):
        main(argv=["save_results=False"])


def test_cli_entry_point(tmpdir: Path, items_file: str, monkeypatch: pytest.MonkeyPatch) -> None:
    from hashbag.cli.main import main as cli_main

    monkeypatch.setattr(
        sys, "argv", ["hashbag", "count", f"items_file={items_file}", f"results_dir={tmpdir}"]
    )
    cli_main()

    with open(Path(tmpdir) / "summary.json", "rt") as f_summary:
        assert json.load(f_summary)["length"] == 3

    monkeypatch.setattr(sys, "argv", ["hashbag", "unknown"])
    with pytest.raises(ValueError):
        cli_main()
