from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

from vinrecon.config import ROOF_LOW_BELOW_ENV_VAR
from vinrecon.ui import cli

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path


def test_reconcile_prints_json(
    data_file: Callable[[str], Path], capsys: pytest.CaptureFixture[str]
) -> None:
    cli.main(
        [
            "reconcile",
            "--vin",
            " 1ftbw9ck5pka12345 ",
            "--primary",
            str(data_file("nhtsa/decode_e_transit.json")),
            "--secondary",
            str(data_file("epa/vehicle_e_transit.json")),
        ]
    )

    output = json.loads(capsys.readouterr().out)
    assert output["identity"]["model_name"] == "E-Transit"
    assert output["configuration"]["payload_capacity"] == 3381
    assert output["configuration"]["height_type"] == "High Roof"
    assert output["metadata"]["vehicle_identifier"] == "1FTBW9CK5PKA12345"
    assert output["metadata"]["data_source"] == "vin_decode_both"
    assert output["metadata"]["confidence"] == "high"


def test_reconcile_accepts_flat_row(
    tmp_path: Path, minimal_primary: dict[str, object], capsys: pytest.CaptureFixture[str]
) -> None:
    primary = tmp_path / "row.json"
    primary.write_text(json.dumps(minimal_primary), encoding="utf-8")

    cli.main(["reconcile", "--vin", "1FTBW9CK5PKA12345", "--primary", str(primary), "--pretty"])

    out = capsys.readouterr().out
    assert out.startswith("{\n")
    assert json.loads(out)["metadata"]["confidence"] == "medium"


def test_invalid_vin_exits_with_validation_status(data_file: Callable[[str], Path]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(
            [
                "reconcile",
                "--vin",
                "1FTBW9CK5PKO12345",
                "--primary",
                str(data_file("nhtsa/decode_e_transit.json")),
            ]
        )

    assert excinfo.value.code == 2


def test_missing_file_exits_with_validation_status(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(
            ["reconcile", "--vin", "1FTBW9CK5PKA12345", "--primary", str(tmp_path / "none.json")]
        )

    assert excinfo.value.code == 2


def test_invalid_json_exits_with_validation_status(tmp_path: Path) -> None:
    primary = tmp_path / "broken.json"
    primary.write_text("{not json", encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["reconcile", "--vin", "1FTBW9CK5PKA12345", "--primary", str(primary)])

    assert excinfo.value.code == 2


def test_bad_configuration_exits_with_validation_status(
    monkeypatch: pytest.MonkeyPatch, data_file: Callable[[str], Path]
) -> None:
    monkeypatch.setenv(ROOF_LOW_BELOW_ENV_VAR, "tall")

    with pytest.raises(SystemExit) as excinfo:
        cli.main(
            [
                "reconcile",
                "--vin",
                "1FTBW9CK5PKA12345",
                "--primary",
                str(data_file("nhtsa/decode_e_transit.json")),
            ]
        )

    assert excinfo.value.code == 2


def test_unexpected_failure_exits_with_fatal_status(
    monkeypatch: pytest.MonkeyPatch, data_file: Callable[[str], Path]
) -> None:
    def boom(*_: object, **__: object) -> None:
        raise RuntimeError("boom")

    monkeypatch.setattr(cli, "reconcile_vehicle", boom)

    with pytest.raises(SystemExit) as excinfo:
        cli.main(
            [
                "reconcile",
                "--vin",
                "1FTBW9CK5PKA12345",
                "--primary",
                str(data_file("nhtsa/decode_e_transit.json")),
            ]
        )

    assert excinfo.value.code == 1
