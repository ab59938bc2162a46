"""Backup the key-value data file (records + settings) into backups/."""

from __future__ import annotations

import importlib
import shutil
from datetime import datetime
from pathlib import Path

from dotenv import load_dotenv

from config import get_settings_module
from salary_tracker.storage.key_value_store import CORRUPT_SUFFIX, JsonFileKeyValueStore


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    store = JsonFileKeyValueStore(settings.DATA_FILE)
    data_file = store.path
    if not data_file.exists():
        raise SystemExit(f"Nothing to back up: {data_file} does not exist")

    out_dir = Path(__file__).resolve().parents[1] / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_file = out_dir / f"{data_file.stem}_{ts}{data_file.suffix}"
    shutil.copy2(data_file, out_file)
    print(f"OK: Backup created: {out_file}")

    if store.corrupt_path.exists():
        corrupt_out = out_file.with_name(out_file.name + CORRUPT_SUFFIX)
        shutil.copy2(store.corrupt_path, corrupt_out)
        print(f"OK: Unreadable copy saved: {corrupt_out}")


if __name__ == "__main__":
    main()
