"""Rollup constants and genesis file locations."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Union

ROLLUP_NAMESPACE_RAW = bytes([0, 0, 115, 111, 118, 45, 116, 101, 115, 116])

# DA address of the centralized sequencer on the celestia chain.
SEQUENCER_DA_ADDRESS = "celestia1a68m2l85zn5xh0l07clk4rfvnezhywc53g8x7s"


@dataclass(frozen=True)
class GenesisPaths:
    """Locations of the genesis files for each runtime module."""

    accounts_genesis_path: Path
    bank_genesis_path: Path
    sequencer_genesis_path: Path

    @classmethod
    def from_dir(cls, directory: Union[str, "os.PathLike[str]"]) -> "GenesisPaths":
        """Build the paths from the standard file names inside a directory."""
        base = Path(directory)
        return cls(
            accounts_genesis_path=base / "accounts.json",
            bank_genesis_path=base / "bank.json",
            sequencer_genesis_path=base / "sequencer_registry.json",
        )