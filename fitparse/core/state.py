"""Runtime state container for CLI context."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any, Dict

from rich.console import Console

from fitparse.core.vocabulary import Vocabulary


@dataclass
class CLIState:
    """CLI runtime options, loaded configuration and vocabulary."""

    json_output: bool
    plain_output: bool
    verbose: bool
    quiet: bool
    config_path: Path
    config: Dict[str, Any]
    console: Console
    vocabulary: Vocabulary

    def now(self) -> datetime:
        """Current local time; the one place the CLI reads the clock."""
        return datetime.now().astimezone()
