from __future__ import annotations

"""
Password Store Client.

Wraps the 'pass' command line tool as the listing and entry provider.
"""

import logging
from typing import Dict, List, Optional, Sequence

from fuzzel_pass.infra.process import run_command

logger = logging.getLogger(__name__)

DEFAULT_PASS_COMMAND: List[str] = ["pass"]


class PassStore:
    """
    Listing and entry provider backed by 'pass'.

    Attributes:
        command: Base command used to invoke the store.
        store_dir: Optional PASSWORD_STORE_DIR override.
    """

    def __init__(self, command: Optional[Sequence[str]] = None, store_dir: str = "") -> None:
        self.command: List[str] = list(command or DEFAULT_PASS_COMMAND)
        self.store_dir = store_dir

    def _env(self) -> Optional[Dict[str, str]]:
        if self.store_dir:
            return {"PASSWORD_STORE_DIR": self.store_dir}
        return None

    def list_text(self) -> str:
        """Return the raw tree listing printed by 'pass list'."""
        out = run_command(self.command + ["list"], env_overrides=self._env())
        return out.stdout

    def show(self, password_id: str) -> str:
        """Return the decrypted body of one entry ('pass show <path>')."""
        logger.debug(f"Reading entry '{password_id}'.")
        out = run_command(self.command + ["show", password_id], env_overrides=self._env())
        return out.stdout
