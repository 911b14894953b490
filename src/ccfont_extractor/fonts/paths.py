"""
Default Path Provider
=====================

Resolves the default Creative Cloud and output locations for the current
operating system. Every input can be injected so callers (and tests) never
depend on the real user folders.
"""

import logging
import os
import platform
from collections.abc import Mapping
from pathlib import Path

logger = logging.getLogger(__name__)


class DefaultPathProvider:
    """
    Provider for the OS-specific default directories.

    Creative Cloud keeps its synced fonts under ``<app data>/Adobe/CoreSync``;
    extracted fonts go to ``<documents>/Adobe/Fonts`` unless told otherwise.
    """

    def __init__(
        self,
        system: str | None = None,
        environ: Mapping[str, str] | None = None,
        home: Path | None = None,
    ):
        """
        Initialize path provider.

        Args:
            system: Platform name as reported by ``platform.system()``
            environ: Environment variables to consult
            home: User home directory
        """
        self.system = (system or platform.system()).lower()
        self.environ = os.environ if environ is None else environ
        self.home = home or Path.home()

    def application_data_dir(self) -> Path:
        """Get the roaming application data directory."""
        if self.system == "windows":
            appdata = self.environ.get("APPDATA")
            if appdata:
                return Path(appdata)
            return self.home / "AppData" / "Roaming"

        if self.system == "darwin":
            return self.home / "Library" / "Application Support"

        xdg_data_home = self.environ.get("XDG_DATA_HOME")
        if xdg_data_home:
            return Path(xdg_data_home)
        return self.home / ".local" / "share"

    def documents_dir(self) -> Path:
        """Get the user's documents directory."""
        if self.system == "windows":
            profile = self.environ.get("USERPROFILE")
            base = Path(profile) if profile else self.home
            return base / "Documents"

        if self.system != "darwin":
            xdg_documents = self.environ.get("XDG_DOCUMENTS_DIR")
            if xdg_documents:
                return Path(xdg_documents)

        return self.home / "Documents"

    def adobe_dir(self) -> Path:
        """Get the default Adobe CoreSync directory."""
        return self.application_data_dir() / "Adobe" / "CoreSync"

    def output_dir(self) -> Path:
        """Get the default output directory for extracted fonts."""
        return self.documents_dir() / "Adobe" / "Fonts"
