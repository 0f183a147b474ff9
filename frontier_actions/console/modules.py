from importlib.metadata import entry_points
from pathlib import Path
from typing import Protocol

from frontier_actions.core.config import Settings
from frontier_actions.util.logger import logger


class ModuleLister(Protocol):
    def modules(self) -> list[str]: ...


class EntryPointModuleLister:
    """Modules advertised by installed packages under an entry point group"""

    def __init__(self, group: str):
        self.group = group

    def modules(self) -> list[str]:
        return sorted({ep.name for ep in entry_points(group=self.group)})


class DirectoryModuleLister:
    """Every sub-directory of the modules directory counts as a module"""

    def __init__(self, directory: str | Path):
        self.directory = Path(directory)

    def modules(self) -> list[str]:
        if not self.directory.is_dir():
            return []
        return sorted(p.name for p in self.directory.iterdir() if p.is_dir())


class FallbackModuleLister:
    def __init__(self, primary: ModuleLister, fallback: ModuleLister):
        self.primary = primary
        self.fallback = fallback

    def modules(self) -> list[str]:
        try:
            found = self.primary.modules()
        except Exception as e:
            logger.warning("Module discovery failed, scanning directory instead: %s", e)
            return self.fallback.modules()
        return found or self.fallback.modules()


def default_module_lister(settings: Settings) -> ModuleLister | None:
    """None means module support is switched off"""
    if not settings.modules_enabled:
        return None
    return FallbackModuleLister(
        EntryPointModuleLister(settings.modules_entry_point_group),
        DirectoryModuleLister(Path(settings.base_path) / settings.modules_directory),
    )
