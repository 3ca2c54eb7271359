"""
Claude Code plugin installer.

Copies plugin directories shipped in claude_plugins/plugins/ into
~/.claude/plugins/, where the Claude Code host picks them up.

Provides:
  - install_plugin(): copy one plugin into place, replacing any older copy
  - uninstall_plugin(): remove an installed plugin
  - install_all(): install every plugin in AVAILABLE_PLUGINS
  - list_plugins(): print installed / not installed for each known plugin

The only persisted state is the presence of ~/.claude/plugins/<name>/.
There is no manifest: an installed plugin is a plain recursive copy.

Called by: claude_plugins.cli.main()
"""
import logging
import shutil
from dataclasses import dataclass
from pathlib import Path, PureWindowsPath

from rich.markup import escape

from claude_plugins import console

# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------

# Plugin sources live next to this file (package data)
PLUGINS_DIR = Path(__file__).parent / "plugins"

# Fixed location read by the Claude Code host. No environment override.
TARGET_DIR = Path.home() / ".claude" / "plugins"

AVAILABLE_PLUGINS: tuple[str, ...] = (
    "twophone",
    "ddd",
    "health",
)


# ---------------------------------------------------------------------------
# Errors and results
# ---------------------------------------------------------------------------

class InstallerError(Exception):
    """Base class for installer failures reported to the user."""


class PluginNotFoundError(InstallerError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Plugin '{name}' not found")
        self.name = name


@dataclass
class InstallResult:
    name: str
    path: Path | None = None
    updated: bool = False
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class PluginStatus:
    name: str
    installed: bool


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _is_safe_name(name: str) -> bool:
    """
    Return True if `name` can only ever address a direct child directory.

    Rejects empty names, '.', '..', anything carrying a path separator and
    Windows drive prefixes ('C:x'), so uninstall can never rm -rf outside
    the target directory.
    """
    if not name or name in (".", ".."):
        return False
    if "/" in name or "\\" in name:
        return False
    # Checked with Windows rules on every platform
    if PureWindowsPath(name).drive:
        return False
    return not Path(name).is_absolute()


def _plugin_path(root: Path, name: str) -> Path | None:
    if not _is_safe_name(name):
        logging.debug("Rejected unsafe plugin name %r", name)
        return None
    return root / name


def is_installed(name: str, target_dir: Path | None = None) -> bool:
    if target_dir is None:
        target_dir = TARGET_DIR
    path = _plugin_path(target_dir, name)
    return path is not None and path.is_dir()


def plugin_statuses(target_dir: Path | None = None) -> list[PluginStatus]:
    """Return the install status of every known plugin, in catalog order."""
    return [
        PluginStatus(name=name, installed=is_installed(name, target_dir))
        for name in AVAILABLE_PLUGINS
    ]


# ---------------------------------------------------------------------------
# Operations
# ---------------------------------------------------------------------------

def list_plugins(target_dir: Path | None = None) -> list[PluginStatus]:
    """Print each known plugin with a filled (installed) or hollow marker."""
    statuses = plugin_statuses(target_dir)
    console.say("Available plugins:")
    console.say()
    for status in statuses:
        if status.installed:
            console.console.print(f"  [ok]●[/ok] {escape(status.name)} (installed)")
        else:
            console.console.print(f"  [warning]○[/warning] {escape(status.name)}")
    return statuses


def install_plugin(
    name: str,
    plugins_dir: Path | None = None,
    target_dir: Path | None = None,
) -> InstallResult:
    """
    Copy plugins_dir/<name> to target_dir/<name>.

    An existing copy is removed first, so the result always equals a fresh
    copy of the source tree. Symlinks are copied as links, matching cp -r.

    Raises:
        PluginNotFoundError: plugins_dir/<name> is not a directory.
        OSError: the copy or the removal of the old copy failed.
    """
    if plugins_dir is None:
        plugins_dir = PLUGINS_DIR
    if target_dir is None:
        target_dir = TARGET_DIR

    src = _plugin_path(plugins_dir, name)
    if src is None or not src.is_dir():
        raise PluginNotFoundError(name)

    target_dir.mkdir(parents=True, exist_ok=True)
    dest = target_dir / name

    updated = False
    if dest.exists() or dest.is_symlink():
        console.warn(f"Plugin '{name}' already exists. Updating...")
        if dest.is_dir() and not dest.is_symlink():
            shutil.rmtree(dest)
        else:
            dest.unlink()
        logging.debug("Removed previous copy at %s", dest)
        updated = True

    logging.debug("Copying %s -> %s", src, dest)
    shutil.copytree(src, dest, symlinks=True)
    console.ok(f"✓ Installed '{name}' to {dest}")
    return InstallResult(name=name, path=dest, updated=updated)


def uninstall_plugin(name: str, target_dir: Path | None = None) -> bool:
    """
    Remove target_dir/<name>. Returns False (and says so) if it is not installed.
    """
    if target_dir is None:
        target_dir = TARGET_DIR

    path = _plugin_path(target_dir, name)
    if path is None or not path.is_dir():
        console.warn(f"Plugin '{name}' is not installed")
        return False

    if path.is_symlink():
        path.unlink()
    else:
        shutil.rmtree(path)
    logging.debug("Removed %s", path)
    console.ok(f"✓ Uninstalled '{name}'")
    return True


def install_all(
    plugins_dir: Path | None = None,
    target_dir: Path | None = None,
) -> list[InstallResult]:
    """
    Install every plugin in AVAILABLE_PLUGINS, in order.

    A plugin that fails is reported and recorded in its InstallResult;
    the remaining plugins are still installed.
    """
    console.say("Installing all plugins...")
    console.say()

    results: list[InstallResult] = []
    for name in AVAILABLE_PLUGINS:
        try:
            results.append(install_plugin(name, plugins_dir, target_dir))
        except (InstallerError, OSError) as exc:
            console.error(f"Error: {exc}")
            logging.debug("Install of %s failed", name, exc_info=True)
            results.append(InstallResult(name=name, error=str(exc)))

    console.say()
    failed = [r.name for r in results if not r.ok]
    if failed:
        console.error(f"Failed to install: {', '.join(failed)}")
    else:
        console.ok("All plugins installed!")
    return results
