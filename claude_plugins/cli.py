"""
claude-plugins CLI entry point.

Registered as a console_scripts entry point in pyproject.toml:
    claude-plugins = "claude_plugins.cli:main"

Usage:
    claude-plugins <plugin-name>      Install a specific plugin
    claude-plugins all                Install all plugins
    claude-plugins list               List available plugins
    claude-plugins uninstall <name>   Uninstall a plugin
    claude-plugins                    Show help (also -h, --help, help)

Exit codes: 0 on success, 1 when a plugin is missing, the uninstall
target is not given, or a copy/remove fails.
"""
import argparse
import logging
import sys

from claude_plugins import console, installer

_HELP_WORDS = ("", "-h", "--help", "help")


def _setup_logging(verbose: bool) -> None:
    """Diagnostics go to stderr; stdout carries the user-facing report."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(message)s",
        stream=sys.stderr,
    )


def _build_parser() -> argparse.ArgumentParser:
    # Only -v is an option. Every other word, -h and unknown options
    # included, is left for main() to dispatch on by position.
    parser = argparse.ArgumentParser(
        prog="claude-plugins",
        description="Claude Code Plugins Installer",
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log each filesystem step to stderr",
    )
    return parser


def show_help() -> None:
    console.say("Claude Code Plugins Installer")
    console.say()
    console.say("Usage:")
    console.say("  claude-plugins <plugin-name>    Install a specific plugin")
    console.say("  claude-plugins all              Install all plugins")
    console.say("  claude-plugins list             List available plugins")
    console.say("  claude-plugins uninstall <name> Uninstall a plugin")
    console.say()
    console.say("Available plugins:")
    for plugin in installer.AVAILABLE_PLUGINS:
        console.say(f"  - {plugin}")


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the `claude-plugins` CLI command."""
    args, words = _build_parser().parse_known_args(argv)
    _setup_logging(args.verbose)

    # Words past <command> <name> are ignored.
    command = words[0] if words else ""
    name = words[1] if len(words) > 1 else ""
    if command in _HELP_WORDS:
        show_help()
        return

    if command == "list":
        installer.list_plugins()
        return

    try:
        if command == "all":
            results = installer.install_all()
            if not all(r.ok for r in results):
                sys.exit(1)
        elif command == "uninstall":
            if not name:
                console.error("Error: Please specify a plugin name")
                sys.exit(1)
            installer.uninstall_plugin(name)
        else:
            installer.install_plugin(command)
    except (installer.InstallerError, OSError) as exc:
        logging.debug("Command %r failed", command, exc_info=True)
        console.error(f"Error: {exc}")
        sys.exit(1)


if __name__ == "__main__":
    main()
