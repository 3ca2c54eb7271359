from claude_plugins.cli import main

main()
