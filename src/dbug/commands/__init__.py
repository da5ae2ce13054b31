"""dbug CLI subcommands."""
