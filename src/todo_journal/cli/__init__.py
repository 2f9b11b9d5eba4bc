"""Command-line surface: argparse entrypoint and the command registry."""
