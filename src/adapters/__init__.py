"""Entry-point adapters: interface and command-line tools."""
