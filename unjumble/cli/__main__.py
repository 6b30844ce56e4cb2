"""Module entry point for `python -m unjumble.cli`."""

if __name__ == "__main__":  # pragma: no cover (invocation driven)
    from unjumble.cli import cli

    cli()
