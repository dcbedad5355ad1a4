"""FinQA-Methodology CLI module."""


def main() -> None:
    """CLI entry point."""
    from finqa_methodology.cli.app import main as app_main

    app_main()


__all__ = ["main"]
