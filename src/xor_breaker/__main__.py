"""Main entry point for the xor_breaker package."""
from xor_breaker.cli import cli


def main():
    """Main entry point function."""
    cli()


if __name__ == "__main__":
    main()
