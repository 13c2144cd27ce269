"""Entry point: python -m storefront"""

from storefront.cli import cli

if __name__ == "__main__":
    cli()
