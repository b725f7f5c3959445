# src/cargo_testify/__main__.py

from cargo_testify.cli.main import cli

if __name__ == "__main__":
    cli()
