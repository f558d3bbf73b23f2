# remote_sme/__main__.py
from remote_sme.cli import cli

if __name__ == "__main__":  # pragma: no cover
    cli()
