"""Allow ``python -m create_ec_app``."""

from create_ec_app.cli import main

main()
