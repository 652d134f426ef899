#!/usr/bin/env python3

import typer

from cloud_dictionary.cli.db_cli import db_app

cloud_dictionary_app = typer.Typer(pretty_exceptions_show_locals=False)
cloud_dictionary_app.add_typer(db_app, name="db", help="Manage the dictionary database")

if __name__ == "__main__":
    cloud_dictionary_app()
