import asyncio
from typing import Annotated

import typer

from cloud_dictionary.configuration.config_loader import load_config
from cloud_dictionary.configuration.entities.dictionary_config import DictionaryConfig
from cloud_dictionary.dictionary_store import DictionaryStore
from cloud_dictionary.logging.logger import log

db_app = typer.Typer(help="Dictionary database management commands", no_args_is_help=True)

ConfigOption = Annotated[
    str,
    typer.Option(
        "--config",
        "-c",
        help="Path to config.yml",
        show_default=True,
    ),
]


def create_store(config: DictionaryConfig) -> DictionaryStore:
    return DictionaryStore.from_config(config)


async def _initialize(store: DictionaryStore) -> int:
    await store.initialize()
    return await store.reconcile_definition_count()


@db_app.command()
def init(config: ConfigOption = "./config.yml") -> None:
    """
    Create the collection indices and provision the definition counter.

    The counter is set to the number of definitions already stored.
    """
    try:
        store = create_store(load_config(config))
        count = asyncio.run(_initialize(store))
        typer.echo(f"Dictionary database initialized with {count} definitions.")
    except Exception as e:
        log.error(f"Failed to initialize the dictionary database: {e}")
        raise typer.Exit(1) from e


@db_app.command()
def reconcile(config: ConfigOption = "./config.yml") -> None:
    """
    Recompute the mirrored definition count from the definitions collection.
    """
    try:
        store = create_store(load_config(config))
        count = asyncio.run(store.reconcile_definition_count())
        typer.echo(f"Definition count reconciled: {count}.")
    except Exception as e:
        log.error(f"Failed to reconcile the definition count: {e}")
        raise typer.Exit(1) from e


@db_app.command()
def count(config: ConfigOption = "./config.yml") -> None:
    """
    Show the mirrored definition count.
    """
    try:
        store = create_store(load_config(config))
        typer.echo(asyncio.run(store.get_definition_count()))
    except Exception as e:
        log.error(f"Failed to read the definition count: {e}")
        raise typer.Exit(1) from e
