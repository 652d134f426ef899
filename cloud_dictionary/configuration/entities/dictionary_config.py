from pydantic import BaseModel, Field, field_validator

from cloud_dictionary.logging.logger import LogLevel


class DbConfig(BaseModel):
    db_name: str = "cloud_dictionary"

    host: str = "localhost"
    port: int = 27017
    username: str | None = None
    password: str | None = None


class CollectionsConfig(BaseModel):
    definitions: str = "definitions"
    counter: str = "counter"
    definition_of_the_day: str = "definition_of_the_day"

    @field_validator("definitions", "counter", "definition_of_the_day")
    def _validate_collection_name(cls, name: str) -> str:
        if not name.strip():
            raise ValueError("Collection names cannot be empty.")
        return name


class DictionaryConfig(BaseModel):
    log_level: str = "INFO"

    db: DbConfig = Field(default_factory=DbConfig)
    collections: CollectionsConfig = Field(default_factory=CollectionsConfig)

    @field_validator("log_level")
    def _validate_log_level(cls, log_level: str) -> str:
        log_level = log_level.upper()
        if log_level not in LogLevel.__members__:
            raise ValueError(f"Unknown log level '{log_level}'.")
        return log_level

    @field_validator("collections")
    def _validate_distinct_collections(cls, collections: CollectionsConfig) -> CollectionsConfig:
        names = [collections.definitions, collections.counter, collections.definition_of_the_day]
        if len(set(names)) != len(names):
            raise ValueError(f"The definitions, counter and definition of the day collections must differ: {names}")
        return collections

    class Config:
        validate_assignment = True
