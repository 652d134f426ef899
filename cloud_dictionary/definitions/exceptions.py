from cloud_dictionary.exceptions import DictionaryStoreError


class DefinitionNotFoundError(DictionaryStoreError):
    pass


class DefinitionExistsError(DictionaryStoreError):
    pass


class InvalidPaginationError(DictionaryStoreError, ValueError):
    pass
