class DictionaryPersistenceError(Exception):
    pass


class EntityNotFoundError(DictionaryPersistenceError):
    pass


class EntityConflictError(DictionaryPersistenceError):
    pass
