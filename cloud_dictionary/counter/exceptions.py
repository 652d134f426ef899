from cloud_dictionary.exceptions import DictionaryStoreError


class CounterMissingError(DictionaryStoreError):
    pass


class CounterConflictError(DictionaryStoreError):
    pass
