class DictionaryStoreError(Exception):
    pass
