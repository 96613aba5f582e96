from collections import defaultdict

from aiodataloader import DataLoader

from memberhub.db import sync_to_async


class BaseLoader(DataLoader):
    """
    Batches every `load(key)` issued during one tick of the event loop into a
    single `batch_queryset(keys)` query.

    To-one loaders deliver the matching record or `None`; loaders with
    `many = True` deliver a (possibly empty) list of records per key.
    """

    many = False

    @classmethod
    def key(cls, record):
        """
        Return the grouping key for the given record (defaults to `id`)
        """
        return record.id

    @classmethod
    def value(cls, record):
        """
        Return what gets delivered to the requester for the given record
        (defaults to the record itself)
        """
        return record

    def batch_queryset(self, keys):
        """
        Return an unordered QuerySet that includes every record matching `keys`.
        (ordering is handled in `batch_load_fn`)
        """
        raise NotImplementedError("override batch_queryset in subclass")

    @sync_to_async
    def batch_load_fn(self, keys):
        """
        This implements the aiodataloader interface to batch load records for an
        ordered list of keys.

        Each time we call `load` in the same tick of the event loop, aiodataloader
        remembers the load key and defers the results.  At the end of the tick we
        batch load the records for all those keys.  If the query raises, every
        pending `load` of the batch fails with the same exception.
        """
        queryset = self.batch_queryset(keys)

        # the returned list must be in the exact order of `keys`
        if self.many:
            grouped = defaultdict(list)
            for record in queryset:
                grouped[self.key(record)].append(self.value(record))
            return [grouped.get(key, []) for key in keys]

        results = {self.key(record): self.value(record) for record in queryset}
        return [results.get(key) for key in keys]
