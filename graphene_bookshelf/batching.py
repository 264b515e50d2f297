"""The dataloader resolves a relationship for every parent of a result list in one store scan."""
from asyncio import get_event_loop

import aiodataloader

from .utils import get_store


class RelationshipLoader(aiodataloader.DataLoader):
    # Results always come straight from the store
    cache = False

    def __init__(self, store, relationship):
        super().__init__()
        self.store = store
        self.relationship = relationship

    async def batch_load_fn(self, parents):
        """
        Loads the relationship of all the queued parents at once.

        The batch resolver of the relationship returns one result per
        parent, in the order of ``parents``, which is what the dataloader
        expects back.
        """
        return self.relationship.batch_resolver(self.store, parents)


def get_batch_resolver(relationship):
    """Get the resolve function for the given relationship."""

    def _get_loader(info):
        """Retrieve the loader of the relationship for this execution."""
        store = get_store(info.context)
        loaders = info.context.setdefault("loaders", {})
        loader = loaders.get(relationship)
        if (
            loader is None
            or loader.store is not store
            or loader.loop != get_event_loop()
        ):
            loader = RelationshipLoader(store=store, relationship=relationship)
            loaders[relationship] = loader
        return loader

    async def resolve(root, info, **args):
        return await _get_loader(info).load(root)

    return resolve
