import pytest

from stockwise.seed_data import seed_demo_data


class TestSeedDemoData:

    @pytest.mark.asyncio
    async def test_seeds_every_collection(self, engine, store):
        seed_demo_data(engine)

        counts = {name: len((await store.list_all(name)).items) for name in store.collection_names}
        assert counts == {
            "products": 5,
            "salesorders": 4,
            "demandforecasts": 4,
            "notifications": 5,
            "users": 1,
        }

    @pytest.mark.asyncio
    async def test_skips_when_products_exist(self, engine, store):
        await store.create("products", {"id": "p1", "name": "Existing"})

        seed_demo_data(engine)

        assert [p.id for p in (await store.products.list_all()).items] == ["p1"]
        assert (await store.notifications.list_all()).items == []
