from app.db.storage import InMemoryStorage, SQLStorage
from app.services.promotion_store import PromotionStore


def test_in_memory_storage_get_set():
    storage = InMemoryStorage({"a": "1"})
    assert storage.get("a") == "1"
    assert storage.get("missing") is None
    
    storage.set("a", "2")
    assert storage.get("a") == "2"


def test_sql_storage_upsert(sql_engine):
    storage = SQLStorage(sql_engine)
    assert storage.get("pharmaplus_promotions") is None
    
    storage.set("pharmaplus_promotions", "[]")
    storage.set("pharmaplus_promotions", '[{"id": "1"}]')
    
    assert storage.get("pharmaplus_promotions") == '[{"id": "1"}]'


def test_sql_storage_survives_new_instance(sql_engine, promotion_data):
    saved = PromotionStore(SQLStorage(sql_engine)).save(promotion_data)
    
    reloaded = PromotionStore(SQLStorage(sql_engine)).find_by_id(saved["id"])
    
    assert reloaded["name"] == promotion_data["name"]
    assert reloaded["createdAt"] == saved["createdAt"]


def test_sql_storage_store_mutations(sql_engine, clock, promotion_data):
    sql_store = PromotionStore(SQLStorage(sql_engine), clock=clock)
    first = sql_store.save(promotion_data)
    second = sql_store.save({**promotion_data, "name": "Second"})
    
    sql_store.update({**first, "name": "Renamed"})
    sql_store.remove(second["id"])
    
    promotions = PromotionStore(SQLStorage(sql_engine)).load_all()
    assert [p["name"] for p in promotions] == ["Renamed"]
    assert promotions[0]["createdAt"] == first["createdAt"]


def test_sql_storage_writes_back_migration(sql_engine):
    storage = SQLStorage(sql_engine)
    storage.set("pharmaplus_promotions", '[{"id": "1", "name": "Old"}]')
    
    PromotionStore(storage).load_all()
    
    assert '"rules":""' in storage.get("pharmaplus_promotions")
