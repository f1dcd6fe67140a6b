from product_table.config import Settings
from product_table.main import create_app
from product_table.services.seed import DEMO_PRODUCTS, import_csv, seed_demo
from product_table.services.table import ProductTable

CSV_TEXT = """id,product,brand,category,price,inStock,rating
5,Switch,Nintendo,Video Games,299,yes,4.5
1,Duplicate,Apple,Phones,10,no,3
6,Echo Dot,Amazon,Smart Home Devices,49.99,maybe,4
7,Nest Hub,Google,Smart Home Devices,89,false,4.2
"""


def test_seed_demo_loads_example_devices():
    table = ProductTable()
    stats = seed_demo(table)
    assert stats.created == len(DEMO_PRODUCTS)
    assert [r.price for r in table.store.all()] == ["$749.99", "$1400.00", "$600.00", "$345.49"]
    assert [r.in_stock for r in table.store.all()] == ["Yes", "No", "No", "Yes"]

    again = seed_demo(table)
    assert again.created == 0
    assert again.skipped == len(DEMO_PRODUCTS)


def test_import_csv_counts_each_outcome(tmp_path):
    csv_path = tmp_path / "products.csv"
    csv_path.write_text(CSV_TEXT, encoding="utf-8")
    table = ProductTable()
    seed_demo(table)

    stats = import_csv(csv_path, table)
    assert (stats.created, stats.skipped, stats.rejected) == (2, 1, 1)
    assert [r.id for r in table.store.all()] == [1, 2, 3, 4, 5, 7]


def test_app_loads_csv_from_settings(tmp_path):
    csv_path = tmp_path / "products.csv"
    csv_path.write_text(CSV_TEXT, encoding="utf-8")
    app = create_app(Settings(seed_demo_data=False, seed_csv_path=csv_path))
    assert [r.id for r in app.state.table.store.all()] == [5, 1, 7]
