# creates the catalog schema
from archive_api.core.database import engine, init_db

if __name__ == "__main__":
    init_db()
    print(f"Catalog tables created on {engine.url.render_as_string(hide_password=True)}")
