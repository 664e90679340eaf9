from playstore.config import get_settings
from playstore.db.engine import build_engine
from playstore.db.schema import metadata

def main():
    engine = build_engine(get_settings())
    metadata.drop_all(engine)
    metadata.create_all(engine)
    engine.dispose()
    print("DB schema created.")

if __name__ == "__main__":
    main()
