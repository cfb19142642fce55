from smartattend.database.session import Base, engine

# Import models that need tables
import smartattend.models  # noqa: F401


# Create the database tables
def create_tables(bind=engine):
    Base.metadata.create_all(bind=bind)


if __name__ == "__main__":
    create_tables()
    print("Tables created successfully")
