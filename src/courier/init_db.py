"""Create the Courier tables on the configured database."""

from courier.db.session import create_tables

if __name__ == "__main__":
    create_tables()
    print("Database initialized.")
