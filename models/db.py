from pymongo import MongoClient

import config


def get_database(mongo_uri=None, db_name=None):
    """Open a client for ``mongo_uri`` and return its database.

    The database named in the URI wins over ``db_name``.
    """
    mongo_client = MongoClient(mongo_uri or config.MONGO_URI)
    return mongo_client.get_default_database(default=db_name or config.MONGO_DB_NAME)


def get_movies_collection(db):
    return db[config.MOVIES_COLLECTION]
