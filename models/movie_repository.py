import logging

from bson.errors import InvalidId
from bson.objectid import ObjectId
from pymongo import ASCENDING, DESCENDING

from models.movie import Movie

logger = logging.getLogger(__name__)


def to_object_id(movie_id):
    """Return ``movie_id`` as an ObjectId, or None when it is not one."""
    if isinstance(movie_id, ObjectId):
        return movie_id
    if movie_id is None:
        # ObjectId(None) would mint a fresh id
        return None
    try:
        return ObjectId(movie_id)
    except (InvalidId, TypeError):
        return None


class MovieRepository:
    """Movie documents stored in one MongoDB collection.

    Vote mutations are single conditional updates, so ``votes`` and
    ``voters`` of a document always change together.
    """

    def __init__(self, collection):
        self.collection = collection

    def ensure_indexes(self):
        self.collection.create_index([('title', ASCENDING)], unique=True)
        self.collection.create_index([('creator', ASCENDING)])
        self.collection.create_index([('voters', ASCENDING)])

    def list_movies(self):
        return [Movie.from_document(doc) for doc in self.collection.find().sort('_id', ASCENDING)]

    def standings(self):
        cursor = self.collection.find().sort([('votes', DESCENDING), ('title', ASCENDING)])
        return [Movie.from_document(doc) for doc in cursor]

    def get(self, movie_id):
        oid = to_object_id(movie_id)
        if oid is None:
            return None
        doc = self.collection.find_one({'_id': oid})
        return Movie.from_document(doc) if doc else None

    def find_by_creator(self, user_id):
        doc = self.collection.find_one({'creator': user_id})
        return Movie.from_document(doc) if doc else None

    def find_voted_by(self, user_id):
        return [Movie.from_document(doc) for doc in self.collection.find({'voters': user_id})]

    def insert(self, movie):
        """Insert ``movie`` and set its id.

        Raises pymongo's DuplicateKeyError when the title is taken.
        """
        doc = movie.to_document()
        doc.pop('_id', None)
        result = self.collection.insert_one(doc)
        movie.id = result.inserted_id
        logger.debug("Inserted movie %s (%r)", movie.id, movie.title)
        return movie

    def add_voter(self, movie_id, user_id):
        result = self.collection.update_one(
            {'_id': to_object_id(movie_id), 'voters': {'$ne': user_id}},
            {'$push': {'voters': user_id}, '$inc': {'votes': 1}},
        )
        return result.modified_count == 1

    def remove_voter(self, movie_id, user_id):
        result = self.collection.update_one(
            {'_id': to_object_id(movie_id), 'voters': user_id},
            {'$pull': {'voters': user_id}, '$inc': {'votes': -1}},
        )
        return result.modified_count == 1

    def delete(self, movie_id):
        result = self.collection.delete_one({'_id': to_object_id(movie_id)})
        return result.deleted_count == 1
