from dataclasses import dataclass, field
from typing import List, Optional

from bson.objectid import ObjectId


@dataclass
class Movie:
    """A suggested movie and the users who voted for it."""

    title: str
    creator: str
    votes: int = 0
    voters: List[str] = field(default_factory=list)
    id: Optional[ObjectId] = None

    @classmethod
    def from_document(cls, doc):
        return cls(
            id=doc['_id'],
            title=doc['title'],
            creator=str(doc.get('creator', '')),
            votes=int(doc.get('votes', 0)),
            voters=[str(v) for v in doc.get('voters', [])],
        )

    def to_document(self):
        doc = {
            'title': self.title,
            'votes': self.votes,
            'voters': list(self.voters),
            'creator': self.creator,
        }
        if self.id is not None:
            doc['_id'] = self.id
        return doc

    def to_json(self):
        return {
            'id': str(self.id),
            'title': self.title,
            'votes': self.votes,
            'creator': self.creator,
        }

    def has_voter(self, user_id):
        return user_id in self.voters

    def is_created_by(self, user_id):
        return self.creator == user_id
